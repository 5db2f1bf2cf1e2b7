from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="TESTGEN_", extra="ignore")

    # Optional directory of <KEY>.md files replacing built-in templates
    prompts_dir: Path | None = None

    log_level: str = "INFO"

    # HTTP catalog service
    app_title: str = "Test Automation Prompt Catalog"


@lru_cache
def get_settings() -> Settings:
    return Settings()
