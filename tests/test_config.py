from __future__ import annotations

from pathlib import Path

import pytest

from testgen_prompts.api.core.container import Container
from testgen_prompts.config import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('TESTGEN_PROMPTS_DIR', raising=False)
    settings = Settings(_env_file=None)
    assert settings.prompts_dir is None
    assert settings.log_level == 'INFO'


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('TESTGEN_PROMPTS_DIR', str(tmp_path))
    monkeypatch.setenv('TESTGEN_LOG_LEVEL', 'DEBUG')

    settings = Settings(_env_file=None)

    assert settings.prompts_dir == tmp_path
    assert settings.log_level == 'DEBUG'


def test_container_loads_overrides_from_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Arrange
    (tmp_path / 'CUCUMBER_ONLY.md').write_text('Only ${domContent}', encoding='utf-8')
    monkeypatch.setenv('TESTGEN_PROMPTS_DIR', str(tmp_path))
    get_settings.cache_clear()

    try:
        # Act
        container = Container()

        # Assert
        assert container.renderer.render('CUCUMBER_ONLY', {'domContent': '<p/>'}) == 'Only <p/>'
    finally:
        get_settings.cache_clear()


def test_importing_config_does_not_load_settings() -> None:
    import testgen_prompts.config as config

    assert not hasattr(config, 'settings')
