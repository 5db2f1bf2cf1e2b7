"""Built-in registry wiring the template texts to the key catalog."""

from __future__ import annotations

from functools import lru_cache
from typing import Mapping

from testgen_prompts.domain.generators import CODE_GENERATOR_TYPES, GeneratorType
from testgen_prompts.prompts import templates

from .entities import PromptTemplate
from .in_memory_prompt_store import InMemoryPromptStore

_TEXTS: dict[GeneratorType, str] = {
    GeneratorType.SELENIUM_JAVA_PAGE_ONLY: templates.SELENIUM_JAVA_PAGE_ONLY,
    GeneratorType.PW_TYPESCRIPT_PAGE_ONLY: templates.PW_TYPESCRIPT_PAGE_ONLY,
    GeneratorType.TESTDATA_JSON_ONLY: templates.TESTDATA_JSON_ONLY,
    GeneratorType.CUCUMBER_ONLY: templates.CUCUMBER_ONLY,
    GeneratorType.CUCUMBER_WITH_SELENIUM_JAVA_STEPS: templates.CUCUMBER_WITH_SELENIUM_JAVA_STEPS,
    GeneratorType.CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS: templates.CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS,
}


def builtin_templates(overrides: Mapping[str, str] | None = None) -> list[PromptTemplate]:
    """Build the template records, optionally replacing texts by key."""
    overrides = overrides or {}
    return [
        PromptTemplate(
            key=generator.value,
            display_name=generator.display_name,
            text=overrides.get(generator.value, text),
            description=generator.description,
        )
        for generator, text in _TEXTS.items()
    ]


@lru_cache
def default_prompt_store() -> InMemoryPromptStore:
    return InMemoryPromptStore(builtin_templates(), display_names=CODE_GENERATOR_TYPES)


DEFAULT_PROMPTS: Mapping[str, str] = default_prompt_store().prompts()
