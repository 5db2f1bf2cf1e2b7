"""Key catalog for the code generators.

Callers select a generator by its symbolic key (``CUCUMBER_ONLY``) or by its
display name (``Cucumber-Only``). The display names are stable labels for
selection lists and logs; they never change with the internal key spelling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class GeneratorType(str, Enum):
    """Supported code generators, one per built-in prompt template."""

    SELENIUM_JAVA_PAGE_ONLY = 'SELENIUM_JAVA_PAGE_ONLY'
    CUCUMBER_ONLY = 'CUCUMBER_ONLY'
    CUCUMBER_WITH_SELENIUM_JAVA_STEPS = 'CUCUMBER_WITH_SELENIUM_JAVA_STEPS'
    PW_TYPESCRIPT_PAGE_ONLY = 'PW_TYPESCRIPT_PAGE_ONLY'
    TESTDATA_JSON_ONLY = 'TESTDATA_JSON_ONLY'
    CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS = 'CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS'

    @property
    def display_name(self) -> str:
        return CODE_GENERATOR_TYPES[self.value]

    @property
    def description(self) -> str:
        return GENERATOR_DESCRIPTIONS[self.value]


CODE_GENERATOR_TYPES: Mapping[str, str] = MappingProxyType({
    GeneratorType.SELENIUM_JAVA_PAGE_ONLY.value: 'Selenium-Java-Page-Only',
    GeneratorType.CUCUMBER_ONLY.value: 'Cucumber-Only',
    GeneratorType.CUCUMBER_WITH_SELENIUM_JAVA_STEPS.value: 'Cucumber-With-Selenium-Java-Steps',
    GeneratorType.PW_TYPESCRIPT_PAGE_ONLY.value: 'Playwright-TypeScript-Page-Only',
    GeneratorType.TESTDATA_JSON_ONLY.value: 'TestData-JSON-Only',
    GeneratorType.CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS.value: 'Cucumber-With-Playwright-TypeScript-Steps',
})

GENERATOR_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    GeneratorType.SELENIUM_JAVA_PAGE_ONLY.value: 'Selenium Java Page Object class (no test class)',
    GeneratorType.CUCUMBER_ONLY.value: 'Cucumber feature file only',
    GeneratorType.CUCUMBER_WITH_SELENIUM_JAVA_STEPS.value: 'Cucumber feature file with Selenium Java step definitions',
    GeneratorType.PW_TYPESCRIPT_PAGE_ONLY.value: 'Playwright TypeScript Page Object class (no test class)',
    GeneratorType.TESTDATA_JSON_ONLY.value: 'Realistic JSON test data for the input fields in the DOM',
    GeneratorType.CUCUMBER_WITH_PLAYWRIGHT_TYPESCRIPT_STEPS.value: 'Cucumber feature file with Playwright TypeScript step definitions',
})


@dataclass(frozen=True)
class CatalogEntry:
    """One selectable generator as exported to callers.

    Attributes:
        key: Symbolic template key.
        display_name: Human-readable label.
        description: One-line summary of the generated artifact.
        placeholders: Placeholder names the template expects.
    """

    key: str
    display_name: str
    description: str
    placeholders: tuple[str, ...] = ()


def display_name(key: str) -> str | None:
    """Return the display name for a key, or None when the key is unknown."""
    return CODE_GENERATOR_TYPES.get(key)


def from_display_name(name: str) -> GeneratorType | None:
    """Reverse lookup from a display name to its generator."""
    for generator in GeneratorType:
        if generator.display_name == name:
            return generator
    return None
