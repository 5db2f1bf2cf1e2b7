from __future__ import annotations

import re
from dataclasses import dataclass

# ${identifier} where identifier is [A-Za-z0-9_]+
PLACEHOLDER_PATTERN = re.compile(r'\$\{([A-Za-z0-9_]+)\}')


@dataclass(frozen=True)
class PromptTemplate:
    """
    A named prompt template.

    Attributes:
        key: Symbolic key, e.g. ``CUCUMBER_ONLY``.
        display_name: Human-readable label, e.g. ``Cucumber-Only``.
        text: Raw template text with ``${name}`` placeholders.
        description: One-line summary of what the prompt generates.
    """

    key: str
    display_name: str
    text: str
    description: str = ''

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in order of first appearance."""
        return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(self.text)))
