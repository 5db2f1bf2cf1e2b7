from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from testgen_prompts.core.errors import TemplateNotFound
from testgen_prompts.domain.generators import CatalogEntry

from .entities import PromptTemplate


class InMemoryPromptStore:
    """
    Read-only registry of prompt templates keyed by symbolic name.

    The registry is populated once at construction and exposes no mutation
    operations. The key catalog (display names) is derived from the same
    records, so both always carry the same key set.
    """

    def __init__(self, templates: Iterable[PromptTemplate], display_names: Mapping[str, str] | None = None) -> None:
        by_key: dict[str, PromptTemplate] = {}
        for template in templates:
            if template.key in by_key:
                raise ValueError(f'Duplicate prompt key: {template.key}')
            by_key[template.key] = template

        if display_names is not None:
            if set(display_names) != set(by_key):
                missing = sorted(set(display_names) ^ set(by_key))
                raise ValueError(f'Registry and key catalog disagree on keys: {missing}')
            mislabelled = sorted(k for k, t in by_key.items() if display_names[k] != t.display_name)
            if mislabelled:
                raise ValueError(f'Registry and key catalog disagree on display names: {mislabelled}')

        self._templates: Mapping[str, PromptTemplate] = MappingProxyType(by_key)

    def get(self, key: str) -> str | None:
        """Return the raw template text, or None when the key is unknown."""
        template = self._templates.get(key)
        return template.text if template is not None else None

    def get_prompt(self, key: str) -> str:
        """Return the raw template text.

        Raises:
            TemplateNotFound: If ``key`` is not registered.
        """
        return self.get_template(key).text

    def get_template(self, key: str) -> PromptTemplate:
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFound(key) from None

    def display_name(self, key: str) -> str | None:
        template = self._templates.get(key)
        return template.display_name if template is not None else None

    def keys(self) -> Iterator[str]:
        return iter(self._templates)

    def catalog(self) -> list[CatalogEntry]:
        """Export every registered template as a catalog entry, in registration order."""
        return [
            CatalogEntry(
                key=t.key,
                display_name=t.display_name,
                description=t.description,
                placeholders=t.placeholders,
            )
            for t in self._templates.values()
        ]

    def prompts(self) -> Mapping[str, str]:
        """Read-only view of key -> raw template text."""
        return MappingProxyType({key: t.text for key, t in self._templates.items()})

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)
