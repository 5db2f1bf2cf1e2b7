"""Prompt templates for generating test-automation code from a DOM snapshot.

Pick a generator key from the catalog, render it with ``domContent`` (and
``pageUrl`` for step definitions), and hand the string to a generation model.
"""

from testgen_prompts.core.errors import PromptCatalogError, TemplateNotFound
from testgen_prompts.domain.generators import (
    CODE_GENERATOR_TYPES,
    CatalogEntry,
    GeneratorType,
    display_name,
    from_display_name,
)
from testgen_prompts.domain.prompt_store import (
    DEFAULT_PROMPTS,
    FilesystemPromptStore,
    InMemoryPromptStore,
    PromptTemplate,
    default_prompt_store,
)
from testgen_prompts.runtime.renderer import (
    PromptRenderer,
    escape_code_fences,
    render_prompt,
    render_template,
)


def catalog() -> list[CatalogEntry]:
    """Export the built-in generators with their display names and placeholders."""
    return default_prompt_store().catalog()


__all__ = [
    "CODE_GENERATOR_TYPES",
    "DEFAULT_PROMPTS",
    "CatalogEntry",
    "FilesystemPromptStore",
    "GeneratorType",
    "InMemoryPromptStore",
    "PromptCatalogError",
    "PromptRenderer",
    "PromptTemplate",
    "TemplateNotFound",
    "catalog",
    "default_prompt_store",
    "display_name",
    "escape_code_fences",
    "from_display_name",
    "render_prompt",
    "render_template",
]
