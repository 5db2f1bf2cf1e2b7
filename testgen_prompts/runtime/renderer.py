"""Prompt renderer (literal placeholder substitution).

We keep rendering separate so:
- it can be tested independently
- it can be reused by any caller (HTTP layer, scripts, other services)
- prompt templates stay clean and diffable

Substitution is a single pass over ``${name}`` tokens. Values are inserted
as literal text: a value that itself contains ``${...}`` is never expanded,
and nothing is ever evaluated.
"""

from __future__ import annotations

from typing import Any, Mapping

from testgen_prompts.domain.prompt_store import PLACEHOLDER_PATTERN, PromptStore, default_prompt_store

_CODE_FENCE = '```'
_ESCAPED_CODE_FENCE = '\\`\\`\\`'


def escape_code_fences(text: str) -> str:
    """Escape markdown code fences so a value cannot close a fenced block.

    Not applied by the renderer; callers opt in before passing values.
    """
    return text.replace(_CODE_FENCE, _ESCAPED_CODE_FENCE)


def render_template(template: str, variables: Mapping[str, Any] | None = None) -> str:
    """Substitute bound placeholders in ``template`` and trim the result.

    Args:
        template: Text containing ${name} placeholders.
        variables: Mapping of placeholder names to values. Values are
            converted with ``str()``.

    Returns:
        The rendered text with leading/trailing whitespace removed.
        Placeholders without a binding are left as-is; bindings without a
        placeholder are ignored. Only names matching ``[A-Za-z0-9_]+``
        are placeholders: ``${page-url}`` stays literal even when a
        ``page-url`` binding is given.
    """
    variables = variables or {}

    def _substitute(match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return str(variables[name])

    return PLACEHOLDER_PATTERN.sub(_substitute, template).strip()


class PromptRenderer:
    """Render registered prompt templates by key."""

    def __init__(self, store: PromptStore | None = None) -> None:
        self._store = store if store is not None else default_prompt_store()

    def render(self, key: str, variables: Mapping[str, Any] | None = None) -> str:
        """Render a prompt template.

        Args:
            key: Registered prompt key (e.g. "CUCUMBER_ONLY").
            variables: Mapping of variable names to values.

        Returns:
            Rendered prompt.

        Raises:
            TemplateNotFound: If ``key`` is not registered.
        """
        return render_template(self._store.get_prompt(key), variables)


def render_prompt(key: str, variables: Mapping[str, Any] | None = None) -> str:
    """Render a built-in prompt by key."""
    return PromptRenderer().render(key, variables)
