import logging
from pathlib import Path

from testgen_prompts.domain.generators import CODE_GENERATOR_TYPES
from testgen_prompts.observability.tracing import log_event, new_trace_id

from .defaults import builtin_templates
from .in_memory_prompt_store import InMemoryPromptStore


class FilesystemPromptStore:
    """
    Loads template overrides from a local directory.

    Expected layout:
        <base_dir>/
          CUCUMBER_ONLY.md
          TESTDATA_JSON_ONLY.md
          ...

    A file named after a registered key replaces that key's built-in text.
    Files for unknown keys are skipped; the key set never changes. Loading
    happens once and yields an immutable ``InMemoryPromptStore``.
    """

    def __init__(self, *, base_dir: Path) -> None:
        self._base_dir = base_dir

    def read_overrides(self) -> dict[str, str]:
        if not self._base_dir.is_dir():
            raise NotADirectoryError(f"Prompt override directory not found: {self._base_dir}")

        trace_id = new_trace_id()
        overrides: dict[str, str] = {}
        for path in sorted(self._base_dir.glob("*.md")):
            if not path.is_file():
                continue
            key = path.stem
            if key not in CODE_GENERATOR_TYPES:
                log_event(
                    "prompt_registry.override_ignored",
                    trace_id=trace_id,
                    level=logging.WARNING,
                    path=str(path),
                    reason="unknown prompt key",
                )
                continue
            overrides[key] = path.read_text(encoding="utf-8")
        return overrides

    def load(self) -> InMemoryPromptStore:
        overrides = self.read_overrides()
        store = InMemoryPromptStore(builtin_templates(overrides), display_names=CODE_GENERATOR_TYPES)
        log_event(
            "prompt_registry.loaded",
            trace_id=new_trace_id(),
            source=str(self._base_dir),
            templates=len(store),
            overridden=sorted(overrides),
        )
        return store
