# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from testgen_prompts.config import get_settings
from testgen_prompts.domain.prompt_store import (
    FilesystemPromptStore,
    InMemoryPromptStore,
    default_prompt_store,
)
from testgen_prompts.runtime.renderer import PromptRenderer


class Container:
    def __init__(self, store: InMemoryPromptStore | None = None):
        if store is None:
            prompts_dir = get_settings().prompts_dir
            if prompts_dir is not None:
                store = FilesystemPromptStore(base_dir=prompts_dir).load()
            else:
                store = default_prompt_store()
        self._store = store
        self._renderer = PromptRenderer(store)

    @property
    def store(self) -> InMemoryPromptStore:
        return self._store

    @property
    def renderer(self) -> PromptRenderer:
        return self._renderer


@lru_cache
def get_container():
    return Container()
