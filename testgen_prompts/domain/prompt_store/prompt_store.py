from typing import Iterator, Protocol

from .entities import PromptTemplate


class PromptStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def get_prompt(self, key: str) -> str:
        ...

    def get_template(self, key: str) -> PromptTemplate:
        ...

    def keys(self) -> Iterator[str]:
        ...
