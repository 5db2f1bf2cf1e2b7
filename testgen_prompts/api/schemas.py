from pydantic import BaseModel, Field

from testgen_prompts.domain.generators import CatalogEntry


class CatalogEntryOut(BaseModel):
    key: str
    display_name: str
    description: str
    placeholders: list[str] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CatalogEntryOut":
        return cls(
            key=entry.key,
            display_name=entry.display_name,
            description=entry.description,
            placeholders=list(entry.placeholders),
        )


class PromptTemplateOut(CatalogEntryOut):
    template: str = Field(description="Raw template text with ${name} placeholders")


class RenderPromptRequest(BaseModel):
    """
    Variables for a single render call.

    Conventional names are ``domContent`` (HTML fragment) and ``pageUrl``.
    Unknown names are ignored; missing names stay as literal placeholders.
    """

    variables: dict[str, str] = Field(default_factory=dict)

    escape_code_fences: bool = Field(
        default=False,
        description="Escape ``` in each value before substitution"
    )


class RenderPromptResponse(BaseModel):
    key: str
    display_name: str
    prompt: str
