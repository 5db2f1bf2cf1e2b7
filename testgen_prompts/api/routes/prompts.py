from fastapi import APIRouter, Depends, HTTPException

from testgen_prompts.api.core.container import get_container
from testgen_prompts.api.schemas import (
    CatalogEntryOut,
    PromptTemplateOut,
    RenderPromptRequest,
    RenderPromptResponse,
)
from testgen_prompts.core.errors import TemplateNotFound
from testgen_prompts.observability.tracing import Span, log_event, new_trace_id
from testgen_prompts.runtime.renderer import escape_code_fences

router = APIRouter(prefix="/prompts", tags=["Prompts"])


@router.get("", summary="List all prompt generators", response_model=list[CatalogEntryOut])
async def list_prompts(container=Depends(get_container)):
    return [CatalogEntryOut.from_entry(entry) for entry in container.store.catalog()]


@router.get("/{key}", summary="Get a prompt template", response_model=PromptTemplateOut)
async def get_prompt(key: str, container=Depends(get_container)):
    try:
        template = container.store.get_template(key)
    except TemplateNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return PromptTemplateOut(
        key=template.key,
        display_name=template.display_name,
        description=template.description,
        placeholders=list(template.placeholders),
        template=template.text,
    )


@router.post(
    "/{key}/render",
    summary="Render a prompt",
    description="Fill the template placeholders with the given variables.",
    response_model=RenderPromptResponse,
)
async def render_prompt(key: str, payload: RenderPromptRequest, container=Depends(get_container)):
    trace_id = new_trace_id()
    span = Span(name="prompt.render", trace_id=trace_id, attributes={"key": key})

    variables = payload.variables
    if payload.escape_code_fences:
        variables = {name: escape_code_fences(value) for name, value in variables.items()}

    try:
        prompt = container.renderer.render(key, variables)
    except TemplateNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    span.end()
    log_event(
        "prompt.rendered",
        trace_id=trace_id,
        span=span,
        variables=sorted(variables),
        chars=len(prompt),
    )
    return RenderPromptResponse(
        key=key,
        display_name=container.store.display_name(key),
        prompt=prompt,
    )
