"""FastAPI prompt catalog service.

Exposes the prompt catalog to selection UIs and orchestrators:
- list generators with their display names and placeholders
- fetch a raw template
- render a template with caller-supplied variables

The service never calls a generation model; it only returns prompt text.
"""

from __future__ import annotations

from fastapi import FastAPI

from testgen_prompts.api.routes import register_routes
from testgen_prompts.config import get_settings
from testgen_prompts.observability.tracing import configure_logging

tags_metadata = [
    {
        "name": "Prompts",
        "description": "Prompt templates for test-automation code generation"
    },
]


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        version='1.0.0',
        description='Prompt catalog for page objects, feature files, step definitions and test data',
        openapi_tags=tags_metadata
    )

    # Register all API routes
    register_routes(app)
    return app


app = create_app()
