"""FastAPI application factory for maestrolint."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from maestrolint import __version__
from maestrolint.api.deps import init_validator
from maestrolint.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from maestrolint.api.routers import editor, reference, validation
from maestrolint.api.schemas import HealthResponse
from maestrolint.parser.loader import FlowLoader
from maestrolint.settings import Settings
from maestrolint.validation.engine import FlowValidator


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="maestrolint",
        description="Diagnostics, hover reference and completion for Maestro flow YAML.",
        version=__version__,
    )
    app.state.settings = settings
    init_validator(
        FlowValidator(
            FlowLoader(
                max_document_size=settings.max_document_size,
                max_depth=settings.max_depth,
            )
        )
    )

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(validation.router, prefix="/validate", tags=["validation"])
    app.include_router(reference.router, prefix="/reference", tags=["reference"])
    app.include_router(editor.router, tags=["editor"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("maestrolint.api")
    logger.info(
        "maestrolint API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "maestrolint.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
