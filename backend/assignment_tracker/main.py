"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assignment_tracker.config import get_settings
from assignment_tracker.infrastructure.logging.log_config import setup_logging
from assignment_tracker.infrastructure.storage.json_assignment_store import JsonAssignmentStore
from assignment_tracker.presentation.api.router import router as api_router
from assignment_tracker.presentation.error_handlers import register_exception_handlers
from assignment_tracker.presentation.web.board import router as web_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load the store once."""
    settings = get_settings()
    setup_logging(settings)

    if getattr(app.state, "store", None) is None:
        app.state.store = JsonAssignmentStore.load(settings.data_file)

    logger.info(
        "Serving %d assignments from %s (docs at /api-docs)",
        await app.state.store.count(),
        app.state.store.path,
    )
    yield


def create_app(store: JsonAssignmentStore | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    ``store`` is normally loaded from ``settings.data_file`` at startup;
    passing one in skips that step.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
    )
    app.state.store = store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount routes
    app.include_router(api_router)
    app.include_router(web_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "assignment_tracker.main:app",
        host=settings.host,
        port=settings.port,
    )
