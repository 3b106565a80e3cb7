"""Snickers API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Exactly one storage instance per app, stored on app.state and injected
      into handlers through api.dependencies.get_storage
    - Every response, success or error, is application/json; charset=UTF-8
    - Trailing-slash paths are served directly (redirect_slashes disabled)

Design Decisions:
    - create_app() factory: tests build isolated apps around their own storage;
      the module-level `app` serves `uvicorn snickers.main:app`
    - Lifespan configures logging and opens/closes the storage backend
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from snickers.api.error_handlers import register_error_handlers
from snickers.api.responses import JSONUTF8Response
from snickers.api.routes import index, jobs, presets
from snickers.api.routes.index import SERVICE_VERSION
from snickers.config import Settings, get_settings
from snickers.core.repository_protocols import StorageInterface
from snickers.infrastructure.observability import setup_logging
from snickers.infrastructure.storage_factory import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    await app.state.storage.open()
    logger.info(
        "Snickers API started",
        extra={"storage_backend": settings.storage_backend},
    )
    yield
    await app.state.storage.close()
    logger.info("Snickers API shutting down")


def create_app(
    settings: Settings | None = None,
    storage: StorageInterface | None = None,
) -> FastAPI:
    """Build the application around one storage instance."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Snickers API",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        default_response_class=JSONUTF8Response,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(index.router)
    app.include_router(presets.router)
    app.include_router(jobs.router)

    register_error_handlers(app)
    return app


app = create_app()
