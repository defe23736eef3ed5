"""
Main entrypoint for the Library Catalogue API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn library_catalogue.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Every start gets a fresh catalogue; nothing is persisted.
    init_store(load_sample_data=settings.load_sample_data)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first so that imports and startup can log
    messages.  The catalogue routes are mounted under ``/api`` and the
    health check under ``/health``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, prefix="/health", tags=["health"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
