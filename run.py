"""Entry point for the Library Catalogue API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level come from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``library_catalogue/app/core/config.py``
for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from library_catalogue.app.core.config import settings
from library_catalogue.app.main import app


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving %s on %s:%s", settings.project_name, settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
