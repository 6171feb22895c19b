"""Entry point for the Products API server.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from ``HOST`` and ``PORT`` through
``products_api.app.core.config``.  Defaults are ``0.0.0.0`` and
``8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from products_api.app.core.config import settings
from products_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on port %s...", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
