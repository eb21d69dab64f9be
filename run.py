"""Entry point for the Memo API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level are read from the environment; see
``memo_api/app/core/config.py`` for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from memo_api.app.core.config import settings
from memo_api.app.main import app


async def run_api() -> None:
    """Start the memo API using Uvicorn.

    Host and port come from ``API_HOST`` and ``API_PORT``.  Defaults
    are ``0.0.0.0`` and ``8000``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run the API until it is stopped."""
    try:
        await run_api()
    except Exception:
        logging.exception("Exception in service")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
