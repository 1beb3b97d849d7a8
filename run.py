"""Entry point for the Guitars API.

Serves the API, the index page and the browser script with Uvicorn.
Host, port, log level and the storage backend come from the
environment (see ``guitars_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from guitars_api.app.core.config import settings
from guitars_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host``/``settings.port``."""
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
    try:
        await run_api()
    except Exception:
        logging.exception("Guitars API stopped")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
