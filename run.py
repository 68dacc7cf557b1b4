"""Entry point for the Starter API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); see ``starter_api/app/core/config.py`` for the other
options.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from starter_api.app.core.config import settings
from starter_api.app.main import app

logger = logging.getLogger("starter_api")


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logger.info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
