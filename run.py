"""Entry point for the Posts API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root::

    python run.py

Host, port and log level are read from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``posts_api/app/core/config.py`` for
every supported variable.  All posts are held in memory and are lost
when the process exits.
"""
import asyncio
import logging

from uvicorn import Config, Server

from posts_api.app.core.config import settings
from posts_api.app.core.logging_config import setup_logging
from posts_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server is running at http://localhost:%d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
