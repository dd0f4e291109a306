"""
Main entrypoint for the Posts API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn posts_api.app.main:app --port 8080

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import PostStore


def create_app(
    store: Optional[PostStore] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PostStore]
        Store the routes operate on.  A fresh, empty store is created
        when omitted; tests pass their own to inspect it directly.
    logger : Optional[logging.Logger]
        Logger receiving one line per request.  Defaults to the
        ``posts_api.requests`` logger.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    request_logger = setup_logging(settings.log_level, settings.log_file)

    # Paths match exactly: "/posts/" is a 404, not a redirect to "/posts".
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.store = store if store is not None else PostStore()
    app.state.logger = logger if logger is not None else request_logger

    register_exception_handlers(app)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
