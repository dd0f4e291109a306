"""
FastAPI dependencies shared by the post endpoints.

The store and the request logger are created once by ``create_app``
and kept on ``app.state``; the functions here hand them to route
handlers.  ``RequestLogger`` is attached as a router‑level dependency
so every request reaching a route is logged before any handler logic
(id parsing included) runs.
"""

import logging

from fastapi import Depends, Request

from ..core.store import PostStore


def get_store(request: Request) -> PostStore:
    return request.app.state.store


def get_request_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


def request_uri(request: Request) -> str:
    """Return the raw request target: undecoded path plus query string."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        uri = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        uri = request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        uri += "?" + query.decode("latin-1")
    return uri


def content_length(request: Request) -> int:
    """Return the declared body length.

    ``-1`` means unknown (chunked or unparsable header), ``0`` means the
    request carries no body.
    """
    value = request.headers.get("content-length")
    if value is not None:
        try:
            return int(value)
        except ValueError:
            return -1
    if "chunked" in request.headers.get("transfer-encoding", "").lower():
        return -1
    return 0


class RequestLogger:
    """Dependency logging route name, method, URI and content length."""

    def __init__(self, route_name: str) -> None:
        self.route_name = route_name

    async def __call__(
        self,
        request: Request,
        logger: logging.Logger = Depends(get_request_logger),
    ) -> None:
        logger.info(
            "%s -> %s %s %d",
            self.route_name,
            request.method,
            request_uri(request),
            content_length(request),
        )
