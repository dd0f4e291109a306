"""
Error taxonomy for the Posts API.

Every failure a request can run into is one of the exceptions below.
Each carries the HTTP status and the plain‑text message sent back to
the client.  Handlers simply raise; ``register_exception_handlers``
installs a single FastAPI exception handler that renders them, so an
error only ever affects the request that raised it.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse


class PostsAPIError(Exception):
    """Base class for errors rendered as plain‑text HTTP responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientInputError(PostsAPIError):
    """The request itself is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class InvalidPostIDError(ClientInputError):
    message = "Invalid post ID"


class MalformedBodyError(ClientInputError):
    message = "Error parsing request body"


class PostNotFoundError(PostsAPIError):
    """The referenced post id is not in the store."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "Post not found"


class MethodNotAllowedError(PostsAPIError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = "Method not allowed"


class ServerIOError(PostsAPIError):
    """The request body could not be read from the connection."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Error reading request body"


async def posts_api_error_handler(request: Request, exc: PostsAPIError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every ``PostsAPIError`` raised by a route as plain text."""
    app.add_exception_handler(PostsAPIError, posts_api_error_handler)
