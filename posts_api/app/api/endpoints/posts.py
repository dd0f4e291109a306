"""
Post endpoints.

Two routers mirror the two path prefixes the service answers on:

* ``/posts`` lists the whole collection (``GET`` only).
* ``/post/{id}`` reads (``GET``), creates or updates (``POST``) and
  deletes (``DELETE``) a single post.  ``POST /post/0`` creates a new
  post; any other id targets an existing one.

The id segment is everything after ``/post/`` and must be a base‑10
integer.  It is checked before the method, so ``PUT /post/abc`` is a
400 while ``PUT /post/1`` is a 405.  Every handler performs exactly
one store operation; failures are raised as ``PostsAPIError``
subclasses and rendered as plain text by the app's exception handler.
"""

import json
import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from starlette.requests import ClientDisconnect

from ...core.errors import (
    InvalidPostIDError,
    MalformedBodyError,
    MethodNotAllowedError,
    ServerIOError,
)
from ...core.store import PostStore
from ...schemas.post import Post
from ..deps import RequestLogger, get_store
from ..routing import AnyMethodRoute

_POST_ID = re.compile(r"[+-]?[0-9]+")
# Ids outside the signed 64‑bit range are rejected like non‑numeric ones.
_MIN_POST_ID = -(2 ** 63)
_MAX_POST_ID = 2 ** 63 - 1

# Declared methods of the fallback routes; AnyMethodRoute answers every
# method its sibling routes do not.
FALLBACK_METHODS = ["PUT", "PATCH", "HEAD", "OPTIONS"]

posts_router = APIRouter(dependencies=[Depends(RequestLogger("/posts"))])
post_router = APIRouter(dependencies=[Depends(RequestLogger("/post/"))])


def resolve_post_id(post_id: str) -> int:
    """Parse the id segment of ``/post/{id}`` or raise ``InvalidPostIDError``."""
    if not _POST_ID.fullmatch(post_id):
        raise InvalidPostIDError()
    value = int(post_id)
    if not _MIN_POST_ID <= value <= _MAX_POST_ID:
        raise InvalidPostIDError()
    return value


async def read_submitted_post(request: Request) -> Post:
    """Read the whole request body and decode it into a ``Post``.

    A body that cannot be read raises ``ServerIOError`` (500); one that
    is not a JSON object of the right shape raises
    ``MalformedBodyError`` (400).  Invalid UTF‑8 is replaced with
    U+FFFD rather than rejected.
    """
    try:
        raw = await request.body()
    except ClientDisconnect as exc:
        raise ServerIOError() from exc
    try:
        return Post.model_validate(json.loads(raw.decode("utf-8", "replace")))
    except ValueError as exc:
        # json.JSONDecodeError and pydantic's ValidationError both
        # derive from ValueError.
        raise MalformedBodyError() from exc


@posts_router.get("/posts", response_model=List[Post])
def list_posts(store: PostStore = Depends(get_store)) -> List[Post]:
    """Return every post, in no particular order."""
    return store.list()


def posts_method_not_allowed() -> None:
    raise MethodNotAllowedError()


@post_router.get("/post/{post_id:path}", response_model=Post)
def get_post(
    post_id: int = Depends(resolve_post_id),
    store: PostStore = Depends(get_store),
) -> Post:
    """Retrieve a single post by id.

    Returns HTTP 404 if the post does not exist.
    """
    return store.get(post_id)


@post_router.post("/post/{post_id:path}", response_model=Post)
async def save_post(
    request: Request,
    response: Response,
    post_id: int = Depends(resolve_post_id),
    store: PostStore = Depends(get_store),
) -> Post:
    """Create a post (id 0, HTTP 201) or update an existing one (HTTP 200).

    The ``id`` field of the submitted body is ignored; only the path
    decides between create and update.  Updates return the stored post
    as is, without applying the submitted body.
    """
    submitted = await read_submitted_post(request)
    if post_id == 0:
        response.status_code = status.HTTP_201_CREATED
        return store.create(submitted.body)
    return store.replace(post_id, submitted.body)


@post_router.delete("/post/{post_id:path}")
def delete_post(
    post_id: int = Depends(resolve_post_id),
    store: PostStore = Depends(get_store),
) -> Response:
    """Delete a post, answering 200 with an empty body or 404."""
    store.delete(post_id)
    return Response(status_code=status.HTTP_200_OK)


def post_method_not_allowed(post_id: int = Depends(resolve_post_id)) -> None:
    raise MethodNotAllowedError()


# Registered last so the method-specific routes above take precedence.
posts_router.add_api_route(
    "/posts",
    posts_method_not_allowed,
    methods=FALLBACK_METHODS,
    include_in_schema=False,
    route_class_override=AnyMethodRoute,
)
post_router.add_api_route(
    "/post/{post_id:path}",
    post_method_not_allowed,
    methods=FALLBACK_METHODS,
    include_in_schema=False,
    route_class_override=AnyMethodRoute,
)
