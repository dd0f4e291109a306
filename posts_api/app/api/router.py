"""
Top‑level router of the API.

This router aggregates the endpoint routers.  The post routes are
mounted at the root without a prefix: clients address ``/posts`` and
``/post/{id}`` directly.
"""

from fastapi import APIRouter

from .endpoints import posts

router = APIRouter()

router.include_router(posts.posts_router, tags=["posts"])
router.include_router(posts.post_router, tags=["posts"])
