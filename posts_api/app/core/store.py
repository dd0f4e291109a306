"""
In‑memory post store.

``PostStore`` holds the authoritative post collection together with
the id counter.  A single ``threading.Lock`` guards both, so creating
a post (read counter, bump it, insert) is atomic with respect to every
other operation.  Requests are served concurrently from uvicorn's
worker threads, which is why a thread lock rather than an
``asyncio.Lock`` is used.

Each operation performs exactly one map access while holding the
lock and hands back copies, so callers serialize results after the
lock has been released and can never mutate stored posts.  Nothing is
persisted: the collection lives as long as the store object.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List

from ..schemas.post import Post
from .errors import PostNotFoundError

logger = logging.getLogger(__name__)


class PostStore:
    """Lock‑guarded mapping of post id to ``Post`` plus the next id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._posts: Dict[int, Post] = {}
        # Ids are never reused, even after deletion.
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def list(self) -> List[Post]:
        """Return a snapshot of all posts in no particular order."""
        with self._lock:
            return [post.model_copy() for post in self._posts.values()]

    def get(self, post_id: int) -> Post:
        """Return the post stored under ``post_id``.

        Raises ``PostNotFoundError`` if there is none.
        """
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError()
            return post.model_copy()

    def create(self, body: str) -> Post:
        """Store a new post under the next free id and return it."""
        with self._lock:
            post = Post(id=self._next_id, body=body)
            self._next_id += 1
            self._posts[post.id] = post
        logger.debug("Created post %s", post.id)
        return post.model_copy()

    def replace(self, post_id: int, body: str) -> Post:
        """Re‑store the existing post under ``post_id`` and return it.

        The submitted ``body`` is not applied: the record fetched from
        the collection is written back unchanged, so an update only
        confirms the post exists.  Raises ``PostNotFoundError`` if it
        does not.
        """
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                raise PostNotFoundError()
            self._posts[post.id] = post
            return post.model_copy()

    def delete(self, post_id: int) -> None:
        """Remove the post stored under ``post_id``.

        Raises ``PostNotFoundError`` if there is none.
        """
        with self._lock:
            if self._posts.pop(post_id, None) is None:
                raise PostNotFoundError()
        logger.debug("Deleted post %s", post_id)
