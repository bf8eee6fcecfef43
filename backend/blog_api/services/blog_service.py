"""Blog Service: create/get/list/update/delete composed over store + allocator.

Invariants:
    - create: PostValidationError propagates unchanged; the store is only
      written after conversion succeeded
    - get/update: a lookup miss is returned as None, never raised; an update
      of an unknown id does not validate its body
    - update is one atomic store.replace, so it never resurrects a post that
      a concurrent delete removed
    - update preserves id and created_at; modified_at comes from the request
      timestamp, raised to created_at if it would precede it
    - delete: a miss raises PostNotFoundError carrying the id

Design Decisions:
    - Store, allocator and clock injected: every BlogService is an isolated
      world (tests build one per case; the app builds one per process)
    - Sync methods: nothing here does IO, and FastAPI runs sync routes in its
      thread pool, so store/allocator locks see real contention
"""

import logging
from typing import Any

from blog_api.core.domain_types import Clock, PostId, SortOrder
from blog_api.core.errors import PostNotFoundError
from blog_api.core.id_allocator import IdAllocator
from blog_api.core.post import Post, current_millis
from blog_api.core.post_store import PostStore
from blog_api.core.request_converter import (
    convert_new_post, convert_post_update,
)

logger = logging.getLogger(__name__)


class BlogService:
    """CRUD orchestrator for blog posts."""

    def __init__(
        self,
        store: PostStore | None = None,
        allocator: IdAllocator | None = None,
        clock: Clock = current_millis,
    ):
        self.store = store if store is not None else PostStore()
        self.allocator = allocator if allocator is not None else IdAllocator()
        self._clock = clock

    def create(self, body: Any) -> Post:
        post = convert_new_post(body, self.allocator, self._clock)
        self.store.put(post.id, post)
        logger.info("Blog post created", extra={"post_id": post.id})
        return post

    def get(self, post_id: PostId) -> Post | None:
        post = self.store.get(post_id)
        if post is None:
            logger.warning("Blog post lookup missed", extra={"post_id": post_id})
        return post

    def list_posts(self, descending: bool = True) -> list[Post]:
        return self.store.list(SortOrder.from_descending(descending))

    def update(self, post_id: PostId, body: Any) -> Post | None:
        """Replace title/content of an existing post; None if it does not exist."""
        def apply(old: Post) -> Post:
            incoming = convert_post_update(body, post_id, self._clock)
            return old.with_changes(
                title=incoming.title,
                content=incoming.content,
                modified_at=max(incoming.created_at, old.created_at),
            )

        updated = self.store.replace(post_id, apply)
        if updated is None:
            logger.warning(
                "Update of unknown blog post", extra={"post_id": post_id},
            )
            return None
        logger.info("Blog post updated", extra={"post_id": post_id})
        return updated

    def delete(self, post_id: PostId) -> None:
        removed = self.store.remove(post_id)
        if removed is None:
            raise PostNotFoundError(post_id)
        logger.info("Blog post deleted", extra={"post_id": post_id})
