"""Post Store: in-memory id -> Post repository.

Invariants:
    - Every operation holds the same lock, so all are linearizable
    - get/remove never raise; absence is reported as None
    - list() returns a new list (snapshot); later writes never change it
    - Entries are frozen Posts, so no caller holds a mutable reference into the map

Design Decisions:
    - dict + threading.Lock over a lock-free structure: route handlers run in
      FastAPI's thread pool, and every critical section here is O(1) except list()
    - Sorting happens outside the lock on the copied values
    - replace() exists so read-modify-write needs no caller-side locking
"""

import threading
from typing import Callable

from blog_api.core.domain_types import SortOrder
from blog_api.core.post import Post


class PostStore:
    def __init__(self):
        self._posts: dict[int, Post] = {}
        self._lock = threading.Lock()

    def put(self, post_id: int, post: Post) -> None:
        """Insert or overwrite the entry at post_id."""
        with self._lock:
            self._posts[post_id] = post

    def get(self, post_id: int) -> Post | None:
        with self._lock:
            return self._posts.get(post_id)

    def replace(
        self, post_id: int, change: Callable[[Post], Post],
    ) -> Post | None:
        """Atomically swap an existing entry for change(old); None if absent.

        change runs under the store lock, so a concurrent remove can never be
        undone by a replace that read the entry first.
        """
        with self._lock:
            old = self._posts.get(post_id)
            if old is None:
                return None
            new = change(old)
            self._posts[post_id] = new
            return new

    def remove(self, post_id: int) -> Post | None:
        """Delete and return the entry, or None if there was none."""
        with self._lock:
            return self._posts.pop(post_id, None)

    def list(self, order: SortOrder = SortOrder.ASCENDING) -> list[Post]:
        with self._lock:
            posts = list(self._posts.values())
        posts.sort(
            key=lambda p: p.id, reverse=order is SortOrder.DESCENDING,
        )
        return posts

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def __contains__(self, post_id: object) -> bool:
        with self._lock:
            return post_id in self._posts
