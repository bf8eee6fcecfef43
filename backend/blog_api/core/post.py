"""Post Entity: the immutable blog post value.

Invariants:
    - title and content are non-empty str
    - id is non-negative and never recomputed after construction
    - created_at <= modified_at
    - Updates build a new Post (with_changes); fields are never mutated in place

Design Decisions:
    - frozen dataclass: a reader holding a Post can never observe a half-applied
      update, which is what makes store reads atomic per entry
    - Timestamps are epoch milliseconds (int), matching the wire format
"""

import time
from dataclasses import dataclass, replace

from blog_api.core.errors import PostValidationError


def current_millis() -> int:
    """Default clock: wall time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    content: str
    created_at: int
    modified_at: int

    def __post_init__(self):
        if self.id < 0:
            raise PostValidationError(f"id must be non-negative, got {self.id}", "id")
        for name in ("title", "content"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise PostValidationError(f"{name} is missing", name)
        if self.modified_at < self.created_at:
            raise PostValidationError(
                "modifiedAt must not precede createdAt", "modifiedAt",
            )

    def with_changes(self, title: str, content: str, modified_at: int) -> "Post":
        """Return a new Post with the same id and created_at."""
        return replace(
            self, title=title, content=content, modified_at=modified_at,
        )
