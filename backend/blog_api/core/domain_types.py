"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps a non-negative int; never reused within a store's lifetime
    - Clock returns epoch milliseconds
    - Listing order encoded as an Enum, no raw bool/str matching in core

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Callable, NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)


# ─── Value Types ─────────────────────────────────────────────────

Clock = Callable[[], int]   # epoch milliseconds


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    """Listing order; the sort key is always the integer post id."""
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def from_descending(cls, descending: bool) -> "SortOrder":
        return cls.DESCENDING if descending else cls.ASCENDING
