"""ID Allocator: monotonic, thread-safe post id source.

Invariants:
    - next_id() returns the current value and increments by exactly one
    - No two callers ever observe the same value, regardless of threading
    - Values are never rolled back or reused

Design Decisions:
    - Lock-guarded int over itertools.count: peek() needs a consistent read
    - No upper bound: Python ints do not wrap
"""

import threading


class IdAllocator:
    """Process-local counter, owned by one BlogService."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Next value to be handed out, without consuming it."""
        with self._lock:
            return self._next
