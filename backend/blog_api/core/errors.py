"""Error Hierarchy: typed, categorized exceptions for blog post failures.

Invariants:
    - Every error has a message (str), code (str) and kind (ErrorKind)
    - to_response() produces the flat {"error": message} envelope
    - Lookup misses on get/update are NOT errors; they surface as None

Design Decisions:
    - Single hierarchy with BlogError base: one FastAPI handler catches all
    - Status codes are not stored on the error; the boundary picks them by
      matching on kind (see api.error_handlers.status_for_kind)
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error categories the HTTP boundary maps to status codes."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class BlogError(Exception):
    """Base exception for all blog API errors."""

    def __init__(self, message: str, code: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


class PostValidationError(BlogError):
    """Request body is malformed or a required field is missing."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, "VALIDATION_ERROR", ErrorKind.VALIDATION)
        self.field = field


class PostNotFoundError(BlogError):
    """Operation targeted a post id that is not in the store."""
    def __init__(self, post_id: int):
        super().__init__(
            f"The blog post does not exist. ID: {post_id}",
            "POST_NOT_FOUND", ErrorKind.NOT_FOUND,
        )
        self.post_id = post_id
