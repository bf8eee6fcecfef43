"""Request Converter: turns a decoded JSON body into a candidate Post.

Invariants:
    - Never touches the store; only builds values
    - Required fields checked in order (title, then content); first miss wins
    - The allocator is consulted only after every field check has passed,
      so a rejected create never consumes an id
    - Update bodies keep the caller-supplied id

Design Decisions:
    - Body arrives as decoded JSON (Any) when sent as application/json; other
      content types reach here as raw bytes and are decoded as JSON regardless
    - Optional createdAt on update bodies is passed through as the new
      modification time; absent means "now"
"""

import json
from collections.abc import Mapping
from typing import Any

from blog_api.core.domain_types import Clock, PostId
from blog_api.core.errors import PostValidationError
from blog_api.core.id_allocator import IdAllocator
from blog_api.core.post import Post, current_millis

TIMESTAMP_FIELD = "createdAt"


def string_value(body: Mapping[str, Any], field: str) -> str:
    """Extract a required, non-empty text field or raise '<field> is missing'."""
    value = body.get(field)
    if not isinstance(value, str) or not value:
        raise PostValidationError(f"{field} is missing", field)
    return value


def _decode_raw(body: bytes | bytearray) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise PostValidationError("request body is not valid JSON") from None


def _require_mapping(body: Any) -> Mapping[str, Any]:
    if isinstance(body, (bytes, bytearray)) and body:
        body = _decode_raw(body)
    if not isinstance(body, Mapping):
        raise PostValidationError("request body must be a JSON object")
    return body


def _timestamp_value(body: Mapping[str, Any], clock: Clock) -> int:
    value = body.get(TIMESTAMP_FIELD)
    if value is None:
        return clock()
    # ADR: JSON true/false are not timestamps
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PostValidationError(
            f"{TIMESTAMP_FIELD} must be a non-negative integer timestamp",
            TIMESTAMP_FIELD,
        )
    return value


def convert_new_post(
    body: Any, allocator: IdAllocator, clock: Clock = current_millis,
) -> Post:
    """Validate a create body and build a Post with a freshly allocated id."""
    fields = _require_mapping(body)
    title = string_value(fields, "title")
    content = string_value(fields, "content")
    now = clock()
    return Post(
        id=allocator.next_id(), title=title, content=content,
        created_at=now, modified_at=now,
    )


def convert_post_update(
    body: Any, post_id: PostId, clock: Clock = current_millis,
) -> Post:
    """Validate an update body; created_at/modified_at carry its timestamp."""
    fields = _require_mapping(body)
    title = string_value(fields, "title")
    content = string_value(fields, "content")
    timestamp = _timestamp_value(fields, clock)
    return Post(
        id=post_id, title=title, content=content,
        created_at=timestamp, modified_at=timestamp,
    )
