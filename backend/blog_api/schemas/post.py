"""Post Schemas: wire shape of a blog post and of error bodies.

Invariants:
    - Post JSON keys are id, title, content, createdAt, modifiedAt
    - Timestamps serialized as integer epoch milliseconds

Design Decisions:
    - camelCase via alias_generator: Python attributes stay snake_case
    - Request bodies are NOT modeled here; they reach the converter as raw
      JSON so missing fields report "<field> is missing" instead of pydantic's
      generic messages
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog_api.core.post import Post


class PostResponse(BaseModel):
    """Public-facing blog post."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    content: str
    created_at: int
    modified_at: int

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            modified_at=post.modified_at,
        )


class ErrorResponse(BaseModel):
    """Error envelope: {"error": "<message>"}."""
    error: str
