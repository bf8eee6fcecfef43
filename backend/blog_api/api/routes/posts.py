"""Post Routes: HTTP surface for blog post CRUD.

Invariants:
    - POST   /posts        → 200 Post | 400 {"error": "<field> is missing"}
    - GET    /posts/{id}   → 200 Post | 200 null (404 when strict_not_found)
    - GET    /posts        → 200 [Post], ordered by id (descending by default)
    - PUT    /posts/{id}   → 200 Post | 404 empty body | 400 on invalid body
    - DELETE /posts/{id}   → 204 empty body | 400 {"error": "...ID: <id>"}

Design Decisions:
    - Sync handlers: BlogService does no IO; FastAPI runs them in its thread pool
    - Bodies accepted as Any (decoded JSON, or raw bytes for non-JSON content
      types) and decoded + validated by the core converter
    - BlogError subclasses are not caught here; error_handlers maps them
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from blog_api.api.dependencies import get_app_settings, get_blog_service
from blog_api.config import Settings
from blog_api.core.domain_types import PostId
from blog_api.core.errors import PostNotFoundError
from blog_api.schemas.post import ErrorResponse, PostResponse
from blog_api.services.blog_service import BlogService

router = APIRouter(prefix="/posts", tags=["posts"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
}


@router.post("", response_model=PostResponse, responses=_ERROR_RESPONSES)
def create_post(
    body: Any = Body(None),
    service: BlogService = Depends(get_blog_service),
):
    """Create a blog post from {"title", "content"}."""
    post = service.create(body)
    return PostResponse.from_post(post)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    service: BlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_app_settings),
):
    """Get a blog post. Unknown ids yield an empty (null) 200 by default."""
    post = service.get(PostId(post_id))
    if post is None:
        if settings.strict_not_found:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=PostNotFoundError(post_id).to_response(),
            )
        return JSONResponse(content=None)
    return PostResponse.from_post(post)


@router.get("", response_model=list[PostResponse])
def list_posts(
    descending: bool = Query(True),
    service: BlogService = Depends(get_blog_service),
):
    """List all blog posts ordered by id."""
    return [
        PostResponse.from_post(p)
        for p in service.list_posts(descending=descending)
    ]


@router.put("/{post_id}", response_model=PostResponse, responses=_ERROR_RESPONSES)
def update_post(
    post_id: int,
    body: Any = Body(None),
    service: BlogService = Depends(get_blog_service),
):
    """Replace title/content of a blog post."""
    post = service.update(PostId(post_id), body)
    if post is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return PostResponse.from_post(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def delete_post(
    post_id: int, service: BlogService = Depends(get_blog_service),
):
    """Delete a blog post. Unknown ids are a bad request (400)."""
    service.delete(PostId(post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
