"""Route Dependencies: per-app singletons resolved from app.state.

Invariants:
    - One BlogService per FastAPI app, created in create_app()
    - Routes never construct services themselves
"""

from fastapi import Request

from blog_api.config import Settings
from blog_api.services.blog_service import BlogService


def get_blog_service(request: Request) -> BlogService:
    return request.app.state.blog_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
