"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - No readiness probe: the store is in-process, nothing external to check
"""

from fastapi import APIRouter, Depends, status

from blog_api.api.dependencies import get_app_settings, get_blog_service
from blog_api.config import Settings
from blog_api.services.blog_service import BlogService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
def health_check(
    service: BlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_app_settings),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "posts": len(service.store),
        "next_id": service.allocator.peek(),
    }
