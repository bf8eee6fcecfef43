"""Blog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
    - One BlogService per app, stored on app.state

Design Decisions:
    - create_app() factory: tests build isolated apps with their own store
    - Module-level `app` kept for `uvicorn blog_api.main:app`
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import health, posts
from blog_api.config import Settings, get_settings
from blog_api.core.id_allocator import IdAllocator
from blog_api.infrastructure.observability import setup_logging
from blog_api.services.blog_service import BlogService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    service: BlogService | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build a FastAPI app around a BlogService (a fresh one by default)."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.blog_service = service or BlogService(
        allocator=IdAllocator(settings.id_start),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(posts.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "blog_api.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )
