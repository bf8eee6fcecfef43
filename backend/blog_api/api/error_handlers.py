"""Error Handlers: global exception handlers for the blog API.

Invariants:
    - BlogError → status chosen by status_for_kind, body {"error": message}
    - RequestValidationError → 400, body {"error": "<loc>: <msg>"}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Status picked by an exhaustive match on ErrorKind, not stored on the error
    - NOT_FOUND maps to 400: deleting an unknown post is reported as a bad request
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from blog_api.core.errors import BlogError, ErrorKind

logger = logging.getLogger(__name__)


def status_for_kind(kind: ErrorKind) -> int:
    """Map an error kind to its HTTP status."""
    match kind:
        case ErrorKind.VALIDATION:
            return status.HTTP_400_BAD_REQUEST
        case ErrorKind.NOT_FOUND:
            return status.HTTP_400_BAD_REQUEST
        case ErrorKind.INTERNAL:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
    raise ValueError(f"Unhandled error kind: {kind!r}")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_blog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_blog_error_handler(app: FastAPI) -> None:
    """Register blog domain error handler."""

    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError):
        status_code = status_for_kind(exc.kind)
        logger.warning(
            f"BlogError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": status_code,
            },
        )
        return JSONResponse(status_code=status_code, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Flatten the first pydantic error into the {"error": ...} envelope."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data"}
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return {"error": f"{loc}: {first['msg']}" if loc else first["msg"]}
