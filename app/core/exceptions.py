"""
Domain errors and global exception handlers.

Services raise the ``BlogError`` subclasses below; the handlers registered
here turn them into JSON responses and keep stack traces out of them.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


# ── Domain errors ───────────────────────────────────────────────────
class BlogError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(BlogError):
    status_code = 400
    message = "Missing fields."


class DuplicateEmailError(BlogError):
    status_code = 409
    message = "Email already exists."


class InvalidCredentialsError(BlogError):
    """Raised for an unknown email *and* for a wrong password."""

    status_code = 401
    message = "Invalid credentials."


class NotFoundError(BlogError):
    status_code = 404
    message = "Not found."


class InvalidTransitionError(BlogError):
    status_code = 409
    message = "Post is no longer pending."


class StorageAuthError(BlogError):
    status_code = 500
    message = "S3 URL generation failed."


# ── Handlers ────────────────────────────────────────────────────────
def _error_body(message: object) -> dict:
    return {"message": message, "success": False}

async def _blog_error_handler(_request: Request, exc: BlogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.message, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

async def _http_exception_handler(_request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail),
        headers=getattr(exc, "headers", None),
    )

async def _request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    detail = first.get("msg", "Invalid request")
    message = f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"
    return JSONResponse(status_code=400, content=_error_body(message))

async def _rate_limit_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content=_error_body(f"Rate limit exceeded: {exc.detail}"),
    )

async def _sqlalchemy_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error: %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content=_error_body("Internal database error"))

async def _generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(status_code=500, content=_error_body("Internal server error"))

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(BlogError, _blog_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
