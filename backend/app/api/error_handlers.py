"""Error Handlers — global exception handlers for the BlogHub API.

Invariants:
    - BlogHubError → exc.http_status with exc.to_response() (each subclass owns its shape)
    - RequestValidationError → 400 with a flat field -> message map
    - Exception (catch-all) → 500 {"status", "message"} carrying the exception message
    - translate_error is total: every exception maps to exactly one (status, body)

Design Decisions:
    - Three-layer handler: domain (BlogHubError), validation (Pydantic), catch-all (Exception)
    - translate_error shared with SessionAuthMiddleware, which runs outside
      FastAPI's exception middleware and cannot rely on these handlers
    - Field map keyed by the last loc element: clients see "catName", not "body.catName"
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import BlogHubError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bloghub_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def translate_error(exc: Exception) -> tuple[int, dict]:
    """Map any exception to (HTTP status, JSON body)."""
    if isinstance(exc, BlogHubError):
        return exc.http_status, exc.to_response()
    if isinstance(exc, RequestValidationError):
        return status.HTTP_400_BAD_REQUEST, build_field_error_map(exc.errors())
    return status.HTTP_500_INTERNAL_SERVER_ERROR, {
        "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "message": str(exc) or exc.__class__.__name__,
    }


def _register_bloghub_error_handler(app: FastAPI) -> None:
    """Register BlogHub domain/infrastructure error handler."""

    @app.exception_handler(BlogHubError)
    async def bloghub_error_handler(request: Request, exc: BlogHubError):
        """Handle all BlogHub domain/infrastructure errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"BlogHubError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        status_code, body = translate_error(exc)
        return JSONResponse(status_code=status_code, content=body)


def build_field_error_map(errors) -> dict[str, str]:
    """One entry per invalid field; the first message for a field wins."""
    field_errors: dict[str, str] = {}
    for e in errors:
        loc = e.get("loc") or ()
        if e.get("type") == "json_invalid" or len(loc) < 2:
            field = str(loc[0]) if loc else "body"
        else:
            field = str(loc[-1])
        field_errors.setdefault(field, e.get("msg", "Invalid value"))
    return field_errors
