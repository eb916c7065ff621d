"""Error Handlers — global exception handlers rendering every failure as plain text.

Invariants:
    - ExerciseTrackerError → exc.message with exc.http_status
    - RequestValidationError → 400 with the first field-level message
    - HTTPException → its own status and detail
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details
    - Error bodies are text/plain, never JSON

Design Decisions:
    - Layered handlers: domain (ExerciseTrackerError), validation (Pydantic),
      HTTP (Starlette), catch-all (Exception)
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_tracker.core.errors import ExerciseTrackerError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register exercise tracker domain/infrastructure error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        extra = {**exc.to_log_extra(), "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(f"ExerciseTrackerError: {exc.message}", extra=extra)
        else:
            logger.warning(f"Rejected request: {exc.message}", extra=extra)
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return PlainTextResponse(
            first_validation_message(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTPException raised by routing or routes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def first_validation_message(exc: RequestValidationError) -> str:
    """Report the first field-level error as "<field>: <message>"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
    field = ".".join(loc)
    return f"{field}: {first['msg']}" if field else first["msg"]
