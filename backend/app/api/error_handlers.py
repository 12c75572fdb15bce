"""Error Handlers: global exception handlers for the exercise tracker API.

Invariants:
    - ExerciseTrackerError → {"error": message} with the error's http_status
    - Exception (catch-all) → 500 {"error": "Something went wrong!"}, details logged only

Design Decisions:
    - Two-layer handler: domain (ExerciseTrackerError), catch-all (Exception)
    - Request bodies are decoded by hand (read_payload), so FastAPI's own
      RequestValidationError path is never hit and keeps its default handler
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import ExerciseTrackerError, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_tracker_error_handler(app)
    _register_generic_error_handler(app)


def _register_tracker_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all exercise tracker errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_fields(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        error = InternalError(f"{type(exc).__name__}: {exc}")
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={**error.log_fields(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )
