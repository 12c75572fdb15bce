"""Error Hierarchy: typed exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), an http_status (int) and a client-facing message
    - to_response() produces the {"error": message} envelope, nothing else
    - Internal details never appear in messages (logged server-side only)

Design Decisions:
    - Single hierarchy rooted at ExerciseTrackerError: one global handler maps all of it
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class ErrorContext:
    """Extra data for logs; never serialized to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_fields(self) -> dict:
        """Context for the server-side log record (None values dropped)."""
        fields = {
            "error_code": self.code,
            "user_id": self.context.user_id,
            "field": self.context.field,
            "detail": self.context.debug_info,
        }
        return {k: v for k, v in fields.items() if v is not None}


# ─── Request Errors (400-level) ─────────────────────────────────

class TrackerValidationError(ExerciseTrackerError):
    """A required field is missing or cannot be coerced."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(message, "VALIDATION_ERROR", 400, ctx)
        self.field = field


class ResourceNotFoundError(ExerciseTrackerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found", "RESOURCE_NOT_FOUND", 404, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id

    def log_fields(self) -> dict:
        return {
            **super().log_fields(),
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
        }


# ─── Server Errors (500-level) ──────────────────────────────────

INTERNAL_ERROR_MESSAGE = "Something went wrong!"


class InternalError(ExerciseTrackerError):
    """Unexpected failure; the client only ever sees the generic message."""
    def __init__(self, detail: str = "", context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if detail:
            ctx.debug_info = {"detail": detail}
        super().__init__(INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR", 500, ctx)
