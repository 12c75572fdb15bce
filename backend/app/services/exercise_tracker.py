"""Exercise Tracker Service: user creation, listing, exercise logging and log reports.

Invariants:
    - Raw payload dicts are validated into schemas before touching TrackerState
    - A failed request never mutates TrackerState
    - Exercise creation checks the user before the body (404 wins over 400)
    - The date string returned on creation is the exact string stored and later logged

Design Decisions:
    - Presence checks run before schema validation so missing fields produce the
      fixed messages clients rely on
    - Clock injected as a callable: tests pin "today" without patching datetime
"""

import logging
from datetime import date
from typing import Callable

from pydantic import ValidationError

from app.core.calendar_dates import normalize_exercise_date
from app.core.errors import TrackerValidationError
from app.core.exercise_log import filter_log, parse_limit
from app.core.tracker_state import TrackerState, User
from app.schemas.exercises import (
    ExerciseCreate,
    ExerciseLogResponse,
    ExerciseResponse,
    LogEntry,
    LogQuery,
)
from app.schemas.users import UserCreate, UserResponse

logger = logging.getLogger(__name__)

USERNAME_REQUIRED = "Username is required"
EXERCISE_FIELDS_REQUIRED = "Description and duration are required"


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _first_error(exc: ValidationError) -> tuple[str, str]:
    """(field, message) of the first schema error."""
    err = exc.errors()[0]
    field = ".".join(str(loc) for loc in err["loc"])
    return field, err["msg"]


class ExerciseTrackerService:
    """Request-level operations over one TrackerState."""

    def __init__(
        self, state: TrackerState, today: Callable[[], date] = date.today,
    ):
        self.state = state
        self._today = today

    def create_user(self, payload: dict) -> UserResponse:
        if _is_blank(payload.get("username")):
            raise TrackerValidationError(USERNAME_REQUIRED, field="username")
        try:
            body = UserCreate.model_validate(payload)
        except ValidationError as e:
            field, _ = _first_error(e)
            raise TrackerValidationError(USERNAME_REQUIRED, field=field) from e

        user = self.state.add_user(body.username)
        logger.info("User created", extra={"user_id": user.id})
        return _user_response(user)

    def list_users(self) -> list[UserResponse]:
        return [_user_response(u) for u in self.state.users]

    def add_exercise(self, user_id: str, payload: dict) -> ExerciseResponse:
        user = self.state.get_user(user_id)

        missing = [
            name for name in ("description", "duration")
            if _is_blank(payload.get(name))
        ]
        if missing:
            raise TrackerValidationError(EXERCISE_FIELDS_REQUIRED, field=missing[0])
        try:
            body = ExerciseCreate.model_validate(payload)
        except ValidationError as e:
            field, message = _first_error(e)
            raise TrackerValidationError(message, field=field) from e

        exercise = self.state.add_exercise(
            user.id,
            description=body.description,
            duration=body.duration,
            date=normalize_exercise_date(body.date, self._today()),
        )
        logger.info(
            "Exercise added",
            extra={"user_id": user.id, "exercise_id": exercise.id},
        )
        return ExerciseResponse(
            id=user.id,
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=exercise.date,
        )

    def get_log(self, user_id: str, query: LogQuery) -> ExerciseLogResponse:
        user = self.state.get_user(user_id)
        entries = filter_log(
            self.state.exercises_for(user.id),
            date_from=query.date_from,
            date_to=query.date_to,
            limit=parse_limit(query.limit),
        )
        log = [
            LogEntry(description=e.description, duration=e.duration, date=e.date)
            for e in entries
        ]
        logger.debug(
            "Exercise log served", extra={"user_id": user.id, "count": len(log)},
        )
        return ExerciseLogResponse(
            id=user.id, username=user.username, count=len(log), log=log,
        )


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username)
