"""User & Exercise Routes: /api/users and its exercises/logs sub-resources.

Invariants:
    - Routes never contain business logic (delegate to ExerciseTrackerService)
    - Success responses are 200, including creations
    - Bodies arrive as JSON or form data through read_payload; exercise
      creation reads its body only after the user lookup succeeds
"""

import logging

from fastapi import APIRouter, Depends, Query, Request

from app.core.tracker_state import TrackerState
from app.infrastructure.request_body import read_payload
from app.infrastructure.state_store import get_tracker_state
from app.schemas.exercises import ExerciseLogResponse, ExerciseResponse, LogQuery
from app.schemas.users import UserResponse
from app.services.exercise_tracker import ExerciseTrackerService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


def get_tracker_service(
    state: TrackerState = Depends(get_tracker_state),
) -> ExerciseTrackerService:
    return ExerciseTrackerService(state)


@router.post("", response_model=UserResponse)
async def create_user(
    payload: dict = Depends(read_payload),
    service: ExerciseTrackerService = Depends(get_tracker_service),
):
    """Create a user from {username}."""
    return service.create_user(payload)


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: ExerciseTrackerService = Depends(get_tracker_service),
):
    """All users in creation order."""
    return service.list_users()


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    request: Request,
    service: ExerciseTrackerService = Depends(get_tracker_service),
):
    """Record {description, duration, date?} for an existing user."""
    # unknown user is a 404 even when the body is unreadable
    service.state.get_user(user_id)
    payload = await read_payload(request)
    return service.add_exercise(user_id, payload)


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_exercise_log(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    service: ExerciseTrackerService = Depends(get_tracker_service),
):
    """A user's exercises, optionally windowed by from/to and cut to limit."""
    query = LogQuery(date_from=date_from, date_to=date_to, limit=limit)
    return service.get_log(user_id, query)
