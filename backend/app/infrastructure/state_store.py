"""State Store: hands the application-owned TrackerState to route handlers.

Invariants:
    - Exactly one TrackerState per app instance, created in the lifespan
    - Handlers only reach state through the get_tracker_state dependency

Design Decisions:
    - Stored on app.state so the dependency is a plain lookup; tests override
      get_tracker_state through app.dependency_overrides
"""

import logging

from fastapi import FastAPI, Request

from app.core.tracker_state import TrackerState
from app.core.errors import InternalError

logger = logging.getLogger(__name__)


def init_tracker_state(app: FastAPI) -> TrackerState:
    state = TrackerState()
    app.state.tracker = state
    logger.info("In-memory tracker state initialized")
    return state


def get_tracker_state(request: Request) -> TrackerState:
    """FastAPI dependency: the TrackerState owned by the running app."""
    state = getattr(request.app.state, "tracker", None)
    if state is None:
        raise InternalError("tracker state not initialized (lifespan did not run)")
    return state
