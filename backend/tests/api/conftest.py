"""API test fixtures: FastAPI test client over a fresh TrackerState.

Invariants:
    - Every test gets its own TrackerState (no state leaks between tests)
    - get_tracker_state dependency overridden; the lifespan is not run
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.tracker_state import TrackerState
from app.infrastructure.state_store import get_tracker_state
from app.main import app


@pytest.fixture
def tracker_state():
    return TrackerState()


@pytest.fixture
async def client(tracker_state):
    """FastAPI test client with state dependency overridden."""
    app.dependency_overrides[get_tracker_state] = lambda: tracker_state

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def user(client):
    """A created user, as returned by POST /api/users."""
    res = await client.post("/api/users", json={"username": "A"})
    return res.json()
