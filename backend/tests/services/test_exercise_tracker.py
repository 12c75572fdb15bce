"""Exercise Tracker Service: operations over an isolated TrackerState.

Invariants:
    - Failed operations leave TrackerState untouched
    - Unknown user is reported before missing exercise fields
    - Creation response and log entry carry the identical date string
"""

from datetime import date

import pytest

from app.core.errors import ResourceNotFoundError, TrackerValidationError
from app.core.tracker_state import TrackerState
from app.schemas.exercises import LogQuery
from app.services.exercise_tracker import ExerciseTrackerService


@pytest.fixture
def service():
    return ExerciseTrackerService(TrackerState(), today=lambda: date(2024, 1, 1))


@pytest.fixture
def user_id(service):
    return service.create_user({"username": "A"}).id


def test_create_user_returns_new_id(service):
    user = service.create_user({"username": "alice"})
    assert user.id == "1"
    assert user.username == "alice"


@pytest.mark.parametrize("payload", [{}, {"username": ""}, {"username": None}, {"username": "  "}])
def test_create_user_without_username_fails_without_growing(service, payload):
    with pytest.raises(TrackerValidationError) as exc_info:
        service.create_user(payload)
    assert exc_info.value.message == "Username is required"
    assert service.state.users == []


def test_list_users_in_creation_order(service):
    for name in ("x", "y", "z"):
        service.create_user({"username": name})
    assert [u.username for u in service.list_users()] == ["x", "y", "z"]


def test_add_exercise_unknown_user_is_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        service.add_exercise("99", {"description": "run", "duration": "10"})
    assert service.state.exercises == []


def test_unknown_user_wins_over_missing_fields(service):
    with pytest.raises(ResourceNotFoundError):
        service.add_exercise("99", {})


@pytest.mark.parametrize(
    "payload",
    [{"duration": "10"}, {"description": "run"}, {"description": "", "duration": "10"},
     {"description": "run", "duration": ""}, {"description": "run", "duration": None}],
)
def test_add_exercise_missing_fields(service, user_id, payload):
    with pytest.raises(TrackerValidationError) as exc_info:
        service.add_exercise(user_id, payload)
    assert exc_info.value.message == "Description and duration are required"
    assert service.state.exercises == []


def test_add_exercise_non_numeric_duration(service, user_id):
    with pytest.raises(TrackerValidationError) as exc_info:
        service.add_exercise(user_id, {"description": "run", "duration": "forever"})
    assert exc_info.value.message == "Duration must be a number"
    assert exc_info.value.field == "duration"


def test_add_exercise_defaults_date_to_today(service, user_id):
    resp = service.add_exercise(user_id, {"description": "run", "duration": 30})
    assert resp.date == "Mon Jan 01 2024"


def test_add_exercise_keeps_invalid_date_text(service, user_id):
    resp = service.add_exercise(user_id, {"description": "run", "duration": 30, "date": "nope"})
    assert resp.date == "Invalid Date"


def test_add_exercise_merges_user_and_exercise(service, user_id):
    resp = service.add_exercise(
        user_id, {"description": "run", "duration": "30", "date": "2023-01-15"},
    )
    assert resp.model_dump(by_alias=True) == {
        "_id": user_id,
        "username": "A",
        "description": "run",
        "duration": 30,
        "date": "Sun Jan 15 2023",
    }


def test_log_matches_created_exercise(service, user_id):
    created = service.add_exercise(
        user_id, {"description": "row", "duration": "12", "date": "2023-02-01"},
    )
    log = service.get_log(user_id, LogQuery())
    entry = log.log[0]
    assert (entry.description, entry.duration, entry.date) == (
        created.description, created.duration, created.date,
    )


def test_log_window_and_count(service, user_id):
    for day in ("2023-01-01", "2023-01-15", "2023-02-01"):
        service.add_exercise(user_id, {"description": day, "duration": 10, "date": day})
    log = service.get_log(user_id, LogQuery(date_from="2023-01-01", date_to="2023-01-31"))
    assert log.count == 2
    assert [e.description for e in log.log] == ["2023-01-01", "2023-01-15"]


def test_log_limit(service, user_id):
    for n in range(3):
        service.add_exercise(user_id, {"description": f"ex{n}", "duration": 10})
    log = service.get_log(user_id, LogQuery(limit="1"))
    assert log.count == 1
    assert log.log[0].description == "ex0"


def test_log_ignores_other_users(service, user_id):
    other = service.create_user({"username": "B"}).id
    service.add_exercise(other, {"description": "theirs", "duration": 10})
    log = service.get_log(user_id, LogQuery())
    assert log.count == 0
    assert log.log == []


def test_log_unknown_user(service):
    with pytest.raises(ResourceNotFoundError):
        service.get_log("5", LogQuery())
