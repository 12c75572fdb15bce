"""Exercise Log: window filtering, limit handling and lenient integer parsing."""

import pytest

from app.core.domain_types import INVALID_DATE
from app.core.exercise_log import filter_log, parse_leading_int, parse_limit
from app.core.tracker_state import TrackerState


@pytest.fixture
def exercises():
    state = TrackerState()
    user = state.add_user("A")
    state.add_exercise(user.id, "first", 10, "Sun Jan 01 2023")
    state.add_exercise(user.id, "second", 20, "Sun Jan 15 2023")
    state.add_exercise(user.id, "third", 30, "Wed Feb 01 2023")
    return state.exercises_for(user.id)


def _descriptions(entries):
    return [e.description for e in entries]


def test_no_filters_returns_everything_in_order(exercises):
    assert _descriptions(filter_log(exercises)) == ["first", "second", "third"]


def test_from_to_window_is_inclusive(exercises):
    result = filter_log(exercises, date_from="2023-01-01", date_to="2023-01-31")
    assert _descriptions(result) == ["first", "second"]


def test_from_only(exercises):
    assert _descriptions(filter_log(exercises, date_from="2023-01-15")) == ["second", "third"]


def test_to_only(exercises):
    assert _descriptions(filter_log(exercises, date_to="2023-01-14")) == ["first"]


def test_invalid_bound_is_unbounded(exercises):
    result = filter_log(exercises, date_from="garbage", date_to="2023-01-15")
    assert _descriptions(result) == ["first", "second"]


def test_limit_keeps_earliest_created(exercises):
    assert _descriptions(filter_log(exercises, limit=1)) == ["first"]


def test_limit_applies_after_filter(exercises):
    result = filter_log(exercises, date_from="2023-01-10", limit=1)
    assert _descriptions(result) == ["second"]


def test_limit_zero_returns_nothing(exercises):
    assert filter_log(exercises, limit=0) == []


def test_invalid_exercise_date_survives_bounds():
    state = TrackerState()
    user = state.add_user("A")
    state.add_exercise(user.id, "mystery", 5, INVALID_DATE)
    result = filter_log(state.exercises_for(user.id), date_from="2023-01-01", date_to="2023-01-31")
    assert _descriptions(result) == ["mystery"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(30, 30), (30.9, 30), ("45", 45), ("45min", 45), (" 7 ", 7), ("-3", -3),
     ("abc", None), ("", None), (None, None), (True, None), (float("nan"), None)],
)
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("2", 2), ("0", 0), ("-1", None), ("many", None), (None, None)],
)
def test_parse_limit(value, expected):
    assert parse_limit(value) == expected
