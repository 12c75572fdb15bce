"""Exercise Log: date-window filtering and limiting of a user's exercises.

Invariants:
    - Output preserves input order (creation order)
    - Bounds are inclusive; an unparseable bound is no bound
    - An exercise stored as INVALID_DATE is never excluded by a bound
    - limit applies after filtering; None or negative means no limit
"""

from datetime import date
import math
import re

from app.core.calendar_dates import parse_calendar_date
from app.core.tracker_state import Exercise

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: object) -> int | None:
    """Lenient integer coercion: 30 -> 30, 30.9 -> 30, "45min" -> 45, "abc" -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_limit(value: str | None) -> int | None:
    limit = parse_leading_int(value)
    if limit is None or limit < 0:
        return None
    return limit


def _within(exercise: Exercise, start: date | None, end: date | None) -> bool:
    day = parse_calendar_date(exercise.date)
    if day is None:
        return True
    if start and day < start:
        return False
    if end and day > end:
        return False
    return True


def filter_log(
    exercises: list[Exercise],
    date_from: str | None = None,
    date_to: str | None = None,
    limit: int | None = None,
) -> list[Exercise]:
    """Apply the [from, to] window, then keep the first `limit` entries."""
    start = parse_calendar_date(date_from)
    end = parse_calendar_date(date_to)
    selected = exercises
    if start or end:
        selected = [e for e in exercises if _within(e, start, end)]
    if limit is not None:
        selected = selected[:limit]
    return list(selected)
