"""Calendar Dates: parse the date strings clients send, format the ones we store.

Invariants:
    - parse_calendar_date() returns a date or None, never raises
    - format_calendar_date(None) == INVALID_DATE
    - parse_calendar_date(format_calendar_date(d)) == d for every valid d
"""

from datetime import date, datetime

from app.core.domain_types import DATE_DISPLAY_FORMAT, INVALID_DATE

_DATE_FORMATS = (
    "%Y-%m-%d",
    DATE_DISPLAY_FORMAT,
    "%b %d %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def parse_calendar_date(value: str | None) -> date | None:
    """Parse a client date string; None when absent or unrecognized."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    # ISO date-times ("2023-01-15T10:30:00Z"): keep the calendar part
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_calendar_date(value: date | None) -> str:
    if value is None:
        return INVALID_DATE
    return value.strftime(DATE_DISPLAY_FORMAT)


def normalize_exercise_date(value: str | None, today: date) -> str:
    """Stored form of an exercise date.

    Omitted or blank input means today. Anything unparseable is kept as
    INVALID_DATE rather than rejected.
    """
    if value is None or not value.strip():
        return format_calendar_date(today)
    return format_calendar_date(parse_calendar_date(value))
