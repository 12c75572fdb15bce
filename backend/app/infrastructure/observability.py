"""Structured Logging: JSON and key=value formatters for the API process.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Domain extras (LOG_EXTRA_FIELDS) are surfaced by both formats when present
    - setup_logging installs exactly one app handler on the root logger, however
      many times it is called
"""

import logging
import json
from datetime import datetime, timezone

LOG_EXTRA_FIELDS = (
    "user_id", "exercise_id", "count", "path",
    "error_code", "field", "resource_type", "resource_id", "detail",
)

_HANDLER_NAME = "exercise-tracker"


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in LOG_EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class KeyValueFormatter(logging.Formatter):
    """Human-readable line with extras appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        if not pairs:
            return line
        head, sep, tail = line.partition("\n")  # keep tracebacks below the pairs
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the root logger for the application; returns the installed handler."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else KeyValueFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
