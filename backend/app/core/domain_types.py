"""Domain Types: identity types and shared constants for the exercise tracker.

Invariants:
    - UserId and ExerciseId are stringified positive integers ("1", "2", ...)
    - INVALID_DATE is the only non-calendar value an exercise date may hold

Design Decisions:
    - NewType over wrapper classes: ids travel through JSON unchanged
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ExerciseId = NewType("ExerciseId", str)


# ─── Constants ───────────────────────────────────────────────────

FIRST_ID = 1
INVALID_DATE = "Invalid Date"
DATE_DISPLAY_FORMAT = "%a %b %d %Y"  # Mon Jan 01 2024
