"""Tracker State: the in-memory owner of users, exercises and their id counters.

Invariants:
    - Ids are assigned from per-collection counters starting at FIRST_ID, never reused
    - Users and exercises are append-only; list order is creation order
    - add_exercise() only accepts a user_id that exists at write time

Design Decisions:
    - One explicit state object instead of module-level lists: the app owns one
      instance, tests build their own
    - Pure dataclass, no IO and no locking (single-process, single event loop)
"""

from dataclasses import dataclass, field

from app.core.domain_types import FIRST_ID, ExerciseId, UserId
from app.core.errors import ResourceNotFoundError, ErrorContext


@dataclass(frozen=True)
class User:
    id: UserId
    username: str


@dataclass(frozen=True)
class Exercise:
    id: ExerciseId
    user_id: UserId
    description: str
    duration: int
    date: str


@dataclass
class TrackerState:
    """Process-lifetime collections. Lost on restart."""

    users: list[User] = field(default_factory=list)
    exercises: list[Exercise] = field(default_factory=list)
    next_user_id: int = FIRST_ID
    next_exercise_id: int = FIRST_ID

    def add_user(self, username: str) -> User:
        user = User(id=UserId(str(self.next_user_id)), username=username)
        self.users.append(user)
        self.next_user_id += 1
        return user

    def find_user(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def get_user(self, user_id: str) -> User:
        """Like find_user, but an unknown id raises ResourceNotFoundError."""
        user = self.find_user(user_id)
        if user is None:
            raise ResourceNotFoundError(
                "User", user_id, ErrorContext(user_id=user_id),
            )
        return user

    def add_exercise(
        self, user_id: str, description: str, duration: int, date: str,
    ) -> Exercise:
        user = self.get_user(user_id)
        exercise = Exercise(
            id=ExerciseId(str(self.next_exercise_id)),
            user_id=user.id,
            description=description,
            duration=duration,
            date=date,
        )
        self.exercises.append(exercise)
        self.next_exercise_id += 1
        return exercise

    def exercises_for(self, user_id: str) -> list[Exercise]:
        return [e for e in self.exercises if e.user_id == user_id]
