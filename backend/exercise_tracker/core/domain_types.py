"""Domain Types — identity types and plain records shared by core and shell.

Invariants:
    - UserId and ExerciseId wrap str (opaque tokens, never parsed)
    - UserRecord / ExerciseRecord are immutable snapshots of stored rows
    - ExerciseRecord.date is a calendar date (no time, no timezone)

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses over ORM objects at the boundary: services and tests never touch the ORM
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ExerciseId = NewType("ExerciseId", str)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    id: UserId
    username: str


@dataclass(frozen=True)
class ExerciseDraft:
    """Validated exercise fields, ready to insert."""
    description: str
    duration: float
    date: date


@dataclass(frozen=True)
class ExerciseRecord:
    id: ExerciseId
    user_id: UserId
    description: str
    duration: float
    date: date


@dataclass(frozen=True)
class LogFilter:
    """Composed exercise-log query. None means unconstrained."""
    user_id: UserId
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None
