"""Validation Layer — required-field and value-range checks, run before any mutation.

Invariants:
    - Checks run in a fixed order and stop at the first failure
    - Messages are the exact client-facing plain-text bodies
    - Pure: no IO, "today" passed in by the caller

Design Decisions:
    - Form fields arrive as text, JSON fields may arrive as any JSON type:
      text fields must be strings, duration may be a number or numeric text
    - Empty string counts as absent: HTML forms submit "" for blank inputs
    - No trimming of username (length check only)
"""

import math
from datetime import date

from exercise_tracker.core.dates import resolve_exercise_date
from exercise_tracker.core.domain_types import ExerciseDraft
from exercise_tracker.core.errors import ValidationError


def check_username(username: object) -> str:
    """Return the username unchanged, or raise if it is missing/empty/not text."""
    if username is None or username == "":
        raise ValidationError("Username is required.", field="username")
    if not isinstance(username, str):
        raise ValidationError("Username must be a string.", field="username")
    return username


def parse_duration(raw: object) -> float:
    """Duration in minutes; must be present, numeric and > 0."""
    if raw is None or raw == "":
        raise ValidationError("Duration required.", field="duration")
    if isinstance(raw, bool):
        raise ValidationError("Duration must be a number.", field="duration")
    try:
        duration = float(raw)
    except (TypeError, ValueError):
        raise ValidationError("Duration must be a number.", field="duration")
    if not math.isfinite(duration):
        raise ValidationError("Duration must be a number.", field="duration")
    if duration <= 0:
        raise ValidationError(
            "Duration must be greater than 0.", field="duration",
        )
    return duration


def check_exercise_fields(
    description: object, duration: object, date_text: object, today: date,
) -> ExerciseDraft:
    """Validate add-exercise fields (after the userId has been resolved)."""
    if description is None or description == "":
        raise ValidationError("Description required.", field="description")
    if not isinstance(description, str):
        raise ValidationError(
            "Description must be a string.", field="description",
        )
    checked_duration = parse_duration(duration)
    if date_text is not None and not isinstance(date_text, str):
        raise ValidationError("Invalid date.", field="date")
    exercise_date = resolve_exercise_date(date_text, today)
    return ExerciseDraft(
        description=description,
        duration=checked_duration,
        date=exercise_date,
    )


def display_duration(duration: float) -> int | float:
    """Integral durations render as ints (30, not 30.0)."""
    return int(duration) if float(duration).is_integer() else duration
