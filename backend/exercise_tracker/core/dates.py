"""Date Normalizer — parse client dates and render them as YYYY-MM-DD.

Invariants:
    - Output is always zero-padded YYYY-MM-DD
    - DATE_PATTERN is a loose syntactic check (search, not fullmatch); calendar
      validity is checked separately by the ISO parse
    - Text without the YYYY-MM-DD pattern never parses (no ISO basic or week forms)
    - Pure functions: "today" is always passed in, never read from the clock here

Design Decisions:
    - datetime.fromisoformat over strptime: accepts date-only and datetime text
      ("2023-05-01", "2023-05-01T10:00Z"), the time part is dropped
"""

import re
from datetime import date, datetime

from exercise_tracker.core.errors import ValidationError

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(text: str | None) -> date | None:
    """Parse ISO date/datetime text into a calendar date, or None."""
    if not text or not DATE_PATTERN.search(text):
        return None
    try:
        return datetime.fromisoformat(text.strip()).date()
    except ValueError:
        return None


def resolve_exercise_date(text: str | None, today: date) -> date:
    """Pick the date for a new exercise.

    Text containing the YYYY-MM-DD pattern is parsed as that date; anything
    else (absent, empty, free text) falls back to today. Pattern-shaped text
    that is not a real calendar date raises ValidationError.
    """
    if not text or not DATE_PATTERN.search(text):
        return today
    parsed = parse_iso_date(text)
    if parsed is None:
        raise ValidationError("Invalid date.", field="date")
    return parsed


def to_yyyymmdd(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
