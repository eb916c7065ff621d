"""Route Dependencies — per-request service wiring and body field extraction.

Invariants:
    - One ExerciseTracker per request, bound to that request's DB session
    - Body fields read from form data or JSON, whichever the client sent

Design Decisions:
    - Service built through Depends(get_db): tests override get_db only
    - JSON accepted alongside forms: API clients and the HTML landing page share endpoints
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import ValidationError
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.repositories import (
    SqlExerciseRepository, SqlUserRepository,
)
from exercise_tracker.services.exercise_tracker import ExerciseTracker


def get_tracker(db: AsyncSession = Depends(get_db)) -> ExerciseTracker:
    """FastAPI dependency for the exercise tracker service."""
    return ExerciseTracker(SqlUserRepository(db), SqlExerciseRepository(db))


async def read_body_fields(request: Request) -> dict:
    """Request body as a flat dict (form-encoded, multipart, or JSON object)."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:  # JSONDecodeError or UnicodeDecodeError
            raise ValidationError("Malformed JSON body.")
        if not isinstance(payload, dict):
            raise ValidationError("JSON body must be an object.")
        return payload
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
