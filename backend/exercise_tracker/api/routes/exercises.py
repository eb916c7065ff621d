"""Exercise Routes — add an exercise, query a user's log.

Invariants:
    - Routes never contain business logic (delegate to ExerciseTracker)
    - Log response omits from/to/limit when they were not applied
    - limit, when given, is an integer >= 1 (FastAPI rejects anything else with 400)
"""

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import get_tracker, read_body_fields
from exercise_tracker.schemas.exercise import (
    ExerciseLogResponse, ExerciseResponse,
)
from exercise_tracker.services.exercise_tracker import ExerciseTracker

router = APIRouter(prefix="/api/exercise", tags=["exercises"])


@router.post("/add", response_model=ExerciseResponse)
async def add_exercise(
    fields: dict = Depends(read_body_fields),
    tracker: ExerciseTracker = Depends(get_tracker),
):
    """Record an exercise for an existing user."""
    return await tracker.add_exercise(
        fields.get("userId"),
        fields.get("description"),
        fields.get("duration"),
        fields.get("date"),
    )


@router.get(
    "/log", response_model=ExerciseLogResponse,
    response_model_exclude_none=True,
)
async def get_log(
    user_id: str | None = Query(None, alias="userId"),
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: int | None = Query(None, ge=1),
    tracker: ExerciseTracker = Depends(get_tracker),
):
    """Exercise log for one user, filtered by date range and capped by limit."""
    return await tracker.get_log(user_id, date_from, date_to, limit)
