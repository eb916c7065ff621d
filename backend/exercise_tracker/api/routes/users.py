"""User Routes — registration and listing.

Invariants:
    - Routes never contain business logic (delegate to ExerciseTracker)
    - Errors raised as ExerciseTrackerError, rendered as plain text by the global handler
"""

from fastapi import APIRouter, Depends

from exercise_tracker.api.dependencies import get_tracker, read_body_fields
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services.exercise_tracker import ExerciseTracker

router = APIRouter(prefix="/api/exercise", tags=["users"])


@router.post("/new-user", response_model=UserResponse)
async def create_user(
    fields: dict = Depends(read_body_fields),
    tracker: ExerciseTracker = Depends(get_tracker),
):
    """Register a username and return its generated id."""
    return await tracker.create_user(fields.get("username"))


@router.get("/users", response_model=list[UserResponse])
async def list_users(tracker: ExerciseTracker = Depends(get_tracker)):
    return await tracker.list_users()
