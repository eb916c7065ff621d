"""Exercise Tracker Service — orchestrates validation → store → response shaping per endpoint.

Invariants:
    - Validation always runs before any mutation, first failure wins
    - add_exercise: userId resolved before any field check ("Invalid userId." first)
    - Dates leave this service as YYYY-MM-DD strings only
    - Repositories are injected (protocols), never constructed here

Design Decisions:
    - create_user pre-checks the username for the friendly message; the
      repository's unique-constraint mapping covers the concurrent case
    - add_exercise returns the resolved user's username and the new exercise's
      id (the stored exercise carries no username)
    - limit caps the number of log entries
    - today is injectable so date defaults are testable
"""

import logging
from datetime import date
from typing import Callable

from exercise_tracker.core.dates import parse_iso_date, to_yyyymmdd
from exercise_tracker.core.domain_types import LogFilter, UserId, UserRecord
from exercise_tracker.core.errors import ConflictError, UnknownUserError
from exercise_tracker.core.repository_protocols import (
    ExerciseRepository, UserRepository,
)
from exercise_tracker.core.validate_exercise import (
    check_exercise_fields, check_username, display_duration,
)
from exercise_tracker.schemas.exercise import (
    ExerciseLogResponse, ExerciseResponse, LogEntry,
)
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class ExerciseTracker:
    """Request handlers for users and exercises, independent of HTTP."""

    def __init__(
        self,
        users: UserRepository,
        exercises: ExerciseRepository,
        today: Callable[[], date] = date.today,
    ):
        self.users = users
        self.exercises = exercises
        self.today = today

    async def create_user(self, username: object) -> UserResponse:
        """Register a new username."""
        name = check_username(username)
        if await self.users.get_by_username(name) is not None:
            raise ConflictError(name)
        user = await self.users.add(name)
        logger.info(
            "User created", extra={"user_id": user.id, "username": name},
        )
        return UserResponse(username=user.username, id=user.id)

    async def list_users(self) -> list[UserResponse]:
        users = await self.users.list_all()
        return [UserResponse(username=u.username, id=u.id) for u in users]

    async def add_exercise(
        self,
        user_id: object,
        description: object,
        duration: object,
        date_text: object = None,
    ) -> ExerciseResponse:
        """Validate and store one exercise for an existing user."""
        user = await self._resolve_user(user_id)
        draft = check_exercise_fields(
            description, duration, date_text, today=self.today(),
        )
        exercise = await self.exercises.add(user.id, draft)
        logger.info(
            "Exercise added",
            extra={"user_id": user.id, "exercise_id": exercise.id},
        )
        return ExerciseResponse(
            username=user.username,
            id=exercise.id,
            description=exercise.description,
            duration=display_duration(exercise.duration),
            date=to_yyyymmdd(exercise.date),
        )

    async def get_log(
        self,
        user_id: object,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: int | None = None,
    ) -> ExerciseLogResponse:
        """A user's exercises, optionally bounded by date range and count.

        from/to that do not parse as dates are ignored and not echoed.
        """
        user = await self._resolve_user(user_id)
        parsed_from = parse_iso_date(date_from)
        parsed_to = parse_iso_date(date_to)

        exercises = await self.exercises.find(LogFilter(
            user_id=user.id,
            date_from=parsed_from,
            date_to=parsed_to,
            limit=limit,
        ))
        log = [
            LogEntry(
                description=e.description,
                duration=display_duration(e.duration),
                date=to_yyyymmdd(e.date),
            )
            for e in exercises
        ]
        logger.info(
            "Log queried", extra={"user_id": user.id, "count": len(log)},
        )
        return ExerciseLogResponse(
            username=user.username,
            id=user.id,
            date_from=date_from if parsed_from is not None else None,
            date_to=date_to if parsed_to is not None else None,
            limit=limit,
            count=len(log),
            log=log,
        )

    async def _resolve_user(self, user_id: object) -> UserRecord:
        if not user_id:
            raise UnknownUserError()
        user = await self.users.get_by_id(UserId(str(user_id)))
        if user is None:
            raise UnknownUserError(str(user_id))
        return user
