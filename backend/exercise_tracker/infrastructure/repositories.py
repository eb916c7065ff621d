"""SQL Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - Every write commits before returning (one durable insert per call)
    - Rows leave this module as core records, never as ORM objects
    - Duplicate username on insert → rollback + ConflictError
    - Other SQLAlchemy errors propagate to the session manager (→ StoreError)

Design Decisions:
    - Repository per aggregate over ad-hoc queries in routes: the service
      depends on protocols, tests swap in in-memory doubles
    - Log query composed with select().where() chaining, ordered by date then
      id so the result-count cap is deterministic
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import (
    ExerciseDraft, ExerciseId, ExerciseRecord, LogFilter, UserId, UserRecord,
)
from exercise_tracker.core.errors import ConflictError
from exercise_tracker.core.identifiers import new_exercise_id, new_user_id
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def _to_user_record(row: User) -> UserRecord:
    return UserRecord(id=UserId(row.id), username=row.username)


def _to_exercise_record(row: Exercise) -> ExerciseRecord:
    return ExerciseRecord(
        id=ExerciseId(row.id),
        user_id=UserId(row.user_id),
        description=row.description,
        duration=row.duration,
        date=row.date,
    )


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, username: str) -> UserRecord:
        """Insert a user; the unique constraint on username is authoritative."""
        user = User(id=new_user_id(), username=username)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await self.get_by_username(username) is not None:
                logger.warning(
                    "Username taken by concurrent registration",
                    extra={"username": username},
                )
                raise ConflictError(username)
            raise
        return _to_user_record(user)

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        row = await self.db.get(User, user_id)
        return _to_user_record(row) if row else None

    async def get_by_username(self, username: str) -> UserRecord | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        row = result.scalar_one_or_none()
        return _to_user_record(row) if row else None

    async def list_all(self) -> list[UserRecord]:
        result = await self.db.execute(select(User))
        return [_to_user_record(row) for row in result.scalars().all()]


class SqlExerciseRepository:
    """Exercise persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(
        self, user_id: UserId, draft: ExerciseDraft,
    ) -> ExerciseRecord:
        exercise = Exercise(
            id=new_exercise_id(),
            user_id=user_id,
            description=draft.description,
            duration=draft.duration,
            date=draft.date,
        )
        self.db.add(exercise)
        await self.db.commit()
        return _to_exercise_record(exercise)

    async def find(self, log_filter: LogFilter) -> list[ExerciseRecord]:
        query = select(Exercise).where(Exercise.user_id == log_filter.user_id)
        if log_filter.date_from is not None:
            query = query.where(Exercise.date >= log_filter.date_from)
        if log_filter.date_to is not None:
            query = query.where(Exercise.date <= log_filter.date_to)
        query = query.order_by(Exercise.date, Exercise.id)
        if log_filter.limit is not None:
            query = query.limit(log_filter.limit)

        result = await self.db.execute(query)
        return [_to_exercise_record(row) for row in result.scalars().all()]
