"""Boundary Protocols — contracts between core and the store adapter.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory test doubles need no base class
    - UserRepository.add raises ConflictError on a duplicate username: the
      store's unique constraint is authoritative, not the caller's pre-check
"""

from typing import Protocol

from exercise_tracker.core.domain_types import (
    ExerciseDraft, ExerciseRecord, LogFilter, UserId, UserRecord,
)


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def add(self, username: str) -> UserRecord: ...
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def get_by_username(self, username: str) -> UserRecord | None: ...
    async def list_all(self) -> list[UserRecord]: ...


class ExerciseRepository(Protocol):
    """Contract for exercise persistence — implemented by shell."""
    async def add(
        self, user_id: UserId, draft: ExerciseDraft,
    ) -> ExerciseRecord: ...
    async def find(self, log_filter: LogFilter) -> list[ExerciseRecord]: ...
