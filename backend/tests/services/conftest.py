"""Service test fixtures — async DB, FastAPI test client, in-memory repositories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - app.state.db_manager points at the test engine for the readiness probe
    - In-memory repositories satisfy the same protocols as the SQL ones

Design Decisions:
    - SQLite in-memory: fast, no external dependency, supports the unique constraint
    - ASGITransport does not run the lifespan, so no real database is opened
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from exercise_tracker.core.domain_types import (
    ExerciseDraft, ExerciseRecord, LogFilter, UserId, UserRecord,
)
from exercise_tracker.core.errors import ConflictError
from exercise_tracker.core.identifiers import new_exercise_id, new_user_id
from exercise_tracker.db.base import Base
from exercise_tracker.infrastructure.database import (
    DatabaseSessionManager, get_db,
)
from exercise_tracker.main import app
from exercise_tracker.services.exercise_tracker import ExerciseTracker
import exercise_tracker.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


async def create_user(client, username: str) -> dict:
    res = await client.post(
        "/api/exercise/new-user", data={"username": username},
    )
    assert res.status_code == 200, res.text
    return res.json()


@pytest.fixture
def register(client):
    """Register a username through the API, return {username, id}."""
    async def _register(username: str) -> dict:
        return await create_user(client, username)
    return _register


# ─── In-memory repositories ─────────────────────────────────────

class InMemoryUserRepository:
    def __init__(self):
        self.rows: dict[str, UserRecord] = {}

    async def add(self, username: str) -> UserRecord:
        if any(u.username == username for u in self.rows.values()):
            raise ConflictError(username)
        user = UserRecord(id=new_user_id(), username=username)
        self.rows[user.id] = user
        return user

    async def get_by_id(self, user_id: UserId) -> UserRecord | None:
        return self.rows.get(user_id)

    async def get_by_username(self, username: str) -> UserRecord | None:
        return next(
            (u for u in self.rows.values() if u.username == username), None,
        )

    async def list_all(self) -> list[UserRecord]:
        return list(self.rows.values())


class InMemoryExerciseRepository:
    def __init__(self):
        self.rows: list[ExerciseRecord] = []

    async def add(
        self, user_id: UserId, draft: ExerciseDraft,
    ) -> ExerciseRecord:
        record = ExerciseRecord(
            id=new_exercise_id(), user_id=user_id,
            description=draft.description, duration=draft.duration,
            date=draft.date,
        )
        self.rows.append(record)
        return record

    async def find(self, log_filter: LogFilter) -> list[ExerciseRecord]:
        found = [
            e for e in self.rows
            if e.user_id == log_filter.user_id
            and (log_filter.date_from is None or e.date >= log_filter.date_from)
            and (log_filter.date_to is None or e.date <= log_filter.date_to)
        ]
        found.sort(key=lambda e: (e.date, e.id))
        if log_filter.limit is not None:
            found = found[:log_filter.limit]
        return found


FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def tracker():
    """ExerciseTracker over in-memory repositories with a fixed clock."""
    return ExerciseTracker(
        InMemoryUserRepository(),
        InMemoryExerciseRepository(),
        today=lambda: FIXED_TODAY,
    )
