"""User ORM — registered users; never updated or deleted.

Invariants:
    - id is an opaque 8-char base-36 string (client never supplies it)
    - username is non-nullable and UNIQUE at the store level

Design Decisions:
    - Unique constraint is the authority on duplicates: check-then-insert alone races
    - Constraint named to match the initial migration
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
