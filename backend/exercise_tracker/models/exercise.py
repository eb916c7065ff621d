"""Exercise ORM — one logged activity for a user.

Invariants:
    - Always belongs to a User (user_id FK, also checked before insert)
    - duration > 0, stored in minutes
    - date is a calendar date (no time component)

Design Decisions:
    - Date column over DateTime: the API only ever speaks YYYY-MM-DD, range
      filters compare whole days
    - Composite index (user_id, date): the log query filters on both
"""

from datetime import date as date_type

from sqlalchemy import Date, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise entry."""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id_date", "user_id", "date"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("users.id"), nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
