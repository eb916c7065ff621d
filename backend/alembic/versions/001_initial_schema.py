"""Initial schema — users, exercises.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "exercises",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("user_id", sa.String(32), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("duration", sa.Float, nullable=False),
        sa.Column("date", sa.Date, nullable=False),
    )
    op.create_index(
        "ix_exercises_user_id_date", "exercises", ["user_id", "date"],
    )


def downgrade() -> None:
    op.drop_index("ix_exercises_user_id_date", table_name="exercises")
    op.drop_table("exercises")
    op.drop_table("users")
