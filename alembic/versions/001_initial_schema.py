"""Initial schema — presets, jobs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

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
        "presets",
        sa.Column("name", sa.String(), primary_key=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("container", sa.String(), nullable=True),
        sa.Column("profile", sa.String(), nullable=True),
        sa.Column("profile_level", sa.String(), nullable=True),
        sa.Column("rate_control", sa.String(), nullable=True),
        sa.Column("video", sa.JSON, nullable=False),
        sa.Column("audio", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "jobs",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("source", sa.Text, nullable=False, server_default=""),
        sa.Column("destination", sa.Text, nullable=False, server_default=""),
        sa.Column("preset", sa.JSON, nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default=""),
        sa.Column("progress", sa.String(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("jobs")
    op.drop_table("presets")
