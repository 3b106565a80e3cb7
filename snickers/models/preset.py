"""Preset ORM — one row per named preset.

Invariants:
    - name is the primary key (presets are never renamed)
    - video/audio stored as JSON objects with camelCase keys, unset keys omitted
    - created_at fixes list order
    - String columns carry no length limit: preset fields are free-form strings
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from snickers.db.base import Base


class PresetRow(Base):
    __tablename__ = "presets"

    name: Mapped[str] = mapped_column(String, primary_key=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    container: Mapped[str | None] = mapped_column(String, nullable=True)
    profile: Mapped[str | None] = mapped_column(String, nullable=True)
    profile_level: Mapped[str | None] = mapped_column(String, nullable=True)
    rate_control: Mapped[str | None] = mapped_column(String, nullable=True)
    video: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    audio: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
