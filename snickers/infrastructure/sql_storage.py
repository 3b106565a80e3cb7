"""SQL Storage — StorageInterface over SQLAlchemy async ORM.

Invariants:
    - One DB session per call; each write commits exactly once
    - Rows never leave this module: callers receive schema models
    - store_preset/store_job are single-statement upserts: concurrent creates
      of one key never collide on the primary key
    - update_preset requires an existing row
    - Missing rows raise PresetNotFoundError / JobNotFoundError, everything
      else surfaces as StorageError via DatabaseSessionManager
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from snickers.core.domain_types import JobId, PresetName
from snickers.core.errors import (
    JobNotFoundError, PresetNotFoundError, StorageError,
)
from snickers.infrastructure.database import DatabaseSessionManager
from snickers.models.job import JobRow
from snickers.models.preset import PresetRow
from snickers.schemas.job import Job
from snickers.schemas.preset import Preset

logger = logging.getLogger(__name__)


class SQLStorage:
    """Relational storage for presets and jobs."""

    def __init__(self, db: DatabaseSessionManager, create_tables: bool = False):
        self._db = db
        self._create_tables = create_tables

    async def open(self) -> None:
        if self._create_tables:
            await self._db.create_tables()
            logger.info("Database tables ensured")

    async def close(self) -> None:
        await self._db.dispose()

    async def health_check(self) -> bool:
        return await self._db.health_check()

    # ─── Presets ─────────────────────────────────────────────────

    async def store_preset(self, preset: Preset) -> None:
        values = {"name": preset.name, **_preset_columns(preset)}
        await self._upsert(PresetRow, PresetRow.name, values)

    async def get_presets(self) -> list[Preset]:
        async with self._db.session() as db:
            result = await db.execute(
                select(PresetRow).order_by(PresetRow.created_at, PresetRow.name),
            )
            return [_preset_from_row(r) for r in result.scalars().all()]

    async def get_preset_by_name(self, name: PresetName) -> Preset:
        async with self._db.session() as db:
            row = await db.get(PresetRow, name)
            if row is None:
                raise PresetNotFoundError(name)
            return _preset_from_row(row)

    async def update_preset(self, preset: Preset) -> None:
        async with self._db.session() as db:
            row = await db.get(PresetRow, preset.name)
            if row is None:
                raise PresetNotFoundError(preset.name)
            _fill_preset_row(row, preset)
            await db.commit()

    # ─── Jobs ────────────────────────────────────────────────────

    async def store_job(self, job: Job) -> None:
        await self._upsert(JobRow, JobRow.id, {
            "id": job.id,
            "source": job.source,
            "destination": job.destination,
            "preset": job.preset.to_wire(),
            "status": job.status,
            "progress": job.progress,
        })

    async def get_jobs(self) -> list[Job]:
        async with self._db.session() as db:
            result = await db.execute(
                select(JobRow).order_by(JobRow.created_at, JobRow.id),
            )
            return [_job_from_row(r) for r in result.scalars().all()]

    async def get_job_by_id(self, job_id: JobId) -> Job:
        async with self._db.session() as db:
            row = await db.get(JobRow, job_id)
            if row is None:
                raise JobNotFoundError(job_id)
            return _job_from_row(row)

    async def clear(self) -> None:
        async with self._db.session() as db:
            await db.execute(delete(JobRow))
            await db.execute(delete(PresetRow))
            await db.commit()

    async def _upsert(self, model, key, values: dict) -> None:
        """INSERT ... ON CONFLICT (key) DO UPDATE; created_at keeps its first value."""
        dialect = self._db.engine.dialect.name
        insert = _INSERTS.get(dialect)
        if insert is None:
            raise StorageError(f"unsupported database dialect: {dialect}")
        stmt = insert(model).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[key.key],
            set_={k: v for k, v in values.items() if k != key.key},
        )
        async with self._db.session() as db:
            await db.execute(stmt)
            await db.commit()


_INSERTS = {"sqlite": sqlite_insert, "postgresql": postgresql_insert}


def _preset_columns(preset: Preset) -> dict:
    return {
        "description": preset.description,
        "container": preset.container,
        "profile": preset.profile,
        "profile_level": preset.profile_level,
        "rate_control": preset.rate_control,
        "video": preset.video.model_dump(by_alias=True, exclude_none=True),
        "audio": preset.audio.model_dump(by_alias=True, exclude_none=True),
    }


def _fill_preset_row(row: PresetRow, preset: Preset) -> None:
    for column, value in _preset_columns(preset).items():
        setattr(row, column, value)


def _preset_from_row(row: PresetRow) -> Preset:
    return Preset(
        name=row.name,
        description=row.description,
        container=row.container,
        profile=row.profile,
        profile_level=row.profile_level,
        rate_control=row.rate_control,
        video=row.video or {},
        audio=row.audio or {},
    )


def _job_from_row(row: JobRow) -> Job:
    return Job(
        id=row.id,
        source=row.source,
        destination=row.destination,
        preset=row.preset or {},
        status=row.status,
        progress=row.progress,
    )
