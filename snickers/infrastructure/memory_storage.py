"""In-Memory Storage — dict-backed StorageInterface, default backend and test double.

Invariants:
    - Presets keyed by name, jobs keyed by id; insertion order is list order
    - Every write stores a deep copy, every read returns a deep copy
    - No await points inside a mutation: each call is atomic on the event loop

Design Decisions:
    - State lives on the instance, not the module: one instance per app,
      fresh instance per test
"""

import logging

from snickers.core.domain_types import JobId, PresetName
from snickers.core.errors import JobNotFoundError, PresetNotFoundError
from snickers.schemas.job import Job
from snickers.schemas.preset import Preset

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Process-local storage for presets and jobs."""

    def __init__(self):
        self._presets: dict[str, Preset] = {}
        self._jobs: dict[str, Job] = {}

    async def store_preset(self, preset: Preset) -> None:
        self._presets[preset.name] = preset.model_copy(deep=True)

    async def get_presets(self) -> list[Preset]:
        return [p.model_copy(deep=True) for p in self._presets.values()]

    async def get_preset_by_name(self, name: PresetName) -> Preset:
        preset = self._presets.get(name)
        if preset is None:
            raise PresetNotFoundError(name)
        return preset.model_copy(deep=True)

    async def update_preset(self, preset: Preset) -> None:
        if preset.name not in self._presets:
            raise PresetNotFoundError(preset.name)
        self._presets[preset.name] = preset.model_copy(deep=True)

    async def store_job(self, job: Job) -> None:
        self._jobs[job.id] = job.model_copy(deep=True)

    async def get_jobs(self) -> list[Job]:
        return [j.model_copy(deep=True) for j in self._jobs.values()]

    async def get_job_by_id(self, job_id: JobId) -> Job:
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job.model_copy(deep=True)

    async def clear(self) -> None:
        self._presets.clear()
        self._jobs.clear()
        logger.info("In-memory storage cleared")

    async def health_check(self) -> bool:
        return True

    async def open(self) -> None:
        logger.info("Using in-memory storage (state lost on restart)")

    async def close(self) -> None:
        pass
