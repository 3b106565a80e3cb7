"""Boundary Protocols — the storage contract consumed by the service layer.

Invariants:
    - Core NEVER imports from infrastructure; implementations are injected
    - Missing records are signalled with PresetNotFoundError / JobNotFoundError
    - Any other backend failure is raised as StorageError
    - Values cross the boundary by copy: mutating a returned model never
      changes stored state

Design Decisions:
    - Protocol over ABC: structural subtyping, backends need no inheritance
    - Async methods: implementations may do IO; callers await every call
    - Synchronization is the backend's concern; callers add no locking
"""

from typing import Protocol

from snickers.core.domain_types import JobId, PresetName
from snickers.schemas.job import Job
from snickers.schemas.preset import Preset


class StorageInterface(Protocol):
    """Contract for preset and job persistence, implemented by infrastructure."""

    async def store_preset(self, preset: Preset) -> None: ...
    async def get_presets(self) -> list[Preset]: ...
    async def get_preset_by_name(self, name: PresetName) -> Preset: ...
    async def update_preset(self, preset: Preset) -> None: ...
    async def store_job(self, job: Job) -> None: ...
    async def get_jobs(self) -> list[Job]: ...
    async def get_job_by_id(self, job_id: JobId) -> Job: ...
    async def clear(self) -> None: ...
    async def health_check(self) -> bool: ...

    # Lifecycle hooks driven by the FastAPI lifespan
    async def open(self) -> None: ...
    async def close(self) -> None: ...
