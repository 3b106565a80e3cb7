"""Job Service — create, list and fetch transcoding jobs.

Invariants:
    - A job is created only when its preset resolves; otherwise nothing is stored
    - A missing preset is a client error (400, REFERENCE_NOT_FOUND), reported as
      "retrieving preset: preset not found"
    - The resolved preset is embedded by value; status and progress start empty
"""

import logging

from snickers.core.domain_types import JobId, PresetName, new_job_id
from snickers.core.errors import MalformedInputError, ReferenceNotFoundError
from snickers.core.repository_protocols import StorageInterface
from snickers.core.validate_job import check_job_request
from snickers.schemas.job import Job, JobCreate
from snickers.services.storage_guard import storage_guard

logger = logging.getLogger(__name__)


async def create_job(storage: StorageInterface, body: JobCreate) -> Job:
    """Resolve the named preset and store a new job bound to it."""
    violation = check_job_request(body)
    if violation:
        raise MalformedInputError("validating job", violation)

    with storage_guard("retrieving preset", missing=ReferenceNotFoundError):
        preset = await storage.get_preset_by_name(PresetName(body.preset))

    job = Job(
        id=new_job_id(),
        source=body.source,
        destination=body.destination,
        preset=preset,
    )
    with storage_guard("storing job"):
        await storage.store_job(job)
    logger.info(
        "Job created",
        extra={"job_id": job.id, "preset_name": preset.name},
    )
    return job


async def list_jobs(storage: StorageInterface) -> list[Job]:
    with storage_guard("listing jobs"):
        return await storage.get_jobs()


async def get_job(storage: StorageInterface, job_id: JobId) -> Job:
    with storage_guard("retrieving job"):
        return await storage.get_job_by_id(job_id)
