"""Job Routes — /jobs collection and /jobs/{job_id} item.

Invariants:
    - POST body carries a preset *name*; the response embeds the resolved preset
    - Unknown preset on POST → 400 "retrieving preset: preset not found"
    - Unknown id on GET → 404 "retrieving job: job not found"
"""

from fastapi import APIRouter, Depends, Request

from snickers.api.decode import decode_body
from snickers.api.dependencies import get_storage
from snickers.core.domain_types import JobId
from snickers.core.repository_protocols import StorageInterface
from snickers.schemas.job import Job, JobCreate
from snickers.services import jobs as job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])

_ONE = {"response_model": Job, "response_model_exclude_none": True}
_MANY = {"response_model": list[Job], "response_model_exclude_none": True}


@router.post("", **_ONE)
@router.post("/", include_in_schema=False, **_ONE)
async def create_job(
    request: Request, storage: StorageInterface = Depends(get_storage),
):
    """Create a job bound to a stored preset."""
    body = await decode_body(request, JobCreate, "unpacking job")
    return await job_service.create_job(storage, body)


@router.get("", **_MANY)
@router.get("/", include_in_schema=False, **_MANY)
async def list_jobs(storage: StorageInterface = Depends(get_storage)):
    """List every stored job."""
    return await job_service.list_jobs(storage)


@router.get("/{job_id}", **_ONE)
@router.get("/{job_id}/", include_in_schema=False, **_ONE)
async def get_job(
    job_id: str, storage: StorageInterface = Depends(get_storage),
):
    """Get a job by id."""
    return await job_service.get_job(storage, JobId(job_id))
