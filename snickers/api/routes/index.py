"""Index & Readiness — liveness at GET / and a storage-aware readiness probe.

Invariants:
    - GET / always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 with the error envelope if storage is unreachable
"""

from fastapi import APIRouter, Depends

from snickers.api.dependencies import get_storage
from snickers.core.errors import ServiceUnavailableError
from snickers.core.repository_protocols import StorageInterface

router = APIRouter(tags=["index"])

SERVICE_NAME = "snickers"
SERVICE_VERSION = "0.1.0"


@router.get("/")
async def index():
    """Basic liveness probe."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "ok",
    }


@router.get("/health/ready")
@router.get("/health/ready/", include_in_schema=False)
async def readiness_check(storage: StorageInterface = Depends(get_storage)):
    """Readiness probe, including storage connectivity."""
    if not await storage.health_check():
        raise ServiceUnavailableError("checking storage", "storage unavailable")
    return {"status": "ready"}
