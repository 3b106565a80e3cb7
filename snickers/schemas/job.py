"""Job Schemas — transcoding requests bound to a resolved preset.

Invariants:
    - Job.preset is a copy of the stored preset at creation time, not a link
    - id, source, destination, status, progress always serialize (even when empty)
    - JobCreate.preset is a preset *name*; resolution happens in services/jobs.py
"""

from pydantic import Field

from snickers.schemas.base import WireModel
from snickers.schemas.preset import Preset


class JobCreate(WireModel):
    """POST /jobs body."""
    source: str | None = None
    destination: str | None = None
    preset: str | None = None


class Job(WireModel):
    """Stored transcoding job."""
    id: str = ""
    source: str = ""
    destination: str = ""
    preset: Preset = Field(default_factory=Preset)
    status: str = ""
    progress: str = ""

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
