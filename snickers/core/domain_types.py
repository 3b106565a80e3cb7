"""Domain Types — identity types that replace bare strings across the codebase.

Invariants:
    - PresetName is the unique, immutable key of a preset
    - JobId is generated server-side as a UUID4 string

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import uuid4


PresetName = NewType("PresetName", str)
JobId = NewType("JobId", str)


def new_job_id() -> JobId:
    return JobId(str(uuid4()))
