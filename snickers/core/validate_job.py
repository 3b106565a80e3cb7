"""Job Request Validation — required fields of POST /jobs.

Invariants:
    - source, destination and preset must each be non-blank
    - Fields are checked in wire order; the first violation is reported
    - Referential validity (does the preset exist?) is checked by the shell,
      which owns storage access
"""

from snickers.schemas.job import JobCreate

_REQUIRED_FIELDS = ("source", "destination", "preset")


def check_job_request(body: JobCreate) -> str | None:
    """Return the first missing required field as a message, or None."""
    for field_name in _REQUIRED_FIELDS:
        value = getattr(body, field_name)
        if value is None or not value.strip():
            return f"{field_name} is required"
    return None
