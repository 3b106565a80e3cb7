"""Error Hierarchy — typed exceptions and the single kind → HTTP status table.

Invariants:
    - Every API error carries a kind (ErrorKind), a context phrase and a cause
    - Status codes come from _KIND_STATUS only; subclasses never hardcode them
    - to_response() produces exactly {"error": "<context>: <cause>"}
    - Storage signals (StorageError family) carry no HTTP meaning; services
      translate them into SnickersError at the handler boundary

Design Decisions:
    - Single hierarchy with SnickersError base: one FastAPI handler catches all
    - Referenced-preset misses during job creation use REFERENCE_NOT_FOUND (400),
      direct lookups use RESOURCE_NOT_FOUND (404)
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Outcome classes a handler can fail with."""
    MALFORMED_INPUT = "malformed_input"
    REFERENCE_NOT_FOUND = "reference_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE_FAILURE = "storage_failure"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_INPUT: 400,
    ErrorKind.REFERENCE_NOT_FOUND: 400,
    ErrorKind.RESOURCE_NOT_FOUND: 404,
    ErrorKind.STORAGE_FAILURE: 500,
    ErrorKind.UNAVAILABLE: 503,
    ErrorKind.INTERNAL: 500,
}


def status_for(kind: ErrorKind) -> int:
    """Map an error kind to its HTTP status code."""
    return _KIND_STATUS[kind]


def error_envelope(context: str, cause: str) -> dict:
    """Build the JSON error body shared by every non-2xx response."""
    return {"error": f"{context}: {cause}"}


class SnickersError(Exception):
    """Base exception for all errors surfaced through the API."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, context: str, cause: str):
        self.context = context
        self.cause = cause
        self.message = f"{context}: {cause}"
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def http_status(self) -> int:
        return status_for(self.kind)

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return error_envelope(self.context, self.cause)


# ─── Client Errors (400-level) ──────────────────────────────────

class MalformedInputError(SnickersError):
    """Request body does not parse into the expected shape."""
    kind = ErrorKind.MALFORMED_INPUT


class ReferenceNotFoundError(SnickersError):
    """A cross-reference in the request body (e.g. a job's preset) does not resolve."""
    kind = ErrorKind.REFERENCE_NOT_FOUND


class ResourceNotFoundError(SnickersError):
    """Direct lookup by name or id found nothing."""
    kind = ErrorKind.RESOURCE_NOT_FOUND


# ─── Server Errors (500-level) ──────────────────────────────────

class StorageFailureError(SnickersError):
    """Storage collaborator failed for reasons unrelated to the request."""
    kind = ErrorKind.STORAGE_FAILURE


class ServiceUnavailableError(SnickersError):
    """A dependency is not ready to serve requests."""
    kind = ErrorKind.UNAVAILABLE


# ─── Storage Signals ────────────────────────────────────────────

class StorageError(Exception):
    """Unexpected failure reported by a storage backend."""


class RecordNotFoundError(StorageError):
    """Lookup or update targeted a record the backend does not hold."""


class PresetNotFoundError(RecordNotFoundError):
    def __init__(self, name: str | None = None):
        super().__init__("preset not found")
        self.name = name


class JobNotFoundError(RecordNotFoundError):
    def __init__(self, job_id: str | None = None):
        super().__init__("job not found")
        self.job_id = job_id
