"""FastAPI Dependencies — per-request access to app-scoped collaborators."""

from fastapi import Request

from snickers.core.repository_protocols import StorageInterface


def get_storage(request: Request) -> StorageInterface:
    """The storage instance created once by create_app()."""
    return request.app.state.storage
