"""Storage Factory — builds the single storage instance for an app from settings."""

from snickers.config import Settings
from snickers.core.repository_protocols import StorageInterface
from snickers.infrastructure.database import DatabaseSessionManager
from snickers.infrastructure.memory_storage import InMemoryStorage
from snickers.infrastructure.sql_storage import SQLStorage


def build_storage(settings: Settings) -> StorageInterface:
    """Select the storage backend named by settings.storage_backend."""
    if settings.storage_backend == "database":
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        return SQLStorage(db, create_tables=settings.database_create_tables)
    return InMemoryStorage()
