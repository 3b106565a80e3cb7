"""Infrastructure — storage implementations, DB session management, logging.

Invariants:
    - Every storage backend satisfies core.repository_protocols.StorageInterface
    - Backend-specific exceptions never leave this package (mapped to StorageError)
"""
