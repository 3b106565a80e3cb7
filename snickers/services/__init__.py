"""Services — request handlers' orchestration of validation and storage.

Invariants:
    - Each operation makes at most one storage write
    - Storage signals are translated into SnickersError before leaving this layer
"""
