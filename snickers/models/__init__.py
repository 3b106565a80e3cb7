"""ORM Models — SQLAlchemy rows backing SQLStorage.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are converted to/from schemas in infrastructure/sql_storage.py only

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from snickers.models.preset import PresetRow  # noqa: F401
from snickers.models.job import JobRow  # noqa: F401
