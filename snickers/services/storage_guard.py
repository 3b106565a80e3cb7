"""Storage Guard — translates storage signals into API errors at one seam.

Invariants:
    - RecordNotFoundError → the caller-chosen not-found error class
    - Any other StorageError → StorageFailureError (500)
    - The context phrase names the operation that was attempted
"""

from contextlib import contextmanager
from typing import Iterator

from snickers.core.errors import (
    RecordNotFoundError, ResourceNotFoundError, SnickersError,
    StorageError, StorageFailureError,
)


@contextmanager
def storage_guard(
    context: str, missing: type[SnickersError] = ResourceNotFoundError,
) -> Iterator[None]:
    """Wrap storage calls so failures surface as SnickersError subclasses."""
    try:
        yield
    except RecordNotFoundError as e:
        raise missing(context, str(e)) from e
    except StorageError as e:
        raise StorageFailureError(context, str(e) or "storage failure") from e
