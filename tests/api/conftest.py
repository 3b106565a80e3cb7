"""API test fixtures — an isolated app per test around a fresh storage.

Invariants:
    - Every test gets its own app and InMemoryStorage (no shared state)
    - `client` raises server-side exceptions; `tolerant_client` returns the
      500 response instead, for catch-all handler tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from snickers.config import Settings
from snickers.main import create_app


@pytest.fixture
def app(storage):
    return create_app(settings=Settings(storage_backend="memory"), storage=storage)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def tolerant_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
