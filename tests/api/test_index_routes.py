"""Index & readiness routes."""

import pytest

from snickers.infrastructure.memory_storage import InMemoryStorage

JSON_UTF8 = "application/json; charset=UTF-8"


@pytest.mark.asyncio
async def test_index_is_alive(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"] == JSON_UTF8
    assert res.json()["status"] == "ok"
    assert res.json()["service"] == "snickers"


@pytest.mark.asyncio
async def test_ready_when_storage_healthy(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_not_ready_when_storage_unhealthy(client, storage, monkeypatch):
    async def unhealthy(self):
        return False

    monkeypatch.setattr(InMemoryStorage, "health_check", unhealthy)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json() == {"error": "checking storage: storage unavailable"}
