"""Preset routes — create, update, list, get over HTTP.

Invariants:
    - Every response is application/json; charset=UTF-8
    - Malformed bodies → 400 with an "error" field
    - Get of an unknown name → 404 "retrieving preset: preset not found"
    - Update of an unknown name → 400 "updating preset: preset not found",
      storage unchanged
"""

import pytest

from snickers.schemas.preset import Preset

JSON_UTF8 = "application/json; charset=UTF-8"


@pytest.mark.asyncio
async def test_list_returns_json_content_type(client):
    res = await client.get("/presets")
    assert res.headers["content-type"] == JSON_UTF8


@pytest.mark.asyncio
async def test_list_empty_store_returns_empty_array(client):
    res = await client.get("/presets")
    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.asyncio
async def test_list_returns_stored_presets(client, storage):
    await storage.store_preset(Preset(name="a"))
    await storage.store_preset(Preset(name="b"))

    res = await client.get("/presets")

    assert res.status_code == 200
    assert sorted(res.json(), key=lambda p: p["name"]) == [
        {"name": "a", "video": {}, "audio": {}},
        {"name": "b", "video": {}, "audio": {}},
    ]


@pytest.mark.asyncio
async def test_post_saves_new_preset(client, storage):
    res = await client.post(
        "/presets", content=b'{"name": "storedPreset", "video": {},"audio": {}}',
    )

    assert res.status_code == 200
    assert res.headers["content-type"] == JSON_UTF8
    assert res.json() == {"name": "storedPreset", "video": {}, "audio": {}}
    assert len(await storage.get_presets()) == 1


@pytest.mark.asyncio
async def test_post_then_get_round_trips_exactly(client):
    submitted = {
        "name": "examplePreset",
        "video": {"width": "720"},
        "audio": {"codec": "aac"},
    }
    await client.post("/presets", json=submitted)

    res = await client.get("/presets/examplePreset")

    assert res.status_code == 200
    assert res.json() == submitted


@pytest.mark.asyncio
async def test_post_then_get_full_preset(client, example_preset):
    await client.post("/presets", json=example_preset.to_wire())
    res = await client.get("/presets/examplePreset")
    assert res.json() == example_preset.to_wire()


@pytest.mark.asyncio
async def test_post_overwrites_existing_preset(client, storage):
    await client.post("/presets", json={"name": "p", "container": "mp4"})
    res = await client.post("/presets", json={"name": "p", "container": "mov"})
    assert res.status_code == 200
    assert (await storage.get_preset_by_name("p")).container == "mov"


@pytest.mark.parametrize("body", [
    b'{"neime: "badPreset}}',
    b'{"name": "missingBrace"',
    b"not json at all",
    b"",
])
@pytest.mark.asyncio
async def test_post_malformed_preset_returns_bad_request(client, storage, body):
    res = await client.post("/presets", content=body)

    assert res.status_code == 400
    assert res.headers["content-type"] == JSON_UTF8
    assert res.json()["error"].startswith("unpacking preset: ")
    assert await storage.get_presets() == []


@pytest.mark.asyncio
async def test_post_deeply_nested_body_returns_bad_request(client, storage):
    res = await client.post("/presets", content=b"[" * 100000)

    assert res.status_code == 400
    assert res.json()["error"].startswith("unpacking preset: invalid JSON")
    assert await storage.get_presets() == []


@pytest.mark.asyncio
async def test_post_huge_number_reports_field_not_encoding(client):
    body = b'{"name": ' + b"1" * 5000 + b"}"

    res = await client.post("/presets", content=body)

    assert res.status_code == 400
    assert res.json()["error"].startswith("unpacking preset: ")
    assert "UTF-8" not in res.json()["error"]


@pytest.mark.asyncio
async def test_post_invalid_utf8_returns_bad_request(client):
    res = await client.post("/presets", content=b'{"name": "\xff\xfe"}')
    assert res.status_code == 400
    assert res.json()["error"].startswith("unpacking preset: invalid JSON")


@pytest.mark.asyncio
async def test_post_wrong_shape_returns_bad_request(client):
    res = await client.post("/presets", json={"name": "p", "video": "720p"})
    assert res.status_code == 400
    assert res.json()["error"].startswith("unpacking preset: video")


@pytest.mark.asyncio
async def test_post_json_array_returns_bad_request(client):
    res = await client.post("/presets", json=[{"name": "p"}])
    assert res.status_code == 400
    assert res.json() == {"error": "unpacking preset: expected a JSON object"}


@pytest.mark.asyncio
async def test_post_without_name_returns_bad_request(client, storage):
    res = await client.post("/presets", json={"video": {}, "audio": {}})
    assert res.status_code == 400
    assert res.json() == {"error": "validating preset: preset name is required"}
    assert await storage.get_presets() == []


@pytest.mark.asyncio
async def test_put_updates_existing_preset(client, storage):
    await storage.store_preset(Preset(name="examplePreset"))
    body = b'{"name":"examplePreset","Description": "new description","video": {},"audio": {}}'

    res = await client.put("/presets", content=body)

    presets = await storage.get_presets()
    assert res.status_code == 200
    assert res.headers["content-type"] == JSON_UTF8
    assert presets[0].description == "new description"
    assert res.json()["description"] == "new description"


@pytest.mark.asyncio
async def test_put_changes_only_submitted_fields(client, storage):
    await storage.store_preset(Preset.model_validate({
        "name": "p", "container": "mp4", "video": {"width": "720", "codec": "h264"},
    }))

    res = await client.put("/presets", json={"name": "p", "video": {"width": "1080"}})

    assert res.status_code == 200
    assert res.json() == {
        "name": "p",
        "container": "mp4",
        "video": {"width": "1080", "codec": "h264"},
        "audio": {},
    }


@pytest.mark.asyncio
async def test_put_malformed_preset_returns_bad_request(client, storage):
    await storage.store_preset(Preset(name="examplePreset"))
    body = b'{"name":"examplePreset","Description: "new description","video": {},"audio": {}}'

    res = await client.put("/presets", content=body)

    assert res.status_code == 400
    assert res.headers["content-type"] == JSON_UTF8
    assert "error" in res.json()
    assert (await storage.get_preset_by_name("examplePreset")).description is None


@pytest.mark.asyncio
async def test_put_unknown_preset_returns_bad_request(client, storage):
    await storage.store_preset(Preset(name="other"))

    res = await client.put("/presets", json={"name": "missing", "description": "x"})

    assert res.status_code == 400
    assert res.json() == {"error": "updating preset: preset not found"}
    assert [p.name for p in await storage.get_presets()] == ["other"]


@pytest.mark.asyncio
async def test_get_preset_details(client, storage, example_preset):
    await storage.store_preset(example_preset)

    res = await client.get("/presets/examplePreset")

    assert res.status_code == 200
    assert res.headers["content-type"] == JSON_UTF8
    assert res.json() == example_preset.to_wire()


@pytest.mark.asyncio
async def test_get_unknown_preset_returns_not_found(client):
    res = await client.get("/presets/nope")
    assert res.status_code == 404
    assert res.headers["content-type"] == JSON_UTF8
    assert res.json() == {"error": "retrieving preset: preset not found"}


@pytest.mark.asyncio
async def test_trailing_slash_is_equivalent(client, storage):
    await storage.store_preset(Preset(name="a"))

    collection = await client.get("/presets/")
    item = await client.get("/presets/a/")
    created = await client.post("/presets/", json={"name": "b"})

    assert collection.status_code == 200
    assert collection.json() == [{"name": "a", "video": {}, "audio": {}}]
    assert item.status_code == 200
    assert item.json()["name"] == "a"
    assert created.status_code == 200
