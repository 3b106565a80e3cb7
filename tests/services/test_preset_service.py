"""Preset service tests — validation and update semantics without HTTP."""

import pytest

from snickers.core.errors import (
    MalformedInputError, ReferenceNotFoundError, ResourceNotFoundError,
)
from snickers.schemas.preset import Preset
from snickers.services.presets import (
    create_preset, get_preset, list_presets, update_preset,
)


@pytest.mark.asyncio
async def test_create_rejects_blank_name(storage):
    with pytest.raises(MalformedInputError):
        await create_preset(storage, Preset(name=""))
    assert await list_presets(storage) == []


@pytest.mark.asyncio
async def test_update_returns_merged_preset(storage):
    await create_preset(storage, Preset(name="p", container="mp4"))

    updated = await update_preset(
        storage, Preset.model_validate({"name": "p", "profile": "main"}),
    )

    assert updated.container == "mp4"
    assert updated.profile == "main"
    assert (await get_preset(storage, "p")).profile == "main"


@pytest.mark.asyncio
async def test_update_missing_preset_is_reference_not_found(storage):
    with pytest.raises(ReferenceNotFoundError) as exc_info:
        await update_preset(storage, Preset(name="missing"))
    assert exc_info.value.to_response() == {"error": "updating preset: preset not found"}
    assert await list_presets(storage) == []


@pytest.mark.asyncio
async def test_get_missing_preset_is_resource_not_found(storage):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await get_preset(storage, "missing")
    assert exc_info.value.http_status == 404
