"""Preset Routes — /presets collection and /presets/{name} item.

Invariants:
    - Bodies are decoded by api.decode (never FastAPI body params) so every
      decode failure becomes "unpacking preset: ..." with status 400
    - Responses omit unset preset fields (response_model_exclude_none)
"""

from fastapi import APIRouter, Depends, Request

from snickers.api.decode import decode_body
from snickers.api.dependencies import get_storage
from snickers.core.domain_types import PresetName
from snickers.core.repository_protocols import StorageInterface
from snickers.schemas.preset import Preset
from snickers.services import presets as preset_service

router = APIRouter(prefix="/presets", tags=["presets"])

_ONE = {"response_model": Preset, "response_model_exclude_none": True}
_MANY = {"response_model": list[Preset], "response_model_exclude_none": True}


@router.post("", **_ONE)
@router.post("/", include_in_schema=False, **_ONE)
async def create_preset(
    request: Request, storage: StorageInterface = Depends(get_storage),
):
    """Create (or overwrite) a preset."""
    preset = await decode_body(request, Preset, "unpacking preset")
    return await preset_service.create_preset(storage, preset)


@router.put("", **_ONE)
@router.put("/", include_in_schema=False, **_ONE)
async def update_preset(
    request: Request, storage: StorageInterface = Depends(get_storage),
):
    """Update the submitted fields of an existing preset."""
    preset = await decode_body(request, Preset, "unpacking preset")
    return await preset_service.update_preset(storage, preset)


@router.get("", **_MANY)
@router.get("/", include_in_schema=False, **_MANY)
async def list_presets(storage: StorageInterface = Depends(get_storage)):
    """List every stored preset."""
    return await preset_service.list_presets(storage)


@router.get("/{name}", **_ONE)
@router.get("/{name}/", include_in_schema=False, **_ONE)
async def get_preset(
    name: str, storage: StorageInterface = Depends(get_storage),
):
    """Get a preset by name."""
    return await preset_service.get_preset(storage, PresetName(name))
