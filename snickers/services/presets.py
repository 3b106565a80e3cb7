"""Preset Service — create, update, list and fetch presets.

Invariants:
    - A preset is validated before any storage call
    - Update looks the preset up first; a miss is REFERENCE_NOT_FOUND (400)
      and leaves storage untouched
    - Update never renames: the stored name is kept
"""

import logging

from snickers.core.domain_types import PresetName
from snickers.core.errors import MalformedInputError, ReferenceNotFoundError
from snickers.core.preset_update import merge_preset_update
from snickers.core.repository_protocols import StorageInterface
from snickers.core.validate_preset import check_preset
from snickers.schemas.preset import Preset
from snickers.services.storage_guard import storage_guard

logger = logging.getLogger(__name__)


def _require_valid(preset: Preset) -> None:
    violation = check_preset(preset)
    if violation:
        raise MalformedInputError("validating preset", violation)


async def create_preset(storage: StorageInterface, preset: Preset) -> Preset:
    """Store a preset, overwriting any preset with the same name."""
    _require_valid(preset)
    with storage_guard("storing preset"):
        await storage.store_preset(preset)
    logger.info("Preset stored", extra={"preset_name": preset.name})
    return preset


async def update_preset(storage: StorageInterface, update: Preset) -> Preset:
    """Apply the submitted fields to an existing preset."""
    _require_valid(update)
    with storage_guard("updating preset", missing=ReferenceNotFoundError):
        existing = await storage.get_preset_by_name(PresetName(update.name))
        merged = merge_preset_update(existing, update)
        await storage.update_preset(merged)
    logger.info("Preset updated", extra={"preset_name": merged.name})
    return merged


async def list_presets(storage: StorageInterface) -> list[Preset]:
    with storage_guard("listing presets"):
        return await storage.get_presets()


async def get_preset(storage: StorageInterface, name: PresetName) -> Preset:
    with storage_guard("retrieving preset"):
        return await storage.get_preset_by_name(name)
