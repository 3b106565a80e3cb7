"""Preset Update Merge — applies a PUT body onto a stored preset.

Invariants:
    - Only fields present in the request body change; absent fields keep their
      stored value (nested video/audio objects merge field by field)
    - name is never changed by an update
    - Pure: inputs are not mutated, a new Preset is returned
"""

from snickers.schemas.preset import Preset


def merge_preset_update(existing: Preset, update: Preset) -> Preset:
    """Overlay the explicitly submitted fields of `update` on `existing`."""
    merged = existing.model_dump()
    _overlay(merged, update.model_dump(exclude_unset=True))
    merged["name"] = existing.name
    return Preset.model_validate(merged)


def _overlay(target: dict, changes: dict) -> None:
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _overlay(target[key], value)
        else:
            target[key] = value
