"""Preset Validation — structural checks beyond JSON shape.

Invariants:
    - name must be present and non-blank
    - No other field is checked; encoder-specific validation belongs to the
      transcoding engine
    - Returns a violation message (str) or None; never raises
"""

from snickers.schemas.preset import Preset


def check_preset(preset: Preset) -> str | None:
    """Return why the preset cannot be stored, or None if it can."""
    if preset.name is None:
        return "preset name is required"
    if not preset.name.strip():
        return "preset name cannot be blank"
    return None
