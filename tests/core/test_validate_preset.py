"""Preset validation tests — only the name is checked."""

from snickers.core.validate_preset import check_preset
from snickers.schemas.preset import Preset


def test_named_preset_passes():
    assert check_preset(Preset(name="examplePreset")) is None


def test_missing_name_fails():
    result = check_preset(Preset())
    assert result == "preset name is required"


def test_blank_name_fails():
    result = check_preset(Preset(name="   "))
    assert result == "preset name cannot be blank"


def test_encoder_fields_are_not_checked():
    preset = Preset.model_validate({
        "name": "weird",
        "container": "not-a-container",
        "video": {"width": "wide", "bitrate": "-1"},
    })
    assert check_preset(preset) is None
