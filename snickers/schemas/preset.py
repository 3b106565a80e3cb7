"""Preset Schemas — encoding parameter bundles keyed by name.

Invariants:
    - name is the only field with semantic meaning at this layer
    - video and audio always serialize as objects, even when empty
    - Every encoder parameter is an optional string (no unit parsing here)
"""

from pydantic import Field, field_validator

from snickers.schemas.base import WireModel


class VideoPreset(WireModel):
    """Video encoder parameters."""
    width: str | None = None
    height: str | None = None
    codec: str | None = None
    bitrate: str | None = None
    gop_size: str | None = None
    gop_mode: str | None = None
    interlace_mode: str | None = None


class AudioPreset(WireModel):
    """Audio encoder parameters."""
    codec: str | None = None
    bitrate: str | None = None


class Preset(WireModel):
    """Named encoding preset, the stored value type for /presets."""
    name: str | None = None
    description: str | None = None
    container: str | None = None
    profile: str | None = None
    profile_level: str | None = None
    rate_control: str | None = None
    video: VideoPreset = Field(default_factory=VideoPreset)
    audio: AudioPreset = Field(default_factory=AudioPreset)

    @field_validator("video", "audio", mode="before")
    @classmethod
    def null_section_is_empty(cls, v):
        return {} if v is None else v

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
