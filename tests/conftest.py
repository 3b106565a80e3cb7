"""Root conftest — shared test configuration and storage fixtures."""

import os

import pytest

# Tests never touch a real database unless a fixture builds one explicitly
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

from snickers.infrastructure.memory_storage import InMemoryStorage  # noqa: E402
from snickers.schemas.preset import Preset  # noqa: E402


@pytest.fixture
def storage():
    """Fresh in-memory storage per test."""
    return InMemoryStorage()


@pytest.fixture
def example_preset() -> Preset:
    return Preset.model_validate({
        "name": "examplePreset",
        "description": "This is an example of preset",
        "container": "mp4",
        "profile": "high",
        "profileLevel": "3.1",
        "rateControl": "VBR",
        "video": {
            "width": "720",
            "height": "1080",
            "codec": "h264",
            "bitrate": "10000",
            "gopSize": "90",
            "gopMode": "fixed",
            "interlaceMode": "progressive",
        },
        "audio": {"codec": "aac", "bitrate": "64000"},
    })
