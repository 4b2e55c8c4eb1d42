"""
Shared fixtures for grcam-core tests

Images are generated in memory with Pillow, so no fixture files are needed.
"""

from io import BytesIO
from types import SimpleNamespace
from typing import Optional

import pytest
from PIL import Image


def make_tags(make: Optional[str] = None, model: Optional[str] = None) -> dict:
    """Build an exifread-style tag mapping with printable values"""
    tags = {}
    if make is not None:
        tags['Image Make'] = SimpleNamespace(printable=make)
    if model is not None:
        tags['Image Model'] = SimpleNamespace(printable=model)
    return tags


def make_jpeg(make: Optional[str] = None, model: Optional[str] = None) -> bytes:
    """Create a small JPEG, with Make/Model EXIF if given"""
    img = Image.new('RGB', (16, 16), (70, 130, 180))
    buffer = BytesIO()

    if make is None and model is None:
        img.save(buffer, format='JPEG', quality=85)
        return buffer.getvalue()

    exif = Image.Exif()
    if make is not None:
        exif[271] = make  # Make
    if model is not None:
        exif[272] = model  # Model
    img.save(buffer, format='JPEG', quality=85, exif=exif.tobytes())
    return buffer.getvalue()


class FakeTagReader:
    """Tag reader double that records calls and returns or raises a preset value"""

    def __init__(self, tags=None, error: Optional[Exception] = None):
        self.tags = tags if tags is not None else {}
        self.error = error
        self.calls = 0

    def __call__(self, image_bytes: bytes) -> dict:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.tags


@pytest.fixture
def gr_iv_jpeg() -> bytes:
    """JPEG shot on a GR IV"""
    return make_jpeg(make='RICOH', model='RICOH GR IV')


@pytest.fixture
def canon_jpeg() -> bytes:
    """JPEG shot on a Canon"""
    return make_jpeg(make='Canon', model='Canon EOS R5')


@pytest.fixture
def plain_jpeg() -> bytes:
    """JPEG without EXIF"""
    return make_jpeg()
