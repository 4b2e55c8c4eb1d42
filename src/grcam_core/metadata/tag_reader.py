"""
EXIF Tag Reading Module

Turns raw image bytes into a mapping of EXIF tag names to tag values.

Tag names follow the exifread convention ("Image Make", "Image Model",
"EXIF DateTimeOriginal", ...). Every tag value exposes a ``printable``
text form, which is all the detectors rely on.
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Any, Callable, Dict, Mapping

import exifread
from PIL import Image
from PIL.ExifTags import TAGS

logger = logging.getLogger(__name__)

# Any callable bytes -> {tag name: tag}; may raise on malformed input
TagReader = Callable[[bytes], Mapping[str, Any]]

EXIF_IFD = 0x8769


@dataclass(frozen=True)
class ExifTag:
    """Tag value read by Pillow, shaped like exifread's IfdTag"""
    printable: str
    value: Any = None

    def __str__(self) -> str:
        return self.printable


class ExifReadTagReader:
    """Reads EXIF tags with exifread (JPEG, TIFF, DNG, RAF, HEIC, ...)"""

    @staticmethod
    def read_tags(image_bytes: bytes) -> Dict[str, Any]:
        """
        Read EXIF tags from image bytes.

        Args:
            image_bytes: Raw image file bytes

        Returns:
            Dict of exifread IfdTag objects keyed by tag name.
            Empty if the image carries no EXIF.

        exifread does not raise on bytes it cannot recognise as an image; it
        returns an empty dict, so the orchestrator reports METADATA_ABSENT.
        Only structurally broken EXIF (e.g. a truncated JPEG) raises here.
        Use PillowTagReader to have unrecognised bytes reported as parse
        failures.
        """
        tags = exifread.process_file(BytesIO(bytes(image_bytes)), details=False)
        logger.debug("exifread found %d tags", len(tags))
        return dict(tags)


class PillowTagReader:
    """Reads base IFD and EXIF IFD tags with Pillow"""

    @staticmethod
    def read_tags(image_bytes: bytes) -> Dict[str, ExifTag]:
        """
        Read EXIF tags from image bytes.

        Unlike exifread, Pillow raises on bytes it cannot identify as an
        image, so garbage input surfaces as a parse failure.

        Args:
            image_bytes: Raw image file bytes

        Returns:
            Dict of ExifTag objects keyed by exifread-style tag name
        """
        result: Dict[str, ExifTag] = {}

        with Image.open(BytesIO(bytes(image_bytes))) as img:
            exif = img.getexif()
            if not exif:
                return result

            for tag_id, value in exif.items():
                if tag_id == EXIF_IFD:
                    continue
                name = TAGS.get(tag_id, f"Tag 0x{tag_id:04X}")
                result[f"Image {name}"] = PillowTagReader._to_tag(value)

            try:
                exif_ifd = exif.get_ifd(EXIF_IFD)
            except (KeyError, AttributeError):
                exif_ifd = {}

            for tag_id, value in exif_ifd.items():
                name = TAGS.get(tag_id, f"Tag 0x{tag_id:04X}")
                result[f"EXIF {name}"] = PillowTagReader._to_tag(value)

        logger.debug("Pillow found %d tags", len(result))
        return result

    @staticmethod
    def _to_tag(value: Any) -> ExifTag:
        """Render a raw Pillow EXIF value as printable text"""
        if isinstance(value, bytes):
            text = value.decode('utf-8', errors='replace')
        else:
            text = str(value)
        return ExifTag(printable=text.rstrip('\x00'), value=value)
