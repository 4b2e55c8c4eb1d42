"""
GRCam Core - Ricoh GR camera detection for photos

This library provides:
- EXIF Make/Model detection (definitive)
- Filename pattern detection (advisory, e.g. R0001234.JPG)
- Combined detection with configurable error and fallback policy
- GR model registry (HDF and Monochrome variants)

Example:
    >>> from pathlib import Path
    >>> from grcam_core import detect_from_source
    >>>
    >>> path = Path("R0001234.JPG")
    >>> result = detect_from_source(path.read_bytes(), filename=path.name)
    >>> if result.is_match:
    ...     print(f"Model: {result.model.display_name}")
    ...     print(f"Confirmed: {result.is_confirmed}")
"""

from .version import __version__

# Models
from .models import (
    CameraModel,
    DetectionMethod,
    DetectionResult,
    DetectionStatus,
    DetectorConfig,
)

# Errors
from .exceptions import (
    DetectionError,
    InvalidInputError,
    MetadataAbsentError,
    MetadataParseError,
)

# Metadata reading
from .metadata import ExifReadTagReader, PillowTagReader

# Detection
from .detection import DetectionOrchestrator, FilenameDetector, MetadataDetector

# High-level API
from .api import (
    batch_detect,
    detect_from_filename_only,
    detect_from_metadata_tags,
    detect_from_source,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "CameraModel",
    "DetectionMethod",
    "DetectionResult",
    "DetectionStatus",
    "DetectorConfig",
    # Errors
    "DetectionError",
    "InvalidInputError",
    "MetadataParseError",
    "MetadataAbsentError",
    # Metadata
    "ExifReadTagReader",
    "PillowTagReader",
    # Detection
    "MetadataDetector",
    "FilenameDetector",
    "DetectionOrchestrator",
    # High-level API
    "detect_from_source",
    "detect_from_filename_only",
    "detect_from_metadata_tags",
    "batch_detect",
]
