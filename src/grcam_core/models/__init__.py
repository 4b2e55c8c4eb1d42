"""Data models for GR camera detection"""

from .camera_model import (
    BRAND_TOKEN,
    MAKE_VALUES,
    MODEL_MAPPING,
    CameraModel,
    is_known_make,
    lookup_model,
)
from .config import DetectorConfig
from .detection_result import DetectionMethod, DetectionResult, DetectionStatus

__all__ = [
    "CameraModel",
    "MODEL_MAPPING",
    "MAKE_VALUES",
    "BRAND_TOKEN",
    "lookup_model",
    "is_known_make",
    "DetectorConfig",
    "DetectionMethod",
    "DetectionResult",
    "DetectionStatus",
]
