"""
Metadata Signal Detector

Identifies GR cameras from already-read EXIF Make/Model tags.
"""

from typing import Any, Mapping, Optional

from ..models.camera_model import BRAND_TOKEN, CameraModel, is_known_make, lookup_model
from ..models.detection_result import DetectionMethod, DetectionResult, DetectionStatus

MAKE_TAG = 'Image Make'
MODEL_TAG = 'Image Model'


class MetadataDetector:
    """Detect GR cameras from an EXIF tag mapping"""

    @staticmethod
    def detect(tags: Mapping[str, Any]) -> DetectionResult:
        """
        Detect a GR camera from EXIF tags.

        Make must be one of the known Ricoh spellings. Model is matched
        exactly against the registry first; failing that, any Model
        containing "GR" (case-insensitive) is reported as an unknown GR.

        Args:
            tags: Mapping of tag name to tag value, as returned by a tag reader

        Returns:
            DetectionResult with method METADATA on a match
        """
        make = MetadataDetector._printable(tags.get(MAKE_TAG))
        model = MetadataDetector._printable(tags.get(MODEL_TAG))

        if make is None or model is None:
            return DetectionResult.not_detected()

        if not is_known_make(make):
            return DetectionResult.not_detected()

        camera_model = lookup_model(model)
        if camera_model is None and BRAND_TOKEN in model.upper():
            camera_model = CameraModel.UNKNOWN

        if camera_model is None:
            return DetectionResult.not_detected()

        return DetectionResult(
            is_match=True,
            model=camera_model,
            method=DetectionMethod.METADATA,
            camera_make=make,
            camera_model=model,
            status=DetectionStatus.DETECTED,
        )

    @staticmethod
    def _printable(tag: Any) -> Optional[str]:
        """Trimmed text of a tag; accepts IfdTag-like objects and plain strings"""
        if tag is None:
            return None
        text = getattr(tag, 'printable', tag)
        return str(text).strip()
