"""
Detection Result Model

Represents the outcome of checking one image for a GR camera.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .camera_model import CameraModel

if TYPE_CHECKING:
    from ..exceptions import DetectionError


class DetectionMethod(Enum):
    """How the GR camera was detected"""
    METADATA = "metadata"  # EXIF Make/Model, definitive
    FILENAME = "filename"  # R0001234.JPG style name, advisory only
    BOTH = "both"          # EXIF and filename agree
    NONE = "none"

    @property
    def confidence(self) -> int:
        """Rank for comparing methods: both > metadata > filename > none"""
        return _CONFIDENCE[self]


_CONFIDENCE = {
    DetectionMethod.BOTH: 3,
    DetectionMethod.METADATA: 2,
    DetectionMethod.FILENAME: 1,
    DetectionMethod.NONE: 0,
}


class DetectionStatus(Enum):
    """Outcome of a detection call, distinguishing absence from failure"""
    DETECTED = "detected"
    NOT_DETECTED = "not_detected"
    METADATA_PARSE_ERROR = "metadata_parse_error"
    METADATA_ABSENT = "metadata_absent"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class DetectionResult:
    """
    Result of GR camera detection.

    Attributes:
        is_match: Whether the image was taken with a GR camera
        model: Detected model; only set when EXIF contributed to the match
        method: Which signal(s) produced the result
        camera_make: Raw EXIF Make value, trimmed
        camera_model: Raw EXIF Model value, trimmed
        status: Outcome of the call
        error: Error met along the way, kept even when a fallback matched
        used_fallback: True when the filename was checked because EXIF failed
    """
    is_match: bool
    method: DetectionMethod
    model: Optional[CameraModel] = None
    camera_make: Optional[str] = None
    camera_model: Optional[str] = None
    status: DetectionStatus = DetectionStatus.NOT_DETECTED
    error: Optional['DetectionError'] = None
    used_fallback: bool = False

    @property
    def is_confirmed(self) -> bool:
        """
        Whether the detection rests on EXIF metadata.

        Filename-only matches are not confirmed: other cameras use similar
        naming conventions.
        """
        return self.method in (DetectionMethod.METADATA, DetectionMethod.BOTH)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @classmethod
    def not_detected(cls) -> 'DetectionResult':
        """Valid input, no GR camera found"""
        return cls(is_match=False, method=DetectionMethod.NONE)

    @classmethod
    def error_only(cls, error: 'DetectionError') -> 'DetectionResult':
        """Result carrying only an error, no fallback attempted"""
        return cls(
            is_match=False,
            method=DetectionMethod.NONE,
            status=error.status,
            error=error,
        )

    @classmethod
    def with_fallback(
        cls,
        fallback: 'DetectionResult',
        error: 'DetectionError'
    ) -> 'DetectionResult':
        """Wrap a filename fallback result together with the error that caused it"""
        return cls(
            is_match=fallback.is_match,
            method=fallback.method,
            status=DetectionStatus.DETECTED if fallback.is_match else error.status,
            error=error,
            used_fallback=True,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'is_match': self.is_match,
            'model': self.model.display_name if self.model else None,
            'method': self.method.value,
            'camera_make': self.camera_make,
            'camera_model': self.camera_model,
            'status': self.status.value,
            'error': str(self.error) if self.error else None,
            'used_fallback': self.used_fallback,
            'is_confirmed': self.is_confirmed,
        }

    def __str__(self) -> str:
        model = self.model.display_name if self.model else "none"
        return (
            f"DetectionResult(is_match: {self.is_match}, model: {model}, "
            f"method: {self.method.value}, status: {self.status.value}, "
            f"is_confirmed: {self.is_confirmed})"
        )
