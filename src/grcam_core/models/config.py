"""
Detector Configuration

Error and fallback policy for detect_from_source().
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from ..exceptions import DetectionError


@dataclass(frozen=True)
class DetectorConfig:
    """
    Policy applied when EXIF reading fails or finds nothing.

    Attributes:
        throw_on_error: Raise DetectionError instead of returning it in the result
        enable_fallback: Check the filename when EXIF cannot be used
        on_error: Called once with every error, whatever the other settings
        fallback_on_missing_metadata: Also fall back when the image simply
            has no EXIF (as opposed to EXIF that failed to parse)
    """
    throw_on_error: bool = False
    enable_fallback: bool = True
    on_error: Optional[Callable[['DetectionError'], None]] = None
    fallback_on_missing_metadata: bool = True

    @classmethod
    def default(cls) -> 'DetectorConfig':
        """Silent: errors are returned in the result, filename fallback on"""
        return cls()

    @classmethod
    def strict(cls) -> 'DetectorConfig':
        """Errors are raised, no filename fallback"""
        return cls(throw_on_error=True, enable_fallback=False)
