"""
Filename Signal Detector

GR cameras name files like R0001234.JPG or R0001234.DNG. The leading
letter and digit are user-configurable on the camera, so this is only a
hint: other cameras use similar conventions.
"""

import re
from typing import Optional

from ..models.detection_result import DetectionMethod, DetectionResult, DetectionStatus

FILENAME_PATTERN = re.compile(r'^[A-Z]\d{7}\.(jpe?g|dng|raf|tiff?)$', re.IGNORECASE | re.ASCII)


class FilenameDetector:
    """Detect GR cameras from the shape of a filename"""

    @staticmethod
    def detect(path: Optional[str]) -> DetectionResult:
        """
        Detect a GR camera from a filename or path.

        Both / and \\ separators are stripped, so POSIX and Windows paths
        behave the same.

        Args:
            path: Filename, optionally with directories

        Returns:
            DetectionResult with method FILENAME and no model on a match
        """
        if not path:
            return DetectionResult.not_detected()

        if FILENAME_PATTERN.fullmatch(FilenameDetector.basename(path)):
            return DetectionResult(
                is_match=True,
                model=None,  # Filename alone cannot tell models apart
                method=DetectionMethod.FILENAME,
                status=DetectionStatus.DETECTED,
            )

        return DetectionResult.not_detected()

    @staticmethod
    def basename(path: str) -> str:
        """Last path segment, separator-agnostic"""
        return path.split('/')[-1].split('\\')[-1]
