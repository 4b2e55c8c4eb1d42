"""
Detection Orchestrator

Combines the EXIF and filename signals into one DetectionResult and
applies the configured error/fallback policy.
"""

import logging
from typing import Any, Optional

from ..exceptions import (
    DetectionError,
    InvalidInputError,
    MetadataAbsentError,
    MetadataParseError,
)
from ..metadata.tag_reader import ExifReadTagReader, TagReader
from ..models.config import DetectorConfig
from ..models.detection_result import DetectionMethod, DetectionResult, DetectionStatus
from ..validation.input_validator import InputValidator
from .filename_detector import FilenameDetector
from .metadata_detector import MetadataDetector

logger = logging.getLogger(__name__)


class DetectionOrchestrator:
    """
    Detects GR cameras from raw image bytes plus an optional filename.

    Outcomes, strongest first:
    - EXIF and filename both match: method BOTH
    - EXIF matches: method METADATA
    - EXIF readable but not a GR: whatever the filename says
    - EXIF unusable (parse failure or no tags): error handling, which may
      fall back to the filename depending on DetectorConfig

    Example:
        >>> orchestrator = DetectionOrchestrator()
        >>> result = orchestrator.detect_from_source(data, filename="R0001234.JPG")
        >>> result.method
        <DetectionMethod.BOTH: 'both'>
    """

    def __init__(self, tag_reader: Optional[TagReader] = None):
        """
        Args:
            tag_reader: Callable turning bytes into an EXIF tag mapping.
                        Defaults to ExifReadTagReader.read_tags.
        """
        self.tag_reader = tag_reader or ExifReadTagReader.read_tags

    def detect_from_source(
        self,
        image_bytes: Any,
        filename: Optional[str] = None,
        config: Optional[DetectorConfig] = None
    ) -> DetectionResult:
        """
        Detect a GR camera from image bytes and an optional filename.

        Args:
            image_bytes: Raw image file bytes
            filename: Original filename or path, used for combined or fallback detection
            config: Error/fallback policy; DetectorConfig.default() if None

        Returns:
            DetectionResult

        Raises:
            DetectionError: Only when config.throw_on_error is set
        """
        config = config or DetectorConfig.default()

        is_valid, message = InputValidator.validate_bytes(image_bytes)
        if not is_valid:
            error = InvalidInputError(
                message,
                bytes_length=InputValidator.byte_length(image_bytes),
            )
            # Invalid input never falls back: the status stays INVALID_INPUT
            return self._handle_error(error, None, config)

        try:
            tags = self.tag_reader(image_bytes)
        except Exception as e:
            logger.warning("Failed to read EXIF metadata: %s", e)
            error = MetadataParseError(
                f"Failed to read EXIF metadata: {e}",
                cause=e,
                bytes_preview=bytes(image_bytes[:MetadataParseError.PREVIEW_SIZE]),
            )
            return self._handle_error(error, filename, config)

        if not tags:
            logger.debug("No EXIF tags found")
            fallback_name = filename if config.fallback_on_missing_metadata else None
            return self._handle_error(MetadataAbsentError(), fallback_name, config)

        return self._combine(MetadataDetector.detect(tags), filename)

    @staticmethod
    def _combine(metadata_result: DetectionResult, filename: Optional[str]) -> DetectionResult:
        """Merge a successful EXIF check with the filename signal"""
        if metadata_result.is_match:
            if filename is not None and FilenameDetector.detect(filename).is_match:
                logger.debug("EXIF and filename agree on %s", filename)
                return DetectionResult(
                    is_match=True,
                    model=metadata_result.model,
                    method=DetectionMethod.BOTH,
                    camera_make=metadata_result.camera_make,
                    camera_model=metadata_result.camera_model,
                    status=DetectionStatus.DETECTED,
                )
            return metadata_result

        if filename is not None:
            return FilenameDetector.detect(filename)

        return DetectionResult.not_detected()

    @staticmethod
    def _handle_error(
        error: DetectionError,
        filename: Optional[str],
        config: DetectorConfig
    ) -> DetectionResult:
        """
        Apply the error policy.

        on_error always fires first. Then raise, fall back to the filename,
        or return the bare error, in that order of precedence.
        """
        if config.on_error is not None:
            config.on_error(error)

        if config.throw_on_error:
            raise error

        if config.enable_fallback and filename is not None:
            fallback = FilenameDetector.detect(filename)
            logger.debug("Filename fallback for %s: match=%s", filename, fallback.is_match)
            return DetectionResult.with_fallback(fallback, error)

        return DetectionResult.error_only(error)
