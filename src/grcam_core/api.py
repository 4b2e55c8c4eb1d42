"""
High-level API for GR Camera Detection

Convenience functions for detecting Ricoh GR photos.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

from .detection.filename_detector import FilenameDetector
from .detection.metadata_detector import MetadataDetector
from .detection.orchestrator import DetectionOrchestrator
from .metadata.tag_reader import TagReader
from .models.config import DetectorConfig
from .models.detection_result import DetectionResult


def detect_from_source(
    image_bytes: bytes,
    filename: Optional[str] = None,
    config: Optional[DetectorConfig] = None,
    tag_reader: Optional[TagReader] = None
) -> DetectionResult:
    """
    Detect a GR camera from image bytes, optionally helped by the filename.

    Args:
        image_bytes: Raw image file bytes
        filename: Original filename or path (optional)
        config: Error/fallback policy. None = DetectorConfig.default()
        tag_reader: EXIF reader override. None = exifread

    Returns:
        DetectionResult

    Raises:
        DetectionError: Only if config.throw_on_error is set

    Example:
        >>> from pathlib import Path
        >>> from grcam_core import detect_from_source
        >>>
        >>> path = Path("R0001234.JPG")
        >>> result = detect_from_source(path.read_bytes(), filename=path.name)
        >>> if result.is_match:
        ...     print(result.model.display_name, result.method.value)
    """
    orchestrator = DetectionOrchestrator(tag_reader=tag_reader)
    return orchestrator.detect_from_source(image_bytes, filename=filename, config=config)


def detect_from_filename_only(filename: str) -> DetectionResult:
    """
    Detect a GR camera from the filename alone.

    Never confirmed: check result.is_confirmed before trusting it.
    """
    return FilenameDetector.detect(filename)


def detect_from_metadata_tags(tags: Mapping[str, Any]) -> DetectionResult:
    """Detect a GR camera from EXIF tags you have already read"""
    return MetadataDetector.detect(tags)


def batch_detect(
    sources: Iterable[Tuple[bytes, Optional[str]]],
    config: Optional[DetectorConfig] = None,
    progress_callback: Optional[Callable[[int, int, DetectionResult], None]] = None,
    tag_reader: Optional[TagReader] = None
) -> List[DetectionResult]:
    """
    Detect GR cameras for many images with optional progress tracking.

    Args:
        sources: (image_bytes, filename) pairs; filename may be None
        config: Error/fallback policy shared by every call
        progress_callback: Optional callback(current, total, result)
        tag_reader: EXIF reader override

    Returns:
        List of DetectionResult objects, in input order

    Example:
        >>> from pathlib import Path
        >>> from grcam_core import batch_detect
        >>>
        >>> paths = list(Path("./photos").glob("*.JPG"))
        >>> results = batch_detect((p.read_bytes(), p.name) for p in paths)
        >>> gr_count = sum(1 for r in results if r.is_match)
    """
    sources = list(sources)
    orchestrator = DetectionOrchestrator(tag_reader=tag_reader)
    results = []
    total = len(sources)

    for i, (image_bytes, filename) in enumerate(sources, 1):
        result = orchestrator.detect_from_source(image_bytes, filename=filename, config=config)
        results.append(result)

        if progress_callback:
            progress_callback(i, total, result)

    return results
