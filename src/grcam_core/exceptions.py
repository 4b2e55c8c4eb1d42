"""
Detection Errors

Hierarchy of errors that can occur while detecting a GR camera.
Catch DetectionError to handle any of them generically.

Example:
    >>> from grcam_core import DetectorConfig, detect_from_source
    >>> from grcam_core.exceptions import DetectionError
    >>>
    >>> try:
    ...     result = detect_from_source(data, config=DetectorConfig.strict())
    ... except DetectionError as e:
    ...     print(f"Detection failed: {e.message} ({e.status.value})")
"""

from typing import Optional

from .models.detection_result import DetectionStatus


class DetectionError(Exception):
    """
    Base class for all detection errors. Never raised directly: every
    error is one of the subclasses below, each with its own status.

    Attributes:
        message: Human-readable description of what went wrong
        cause: Underlying exception, if any (also chained as __cause__)
        status: DetectionStatus reported when this error ends up in a result
    """

    status: DetectionStatus

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if type(self) is DetectionError:
            raise TypeError("DetectionError is abstract; raise one of its subclasses")
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.message}"

    def _key(self) -> tuple:
        """Fields compared by == and hash(); cause is left out"""
        return (type(self), self.message, self.status)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DetectionError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class InvalidInputError(DetectionError):
    """Image bytes are empty or not a bytes-like object"""

    status = DetectionStatus.INVALID_INPUT

    def __init__(
        self,
        message: str,
        bytes_length: int,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message, cause=cause)
        self.bytes_length = bytes_length

    def __str__(self) -> str:
        return f"InvalidInputError: {self.message} (bytes_length: {self.bytes_length})"

    def _key(self) -> tuple:
        return super()._key() + (self.bytes_length,)


class MetadataParseError(DetectionError):
    """
    The tag reader failed on the supplied bytes.

    Happens with corrupted or truncated files, unsupported formats and
    malformed EXIF structures.
    """

    status = DetectionStatus.METADATA_PARSE_ERROR

    PREVIEW_SIZE = 100

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        bytes_preview: Optional[bytes] = None
    ):
        super().__init__(message, cause=cause)
        self.bytes_preview = bytes_preview

    def __str__(self) -> str:
        text = f"MetadataParseError: {self.message}"
        if self.bytes_preview:
            preview = ' '.join(f"0x{b:02x}" for b in self.bytes_preview[:10])
            text += f" (bytes: {preview}...)"
        return text

    def _key(self) -> tuple:
        return super()._key() + (self.bytes_preview,)


class MetadataAbsentError(DetectionError):
    """
    The image was read but carries no EXIF tags.

    Typical for screenshots, stripped images and formats without EXIF.
    """

    status = DetectionStatus.METADATA_ABSENT

    def __init__(self, message: str = "No EXIF metadata found in image"):
        super().__init__(message)
