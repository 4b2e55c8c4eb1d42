"""
Input Validation Module

Validates image bytes before any EXIF reading is attempted.
"""

from typing import Any, Optional, Tuple


class InputValidator:
    """Validate raw image input before processing"""

    BYTES_TYPES = (bytes, bytearray, memoryview)

    @staticmethod
    def validate_bytes(data: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate image bytes.

        Checks:
        - Input is present
        - Input is a bytes-like object
        - Input is not empty

        Args:
            data: Raw image bytes

        Returns:
            (is_valid, error_message) tuple
        """
        if data is None:
            return False, "Image bytes are missing"

        if not isinstance(data, InputValidator.BYTES_TYPES):
            return False, f"Expected bytes-like object, got {type(data).__name__}"

        if len(data) == 0:
            return False, "Image bytes are empty"

        return True, None

    @staticmethod
    def byte_length(data: Any) -> int:
        """Length of the input if it is bytes-like, else 0"""
        if isinstance(data, InputValidator.BYTES_TYPES):
            return len(data)
        return 0

    @staticmethod
    def is_valid(data: Any) -> bool:
        """
        Quick check if input is valid.

        Args:
            data: Raw image bytes

        Returns:
            True if input can be handed to a tag reader
        """
        valid, _ = InputValidator.validate_bytes(data)
        return valid
