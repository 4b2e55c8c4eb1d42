"""
Tests for input validation
"""

from grcam_core.validation.input_validator import InputValidator


class TestByteValidation:
    """Test validate_bytes()"""

    def test_valid_bytes(self):
        is_valid, error = InputValidator.validate_bytes(b"\xff\xd8")

        assert is_valid is True
        assert error is None

    def test_empty_bytes(self):
        is_valid, error = InputValidator.validate_bytes(b"")

        assert is_valid is False
        assert "empty" in error.lower()

    def test_none(self):
        is_valid, error = InputValidator.validate_bytes(None)

        assert is_valid is False
        assert "missing" in error.lower()

    def test_wrong_type(self):
        is_valid, error = InputValidator.validate_bytes("R0001234.JPG")

        assert is_valid is False
        assert "str" in error

    def test_bytearray_and_memoryview(self):
        assert InputValidator.is_valid(bytearray(b"\x00"))
        assert InputValidator.is_valid(memoryview(b"\x00"))


class TestByteLength:
    """Test byte_length()"""

    def test_lengths(self):
        assert InputValidator.byte_length(b"abc") == 3
        assert InputValidator.byte_length(None) == 0
        assert InputValidator.byte_length("abc") == 0
