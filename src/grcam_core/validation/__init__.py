"""Input validation module"""

from .input_validator import InputValidator

__all__ = ["InputValidator"]
