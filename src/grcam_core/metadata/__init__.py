"""Metadata reading module"""

from .tag_reader import ExifReadTagReader, ExifTag, PillowTagReader, TagReader

__all__ = ["TagReader", "ExifTag", "ExifReadTagReader", "PillowTagReader"]
