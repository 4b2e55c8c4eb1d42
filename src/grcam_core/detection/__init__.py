"""GR camera detection module"""

from .filename_detector import FILENAME_PATTERN, FilenameDetector
from .metadata_detector import MetadataDetector
from .orchestrator import DetectionOrchestrator

__all__ = ["FilenameDetector", "FILENAME_PATTERN", "MetadataDetector", "DetectionOrchestrator"]
