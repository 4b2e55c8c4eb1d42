"""
Tests for filename-based detection

GR cameras write names like R0001234.JPG; matches are advisory only.
"""

import pytest
from grcam_core.detection.filename_detector import FilenameDetector
from grcam_core.models.detection_result import DetectionMethod, DetectionResult, DetectionStatus


class TestMatchingNames:
    """Test names that look like GR output"""

    @pytest.mark.parametrize("name", [
        'R0001234.JPG',
        'R0001234.jpg',
        'R0001234.JPEG',
        'R0001234.DNG',
        'R0001234.RAF',
        'R0001234.TIF',
        'R0001234.TIFF',
        'R1005678.JPG',
        'r0001234.dng',
        'S0001234.JPG',  # prefix letter is configurable on the camera
    ])
    def test_detects_pattern(self, name):
        """Should match one letter, seven digits and a known extension"""
        result = FilenameDetector.detect(name)

        assert result.is_match is True
        assert result.method is DetectionMethod.FILENAME
        assert result.status is DetectionStatus.DETECTED
        assert result.model is None
        assert result.is_confirmed is False

    @pytest.mark.parametrize("name", ['R0001234.JPG', 'IMG_1234.JPG', 'R012345.DNG'])
    def test_path_prefixes_do_not_change_result(self, name):
        """POSIX and Windows directories are ignored"""
        bare = FilenameDetector.detect(name)

        assert FilenameDetector.detect('/a/b/' + name) == bare
        assert FilenameDetector.detect('C:\\a\\b\\' + name) == bare
        assert FilenameDetector.detect('photos\\2025/' + name) == bare


class TestRejectedNames:
    """Test names that must not match"""

    @pytest.mark.parametrize("name", [
        'IMG_1234.JPG',
        'R012345.JPG',      # 6 digits
        'R00012345.JPG',    # 8 digits
        'RR001234.JPG',
        '00001234.JPG',
        'R0001234.PNG',
        'R0001234.JPG.bak',
        'R0001234JPG',
        'xR0001234.JPG',
        'R0001234.JPG\n',
        'R０００１２３４.JPG',  # full-width digits
    ])
    def test_rejects(self, name):
        """Should not match near misses"""
        result = FilenameDetector.detect(name)

        assert result.is_match is False
        assert result.method is DetectionMethod.NONE

    def test_empty_filename(self):
        """Empty input is simply not detected"""
        assert FilenameDetector.detect('') == DetectionResult.not_detected()

    def test_none_filename(self):
        """None is treated like an empty name"""
        assert FilenameDetector.detect(None) == DetectionResult.not_detected()

    def test_directory_only(self):
        """A trailing separator leaves no filename"""
        assert FilenameDetector.detect('/photos/R0001234.JPG/').is_match is False


class TestBasename:
    """Test separator-agnostic basename"""

    def test_mixed_separators(self):
        assert FilenameDetector.basename('C:\\photos/2025\\R0001234.JPG') == 'R0001234.JPG'

    def test_no_separator(self):
        assert FilenameDetector.basename('R0001234.JPG') == 'R0001234.JPG'
