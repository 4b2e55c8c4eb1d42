"""
Tests for batch_detect()
"""

import pytest
from grcam_core import DetectorConfig, MetadataAbsentError, batch_detect
from grcam_core.models.detection_result import DetectionMethod, DetectionStatus

from conftest import FakeTagReader, make_tags


class TestBatchDetect:
    """Test batch detection with progress tracking"""

    def test_results_in_input_order(self):
        reader = FakeTagReader(make_tags('RICOH', 'GR III'))
        results = batch_detect(
            [(b"\xff", 'R0001234.JPG'), (b"\xff", None), (b"", 'R0001235.JPG')],
            tag_reader=reader,
        )

        assert [r.method for r in results] == [
            DetectionMethod.BOTH,
            DetectionMethod.METADATA,
            DetectionMethod.NONE,
        ]
        assert results[2].status is DetectionStatus.INVALID_INPUT
        assert reader.calls == 2

    def test_progress_callback(self):
        calls = []
        results = batch_detect(
            ((b"\xff", name) for name in ['R0000001.JPG', 'IMG_0002.JPG']),
            progress_callback=lambda current, total, result: calls.append((current, total, result)),
            tag_reader=FakeTagReader({}),
        )

        assert [(c, t) for c, t, _ in calls] == [(1, 2), (2, 2)]
        assert [r for _, _, r in calls] == results

    def test_empty_batch(self):
        assert batch_detect([]) == []

    def test_strict_config_stops_batch(self):
        with pytest.raises(MetadataAbsentError):
            batch_detect(
                [(b"\xff", 'R0000001.JPG')],
                config=DetectorConfig.strict(),
                tag_reader=FakeTagReader({}),
            )
