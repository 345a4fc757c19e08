"""Unit tests for output format normalization."""

import pytest
from structlog.testing import capture_logs

from webpconvert.cli.utils.validation import normalize_format
from webpconvert.models.conversion import OutputFormat


class TestNormalizeFormat:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("jpg", OutputFormat.JPG),
            ("png", OutputFormat.PNG),
            ("j", OutputFormat.JPG),
            ("p", OutputFormat.PNG),
            ("PNG", OutputFormat.PNG),
            ("J", OutputFormat.JPG),
        ],
    )
    def test_supported_values(self, value, expected):
        with capture_logs() as logs:
            assert normalize_format(value) is expected

        assert logs == []

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value_defaults_to_jpg(self, value):
        assert normalize_format(value) is OutputFormat.JPG

    @pytest.mark.parametrize("value", ["gif", "jpeg", "webp", "x"])
    def test_invalid_value_falls_back_with_warning(self, value):
        with capture_logs() as logs:
            assert normalize_format(value) is OutputFormat.JPG

        assert len(logs) == 1
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event"] == f"Invalid format: {value}. Using jpg as default."
