"""Tests for parse statistics."""

import pytest

from kon_parser.shared.result import ParseStatistics


class TestParseStatistics:
    """Test ParseStatistics derived values."""

    def test_defaults(self):
        """Test zeroed defaults."""
        stats = ParseStatistics()
        assert stats.element_count == 0
        assert stats.characters_per_second == 0.0
        assert stats.tokens_per_second == 0.0

    def test_rates(self):
        """Test per-second rates."""
        stats = ParseStatistics(
            characters_processed=500, token_count=100, processing_time_ms=250.0
        )
        assert stats.characters_per_second == 2000.0
        assert stats.tokens_per_second == 400.0

    def test_condensed_token_count(self):
        """Test the number of raw tokens removed before parsing."""
        stats = ParseStatistics(raw_token_count=26, token_count=13)
        assert stats.condensed_token_count == 13

    def test_negative_time_rejected(self):
        """Test validation of processing time."""
        with pytest.raises(ValueError, match="processing_time_ms must be >= 0"):
            ParseStatistics(processing_time_ms=-1.0)

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = ParseStatistics(element_count=3).to_dict()
        assert data["element_count"] == 3
        assert set(data) == {
            "characters_processed",
            "raw_token_count",
            "token_count",
            "element_count",
            "attribute_count",
            "max_depth",
            "processing_time_ms",
        }
