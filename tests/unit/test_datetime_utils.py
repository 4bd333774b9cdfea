"""
Unit tests for blog_backend.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from blog_backend.utils.datetime_utils import ensure_utc, to_iso, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6
        assert result.minute == 30


class TestToIso:
    """Tests for to_iso"""

    def test_none_returns_none(self):
        assert to_iso(None) is None

    def test_utc_uses_z_suffix_and_milliseconds(self):
        dt = datetime(2025, 12, 24, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-12-24T10:30:00.123Z"

    def test_naive_treated_as_utc(self):
        assert to_iso(datetime(2025, 1, 1, 0, 0, 0)) == "2025-01-01T00:00:00.000Z"

    def test_offset_converted(self):
        dt = datetime(2025, 1, 1, 5, 30, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert to_iso(dt) == "2025-01-01T00:00:00.000Z"


def test_utc_now_is_aware():
    assert utc_now().tzinfo == timezone.utc
