"""
Unit tests for snapfind.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from snapfind.utils.datetime_utils import ensure_utc, local_day_bounds, parse_iso, to_iso


class TestEnsureUtc:
    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        result = ensure_utc(datetime(2025, 1, 15, 12, 0, 0))
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert (result.hour, result.minute) == (6, 30)


class TestIsoConversion:
    def test_parse_z_suffix(self, mock_settings):
        dt = parse_iso("2025-01-15T12:00:00Z")
        assert dt == datetime(2025, 1, 15, 12, tzinfo=timezone.utc)

    def test_parse_invalid_returns_none(self, mock_settings):
        assert parse_iso("not-a-date") is None
        assert parse_iso(None) is None

    def test_to_iso_uses_z_and_milliseconds(self):
        assert to_iso(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)) == "2025-01-15T12:00:00.000Z"

    def test_to_iso_none(self):
        assert to_iso(None) is None


class TestLocalDayBounds:
    def test_utc_day(self, mock_settings):
        start, end = local_day_bounds(datetime(2025, 3, 10, 15, 30, tzinfo=timezone.utc))
        assert start == datetime(2025, 3, 10, tzinfo=timezone.utc)
        assert end == datetime(2025, 3, 11, tzinfo=timezone.utc)

    def test_day_follows_configured_timezone(self, mock_settings):
        mock_settings.local_timezone = "Asia/Tokyo"
        # 20:00 UTC on the 10th is already the 11th in Tokyo (UTC+9)
        start, end = local_day_bounds(datetime(2025, 3, 10, 20, 0, tzinfo=timezone.utc))
        assert start == datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc)
        assert end == datetime(2025, 3, 11, 15, 0, tzinfo=timezone.utc)

    def test_window_resets_at_local_midnight(self, mock_settings):
        mock_settings.local_timezone = "Asia/Tokyo"
        before = local_day_bounds(datetime(2025, 3, 10, 14, 59, tzinfo=timezone.utc))
        after = local_day_bounds(datetime(2025, 3, 10, 15, 0, tzinfo=timezone.utc))
        assert before[1] == after[0]
        assert after[0] - before[0] == timedelta(days=1)

    def test_invalid_timezone_falls_back_to_utc(self, mock_settings):
        mock_settings.local_timezone = "Not/AZone"
        start, _ = local_day_bounds(datetime(2025, 3, 10, 8, tzinfo=timezone.utc))
        assert start == datetime(2025, 3, 10, tzinfo=timezone.utc)
