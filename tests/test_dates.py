"""
Tests for the YYYY-MM-DD date codec.
"""

from datetime import date, datetime, timedelta

import pytest

from pto_projector.dates import format_date, parse_date


class TestFormatDate:
    """Test format_date."""

    def test_zero_pads_month_and_day(self):
        assert format_date(date(2025, 1, 5)) == "2025-01-05"

    def test_datetime_uses_calendar_day(self):
        assert format_date(datetime(2025, 11, 28, 17, 45)) == "2025-11-28"

    @pytest.mark.parametrize("value", [None, "", "2025-01-05", 20250105, object()])
    def test_non_dates_render_empty(self, value):
        assert format_date(value) == ""


class TestParseDate:
    """Test parse_date."""

    def test_valid_date(self):
        assert parse_date("2025-07-04") == date(2025, 7, 4)

    def test_unpadded_parts_accepted(self):
        assert parse_date("2025-7-4") == date(2025, 7, 4)

    @pytest.mark.parametrize("text", ["2025-13-01", "2025-02-30", "2025-04-31", "2025-01-32"])
    def test_rejects_rolled_over_dates(self, text):
        """Out-of-range parts are rejected rather than rolled into the next month."""
        assert parse_date(text) is None

    @pytest.mark.parametrize(
        "text", ["", "2025-01", "2025-01-01-01", "2025/01/01", "abcd-ef-gh", "2025-01-"]
    )
    def test_rejects_malformed_text(self, text):
        assert parse_date(text) is None

    @pytest.mark.parametrize(
        "text", ["2025-0_7-04", " 2025-07-04 ", "2025- 07-04", "+2025-07-04", "２０２５-07-04"]
    )
    def test_rejects_non_ascii_digit_parts(self, text):
        """Only plain ASCII digits are read as date parts."""
        assert parse_date(text) is None

    def test_rejects_non_text(self):
        assert parse_date(None) is None
        assert parse_date(date(2025, 1, 1)) is None

    def test_leap_day(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)
        assert parse_date("2025-02-29") is None

    def test_parse_inverts_format(self):
        """Every day of a leap year survives format then parse."""
        day = date(2024, 1, 1)
        while day.year == 2024:
            assert parse_date(format_date(day)) == day
            day += timedelta(days=1)
