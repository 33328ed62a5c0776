"""
Tests for the holiday calendar.
"""

from datetime import date, datetime

import pytest

from data.holidays import get_holiday_data
from pto_projector.holidays import HolidayCalendar, holiday_calendar


class TestHolidayData:
    """Test the literal holiday data."""

    def test_2025_has_ten_holidays(self):
        assert len(get_holiday_data(2025)) == 10

    def test_native_american_heritage_day(self):
        assert get_holiday_data(2025)["2025-11-28"] == "Native American Heritage Day"

    def test_uncovered_year(self):
        assert get_holiday_data(2026) is None


class TestHolidayCalendar:
    """Test HolidayCalendar lookups."""

    def test_is_holiday(self, holidays_2025):
        assert holidays_2025.is_holiday(date(2025, 7, 4)) is True
        assert holidays_2025.is_holiday(date(2025, 7, 3)) is False

    def test_datetime_lookup(self, holidays_2025):
        assert holidays_2025.is_holiday(datetime(2025, 12, 25, 9, 30)) is True

    def test_other_years_never_holidays(self, holidays_2025):
        assert date(2026, 1, 1) not in holidays_2025
        assert date(2024, 12, 25) not in holidays_2025

    def test_accepts_plain_list(self):
        calendar = HolidayCalendar(["2025-03-05"])
        assert date(2025, 3, 5) in calendar
        assert len(calendar) == 1

    def test_invalid_entry_raises(self):
        with pytest.raises(ValueError, match="Invalid holiday date"):
            HolidayCalendar(["2025-02-30"])

    def test_uncovered_year_is_empty(self):
        assert len(HolidayCalendar.for_year(2030)) == 0

    def test_entries_sorted(self, holidays_2025):
        entries = holidays_2025.entries()
        assert entries[0] == (date(2025, 1, 1), "New Year's Day")
        assert entries[-1] == (date(2025, 12, 25), "Christmas Day")
        assert [day for day, _ in entries] == sorted(day for day, _ in entries)

    def test_summary(self, holidays_2025):
        assert holidays_2025.summary() == (
            "Jan 1, Jan 20, May 26, Jun 19, Jul 4, Sep 1, Nov 27, Nov 28, Dec 24, Dec 25"
        )

    def test_to_list(self, holidays_2025):
        assert holidays_2025.to_list()[2] == {"date": "2025-05-26", "name": "Memorial Day"}

    def test_default_calendar_is_2025(self):
        assert len(holiday_calendar) == 10
        assert date(2025, 9, 1) in holiday_calendar
