"""
Company holiday calendar data.
Only 2025 is covered; other years have no holidays on record.
"""

HOLIDAYS = {
    2025: {
        "2025-01-01": "New Year's Day",
        "2025-01-20": "Martin Luther King, Jr. Day",
        "2025-05-26": "Memorial Day",
        "2025-06-19": "Juneteenth",
        "2025-07-04": "Independence Day",
        "2025-09-01": "Labor Day",
        "2025-11-27": "Thanksgiving",
        "2025-11-28": "Native American Heritage Day",
        "2025-12-24": "Christmas Eve",
        "2025-12-25": "Christmas Day",
    },
}

DEFAULT_HOLIDAY_YEAR = 2025


def get_holiday_data(year: int):
    """Get holiday names keyed by YYYY-MM-DD for a year, or None if not covered."""
    return HOLIDAYS.get(year)
