"""
Holiday calendar: the non-working days excluded from accrual.
"""

import logging
from datetime import date, datetime

from data.holidays import DEFAULT_HOLIDAY_YEAR, get_holiday_data
from pto_projector.dates import format_date, parse_date

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """
    Immutable set of holiday dates, queried by exact date.

    Built once from literal YYYY-MM-DD data. Dates outside the data are never
    holidays, so years without data simply have none.
    """

    def __init__(self, holidays: dict[str, str] | list[str] | None = None):
        """
        Args:
            holidays: YYYY-MM-DD strings, or a mapping of them to holiday names

        Raises:
            ValueError: If any entry is not a valid YYYY-MM-DD date
        """
        if holidays is None:
            holidays = {}
        if not isinstance(holidays, dict):
            holidays = {text: "" for text in holidays}

        names = {}
        for text, name in holidays.items():
            parsed = parse_date(text)
            if parsed is None:
                raise ValueError(f"Invalid holiday date: {text!r}. Expected YYYY-MM-DD.")
            names[parsed] = name

        self._names = names
        self._dates = frozenset(names)

    @classmethod
    def for_year(cls, year: int) -> "HolidayCalendar":
        """Build the calendar for a covered year (empty if the year has no data)."""
        data = get_holiday_data(year)
        if data is None:
            logger.warning(f"No holiday data for {year}; no days will be excluded")
            return cls()
        return cls(data)

    def is_holiday(self, day: date) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return day in self._dates

    def __contains__(self, day) -> bool:
        return self.is_holiday(day)

    def __len__(self) -> int:
        return len(self._dates)

    def entries(self) -> list[tuple[date, str]]:
        """Holidays in date order as (date, name) pairs."""
        return [(day, self._names[day]) for day in sorted(self._dates)]

    def summary(self) -> str:
        """Short legend text, e.g. "Jan 1, Jan 20, May 26"."""
        return ", ".join(f"{day.strftime('%b')} {day.day}" for day in sorted(self._dates))

    def to_list(self) -> list[dict[str, str]]:
        return [{"date": format_date(day), "name": name} for day, name in self.entries()]


# Process-wide calendar, read-only after import
holiday_calendar = HolidayCalendar.for_year(DEFAULT_HOLIDAY_YEAR)
