"""
Pytest configuration and fixtures.
Shared test utilities and calendar data.
"""

from datetime import date

import pytest

from data.holidays import HOLIDAYS
from pto_projector.holidays import HolidayCalendar


@pytest.fixture
def holidays_2025():
    """Return the 2025 company holiday calendar."""
    return HolidayCalendar(HOLIDAYS[2025])


@pytest.fixture
def no_holidays():
    """Return a calendar with no holidays."""
    return HolidayCalendar()


@pytest.fixture
def monday():
    """Return a Monday with no holiday nearby (2025-03-03)."""
    return date(2025, 3, 3)

