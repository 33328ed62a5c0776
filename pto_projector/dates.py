"""
Canonical YYYY-MM-DD text form for calendar dates.
"""

from datetime import date, datetime


def format_date(value) -> str:
    """
    Render a calendar date as YYYY-MM-DD.

    Datetimes are reduced to their calendar day. Anything that is not a date
    renders as an empty string.
    """
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return ""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(text) -> date | None:
    """
    Parse YYYY-MM-DD text into a date.

    Returns None unless the text splits into exactly three integer parts that
    name a real Gregorian day. Out-of-range parts (month 13, February 30) are
    rejected, never rolled over into the following month or year.
    """
    if not text or not isinstance(text, str):
        return None

    parts = text.split("-")
    if len(parts) != 3:
        return None

    # ASCII digits only: int() would also take "_", whitespace and other scripts
    if not all(part.isascii() and part.isdecimal() for part in parts):
        return None

    year, month, day = (int(part) for part in parts)

    try:
        return date(year, month, day)
    except ValueError:
        return None
