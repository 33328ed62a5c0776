"""
Workday counting over half-open date ranges.
"""

from datetime import date, datetime, timedelta

from dateutil.rrule import DAILY, FR, MO, TH, TU, WE, rrule

WEEKDAYS = (MO, TU, WE, TH, FR)


def count_workdays(start: date, end: date, holidays) -> int:
    """
    Count workdays d with start <= d < end.

    A workday is Monday through Friday and not in ``holidays`` (any container
    of dates, typically a HolidayCalendar). The end date itself is never
    counted; an empty or inverted range counts zero.
    """
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()

    if start >= end:
        return 0

    last = end - timedelta(days=1)
    weekdays = rrule(DAILY, dtstart=start, until=last, byweekday=WEEKDAYS)

    return sum(1 for occurrence in weekdays if occurrence.date() not in holidays)
