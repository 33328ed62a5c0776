"""
Target date selection.

Selecting a day adds it, selecting it again removes it. Membership is keyed
by canonical date text, so the stored form is a set and order never matters
until the dates are realized for a projection.

Only future-or-today workdays can be selected: past days, weekends and
holidays are refused.
"""

from collections.abc import Container, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime

from pto_projector.dates import format_date, parse_date


def is_selectable(day: date, today: date, holidays: Container) -> bool:
    """True if ``day`` is not before ``today``, not a weekend and not a holiday."""
    if isinstance(day, datetime):
        day = day.date()
    if isinstance(today, datetime):
        today = today.date()

    if day < today:
        return False
    if day.weekday() >= 5:
        return False
    return day not in holidays


@dataclass
class TargetDateSet:
    today: date
    holidays: Container = field(default_factory=frozenset)
    keys: set[str] = field(default_factory=set)

    def toggle(self, day: date) -> bool:
        """
        Add the day if absent, remove it if present.

        Returns False, leaving the selection unchanged, for anything that is
        not a date or is not selectable.
        """
        key = format_date(day)
        if not key or not is_selectable(day, self.today, self.holidays):
            return False

        if key in self.keys:
            self.keys.remove(key)
        else:
            self.keys.add(key)
        return True

    def clear(self) -> None:
        self.keys.clear()

    def sorted_dates(self) -> list[tuple[str, date]]:
        return realize_target_dates(self.keys)

    def __contains__(self, day) -> bool:
        key = day if isinstance(day, str) else format_date(day)
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)


def realize_target_dates(entries: Iterable) -> list[tuple[str, date]]:
    """
    Turn selected entries into a chronologically ascending, duplicate-free
    sequence of (canonical key, date) pairs.

    Entries that are not text or do not parse as dates are dropped.
    """
    unique = {}
    for entry in entries:
        if not isinstance(entry, str):
            continue
        parsed = parse_date(entry)
        if parsed is not None:
            unique[parsed] = format_date(parsed)

    return [(unique[day], day) for day in sorted(unique)]
