"""
Balance projection engine.

Given current PTO and sick balances, per-hour accrual rates and a set of
future vacation days, project the running balances as of each day.

Rules, applied to each vacation day in chronological order
----------------------------------------------------------
1. Accrue 8 hours per workday since the previous step (weekends and
   holidays excluded, the vacation day itself excluded).
2. Clamp PTO and sick to their ceilings. No floor is applied here.
3. Take one 8-hour vacation day from PTO while PTO stays at or above the
   floor; otherwise drain PTO to the floor and charge the remainder to sick.
4. Record the balances, then resume accrual the day after the vacation day.

The sick charge in step 3 is ``8 - (pto - floor)`` even when PTO is already
below the floor, in which case sick is charged more than 8 hours. Sick has
no floor at all.

The engine is a pure function of its inputs: callers recompute from scratch
whenever any input changes.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from pto_projector.config import ProjectionPolicy
from pto_projector.dates import format_date
from pto_projector.holidays import HolidayCalendar, holiday_calendar
from pto_projector.observability import trace_span
from pto_projector.selection import realize_target_dates
from pto_projector.workdays import count_workdays

logger = logging.getLogger(__name__)

DEFAULT_POLICY = ProjectionPolicy()


class BalanceStatus(Enum):
    """Display classification of a projected balance."""

    OK = "ok"  # Zero or positive
    NEGATIVE = "negative"  # Borrowed, within the floor
    BELOW_FLOOR = "below_floor"  # Past the floor


@dataclass(frozen=True)
class BalanceSnapshot:
    """Balances as of a vacation day, after that day's accrual and deduction."""

    date: date
    pto: float
    sick: float

    @property
    def key(self) -> str:
        return format_date(self.date)

    def to_dict(self) -> dict:
        return {
            "date": self.key,
            "pto_balance": self.pto,
            "sick_balance": self.sick,
            "pto_display": f"{self.pto:.2f}",
            "sick_display": f"{self.sick:.2f}",
        }


def parse_amount(value) -> float | None:
    """Parse a balance or rate entered as text. Returns None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        # float() also reads digit separators ("1_000"), which a form field should not
        if "_" in value:
            return None
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def balance_status(value: float, floor: float) -> BalanceStatus:
    if value < floor:
        return BalanceStatus.BELOW_FLOOR
    if value < 0:
        return BalanceStatus.NEGATIVE
    return BalanceStatus.OK


def deduct_vacation_day(
    pto: float, sick: float, policy: ProjectionPolicy = DEFAULT_POLICY
) -> tuple[float, float]:
    """Charge one vacation day, PTO first with the remainder spilling into sick."""
    hours = policy.hours_per_day

    if pto - hours >= policy.pto_floor:
        return pto - hours, sick

    pto_available = pto - policy.pto_floor
    if pto_available > 0:
        pto -= pto_available

    sick_needed = hours - pto_available
    return pto, sick - sick_needed


def project_balances(
    current_pto,
    current_sick,
    pto_rate,
    sick_rate,
    target_dates: Iterable[str],
    today: date,
    holidays: HolidayCalendar = holiday_calendar,
    policy: ProjectionPolicy = DEFAULT_POLICY,
) -> list[BalanceSnapshot]:
    """
    Project PTO and sick balances for each target date.

    Args:
        current_pto: Current PTO balance in hours (text or number)
        current_sick: Current sick balance in hours (text or number)
        pto_rate: PTO hours accrued per hour worked (text or number)
        sick_rate: Sick hours accrued per hour worked (text or number)
        target_dates: YYYY-MM-DD vacation days, any order, duplicates allowed
        today: Day accrual starts from (time of day is ignored)
        holidays: Days that accrue nothing
        policy: Ceilings, floor and day length

    Returns:
        One snapshot per valid target date, in chronological order. Empty if
        any of the four numbers fails to parse. Unparseable dates are skipped.
    """
    amounts = [parse_amount(v) for v in (current_pto, current_sick, pto_rate, sick_rate)]
    if any(amount is None for amount in amounts):
        logger.warning(
            "Projection skipped: balances and rates must be numbers "
            f"(pto={current_pto!r}, sick={current_sick!r}, "
            f"pto_rate={pto_rate!r}, sick_rate={sick_rate!r})"
        )
        return []

    running_pto, running_sick, pto_rate, sick_rate = amounts

    if isinstance(today, datetime):
        today = today.date()

    target_dates = list(target_dates)
    schedule = realize_target_dates(target_dates)
    if len(schedule) < len(target_dates):
        logger.debug(f"Skipped {len(target_dates) - len(schedule)} invalid or duplicate dates")

    results = []
    last_processed = today

    with trace_span("project_balances", dates=len(schedule), today=format_date(today)):
        for _, day in schedule:
            workdays = count_workdays(last_processed, day, holidays)
            hours_worked = workdays * policy.hours_per_day

            running_pto += hours_worked * pto_rate
            running_sick += hours_worked * sick_rate

            running_pto = min(running_pto, policy.max_pto)
            running_sick = min(running_sick, policy.max_sick)

            running_pto, running_sick = deduct_vacation_day(running_pto, running_sick, policy)

            results.append(BalanceSnapshot(date=day, pto=running_pto, sick=running_sick))
            last_processed = day + timedelta(days=1)

    logger.info(f"Projected {len(results)} vacation days from {format_date(today)}")
    return results


def as_mapping(snapshots: Iterable[BalanceSnapshot]) -> dict[str, BalanceSnapshot]:
    """Index snapshots by their YYYY-MM-DD key."""
    return {snapshot.key: snapshot for snapshot in snapshots}
