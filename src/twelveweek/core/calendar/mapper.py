"""Calendar mapping between absolute dates and plan ``(week, day)`` coordinates.

Every computation is anchored to the Monday of the calendar week that holds
the plan's start date, whatever weekday the stored start date falls on.
Day offsets are taken from proleptic ordinals, so daylight-saving changes
never skew them.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from twelveweek.core.contracts.calendar import PlanCoordinate, PlanDateRange
from twelveweek.core.contracts.entities import DAYS_PER_WEEK, PLAN_DAYS, PLAN_WEEKS, Plan

_END_OF_DAY = time(23, 59, 59, 999000)


def as_date(value: date) -> date:
    """Reduce a ``datetime`` to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _sunday_first_weekday(value: date) -> int:
    """Weekday as 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


def monday_offset(value: date) -> int:
    """Return the signed number of days that moves ``value`` onto a Monday.

    Sunday rolls forward to the following Monday (+1); every other day rolls
    back to the Monday of its own week.
    """
    weekday = _sunday_first_weekday(as_date(value))
    if weekday == 0:
        return 1
    return 1 - weekday


def align_to_monday(value: date) -> date:
    day = as_date(value)
    return day + timedelta(days=monday_offset(day))


def plan_date(start_date: date, week: int, day: int) -> date:
    """Absolute date of plan ``week`` (1-12) and ``day`` (1-7, Monday=1).

    No bounds check: out-of-range coordinates give dates outside the plan span.
    """
    offset = (week - 1) * DAYS_PER_WEEK + (day - 1)
    return align_to_monday(start_date) + timedelta(days=offset)


def day_number_from_date(value: date, start_date: date) -> PlanCoordinate | None:
    """Inverse of :func:`plan_date`; ``None`` outside the 84-day span."""
    offset = as_date(value).toordinal() - align_to_monday(start_date).toordinal()
    if offset < 0 or offset >= PLAN_DAYS:
        return None
    return PlanCoordinate(week=offset // DAYS_PER_WEEK + 1, day=offset % DAYS_PER_WEEK + 1)


def current_week(plan: Plan, today: date) -> int:
    """Week of ``today`` within ``plan``, clamped to 1-12."""
    offset = align_to_monday(today).toordinal() - align_to_monday(plan.start_date).toordinal()
    week = offset // DAYS_PER_WEEK + 1
    return max(1, min(PLAN_WEEKS, week))


def current_day(today: date) -> int:
    """Weekday of ``today`` as 1=Monday .. 7=Sunday."""
    weekday = _sunday_first_weekday(as_date(today))
    return 7 if weekday == 0 else weekday


def plan_date_range(start_date: date) -> PlanDateRange:
    start = align_to_monday(start_date)
    last_day = start + timedelta(days=PLAN_DAYS - 1)
    return PlanDateRange(
        start=datetime.combine(start, time.min),
        end=datetime.combine(last_day, _END_OF_DAY),
    )


def parse_date_string(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If ``value`` is not an ISO calendar date.
    """
    text = value.strip()
    if len(text) != 10:
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(text)
