from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from twelveweek.core.calendar.mapper import (
    align_to_monday,
    current_day,
    current_week,
    day_number_from_date,
    monday_offset,
    parse_date_string,
    plan_date,
    plan_date_range,
)
from twelveweek.core.contracts.calendar import PlanCoordinate
from twelveweek.core.contracts.entities import Plan

MONDAY = date(2025, 1, 6)
WEEK_OF_DATES = [MONDAY + timedelta(days=offset) for offset in range(7)]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2025, 1, 6), 0),  # Monday
        (date(2025, 1, 7), -1),
        (date(2025, 1, 10), -4),  # Friday
        (date(2025, 1, 11), -5),  # Saturday
        (date(2025, 1, 12), 1),  # Sunday rolls forward
    ],
)
def test_monday_offset(value: date, expected: int) -> None:
    assert monday_offset(value) == expected


@pytest.mark.parametrize("value", [date(2024, 2, 25) + timedelta(days=n) for n in range(21)])
def test_monday_offset_always_lands_on_monday(value: date) -> None:
    assert (value + timedelta(days=monday_offset(value))).weekday() == 0


def test_monday_offset_accepts_datetime() -> None:
    assert monday_offset(datetime(2025, 1, 12, 23, 30)) == 1
    assert align_to_monday(datetime(2025, 1, 9, 8, 0)) == MONDAY


def test_plan_date_first_and_last_day() -> None:
    assert plan_date(MONDAY, 1, 1) == MONDAY
    assert plan_date(MONDAY, 12, 7) == date(2025, 3, 30)


@pytest.mark.parametrize("start", WEEK_OF_DATES)
def test_plan_date_weekday_depends_only_on_day(start: date) -> None:
    for day in range(1, 8):
        assert plan_date(start, 3, day).weekday() == day - 1


def test_plan_date_aligns_mid_week_start_back_to_monday() -> None:
    assert plan_date(date(2025, 1, 9), 1, 1) == MONDAY


def test_plan_date_sunday_start_moves_to_next_monday() -> None:
    assert plan_date(date(2025, 1, 5), 1, 1) == MONDAY


def test_plan_date_does_not_bounds_check() -> None:
    assert plan_date(MONDAY, 13, 1) == MONDAY + timedelta(days=84)
    assert plan_date(MONDAY, 1, 0) == MONDAY - timedelta(days=1)


@pytest.mark.parametrize("start", [MONDAY, date(2025, 1, 9), date(2025, 3, 2), date(2024, 10, 20)])
def test_day_number_round_trips_every_coordinate(start: date) -> None:
    for week in range(1, 13):
        for day in range(1, 8):
            assert day_number_from_date(plan_date(start, week, day), start) == PlanCoordinate(week=week, day=day)


def test_day_number_from_date_outside_span_is_none() -> None:
    assert day_number_from_date(MONDAY - timedelta(days=1), MONDAY) is None
    assert day_number_from_date(MONDAY + timedelta(days=84), MONDAY) is None
    assert day_number_from_date(MONDAY + timedelta(days=83), MONDAY) == PlanCoordinate(week=12, day=7)


def test_day_number_from_date_before_aligned_start_of_mid_week_plan() -> None:
    start = date(2025, 1, 9)
    assert day_number_from_date(date(2025, 1, 6), start) == PlanCoordinate(week=1, day=1)
    assert day_number_from_date(date(2025, 1, 5), start) is None


def test_day_number_from_date_across_daylight_saving_change() -> None:
    start = date(2025, 3, 3)
    assert day_number_from_date(date(2025, 3, 31), start) == PlanCoordinate(week=5, day=1)


def test_current_week_counts_from_aligned_start() -> None:
    plan = Plan(id="p", name="P", start_date=MONDAY)
    assert current_week(plan, MONDAY) == 1
    assert current_week(plan, date(2025, 1, 15)) == 2
    assert current_week(plan, date(2025, 3, 28)) == 12


def test_current_week_on_sunday_rolls_into_next_week() -> None:
    plan = Plan(id="p", name="P", start_date=MONDAY)
    sunday = date(2025, 1, 12)

    assert current_week(plan, sunday) == 2
    assert current_day(sunday) == 7
    assert day_number_from_date(sunday, MONDAY) == PlanCoordinate(week=1, day=7)


@pytest.mark.parametrize("today", [date(2020, 1, 1), date(2024, 12, 30), date(2025, 4, 1), date(2030, 6, 1)])
def test_current_week_is_clamped(today: date) -> None:
    plan = Plan(id="p", name="P", start_date=MONDAY)
    assert 1 <= current_week(plan, today) <= 12


def test_current_week_clamps_to_edges() -> None:
    plan = Plan(id="p", name="P", start_date=MONDAY)
    assert current_week(plan, date(2024, 6, 1)) == 1
    assert current_week(plan, date(2026, 6, 1)) == 12


@pytest.mark.parametrize(("offset", "expected"), list(zip(range(7), range(1, 8), strict=True)))
def test_current_day_monday_is_one(offset: int, expected: int) -> None:
    assert current_day(MONDAY + timedelta(days=offset)) == expected


def test_plan_date_range_spans_83_days_to_end_of_day() -> None:
    span = plan_date_range(date(2025, 1, 8))

    assert span.start == datetime(2025, 1, 6, 0, 0, 0)
    assert span.end == datetime(2025, 3, 30, 23, 59, 59, 999000)
    assert span.end - span.start == timedelta(days=83, hours=23, minutes=59, seconds=59, milliseconds=999)


def test_parse_date_string() -> None:
    assert parse_date_string(" 2025-01-06 ") == MONDAY


@pytest.mark.parametrize("value", ["2025-1-6", "06/01/2025", "2025-02-30", "", "20250106"])
def test_parse_date_string_rejects_malformed(value: str) -> None:
    with pytest.raises(ValueError):
        parse_date_string(value)
