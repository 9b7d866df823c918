"""Derived plan facts used by plan lists and week/day headers."""

from __future__ import annotations

from datetime import date, timedelta

from twelveweek.core.calendar.mapper import align_to_monday, as_date, day_number_from_date, plan_date
from twelveweek.core.contracts.calendar import PlanCoordinate, PlanView
from twelveweek.core.contracts.entities import DAYS_PER_WEEK, PLAN_DAYS, PLAN_WEEKS, DisabledAction, Plan, PlanStatus

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_READY_TOOLTIPS = {
    DisabledAction.TASK_STATUS: "Task status changes are disabled until the plan is activated",
    DisabledAction.PROGRESS: "Progress updates are disabled until the plan is activated",
    DisabledAction.MILESTONE: "Milestone changes are disabled until the plan is activated",
    DisabledAction.REFLECTION: "Reflection editing is disabled until the plan is activated",
    DisabledAction.GENERAL: "This action is disabled until the plan is activated",
}


def plan_end_date(start_date: date) -> date:
    return align_to_monday(start_date) + timedelta(days=PLAN_DAYS - 1)


def is_plan_read_only(status: PlanStatus | str) -> bool:
    """Completed and archived plans accept no edits at all."""
    return status in (PlanStatus.COMPLETED, PlanStatus.ARCHIVED)


def is_plan_ready(status: PlanStatus | str) -> bool:
    return status == PlanStatus.READY


def can_change_task_status(status: PlanStatus | str) -> bool:
    return status == PlanStatus.ACTIVE


def can_change_goal_progress(status: PlanStatus | str) -> bool:
    return status == PlanStatus.ACTIVE


def disabled_tooltip(status: PlanStatus | str, action: DisabledAction | str = DisabledAction.GENERAL) -> str:
    """Explain why ``action`` is unavailable under ``status``; empty when it is allowed."""
    if status == PlanStatus.READY:
        return _READY_TOOLTIPS[DisabledAction(action)]
    if status == PlanStatus.COMPLETED:
        return "This plan is completed and can no longer be edited"
    if status == PlanStatus.ARCHIVED:
        return "This plan is archived and can no longer be edited"
    return ""


def day_name(day: int) -> str | None:
    """Full weekday name of plan ``day`` (1=Monday), ``None`` outside 1-7."""
    if not 1 <= day <= DAYS_PER_WEEK:
        return None
    return _DAY_NAMES[day - 1]


def describe_plan(plan: Plan, today: date) -> PlanView:
    """Summarise ``plan`` as seen on ``today``.

    Unlike :func:`~twelveweek.core.calendar.mapper.current_week`, the week is
    not clamped here: it is ``None`` whenever ``today`` falls outside the plan.
    """
    today = as_date(today)
    coordinate = day_number_from_date(today, plan.start_date)
    end_date = plan_end_date(plan.start_date)
    status = str(plan.status)
    return PlanView(
        plan_id=plan.id,
        name=plan.name,
        start_date=align_to_monday(plan.start_date),
        end_date=end_date,
        current_week=coordinate.week if coordinate is not None else None,
        is_overdue=today > end_date,
        display_status=status[:1].upper() + status[1:],
        is_read_only=is_plan_read_only(plan.status),
        is_ready=is_plan_ready(plan.status),
        can_change_task_status=can_change_task_status(plan.status),
        can_change_goal_progress=can_change_goal_progress(plan.status),
    )


def week_date_range(start_date: date, week: int) -> tuple[date, date]:
    """Monday and Sunday of plan ``week``."""
    return plan_date(start_date, week, 1), plan_date(start_date, week, DAYS_PER_WEEK)


def previous_day(coordinate: PlanCoordinate) -> PlanCoordinate | None:
    if coordinate.day > 1:
        return PlanCoordinate(week=coordinate.week, day=coordinate.day - 1)
    if coordinate.week > 1:
        return PlanCoordinate(week=coordinate.week - 1, day=DAYS_PER_WEEK)
    return None


def next_day(coordinate: PlanCoordinate) -> PlanCoordinate | None:
    if coordinate.day < DAYS_PER_WEEK:
        return PlanCoordinate(week=coordinate.week, day=coordinate.day + 1)
    if coordinate.week < PLAN_WEEKS:
        return PlanCoordinate(week=coordinate.week + 1, day=1)
    return None
