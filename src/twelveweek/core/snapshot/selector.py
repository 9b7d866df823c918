"""Row selection of the dashboard endpoint: current week only, active rows only."""

from __future__ import annotations

from datetime import date

from twelveweek.core.calendar.mapper import current_week
from twelveweek.core.contracts.entities import TaskStatus
from twelveweek.core.contracts.snapshot import DashboardSnapshot, SnapshotOptions

_ACTIVE_TASK_STATUSES = frozenset({TaskStatus.TODO, TaskStatus.IN_PROGRESS})


def target_week(snapshot: DashboardSnapshot, options: SnapshotOptions, today: date) -> int | None:
    """Week the selection narrows to, or ``None`` for the all-weeks view."""
    if options.week_view != "current":
        return None
    if options.week_number is not None:
        return options.week_number
    return current_week(snapshot.plan, today)


def select_rows(snapshot: DashboardSnapshot, options: SnapshotOptions, today: date) -> DashboardSnapshot:
    """Return a new snapshot narrowed by ``options``.

    Goals are never narrowed. ``status_view="active"`` drops completed
    milestones and keeps only tasks that are still open.
    """
    week = target_week(snapshot, options, today)
    milestones = snapshot.milestones
    weekly_goals = snapshot.weekly_goals
    tasks = snapshot.tasks

    if week is not None:
        weekly_goals = tuple(weekly_goal for weekly_goal in weekly_goals if weekly_goal.week_number == week)
        tasks = tuple(task for task in tasks if task.week_number == week)
    if options.status_view == "active":
        milestones = tuple(milestone for milestone in milestones if not milestone.is_completed)
        tasks = tuple(task for task in tasks if task.status in _ACTIVE_TASK_STATUSES)

    return snapshot.model_copy(update={"milestones": milestones, "weekly_goals": weekly_goals, "tasks": tasks})
