"""Dashboard metrics: counts plus the display labels the dashboard shows.

A goal counts as completed when its progress reaches 100; there is no
separate goal status.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from twelveweek.core.contracts.entities import Goal, Task, TaskStatus
from twelveweek.core.contracts.metrics import DashboardMetrics

_WHOLE = Decimal("1")
_TENTH = Decimal("0.1")


def _round_half_up(value: float, quantum: Decimal) -> Decimal:
    """Round the exact binary value of ``value``, ties away from zero.

    Matches the dashboard's number formatting: ``0.15`` is stored below one
    half, so 3 of 2000 tasks shows ``0.1``.
    """
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def aggregate(goals: Sequence[Goal], tasks: Sequence[Task]) -> DashboardMetrics:
    return DashboardMetrics(
        total_goals=len(goals),
        completed_goals=sum(1 for goal in goals if goal.progress_percentage == 100),
        total_tasks=len(tasks),
        completed_tasks=sum(1 for task in tasks if task.status == TaskStatus.COMPLETED),
    )


def goal_completion_percent(metrics: DashboardMetrics) -> int:
    """Completed goals as a whole percentage, rounded half up."""
    if metrics.total_goals == 0:
        return 0
    return int(_round_half_up(metrics.completed_goals / metrics.total_goals * 100, _WHOLE))


def goal_completion_label(metrics: DashboardMetrics) -> str:
    """``"40%"`` for 2 of 5 goals, ``"33%"`` for 1 of 3."""
    return f"{goal_completion_percent(metrics)}%"


def task_progress_label(metrics: DashboardMetrics) -> str:
    """``"50.0 %"`` for 10 of 20 tasks; ``"0.0%"`` when there are no tasks.

    The empty case carries no space before the sign; this matches the
    dashboard card exactly.
    """
    if metrics.total_tasks == 0:
        return "0.0%"
    return f"{_round_half_up(metrics.completed_tasks * 100 / metrics.total_tasks, _TENTH)} %"


def average_progress(goals: Sequence[Goal]) -> int:
    """Mean goal progress, rounded half up; 0 without goals."""
    if not goals:
        return 0
    total = sum(goal.progress_percentage for goal in goals)
    return int((Decimal(total) / Decimal(len(goals))).quantize(_WHOLE, rounding=ROUND_HALF_UP))
