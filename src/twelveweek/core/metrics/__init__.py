"""Dashboard metrics aggregation."""

from twelveweek.core.metrics.aggregator import (
    aggregate,
    average_progress,
    goal_completion_label,
    goal_completion_percent,
    task_progress_label,
)

__all__ = [
    "aggregate",
    "average_progress",
    "goal_completion_label",
    "goal_completion_percent",
    "task_progress_label",
]
