"""Metrics command formatting."""

from __future__ import annotations

import argparse

from twelveweek.cli.common import plural, resolve_inputs
from twelveweek.core.calendar.view import describe_plan
from twelveweek.core.contracts.calendar import PlanView
from twelveweek.core.contracts.metrics import DashboardMetrics
from twelveweek.core.contracts.snapshot import SnapshotOptions
from twelveweek.core.metrics import aggregate, average_progress, goal_completion_label, task_progress_label
from twelveweek.core.snapshot import select_rows, target_week


def format_metrics_summary(
    view: PlanView,
    metrics: DashboardMetrics,
    *,
    average: int,
    week: int | None,
) -> str:
    current = f"week {view.current_week} of 12" if view.current_week is not None else "outside plan"
    lines = [
        "",
        f"twelveweek - {view.name}",
        "",
        f"  Plan ID:   {view.plan_id}",
        f"  Status:    {view.display_status}{' (overdue)' if view.is_overdue else ''}"
        f"{' (read-only)' if view.is_read_only else ''}",
        f"  Dates:     {view.start_date.isoformat()} .. {view.end_date.isoformat()}",
        f"  Today:     {current}",
        "",
        f"  Goals:     {metrics.completed_goals}/{plural(metrics.total_goals, 'goal')} completed"
        f" ({goal_completion_label(metrics)}), average progress {average}%",
        f"  Tasks:     {metrics.completed_tasks}/{plural(metrics.total_tasks, 'task')} completed"
        f" ({task_progress_label(metrics)})",
        f"  Scope:     {f'week {week}' if week is not None else 'all weeks'}",
        "",
    ]
    return "\n".join(lines)


def run_metrics(args: argparse.Namespace) -> int:
    inputs = resolve_inputs(args)
    options = SnapshotOptions(week_view=args.week_view, status_view=args.status_view, week_number=args.week)
    selected = select_rows(inputs.snapshot, options, inputs.today)
    metrics = aggregate(selected.goals, selected.tasks)

    print(
        format_metrics_summary(
            describe_plan(inputs.snapshot.plan, inputs.today),
            metrics,
            average=average_progress(selected.goals),
            week=target_week(inputs.snapshot, options, inputs.today),
        )
    )
    return 0


__all__ = ["format_metrics_summary", "run_metrics"]
