"""Shared test fixtures for twelveweek tests."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from twelveweek.core.contracts.entities import Goal, Milestone, Plan, Task, WeeklyGoal
from twelveweek.core.contracts.snapshot import DashboardSnapshot

PLAN_START = date(2025, 1, 6)  # a Monday


@pytest.fixture
def plan() -> Plan:
    return Plan(id="plan-1", name="Q1 Focus", start_date=PLAN_START, status="active")


@pytest.fixture
def snapshot(plan: Plan) -> DashboardSnapshot:
    """One goal with a milestone, weekly goals in weeks 1 and 2, and a mix of tasks."""
    return DashboardSnapshot(
        plan=plan,
        goals=(
            Goal(id="g-2", plan_id="plan-1", title="Run a half marathon", progress_percentage=100, position=2),
            Goal(id="g-1", plan_id="plan-1", title="Ship the side project", progress_percentage=40, position=1),
        ),
        milestones=(
            Milestone(id="m-1", goal_id="g-1", title="Beta released", position=1),
            Milestone(id="m-2", goal_id="g-1", title="Landing page live", is_completed=True, position=2),
        ),
        weekly_goals=(
            WeeklyGoal(id="wg-1", plan_id="plan-1", week_number=1, goal_id="g-1", title="Set up CI", position=1),
            WeeklyGoal(id="wg-2", plan_id="plan-1", week_number=2, goal_id="g-1", title="Write docs", position=1),
            WeeklyGoal(id="wg-3", plan_id="plan-1", week_number=1, title="Inbox zero", position=1),
        ),
        tasks=(
            Task(id="t-1", plan_id="plan-1", weekly_goal_id="wg-1", title="Pick CI provider", priority="B",
                 week_number=1, due_day=1, position=1),
            Task(id="t-2", plan_id="plan-1", weekly_goal_id="wg-1", title="Add lint job", priority="A",
                 week_number=1, due_day=2, position=2, status="completed"),
            Task(id="t-3", plan_id="plan-1", weekly_goal_id="wg-2", title="Outline docs", week_number=2, position=1),
            Task(id="t-4", plan_id="plan-1", title="Book dentist", task_type="ad_hoc", week_number=1, due_day=3,
                 position=1),
            Task(id="t-5", plan_id="plan-1", title="Renew passport", task_type="ad_hoc", week_number=2, position=1),
        ),
    )


@pytest.fixture
def snapshot_payload(snapshot: DashboardSnapshot) -> dict[str, Any]:
    return snapshot.model_dump(mode="json")


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_payload: dict[str, Any]) -> Path:
    path = tmp_path / "dashboard.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return path
