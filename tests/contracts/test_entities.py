from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from twelveweek.core.contracts.entities import (
    Goal,
    Milestone,
    Plan,
    PlanStatus,
    Task,
    TaskPriority,
    TaskStatus,
    TaskType,
    WeeklyGoal,
)


def test_enum_values() -> None:
    assert TaskStatus.IN_PROGRESS.value == "in_progress"
    assert TaskPriority.A.value == "A"
    assert TaskType.AD_HOC.value == "ad_hoc"
    assert PlanStatus.READY.value == "ready"


def test_task_defaults() -> None:
    task = Task(id="t", plan_id="p", title="Task")

    assert task.status == TaskStatus.TODO
    assert task.priority == TaskPriority.C
    assert task.task_type == TaskType.WEEKLY_SUB
    assert task.week_number is None
    assert task.is_unlinked is True
    assert task.is_completed is False


def test_long_term_goal_id_is_accepted_as_goal_id() -> None:
    task = Task.model_validate({"id": "t", "plan_id": "p", "title": "T", "long_term_goal_id": "g"})
    weekly_goal = WeeklyGoal.model_validate(
        {"id": "w", "plan_id": "p", "title": "W", "week_number": 2, "long_term_goal_id": "g"}
    )
    milestone = Milestone.model_validate({"id": "m", "title": "M", "long_term_goal_id": "g"})

    assert task.goal_id == "g"
    assert task.is_unlinked is False
    assert weekly_goal.goal_id == "g"
    assert milestone.goal_id == "g"


def test_unknown_fields_are_ignored() -> None:
    plan = Plan.model_validate(
        {"id": "p", "name": "Plan", "start_date": "2025-01-06", "user_id": "u", "created_at": "2025-01-01T00:00:00Z"}
    )

    assert plan.start_date == date(2025, 1, 6)
    assert plan.status == PlanStatus.ACTIVE


@pytest.mark.parametrize("week", [0, 13])
def test_weekly_goal_week_must_be_inside_plan(week: int) -> None:
    with pytest.raises(ValidationError):
        WeeklyGoal(id="w", plan_id="p", week_number=week, title="W")


@pytest.mark.parametrize(("field", "value"), [("week_number", 13), ("due_day", 0), ("due_day", 8)])
def test_task_bounds(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        Task.model_validate({"id": "t", "plan_id": "p", "title": "T", field: value})


@pytest.mark.parametrize("progress", [-1, 101])
def test_goal_progress_bounds(progress: int) -> None:
    with pytest.raises(ValidationError):
        Goal(id="g", plan_id="p", title="G", progress_percentage=progress)


def test_goal_completion_follows_progress() -> None:
    assert Goal(id="g", plan_id="p", title="G", progress_percentage=100).is_completed is True
    assert Goal(id="g", plan_id="p", title="G", progress_percentage=99).is_completed is False


def test_rows_are_frozen() -> None:
    task = Task(id="t", plan_id="p", title="T")

    with pytest.raises(ValidationError):
        task.title = "changed"  # type: ignore[misc]


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Task(id="t", plan_id="p", title="T", status="blocked")
