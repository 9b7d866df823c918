"""Snapshot contracts: the flat rows of one plan and row-selection options."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from twelveweek.core.contracts.entities import PLAN_WEEKS, Goal, Milestone, Plan, Task, WeeklyGoal


class DashboardSnapshot(BaseModel):
    """Everything the engine needs for one plan, as fetched by the service layer."""

    plan: Plan
    goals: tuple[Goal, ...] = ()
    milestones: tuple[Milestone, ...] = ()
    weekly_goals: tuple[WeeklyGoal, ...] = ()
    tasks: tuple[Task, ...] = ()

    model_config = {"frozen": True, "extra": "ignore"}


class SnapshotOptions(BaseModel):
    week_view: Literal["current", "all"] = "current"
    status_view: Literal["active", "all"] = "all"
    week_number: int | None = Field(default=None, ge=1, le=PLAN_WEEKS)

    model_config = {"frozen": True}
