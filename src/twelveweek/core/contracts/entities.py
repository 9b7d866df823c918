"""Input row contracts: plans, goals, milestones, weekly goals and tasks.

These mirror the rows handed over by the persistence layer. Rows exported by
the storage backend name the goal reference ``long_term_goal_id``; it is
accepted as an alias of ``goal_id``.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

PLAN_WEEKS = 12
DAYS_PER_WEEK = 7
PLAN_DAYS = PLAN_WEEKS * DAYS_PER_WEEK


def _goal_ref() -> Any:
    return Field(default=None, validation_alias=AliasChoices("goal_id", "long_term_goal_id"))


class PlanStatus(StrEnum):
    READY = "ready"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class DisabledAction(StrEnum):
    """Kinds of edits a plan status can block."""

    TASK_STATUS = "task_status"
    PROGRESS = "progress"
    MILESTONE = "milestone"
    REFLECTION = "reflection"
    GENERAL = "general"


class GoalCategory(StrEnum):
    WORK = "work"
    FINANCE = "finance"
    HOBBY = "hobby"
    RELATIONSHIPS = "relationships"
    HEALTH = "health"
    DEVELOPMENT = "development"


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"


class TaskPriority(StrEnum):
    A = "A"
    B = "B"
    C = "C"


class TaskType(StrEnum):
    WEEKLY_MAIN = "weekly_main"
    WEEKLY_SUB = "weekly_sub"
    AD_HOC = "ad_hoc"


class _Row(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Plan(_Row):
    """A single 12-week planning cycle."""

    id: str
    name: str
    start_date: date
    status: PlanStatus = PlanStatus.ACTIVE


class Goal(_Row):
    """Long-term goal of a plan."""

    id: str
    plan_id: str
    title: str
    category: GoalCategory | None = None
    progress_percentage: int = Field(default=0, ge=0, le=100)
    position: int = 0

    @property
    def is_completed(self) -> bool:
        return self.progress_percentage == 100


class Milestone(_Row):
    id: str
    goal_id: str = Field(validation_alias=AliasChoices("goal_id", "long_term_goal_id"))
    title: str
    is_completed: bool = False
    due_date: date | None = None
    position: int = 0


class WeeklyGoal(_Row):
    id: str
    plan_id: str
    week_number: int = Field(ge=1, le=PLAN_WEEKS)
    goal_id: str | None = _goal_ref()
    milestone_id: str | None = None
    title: str
    position: int = 0


class Task(_Row):
    id: str
    plan_id: str
    title: str
    weekly_goal_id: str | None = None
    goal_id: str | None = _goal_ref()
    milestone_id: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.C
    task_type: TaskType = TaskType.WEEKLY_SUB
    week_number: int | None = Field(default=None, ge=1, le=PLAN_WEEKS)
    due_day: int | None = Field(default=None, ge=1, le=DAYS_PER_WEEK)
    position: int = 0

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def is_unlinked(self) -> bool:
        """True when the task belongs to no weekly goal, goal or milestone."""
        return not (self.weekly_goal_id or self.goal_id or self.milestone_id)
