"""Calendar contracts: plan coordinates and date spans."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from twelveweek.core.contracts.entities import DAYS_PER_WEEK, PLAN_WEEKS


class PlanCoordinate(BaseModel):
    """Position of a day inside a plan: week 1-12, day 1-7 (Monday=1)."""

    week: int = Field(ge=1, le=PLAN_WEEKS)
    day: int = Field(ge=1, le=DAYS_PER_WEEK)

    model_config = {"frozen": True}


class PlanDateRange(BaseModel):
    """Inclusive span of a plan: Monday midnight to the last instant of day 84."""

    start: datetime
    end: datetime

    model_config = {"frozen": True}


class PlanView(BaseModel):
    """Derived plan facts for list and header displays."""

    plan_id: str
    name: str
    start_date: date
    end_date: date
    current_week: int | None = None
    is_overdue: bool = False
    display_status: str
    is_read_only: bool = False
    is_ready: bool = False
    can_change_task_status: bool = True
    can_change_goal_progress: bool = True

    model_config = {"frozen": True}
