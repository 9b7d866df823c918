"""Dashboard metrics contract."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DashboardMetrics(BaseModel):
    total_goals: int = Field(default=0, ge=0)
    completed_goals: int = Field(default=0, ge=0)
    total_tasks: int = Field(default=0, ge=0)
    completed_tasks: int = Field(default=0, ge=0)

    model_config = {"frozen": True}
