"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class TwelveWeekConfig(BaseModel):
    snapshot_path: Path | None = None
    plan_id: str | None = None
    show_completed: bool = False
    show_all_weeks: bool = False
    link_base: str = ""

    model_config = {"frozen": True, "extra": "forbid"}
