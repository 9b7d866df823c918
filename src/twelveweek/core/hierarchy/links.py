"""Navigation URLs for hierarchy nodes.

Each URL depends only on the node's type and ids, never on session state.
"""

from __future__ import annotations


def plan_link(plan_id: str, *, base: str = "") -> str:
    return f"{base}/plans/{plan_id}/dashboard"


def goals_link(plan_id: str, *, base: str = "") -> str:
    return f"{base}/plans/{plan_id}/goals"


def week_link(plan_id: str, week: int, *, base: str = "") -> str:
    return f"{base}/plans/{plan_id}/week/{week}"


def day_link(plan_id: str, week: int, day: int, *, base: str = "") -> str:
    return f"{base}/plans/{plan_id}/week/{week}/day/{day}"


def task_link(plan_id: str, week: int | None, due_day: int | None, *, base: str = "") -> str:
    """Day view when the task is pinned to a day, else its week, else the dashboard."""
    if week is None:
        return plan_link(plan_id, base=base)
    if due_day is None:
        return week_link(plan_id, week, base=base)
    return day_link(plan_id, week, due_day, base=base)
