"""Calendar mapping for 12-week plans."""

from twelveweek.core.calendar.mapper import (
    align_to_monday,
    as_date,
    current_day,
    current_week,
    day_number_from_date,
    monday_offset,
    parse_date_string,
    plan_date,
    plan_date_range,
)
from twelveweek.core.calendar.view import (
    can_change_goal_progress,
    can_change_task_status,
    day_name,
    describe_plan,
    disabled_tooltip,
    is_plan_read_only,
    is_plan_ready,
    next_day,
    plan_end_date,
    previous_day,
    week_date_range,
)

__all__ = [
    "align_to_monday",
    "as_date",
    "can_change_goal_progress",
    "can_change_task_status",
    "current_day",
    "current_week",
    "day_name",
    "day_number_from_date",
    "describe_plan",
    "disabled_tooltip",
    "is_plan_read_only",
    "is_plan_ready",
    "monday_offset",
    "next_day",
    "parse_date_string",
    "plan_date",
    "plan_date_range",
    "plan_end_date",
    "previous_day",
    "week_date_range",
]
