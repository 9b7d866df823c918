"""Public API surface for twelveweek."""

__version__ = "0.3.0"

from twelveweek.core.calendar import (
    align_to_monday,
    current_day,
    current_week,
    day_name,
    day_number_from_date,
    describe_plan,
    disabled_tooltip,
    is_plan_read_only,
    monday_offset,
    next_day,
    parse_date_string,
    plan_date,
    plan_date_range,
    previous_day,
    week_date_range,
)
from twelveweek.core.config import load_config
from twelveweek.core.contracts import (
    ConfigError,
    DashboardMetrics,
    DashboardSnapshot,
    DisabledAction,
    Goal,
    HierarchyTreeNode,
    Milestone,
    NodeType,
    Plan,
    PlanCoordinate,
    PlanDateRange,
    PlanView,
    SnapshotLoadError,
    SnapshotOptions,
    Task,
    TreeFilters,
    TwelveWeekConfig,
    TwelveWeekError,
    WeeklyGoal,
)
from twelveweek.core.hierarchy import (
    EntityIndex,
    HierarchyTreeBuilder,
    build_tree,
    decode_position,
    encode_position,
    normalize_positions,
    should_normalize_positions,
)
from twelveweek.core.metrics import aggregate, average_progress, goal_completion_label, task_progress_label
from twelveweek.core.snapshot import load_snapshot, parse_snapshot, select_rows

__all__ = [
    "ConfigError",
    "DashboardMetrics",
    "DashboardSnapshot",
    "DisabledAction",
    "EntityIndex",
    "Goal",
    "HierarchyTreeBuilder",
    "HierarchyTreeNode",
    "Milestone",
    "NodeType",
    "Plan",
    "PlanCoordinate",
    "PlanDateRange",
    "PlanView",
    "SnapshotLoadError",
    "SnapshotOptions",
    "Task",
    "TreeFilters",
    "TwelveWeekConfig",
    "TwelveWeekError",
    "WeeklyGoal",
    "__version__",
    "aggregate",
    "align_to_monday",
    "average_progress",
    "build_tree",
    "current_day",
    "current_week",
    "day_name",
    "day_number_from_date",
    "decode_position",
    "describe_plan",
    "disabled_tooltip",
    "encode_position",
    "goal_completion_label",
    "is_plan_read_only",
    "load_config",
    "load_snapshot",
    "monday_offset",
    "next_day",
    "normalize_positions",
    "parse_date_string",
    "parse_snapshot",
    "plan_date",
    "plan_date_range",
    "previous_day",
    "select_rows",
    "should_normalize_positions",
    "task_progress_label",
    "week_date_range",
]
