"""Core contracts-domain exports."""

from twelveweek.core.contracts.calendar import PlanCoordinate, PlanDateRange, PlanView
from twelveweek.core.contracts.config import TwelveWeekConfig
from twelveweek.core.contracts.entities import (
    DAYS_PER_WEEK,
    PLAN_DAYS,
    PLAN_WEEKS,
    DisabledAction,
    Goal,
    GoalCategory,
    Milestone,
    Plan,
    PlanStatus,
    Task,
    TaskPriority,
    TaskStatus,
    TaskType,
    WeeklyGoal,
)
from twelveweek.core.contracts.exceptions import ConfigError, SnapshotLoadError, TwelveWeekError
from twelveweek.core.contracts.metrics import DashboardMetrics
from twelveweek.core.contracts.snapshot import DashboardSnapshot, SnapshotOptions
from twelveweek.core.contracts.tree import HierarchyTreeNode, NodeMetadata, NodeType, TreeFilters

__all__ = [
    "DAYS_PER_WEEK",
    "PLAN_DAYS",
    "PLAN_WEEKS",
    "ConfigError",
    "DashboardMetrics",
    "DashboardSnapshot",
    "DisabledAction",
    "Goal",
    "GoalCategory",
    "HierarchyTreeNode",
    "Milestone",
    "NodeMetadata",
    "NodeType",
    "Plan",
    "PlanCoordinate",
    "PlanDateRange",
    "PlanStatus",
    "PlanView",
    "SnapshotLoadError",
    "SnapshotOptions",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TaskType",
    "TreeFilters",
    "TwelveWeekConfig",
    "TwelveWeekError",
    "WeeklyGoal",
]
