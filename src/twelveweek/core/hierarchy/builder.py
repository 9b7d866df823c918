"""Fold a plan's flat rows into the ordered, filtered hierarchy forest.

Forest layout::

    goal                      (indent 0, ordered by position)
      milestone               (ordered by position)
        weekly goal           (ordered by week, then position)
          task                (ordered by priority, then position)
        task                  (milestone task without weekly goal)
      weekly goal             (goal weekly goal without milestone)
        task
      task                    (goal task without weekly goal or milestone)
    weekly goal               (plan-level: no goal, no milestone)
      task
    Other Tasks               (one bucket per displayed week)
      task                    (unlinked tasks)

Rows whose parent reference resolves to nothing are left out silently; a
task with a dangling ``weekly_goal_id`` is not moved to "Other Tasks".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from twelveweek.core.calendar.mapper import current_week, plan_date
from twelveweek.core.contracts.entities import Goal, Milestone, Task, TaskPriority, TaskStatus, WeeklyGoal
from twelveweek.core.contracts.snapshot import DashboardSnapshot
from twelveweek.core.contracts.tree import HierarchyTreeNode, NodeMetadata, NodeType, TreeFilters
from twelveweek.core.hierarchy import links
from twelveweek.core.hierarchy.normalizer import EntityIndex
from twelveweek.core.hierarchy.positions import sort_by_position

logger = logging.getLogger(__name__)

OTHER_TASKS_TITLE = "Other Tasks"
_PRIORITY_RANK = {TaskPriority.A: 0, TaskPriority.B: 1, TaskPriority.C: 2}
_CLOSED_TASK_STATUSES = frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED})
_DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def order_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Priority A before B before C, then position; ties keep input order."""
    return sorted(tasks, key=lambda task: (_PRIORITY_RANK[task.priority], task.position))


def order_weekly_goals(weekly_goals: Iterable[WeeklyGoal]) -> list[WeeklyGoal]:
    return sorted(weekly_goals, key=lambda weekly_goal: (weekly_goal.week_number, weekly_goal.position))


def reindent(nodes: Sequence[HierarchyTreeNode], depth: int = 0) -> list[HierarchyTreeNode]:
    """Copy ``nodes`` with ``indent`` set to their depth below ``depth``."""
    return [
        node.model_copy(update={"indent": depth, "children": tuple(reindent(node.children, depth + 1))})
        for node in nodes
    ]


class HierarchyTreeBuilder:
    """Builds the hierarchy forest of one snapshot for one selected week.

    Args:
        snapshot: Flat rows of a single plan.
        filters: Completion and week visibility switches.
        selected_week: Week shown when ``filters.show_all_weeks`` is off.
        link_base: Prefix prepended to every navigation URL.
    """

    def __init__(
        self,
        snapshot: DashboardSnapshot,
        filters: TreeFilters,
        selected_week: int,
        *,
        link_base: str = "",
    ) -> None:
        self._snapshot = snapshot
        self._filters = filters
        self._selected_week = selected_week
        self._link_base = link_base
        self._plan = snapshot.plan
        self._index = EntityIndex.build(snapshot)

    def build(self) -> list[HierarchyTreeNode]:
        forest: list[HierarchyTreeNode] = []
        for goal in self._index.sorted_goals():
            forest.append(self._goal_node(goal))
        for weekly_goal in self._weekly_goals_in_scope(self._index.plan_weekly_goals):
            forest.append(self._weekly_goal_node(weekly_goal, depth=0))
        forest.extend(self._other_tasks_nodes())

        dangling = self._index.dangling_ids(self._snapshot)
        if dangling:
            logger.debug(
                "plan %s: skipped %d rows with dangling references: %s", self._plan.id, len(dangling), dangling
            )
        return forest

    def build_with_plan_root(self) -> list[HierarchyTreeNode]:
        """Same forest wrapped under a single ``plan`` node."""
        root = HierarchyTreeNode(
            id=self._plan.id,
            type=NodeType.PLAN,
            title=self._plan.name,
            status=str(self._plan.status),
            is_completed=self._plan.status == "completed",
            metadata=self._metadata(self._plan.id, links.plan_link(self._plan.id, base=self._link_base)),
            children=tuple(self.build()),
        )
        return reindent([root])

    # -- visibility ---------------------------------------------------------

    def _in_scope(self, week: int | None) -> bool:
        if self._filters.show_all_weeks:
            return True
        return week == self._selected_week

    def _task_visible(self, task: Task, week: int | None) -> bool:
        if not self._in_scope(week):
            return False
        if not self._filters.show_completed and task.status in _CLOSED_TASK_STATUSES:
            return False
        return True

    def _weekly_goals_in_scope(self, weekly_goals: Iterable[WeeklyGoal]) -> list[WeeklyGoal]:
        return order_weekly_goals(wg for wg in weekly_goals if self._in_scope(wg.week_number))

    # -- node factories -----------------------------------------------------

    def _metadata(self, node_id: str, link_url: str, **extra: str | None) -> NodeMetadata:
        return NodeMetadata(original_id=node_id, link_url=link_url, **extra)

    def _goal_node(self, goal: Goal) -> HierarchyTreeNode:
        children: list[HierarchyTreeNode] = []
        for milestone in sort_by_position(self._index.milestones_by_goal.get(goal.id, ())):
            node = self._milestone_node(milestone, depth=1)
            if node is not None:
                children.append(node)
        for weekly_goal in self._weekly_goals_in_scope(self._index.weekly_goals_by_goal.get(goal.id, ())):
            children.append(self._weekly_goal_node(weekly_goal, depth=1))
        children.extend(self._task_nodes(self._index.tasks_by_goal.get(goal.id, ()), depth=1))

        return HierarchyTreeNode(
            id=goal.id,
            type=NodeType.GOAL,
            title=goal.title,
            indent=0,
            status="completed" if goal.is_completed else None,
            is_completed=goal.is_completed,
            progress=goal.progress_percentage,
            metadata=self._metadata(goal.id, links.goals_link(self._plan.id, base=self._link_base)),
            children=tuple(children),
        )

    def _milestone_node(self, milestone: Milestone, *, depth: int) -> HierarchyTreeNode | None:
        children: list[HierarchyTreeNode] = []
        for weekly_goal in self._weekly_goals_in_scope(self._index.weekly_goals_by_milestone.get(milestone.id, ())):
            children.append(self._weekly_goal_node(weekly_goal, depth=depth + 1))
        children.extend(self._task_nodes(self._index.tasks_by_milestone.get(milestone.id, ()), depth=depth + 1))

        if milestone.is_completed and not self._filters.show_completed and not children:
            return None
        return HierarchyTreeNode(
            id=milestone.id,
            type=NodeType.MILESTONE,
            title=milestone.title,
            indent=depth,
            status="completed" if milestone.is_completed else None,
            is_completed=milestone.is_completed,
            metadata=self._metadata(
                milestone.id,
                links.goals_link(self._plan.id, base=self._link_base),
                date=milestone.due_date.isoformat() if milestone.due_date else None,
            ),
            children=tuple(children),
        )

    def _weekly_goal_node(self, weekly_goal: WeeklyGoal, *, depth: int) -> HierarchyTreeNode:
        tasks = self._index.tasks_by_weekly_goal.get(weekly_goal.id, ())
        return HierarchyTreeNode(
            id=weekly_goal.id,
            type=NodeType.WEEKLY_GOAL,
            title=weekly_goal.title,
            indent=depth,
            week_number=weekly_goal.week_number,
            metadata=self._metadata(
                weekly_goal.id, links.week_link(self._plan.id, weekly_goal.week_number, base=self._link_base)
            ),
            children=tuple(self._task_nodes(tasks, depth=depth + 1, fallback_week=weekly_goal.week_number)),
        )

    def _task_nodes(
        self, tasks: Iterable[Task], *, depth: int, fallback_week: int | None = None
    ) -> list[HierarchyTreeNode]:
        nodes: list[HierarchyTreeNode] = []
        for task in order_tasks(tasks):
            week = task.week_number if task.week_number is not None else fallback_week
            if self._task_visible(task, week):
                nodes.append(self._task_node(task, week, depth=depth))
        return nodes

    def _task_node(self, task: Task, week: int | None, *, depth: int) -> HierarchyTreeNode:
        date_label = None
        day_label = None
        if week is not None and task.due_day is not None:
            date_label = plan_date(self._plan.start_date, week, task.due_day).isoformat()
            day_label = _DAY_LABELS[task.due_day - 1]
        return HierarchyTreeNode(
            id=task.id,
            type=NodeType.TASK,
            title=task.title,
            indent=depth,
            status=str(task.status),
            is_completed=task.is_completed,
            week_number=week,
            metadata=self._metadata(
                task.id,
                links.task_link(self._plan.id, week, task.due_day, base=self._link_base),
                priority=str(task.priority),
                date=date_label,
                day_label=day_label,
            ),
        )

    def _other_tasks_nodes(self) -> list[HierarchyTreeNode]:
        buckets = self._index.unlinked_tasks_by_week
        if self._filters.show_all_weeks:
            weeks: list[int | None] = sorted(week for week in buckets if week is not None)
            if None in buckets:
                weeks.append(None)
        else:
            weeks = [self._selected_week]

        nodes: list[HierarchyTreeNode] = []
        for week in weeks:
            children = self._task_nodes(buckets.get(week, ()), depth=1)
            if not children:
                continue
            bucket_id = f"ad-hoc-group-week-{week}" if week is not None else "ad-hoc-group-unscheduled"
            link_url = (
                links.week_link(self._plan.id, week, base=self._link_base)
                if week is not None
                else links.plan_link(self._plan.id, base=self._link_base)
            )
            nodes.append(
                HierarchyTreeNode(
                    id=bucket_id,
                    type=NodeType.AD_HOC_GROUP,
                    title=OTHER_TASKS_TITLE,
                    indent=0,
                    week_number=week,
                    metadata=self._metadata(bucket_id, link_url),
                    children=tuple(children),
                )
            )
        return nodes


def build_tree(
    snapshot: DashboardSnapshot,
    filters: TreeFilters | None = None,
    selected_week: int | None = None,
    *,
    today: date | None = None,
    link_base: str = "",
    with_plan_root: bool = False,
) -> list[HierarchyTreeNode]:
    """Build the hierarchy forest for ``snapshot``.

    ``selected_week`` defaults to the plan's current week on ``today``
    (``date.today()`` when not given).
    """
    if selected_week is None:
        selected_week = current_week(snapshot.plan, today if today is not None else date.today())
    builder = HierarchyTreeBuilder(snapshot, filters or TreeFilters(), selected_week, link_base=link_base)
    if with_plan_root:
        return builder.build_with_plan_root()
    return builder.build()
