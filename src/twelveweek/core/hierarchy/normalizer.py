"""Lookup indices over the flat rows of one plan.

The tree builder reads parents and children through these indices instead of
scanning collections per node. Indices are rebuilt from scratch for every
snapshot and never cached.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from twelveweek.core.contracts.entities import Goal, Milestone, Task, WeeklyGoal
from twelveweek.core.contracts.snapshot import DashboardSnapshot
from twelveweek.core.hierarchy.positions import sort_by_position

K = TypeVar("K")
V = TypeVar("V")


def _freeze(groups: Mapping[K, list[V]]) -> dict[K, tuple[V, ...]]:
    return {key: tuple(values) for key, values in groups.items()}


def _group(items: Iterable[V], key: Callable[[V], K]) -> dict[K, tuple[V, ...]]:
    groups: dict[K, list[V]] = defaultdict(list)
    for item in items:
        groups[key(item)].append(item)
    return _freeze(groups)


@dataclass(frozen=True)
class EntityIndex:
    """Grouped views of a :class:`DashboardSnapshot`.

    Every group keeps the input order of the snapshot; ordering by
    ``position`` is the tree builder's job. Rows of other plans are left out.
    """

    plan_id: str
    goals: tuple[Goal, ...]
    goals_by_id: dict[str, Goal]
    milestones_by_id: dict[str, Milestone]
    weekly_goals_by_id: dict[str, WeeklyGoal]
    milestones_by_goal: dict[str, tuple[Milestone, ...]]
    weekly_goals_by_week: dict[tuple[str, int], tuple[WeeklyGoal, ...]]
    weekly_goals_by_goal: dict[str, tuple[WeeklyGoal, ...]]
    weekly_goals_by_milestone: dict[str, tuple[WeeklyGoal, ...]]
    plan_weekly_goals: tuple[WeeklyGoal, ...]
    tasks_by_weekly_goal: dict[str, tuple[Task, ...]]
    tasks_by_milestone: dict[str, tuple[Task, ...]]
    tasks_by_goal: dict[str, tuple[Task, ...]]
    unlinked_tasks_by_week: dict[int | None, tuple[Task, ...]]

    @classmethod
    def build(cls, snapshot: DashboardSnapshot) -> EntityIndex:
        plan_id = snapshot.plan.id
        goals = tuple(goal for goal in snapshot.goals if goal.plan_id == plan_id)
        goal_ids = {goal.id for goal in goals}
        milestones = tuple(milestone for milestone in snapshot.milestones if milestone.goal_id in goal_ids)
        weekly_goals = tuple(weekly_goal for weekly_goal in snapshot.weekly_goals if weekly_goal.plan_id == plan_id)
        tasks = tuple(task for task in snapshot.tasks if task.plan_id == plan_id)

        linked_weekly_goals = [weekly_goal for weekly_goal in weekly_goals if weekly_goal.milestone_id]
        goal_weekly_goals = [
            weekly_goal for weekly_goal in weekly_goals if weekly_goal.goal_id and not weekly_goal.milestone_id
        ]
        milestone_tasks = [task for task in tasks if not task.weekly_goal_id and task.milestone_id]
        goal_tasks = [task for task in tasks if not task.weekly_goal_id and not task.milestone_id and task.goal_id]

        return cls(
            plan_id=plan_id,
            goals=goals,
            goals_by_id={goal.id: goal for goal in goals},
            milestones_by_id={milestone.id: milestone for milestone in milestones},
            weekly_goals_by_id={weekly_goal.id: weekly_goal for weekly_goal in weekly_goals},
            milestones_by_goal=_group(milestones, lambda milestone: milestone.goal_id),
            weekly_goals_by_week=_group(
                weekly_goals, lambda weekly_goal: (weekly_goal.plan_id, weekly_goal.week_number)
            ),
            weekly_goals_by_goal=_group(goal_weekly_goals, lambda weekly_goal: weekly_goal.goal_id),
            weekly_goals_by_milestone=_group(linked_weekly_goals, lambda weekly_goal: weekly_goal.milestone_id),
            plan_weekly_goals=tuple(
                weekly_goal for weekly_goal in weekly_goals if not weekly_goal.goal_id and not weekly_goal.milestone_id
            ),
            tasks_by_weekly_goal=_group(
                (task for task in tasks if task.weekly_goal_id), lambda task: task.weekly_goal_id
            ),
            tasks_by_milestone=_group(milestone_tasks, lambda task: task.milestone_id),
            tasks_by_goal=_group(goal_tasks, lambda task: task.goal_id),
            unlinked_tasks_by_week=_group((task for task in tasks if task.is_unlinked), lambda task: task.week_number),
        )

    def sorted_goals(self) -> list[Goal]:
        return sort_by_position(self.goals)

    def weekly_goals_for_week(self, week: int) -> tuple[WeeklyGoal, ...]:
        return self.weekly_goals_by_week.get((self.plan_id, week), ())

    def dangling_ids(self, snapshot: DashboardSnapshot) -> list[str]:
        """Ids of rows whose parent reference points at nothing in ``snapshot``."""
        dangling: list[str] = []
        foreign_goal_ids = {goal.id for goal in snapshot.goals if goal.plan_id != self.plan_id}
        for milestone in snapshot.milestones:
            if milestone.goal_id in foreign_goal_ids:
                continue
            if milestone.goal_id not in self.goals_by_id:
                dangling.append(milestone.id)
        for weekly_goal in snapshot.weekly_goals:
            if weekly_goal.plan_id != self.plan_id:
                continue
            if weekly_goal.milestone_id and weekly_goal.milestone_id not in self.milestones_by_id:
                dangling.append(weekly_goal.id)
            elif not weekly_goal.milestone_id and weekly_goal.goal_id and weekly_goal.goal_id not in self.goals_by_id:
                dangling.append(weekly_goal.id)
        for task in snapshot.tasks:
            if task.plan_id != self.plan_id:
                continue
            if task.weekly_goal_id:
                if task.weekly_goal_id not in self.weekly_goals_by_id:
                    dangling.append(task.id)
            elif task.milestone_id:
                if task.milestone_id not in self.milestones_by_id:
                    dangling.append(task.id)
            elif task.goal_id and task.goal_id not in self.goals_by_id:
                dangling.append(task.id)
        return dangling
