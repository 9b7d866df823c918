"""Hierarchy tree contracts."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NodeType(StrEnum):
    PLAN = "plan"
    GOAL = "goal"
    MILESTONE = "milestone"
    WEEKLY_GOAL = "weekly_goal"
    TASK = "task"
    AD_HOC_GROUP = "ad_hoc_group"


class TreeFilters(BaseModel):
    show_completed: bool = False
    show_all_weeks: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class NodeMetadata(BaseModel):
    original_id: str
    link_url: str
    priority: str | None = None
    date: str | None = None
    day_label: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class HierarchyTreeNode(BaseModel):
    """One display node of the hierarchy view.

    ``indent`` is the node's depth inside the returned forest and is only a
    rendering hint. Dump with ``by_alias=True`` to get the camelCase shape the
    view layer consumes.
    """

    id: str
    type: NodeType
    title: str
    indent: int = 0
    status: str | None = None
    is_completed: bool = False
    progress: int | None = None
    week_number: int | None = None
    metadata: NodeMetadata
    children: tuple[HierarchyTreeNode, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def walk(self) -> Iterator[HierarchyTreeNode]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
