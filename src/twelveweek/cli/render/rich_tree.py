"""Rich rendering of hierarchy forests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from twelveweek.core.contracts.tree import HierarchyTreeNode, NodeType


class RichTreeRenderer:
    """Draws a hierarchy forest as a Rich tree, one line per node."""

    _STYLES: ClassVar[dict[NodeType, str]] = {
        NodeType.PLAN: "bold",
        NodeType.GOAL: "bold cyan",
        NodeType.MILESTONE: "magenta",
        NodeType.WEEKLY_GOAL: "green",
        NodeType.TASK: "",
        NodeType.AD_HOC_GROUP: "yellow",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def label(self, node: HierarchyTreeNode) -> Text:
        text = Text()
        if node.type == NodeType.TASK:
            text.append("[x] " if node.is_completed else "[ ] ")
            if node.metadata.priority:
                text.append(f"{node.metadata.priority} ", style="bold")
        text.append(node.title, style=self._STYLES[node.type] + (" dim" if node.is_completed else ""))
        details: list[str] = []
        if node.progress is not None:
            details.append(f"{node.progress}%")
        if node.week_number is not None and node.type in (NodeType.WEEKLY_GOAL, NodeType.AD_HOC_GROUP):
            details.append(f"week {node.week_number}")
        if node.metadata.day_label and node.metadata.date:
            details.append(f"{node.metadata.day_label} {node.metadata.date}")
        elif node.metadata.date:
            details.append(f"due {node.metadata.date}")
        if node.type == NodeType.TASK and node.status not in (None, "todo", "completed"):
            details.append(str(node.status).replace("_", " "))
        if details:
            text.append(f"  ({', '.join(details)})", style="dim")
        return text

    def build(self, nodes: Sequence[HierarchyTreeNode], title: str) -> Tree:
        root = Tree(Text(title, style="bold"), guide_style="dim")
        for node in nodes:
            self._attach(root, node)
        return root

    def _attach(self, parent: Tree, node: HierarchyTreeNode) -> None:
        branch = parent.add(self.label(node))
        for child in node.children:
            self._attach(branch, child)

    def render(self, nodes: Sequence[HierarchyTreeNode], title: str) -> None:
        if not nodes:
            self._console.print("No plan items to display. Try adjusting the filters.")
            return
        self._console.print(self.build(nodes, title))
