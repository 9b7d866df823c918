"""Hierarchy tree construction."""

from twelveweek.core.hierarchy.builder import HierarchyTreeBuilder, build_tree, order_tasks, reindent
from twelveweek.core.hierarchy.normalizer import EntityIndex
from twelveweek.core.hierarchy.positions import (
    decode_position,
    encode_position,
    normalize_positions,
    should_normalize_positions,
    sort_by_position,
)

__all__ = [
    "EntityIndex",
    "HierarchyTreeBuilder",
    "build_tree",
    "decode_position",
    "encode_position",
    "normalize_positions",
    "order_tasks",
    "reindent",
    "should_normalize_positions",
    "sort_by_position",
]
