"""Snapshot loading and row selection."""

from twelveweek.core.snapshot.loader import load_snapshot, parse_snapshot
from twelveweek.core.snapshot.selector import select_rows, target_week

__all__ = ["load_snapshot", "parse_snapshot", "select_rows", "target_week"]
