"""Tree command."""

from __future__ import annotations

import argparse
import json

from rich.console import Console

from twelveweek.cli.common import resolve_filters, resolve_inputs
from twelveweek.cli.render.rich_tree import RichTreeRenderer
from twelveweek.core.calendar.mapper import current_week
from twelveweek.core.hierarchy import build_tree


def run_tree(args: argparse.Namespace, console: Console | None = None) -> int:
    inputs = resolve_inputs(args)
    filters = resolve_filters(args, inputs.config)
    week = args.week or current_week(inputs.snapshot.plan, inputs.today)

    nodes = build_tree(
        inputs.snapshot,
        filters,
        week,
        link_base=inputs.config.link_base,
        with_plan_root=args.with_plan,
    )

    if args.json:
        payload = [node.model_dump(mode="json", by_alias=True) for node in nodes]
        print(json.dumps(payload, indent=2))
        return 0

    scope = "all weeks" if filters.show_all_weeks else f"week {week}"
    RichTreeRenderer(console).render(nodes, f"{inputs.snapshot.plan.name} - {scope}")
    return 0


__all__ = ["run_tree"]
