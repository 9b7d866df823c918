"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from twelveweek.cli.commands.locate import run_locate
from twelveweek.cli.commands.metrics import run_metrics
from twelveweek.cli.commands.tree import run_tree
from twelveweek.cli.parser import build_parser
from twelveweek.core.contracts.exceptions import ConfigError, SnapshotLoadError

_COMMANDS = {
    "tree": run_tree,
    "metrics": run_metrics,
    "locate": run_locate,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return _COMMANDS[args.command](args)
    except (ConfigError, SnapshotLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
