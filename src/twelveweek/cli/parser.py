"""CLI parser construction."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from datetime import date
from importlib.metadata import PackageNotFoundError, version

from twelveweek.core.calendar.mapper import parse_date_string
from twelveweek.core.contracts.entities import DAYS_PER_WEEK, PLAN_WEEKS


def _package_version() -> str:
    try:
        return version("twelveweek")
    except PackageNotFoundError:
        return "0.0.0"


def _date_arg(value: str) -> date:
    try:
        return parse_date_string(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}: use YYYY-MM-DD") from exc


def _bounded_int(low: int, high: int) -> Callable[[str], int]:
    def convert(value: str) -> int:
        try:
            number = int(value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}, got {number}")
        return number

    return convert


def _add_snapshot_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to twelveweek.json")
    parser.add_argument("--snapshot", default=None, help="Path to a dashboard snapshot or data export JSON file")
    parser.add_argument("--plan-id", default=None, help="Plan to pick from a multi-plan export")
    parser.add_argument("--today", type=_date_arg, default=None, help="Treat this date as today (YYYY-MM-DD)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twelveweek")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    tree_parser = subparsers.add_parser("tree", help="Print the plan hierarchy")
    _add_snapshot_args(tree_parser)
    tree_parser.add_argument("--week", type=_bounded_int(1, PLAN_WEEKS), default=None, help="Week to show (1-12)")
    tree_parser.add_argument(
        "--show-completed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include completed and cancelled tasks (overrides config)",
    )
    tree_parser.add_argument(
        "--all-weeks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show every week of the plan (overrides config)",
    )
    tree_parser.add_argument("--with-plan", action="store_true", help="Wrap the hierarchy under the plan node")
    tree_parser.add_argument("--json", action="store_true", help="Print the tree as JSON")

    metrics_parser = subparsers.add_parser("metrics", help="Print dashboard metrics")
    _add_snapshot_args(metrics_parser)
    metrics_parser.add_argument("--week-view", choices=("current", "all"), default="all", help="Rows to count")
    metrics_parser.add_argument("--status-view", choices=("active", "all"), default="all", help="Rows to count")
    metrics_parser.add_argument(
        "--week", type=_bounded_int(1, PLAN_WEEKS), default=None, help="Week for --week-view current"
    )

    locate_parser = subparsers.add_parser("locate", help="Convert between dates and plan coordinates")
    locate_parser.add_argument("--start", type=_date_arg, required=True, help="Plan start date (YYYY-MM-DD)")
    locate_parser.add_argument("--date", type=_date_arg, default=None, help="Date to locate inside the plan")
    locate_parser.add_argument("--week", type=_bounded_int(1, PLAN_WEEKS), default=None, help="Plan week (1-12)")
    locate_parser.add_argument("--day", type=_bounded_int(1, DAYS_PER_WEEK), default=None, help="Plan day (1-7)")
    locate_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
