"""Shared CLI helpers: resolving config, snapshot and filters from arguments."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from twelveweek.core.config import DEFAULT_CONFIG_NAME, load_config
from twelveweek.core.contracts.config import TwelveWeekConfig
from twelveweek.core.contracts.exceptions import ConfigError
from twelveweek.core.contracts.snapshot import DashboardSnapshot
from twelveweek.core.contracts.tree import TreeFilters
from twelveweek.core.snapshot import load_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandInputs:
    config: TwelveWeekConfig
    snapshot: DashboardSnapshot
    today: date


def resolve_config(args: argparse.Namespace) -> TwelveWeekConfig:
    if args.config is not None:
        return load_config(args.config)
    default_path = Path.cwd() / DEFAULT_CONFIG_NAME
    if default_path.exists():
        logger.debug("using config %s", default_path)
        return load_config(default_path)
    return TwelveWeekConfig()


def resolve_inputs(args: argparse.Namespace) -> CommandInputs:
    config = resolve_config(args)
    snapshot_path = Path(args.snapshot) if args.snapshot else config.snapshot_path
    if snapshot_path is None:
        raise ConfigError("no snapshot given: pass --snapshot or set snapshot_path in twelveweek.json")
    plan_id = args.plan_id or config.plan_id
    snapshot = load_snapshot(snapshot_path, plan_id)
    return CommandInputs(config=config, snapshot=snapshot, today=args.today or date.today())


def resolve_filters(args: argparse.Namespace, config: TwelveWeekConfig) -> TreeFilters:
    show_completed = config.show_completed if args.show_completed is None else args.show_completed
    show_all_weeks = config.show_all_weeks if args.all_weeks is None else args.all_weeks
    return TreeFilters(show_completed=show_completed, show_all_weeks=show_all_weeks)


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
