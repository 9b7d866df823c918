"""Locate command: date to plan coordinate and back."""

from __future__ import annotations

import argparse
import sys

from twelveweek.core.calendar.mapper import align_to_monday, day_number_from_date, plan_date, plan_date_range
from twelveweek.core.calendar.view import day_name


def run_locate(args: argparse.Namespace) -> int:
    if args.date is not None:
        if args.week is not None or args.day is not None:
            print("error: use either --date or --week/--day", file=sys.stderr)
            return 2
        coordinate = day_number_from_date(args.date, args.start)
        if coordinate is None:
            span = plan_date_range(args.start)
            print(
                f"{args.date.isoformat()} is outside the plan "
                f"({span.start.date().isoformat()} .. {span.end.date().isoformat()})"
            )
            return 0
        print(f"{args.date.isoformat()}: week {coordinate.week}, day {coordinate.day} ({day_name(coordinate.day)})")
        return 0

    if args.week is None or args.day is None:
        print("error: --week and --day are required without --date", file=sys.stderr)
        return 2
    value = plan_date(args.start, args.week, args.day)
    print(f"week {args.week}, day {args.day}: {value.isoformat()} ({day_name(args.day)})")
    if align_to_monday(args.start) != args.start:
        print(f"note: plan start {args.start.isoformat()} aligned to Monday {align_to_monday(args.start).isoformat()}")
    return 0


__all__ = ["run_locate"]
