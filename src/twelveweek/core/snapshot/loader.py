"""Load a :class:`DashboardSnapshot` from a JSON file on disk.

Two payload shapes are accepted:

* a dashboard payload: ``{"plan": {...}, "goals": [...], "milestones": [...],
  "weekly_goals": [...], "tasks": [...]}``;
* a full data export: ``{"plans": [...], "goals": [...], ...}`` holding rows of
  several plans. The plan is picked by ``plan_id``, or is the only one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from twelveweek.core.contracts.exceptions import SnapshotLoadError
from twelveweek.core.contracts.snapshot import DashboardSnapshot

logger = logging.getLogger(__name__)

_COLLECTIONS = ("goals", "milestones", "weekly_goals", "tasks")


def _select_plan(plans: Any, plan_id: str | None) -> dict[str, Any]:
    if not isinstance(plans, list) or not plans:
        raise SnapshotLoadError("export contains no plans")
    if plan_id is None:
        if len(plans) > 1:
            ids = [str(plan.get("id")) for plan in plans if isinstance(plan, dict)]
            raise SnapshotLoadError(f"export contains {len(plans)} plans; choose one of {ids}")
        return plans[0]
    for plan in plans:
        if isinstance(plan, dict) and plan.get("id") == plan_id:
            return plan
    raise SnapshotLoadError(f"plan '{plan_id}' not found in export")


def parse_snapshot(payload: Any, plan_id: str | None = None) -> DashboardSnapshot:
    """Validate an already decoded JSON payload.

    Raises:
        SnapshotLoadError: If the payload shape or any row is invalid, or
            ``plan_id`` does not match the payload.
    """
    if not isinstance(payload, dict):
        raise SnapshotLoadError(f"snapshot must be a JSON object, got {type(payload).__name__}")

    if "plan" in payload:
        plan = payload["plan"]
        if plan_id is not None and isinstance(plan, dict) and plan.get("id") != plan_id:
            raise SnapshotLoadError(f"snapshot holds plan '{plan.get('id')}', not '{plan_id}'")
    elif "plans" in payload:
        plan = _select_plan(payload["plans"], plan_id)
    else:
        raise SnapshotLoadError("snapshot has neither 'plan' nor 'plans'")

    data: dict[str, Any] = {"plan": plan}
    for name in _COLLECTIONS:
        rows = payload.get(name) or []
        if not isinstance(rows, list):
            raise SnapshotLoadError(f"{name}: expected a JSON array, got {type(rows).__name__}")
        data[name] = rows

    try:
        return DashboardSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotLoadError(f"snapshot validation failed: {exc}") from exc


def load_snapshot(path: str | Path, plan_id: str | None = None) -> DashboardSnapshot:
    """Read and validate the snapshot stored at ``path``.

    Raises:
        SnapshotLoadError: If the file is missing, unreadable, not JSON, or
            does not match the schema.
    """
    snapshot_path = Path(path).expanduser()
    if not snapshot_path.exists():
        raise SnapshotLoadError(f"missing snapshot file: {snapshot_path}")
    try:
        payload = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SnapshotLoadError(f"invalid JSON in snapshot file: {snapshot_path}") from exc
    except OSError as exc:
        raise SnapshotLoadError(f"failed reading snapshot file: {snapshot_path}") from exc

    snapshot = parse_snapshot(payload, plan_id)
    logger.debug(
        "loaded plan %s: %d goals, %d milestones, %d weekly goals, %d tasks",
        snapshot.plan.id,
        len(snapshot.goals),
        len(snapshot.milestones),
        len(snapshot.weekly_goals),
        len(snapshot.tasks),
    )
    return snapshot
