from __future__ import annotations

import pytest
from pydantic import ValidationError

from twelveweek.core.contracts.metrics import DashboardMetrics


def test_metrics_default_to_zero() -> None:
    assert DashboardMetrics() == DashboardMetrics(total_goals=0, completed_goals=0, total_tasks=0, completed_tasks=0)


def test_counts_must_be_non_negative() -> None:
    with pytest.raises(ValidationError):
        DashboardMetrics(total_goals=-1)


def test_metrics_are_frozen() -> None:
    metrics = DashboardMetrics(total_goals=1)

    with pytest.raises(ValidationError):
        metrics.total_goals = 2  # type: ignore[misc]
