"""Exception hierarchy for twelveweek.

The engine itself (calendar mapping, tree building, metrics) never raises for
data-shape problems. These exceptions exist for the I/O edges: reading
snapshots and configuration files.
"""

from __future__ import annotations


class TwelveWeekError(Exception):
    """Base exception for all twelveweek errors."""


class ConfigError(TwelveWeekError):
    """Configuration loading or validation failure."""


class SnapshotLoadError(TwelveWeekError):
    """Snapshot file loading/parsing failure."""
