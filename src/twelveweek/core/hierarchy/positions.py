"""Single-field task position encoding: ``week_order * 100 + day_rank``.

``week_order`` keeps the block order of the week view; ``day_rank`` (1-99)
orders tasks inside one day without disturbing the week view.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

_WEEK_ORDER_STRIDE = 100
DEFAULT_NORMALIZE_THRESHOLD = 1_000_000


class _Positioned(Protocol):
    @property
    def position(self) -> int: ...


P = TypeVar("P", bound=_Positioned)


def encode_position(week_order: int, day_rank: int) -> int:
    return week_order * _WEEK_ORDER_STRIDE + day_rank


def decode_position(position: int) -> tuple[int, int]:
    """Split ``position`` into ``(week_order, day_rank)``."""
    return divmod(position, _WEEK_ORDER_STRIDE)


def sort_by_position(items: Iterable[P]) -> list[P]:
    """Order by ``position``; equal positions keep their input order."""
    return sorted(items, key=lambda item: item.position)


def normalize_positions(positions: Sequence[int], *, preserve_week_order: bool = True) -> list[int]:
    """Re-space ``positions`` densely, returned in ascending order.

    With ``preserve_week_order`` the week-order blocks survive (renumbered
    1, 2, 3, ...) and day ranks restart at 1 inside each block. Otherwise
    every item gets its own block with day rank 1.
    """
    ordered = sorted(positions)
    if not preserve_week_order:
        return [encode_position(index, 1) for index, _ in enumerate(ordered, start=1)]

    result: list[int] = []
    block = 0
    rank = 0
    previous_order: int | None = None
    for position in ordered:
        week_order, _ = decode_position(position)
        if week_order != previous_order:
            block += 1
            rank = 0
            previous_order = week_order
        rank += 1
        result.append(encode_position(block, rank))
    return result


def should_normalize_positions(positions: Sequence[int], threshold: int = DEFAULT_NORMALIZE_THRESHOLD) -> bool:
    if not positions:
        return False
    return max(positions) > threshold
