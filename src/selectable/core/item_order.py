"""ItemOrder: the eligible items of a container in their natural order.

Resolves ranges between two clicked items. Immutable; build a new one from
the host's current item list whenever the order is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

import numpy as np


@dataclass(frozen=True)
class ItemOrder:
    """Maps between items and their positions in container order.

    The items array holds the eligible items exactly as the host lists them.
    Positions are looked up through a dict, so items must be hashable.
    """

    items: np.ndarray
    positions: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_items(cls, items: Iterable) -> ItemOrder:
        """Create an ItemOrder from an ordered iterable of items."""
        arr = np.fromiter(items, dtype=object)
        positions = {item: i for i, item in enumerate(arr.tolist())}
        if len(positions) != len(arr):
            raise ValueError("Items must be unique.")
        return cls(items=arr, positions=positions)

    @property
    def size(self) -> int:
        """Number of eligible items."""
        return len(self.items)

    def __contains__(self, item: Any) -> bool:
        return item in self.positions

    def index_of(self, item: Any) -> int | None:
        """Return the position of an item, or None if it is not eligible."""
        if item is None:
            return None
        return self.positions.get(item)

    def between(self, first: int, second: int) -> list:
        """Items strictly between two positions, in container order.

        Symmetric: ``between(1, 4) == between(4, 1)``.
        """
        lo, hi = sorted((first, second))
        if hi - lo <= 1:
            return []
        return self.items[lo + 1:hi].tolist()

    def resolve_range(self, anchor: Any, target: Any) -> list:
        """Items spanned between ``anchor`` and ``target``, endpoints excluded.

        An anchor that is missing (never clicked, removed by the host or no
        longer visible) yields an empty range; the caller still handles the
        target itself.
        """
        anchor_index = self.index_of(anchor)
        target_index = self.index_of(target)
        if anchor_index is None or target_index is None:
            return []
        return self.between(anchor_index, target_index)


def resolve_range(eligible_items: Iterable, last_clicked: Any, target: Any) -> list:
    """Items strictly between ``last_clicked`` and ``target`` in ``eligible_items``."""
    return ItemOrder.from_items(eligible_items).resolve_range(last_clicked, target)
