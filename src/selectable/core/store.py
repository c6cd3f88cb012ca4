"""SelectionStore: the selected items of one container + change callbacks."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)


# fn(event, selection, newly_selected, newly_deselected)
ChangeCallback = Callable[[Any, list, list, list], Any]


class SelectionStore:
    """Holds the selected items of a container and notifies callbacks.

    Items are reported in the container's natural order, never in click
    order. The host's visual state is kept in step through
    ``host.mark_selected``.
    """

    def __init__(self, host, selector: Callable[[], Any] = lambda: None) -> None:
        self._host = host
        self._selector = selector
        self._selected: set = set()
        self._callbacks: list[ChangeCallback] = []
        self._batch_depth = 0

    # --- queries ---

    def selectable_items(self) -> list:
        """All items matching the configured selector, visible or not."""
        return list(self._host.enumerate_items(self._selector()))

    def eligible_items(self) -> list:
        """Selectable items the host currently shows."""
        return [item for item in self.selectable_items() if self._host.is_visible(item)]

    def selected_items(self) -> list:
        """Selected items in container order. Items the host removed are skipped."""
        return [item for item in self.selectable_items() if item in self._selected]

    def is_selected(self, item: Any) -> bool:
        return item in self._selected

    def __len__(self) -> int:
        return len(self.selected_items())

    # --- mutations ---

    def select(self, item: Any, event: Any = None, silent: bool = False) -> bool:
        """Select one item. Returns True if its state changed."""
        changed = self._set(item, True)
        if not silent:
            self._notify(event, [item] if changed else [], [])
        return changed

    def deselect(self, item: Any, event: Any = None, silent: bool = False) -> bool:
        """Deselect one item. Returns True if its state changed."""
        changed = self._set(item, False)
        if not silent:
            self._notify(event, [], [item] if changed else [])
        return changed

    def set_selected(self, item: Any, selected: bool) -> bool:
        """Silently force an item's state. Returns True if it changed."""
        return self._set(item, selected)

    def select_all(self, event: Any = None) -> list:
        """Select every eligible item. Returns the items that changed."""
        changed = [item for item in self.eligible_items() if self._set(item, True)]
        self._notify(event, changed, [])
        return changed

    def clear(self, event: Any = None, silent: bool = False) -> list:
        """Deselect everything. Returns the items that changed."""
        changed = [item for item in self.selected_items() if self._set(item, False)]
        # Stale members are dropped without touching the host
        self._selected.clear()
        if not silent:
            self._notify(event, [], changed)
        return changed

    def prune(self) -> list:
        """Forget selected items the host no longer lists. Returns them."""
        current = set(self.selectable_items())
        stale = [item for item in self._selected if item not in current]
        self._selected.difference_update(stale)
        return stale

    @contextmanager
    def transaction(self, event: Any = None) -> Iterator[SelectionStore]:
        """Group mutations into one notification carrying the net change.

        Notifications of the mutations inside the block are suppressed; a
        single one fires on exit, even when nothing changed.
        """
        before = self.selected_items()
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
        after = self.selected_items()
        before_set, after_set = set(before), set(after)
        newly_selected = [item for item in after if item not in before_set]
        # Container order for deselected items too
        newly_deselected = [
            item for item in self.selectable_items()
            if item in before_set and item not in after_set
        ]
        self._notify(event, newly_selected, newly_deselected)

    # --- callbacks ---

    def on_change(self, callback: ChangeCallback) -> None:
        """Register a callback: fn(event, selection, selected, deselected)."""
        self._callbacks.append(callback)

    def _set(self, item: Any, selected: bool) -> bool:
        if (item in self._selected) == selected:
            return False
        if selected:
            self._selected.add(item)
        else:
            self._selected.discard(item)
        self._host.mark_selected(item, selected)
        return True

    def _notify(self, event: Any, selected: list, deselected: list) -> None:
        if self._batch_depth:
            return
        selection = self.selected_items()
        logger.debug(
            "Selection changed: %d selected (+%d, -%d)",
            len(selection), len(selected), len(deselected),
        )
        for cb in self._callbacks:
            cb(event, selection, selected, deselected)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={len(self._selected)})"
