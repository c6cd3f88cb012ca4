"""ClickCoordinator: turns item press/release events into selection changes."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..core.item_order import ItemOrder
from ..core.modifiers import ModifierTracker
from ..core.store import SelectionStore
from ..events import Phase, PointerKind, mark_selectable_click
from .gestures import Action, TargetState, decide
from .outside_click import OutsideClickGuard

logger = logging.getLogger(__name__)


def _is_mouse(event: Any) -> bool:
    return getattr(event, "kind", PointerKind.MOUSE) is PointerKind.MOUSE


class ClickCoordinator:
    """Selection state machine of one container.

    A press on an unselected item acts immediately. A press on a selected
    item is deferred to its release, so a drag of several selected items
    does not collapse the selection on press.
    """

    def __init__(
        self,
        store: SelectionStore,
        modifiers: ModifierTracker,
        guard: OutsideClickGuard,
        is_cancelled: Callable[[Any], bool],
    ) -> None:
        self._store = store
        self._modifiers = modifiers
        self._guard = guard
        self._is_cancelled = is_cancelled
        self._last_clicked: Any = None
        # item -> whether its pending press selected it; popped on release
        self._just_selected: dict = {}

    @property
    def last_clicked(self) -> Any:
        return self._last_clicked

    def handle(self, event: Any) -> None:
        """Process one press or release on ``event.item``."""
        if self._is_cancelled(event.target):
            return

        prevent_default = getattr(event, "prevent_default", None)
        if prevent_default is not None:
            prevent_default()
        self._guard.arm()
        mark_selectable_click(event)

        if event.phase is Phase.PRESS:
            self._press(event, event.item)
        else:
            self._release(event, event.item)

    def _press(self, event: Any, item: Any) -> None:
        selected = self._store.is_selected(item)
        action = decide(
            Phase.PRESS,
            TargetState.SELECTED if selected else TargetState.UNSELECTED,
            _is_mouse(event),
            self._modifiers.chord(),
            len(self._store) > 1,
        )
        if action is not Action.DEFER:
            self._apply(action, event, item)
            self._last_clicked = item
        self._just_selected[item] = not selected

    def _release(self, event: Any, item: Any) -> None:
        just_selected = self._just_selected.pop(item, False)
        before = len(self._store)
        action = decide(
            Phase.RELEASE,
            TargetState.JUST_SELECTED if just_selected else TargetState.SETTLED,
            _is_mouse(event),
            self._modifiers.chord(),
            before > 1,
        )
        if action is Action.SKIP:
            return
        self._apply(action, event, item)
        self._last_clicked = item
        self._guard.update(before, len(self._store))

    def _apply(self, action: Action, event: Any, item: Any) -> None:
        logger.debug("%s: %s on %r", event.phase, action.value, item)
        if action is Action.SELECT:
            self._store.select(item, event)
        elif action is Action.DESELECT:
            self._store.deselect(item, event)
        elif action is Action.REPLACE:
            with self._store.transaction(event):
                self._store.clear(silent=True)
                self._store.select(item, silent=True)
        elif action is Action.RANGE:
            self.select_range(event, item)

    def select_range(self, event: Any, target: Any) -> list:
        """Give every item from the last-clicked one up to ``target`` the
        opposite of the target's current state, with one notification.

        Returns the items spanned between the two endpoints.
        """
        select = not self._store.is_selected(target)
        order = ItemOrder.from_items(self._store.eligible_items())
        span = order.resolve_range(self._last_clicked, target)
        with self._store.transaction(event):
            for item in span:
                self._store.set_selected(item, select)
            self._store.set_selected(target, select)
        return span
