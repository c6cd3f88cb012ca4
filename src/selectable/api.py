"""Selectable: the main user-facing API, one instance per container."""

from __future__ import annotations

import itertools
import logging
import weakref
from typing import Any

import param

from .core.modifiers import ModifierTracker, get_modifier_tracker
from .core.store import SelectionStore
from .core.validation import validate_callback, validate_cancel, validate_selector
from .host.base import DEFAULT_CANCEL, ItemHost
from .interaction.coordinator import ClickCoordinator
from .interaction.outside_click import OutsideClickGuard

logger = logging.getLogger(__name__)


# Methods reachable by name through Selectable.invoke / selectable()
PUBLIC_METHODS = frozenset({
    "select_all", "clear_selection", "selected_items", "selectable_items",
})

_ids = itertools.count()


class SelectableOptions(param.Parameterized):
    """Per-container configuration."""

    selector = param.Parameter(
        default=None, doc="Which items are selectable; None means direct children",
    )
    cancel = param.Parameter(
        default=DEFAULT_CANCEL, doc="Regions whose clicks never change the selection",
    )
    on_change = param.Callable(
        default=None, allow_None=True,
        doc="fn(event, selection, newly_selected, newly_deselected)",
    )


class Selectable:
    """Makes the items of a host container selectable.

    Usage::

        from selectable import Selectable

        sel = Selectable(host, on_change=lambda e, items, added, removed: ...)
        sel.select_all()
        sel.selected_items()

    Click selects one item, Shift+click selects the range from the last
    clicked item, Ctrl+click (Cmd on macOS) toggles one item. Releasing the
    pointer anywhere outside the items clears the selection.
    """

    def __init__(
        self,
        host: ItemHost,
        modifiers: ModifierTracker | None = None,
        **options: Any,
    ) -> None:
        self.uuid = f"selectable-{next(_ids)}"
        # The host keeps this instance alive through its pointer binding, so
        # only weak references point back at it
        self._host_ref = weakref.ref(host)
        self._host = weakref.proxy(host)
        self.options = SelectableOptions()
        self._apply_options(options)

        # Global key tracking is installed once per event source
        self._modifiers = modifiers if modifiers is not None else get_modifier_tracker()
        self._modifiers.attach(host.document)

        self._store = SelectionStore(self._host, lambda: self.options.selector)
        self._store.on_change(self._emit_change)
        self._guard = OutsideClickGuard(
            host.document, self._in_cancel_zone, self._clear_from_outside, name=self.uuid,
        )
        self._coordinator = ClickCoordinator(
            self._store, self._modifiers, self._guard, self._in_cancel_zone,
        )
        host.bind_pointer(self.handle_pointer, self.options.selector)
        logger.debug("%s created", self.uuid)

    # --- configuration ---

    def configure(self, **options: Any) -> Selectable:
        """Update the given options; None keeps the current value."""
        selector = self.options.selector
        self._apply_options(options)
        if self.options.selector is not selector:
            self._host.bind_pointer(self.handle_pointer, self.options.selector)
        return self

    def _apply_options(self, options: dict) -> None:
        unknown = set(options) - {"selector", "cancel", "on_change"}
        if unknown:
            raise TypeError(f"Unknown option(s): {sorted(unknown)}")
        updates = {key: value for key, value in options.items() if value is not None}
        if "selector" in updates:
            validate_selector(updates["selector"])
        if "cancel" in updates:
            validate_cancel(updates["cancel"])
        if "on_change" in updates:
            validate_callback(updates["on_change"], "on_change")
        self.options.param.update(**updates)

    @property
    def modifiers(self) -> ModifierTracker:
        return self._modifiers

    @property
    def last_clicked(self) -> Any:
        return self._coordinator.last_clicked

    @property
    def outside_click_armed(self) -> bool:
        return self._guard.armed

    # --- public methods ---

    def selectable_items(self) -> list:
        return self._store.selectable_items()

    def selected_items(self) -> list:
        return self._store.selected_items()

    def is_selected(self, item: Any) -> bool:
        return self._store.is_selected(item)

    def select_all(self, event: Any = None) -> list:
        """Select every visible item. Returns the items that changed."""
        changed = self._store.select_all(event)
        if len(self._store):
            self._guard.install()
        return changed

    def clear_selection(self, event: Any = None, silent: bool = False) -> list:
        """Deselect every item. Returns the items that changed."""
        changed = self._store.clear(event, silent=silent)
        self._guard.remove()
        return changed

    def invoke(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """Call a public method by name. Unknown names do nothing."""
        if method not in PUBLIC_METHODS:
            logger.debug("%s: ignoring unknown method %r", self.uuid, method)
            return None
        return getattr(self, method)(*args, **kwargs)

    def handle_pointer(self, event: Any) -> None:
        """Entry point for press/release events on items (bound on the host)."""
        self._coordinator.handle(event)

    def on_change(self, callback) -> None:
        """Register an extra change callback besides the ``on_change`` option."""
        self._store.on_change(callback)

    def destroy(self) -> None:
        """Detach from the host and its document."""
        self._host.unbind_pointer()
        self._guard.remove()
        host = self._host_ref()
        if host is not None and _registry.get(host) is self:
            del _registry[host]
        logger.debug("%s destroyed", self.uuid)

    # --- internals ---

    def _in_cancel_zone(self, target: Any) -> bool:
        return self._host.is_in_cancel_zone(target, self.options.cancel)

    def _clear_from_outside(self, event: Any) -> None:
        self._store.clear(event)

    def _emit_change(self, event, selection, newly_selected, newly_deselected) -> None:
        fn = self.options.on_change
        if fn is not None:
            fn(event, selection, newly_selected, newly_deselected)

    def __repr__(self) -> str:
        return f"Selectable({self.uuid}, selected={len(self._store)})"


_registry: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()


def selectable(
    host: ItemHost,
    method: str | None = None,
    *,
    modifiers: ModifierTracker | None = None,
    **options: Any,
) -> Any:
    """Create, reconfigure or call the Selectable attached to ``host``.

    ``selectable(host, **options)`` creates the instance on first use and
    updates its options afterwards (returning it both times).
    ``selectable(host, "selected_items")`` calls a public method on the
    existing instance; unknown names and hosts without an instance give None.
    """
    existing = _registry.get(host)
    if method is not None:
        return existing.invoke(method) if existing is not None else None
    if existing is not None:
        return existing.configure(**options)
    instance = Selectable(host, modifiers=modifiers, **options)
    _registry[host] = instance
    return instance
