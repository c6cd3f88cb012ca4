"""ModifierTracker: process-wide state of the selection modifier keys."""

from __future__ import annotations

import logging
import sys
import weakref
from enum import Enum

import param

from ..events import KeyEvent

logger = logging.getLogger(__name__)


SHIFT = 16
CTRL = 17
# Left and right Command keys
CMD_KEYS = frozenset({91, 93})


class Chord(Enum):
    """Which selection modifier is in effect. Range wins when both are held."""

    NONE = "none"
    MULTI = "multi"
    RANGE = "range"


def detect_platform() -> str:
    return "mac" if sys.platform == "darwin" else "other"


class ModifierTracker(param.Parameterized):
    """Tracks whether the range (Shift) and multi (Ctrl/Cmd) keys are held.

    Shared by every container of the process. Only key transitions and
    window blur mutate it; containers read it when deciding on a click.
    """

    range_held = param.Boolean(default=False, doc="Shift is held")
    multi_held = param.Boolean(default=False, doc="Ctrl (Cmd on mac) is held")
    platform = param.Selector(
        default="other", objects=["mac", "other"],
        doc="Platform family deciding the multi-select key",
    )

    def __init__(self, **params):
        params.setdefault("platform", detect_platform())
        super().__init__(**params)
        self._sources: weakref.WeakSet = weakref.WeakSet()

    @property
    def multi_keys(self) -> frozenset[int]:
        return CMD_KEYS if self.platform == "mac" else frozenset({CTRL})

    def is_range_modifier_held(self) -> bool:
        return self.range_held

    def is_multi_modifier_held(self) -> bool:
        return self.multi_held

    def chord(self) -> Chord:
        if self.range_held:
            return Chord.RANGE
        if self.multi_held:
            return Chord.MULTI
        return Chord.NONE

    def handle_key(self, event: KeyEvent) -> None:
        if event.key_code == SHIFT:
            self.range_held = event.is_down
        elif event.key_code in self.multi_keys:
            self.multi_held = event.is_down

    def handle_blur(self) -> None:
        # Key-up events are lost while a native menu or dialog has focus
        self.multi_held = False

    def attach(self, events) -> bool:
        """Listen to the key and blur signals of an event source, once.

        Returns True if handlers were installed by this call.
        """
        if events in self._sources:
            return False
        events.on_key_transition(self.handle_key)
        events.on_window_blur(self.handle_blur)
        self._sources.add(events)
        logger.debug("Modifier tracking attached to %r", events)
        return True

    @param.depends("range_held", "multi_held", watch=True)
    def _log_change(self):
        logger.debug(
            "Modifiers changed: range=%s multi=%s", self.range_held, self.multi_held,
        )


_tracker: ModifierTracker | None = None


def get_modifier_tracker() -> ModifierTracker:
    """Return the process-wide tracker, creating it on first use."""
    global _tracker
    if _tracker is None:
        _tracker = ModifierTracker()
    return _tracker


def reset_modifier_tracker() -> None:
    """Discard the process-wide tracker (the next call creates a fresh one)."""
    global _tracker
    _tracker = None
