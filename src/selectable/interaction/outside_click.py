"""OutsideClickGuard: clears a selection when the user releases elsewhere."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..events import is_selectable_click

logger = logging.getLogger(__name__)


class OutsideClickGuard:
    """One document release listener for one container.

    The listener exists only while the selection may be non-empty. After it
    clears the selection it stays attached but disarmed until the next item
    click re-arms it.
    """

    def __init__(
        self,
        events,
        is_cancelled: Callable[[Any], bool],
        clear: Callable[[Any], Any],
        name: str = "",
    ) -> None:
        self._events = events
        self._is_cancelled = is_cancelled
        self._clear = clear
        self._name = name
        self._handle: Any = None
        self._armed = False

    @property
    def installed(self) -> bool:
        return self._handle is not None

    @property
    def armed(self) -> bool:
        return self.installed and self._armed

    def install(self) -> None:
        """Attach the listener if needed and arm it."""
        if self._handle is None:
            self._handle = self._events.on_document_release(self._on_release)
            logger.debug("%s: outside-click listener installed", self._name)
        self._armed = True

    def arm(self) -> None:
        self.install()

    def remove(self) -> None:
        if self._handle is None:
            return
        self._events.off_document_release(self._handle)
        self._handle = None
        self._armed = False
        logger.debug("%s: outside-click listener removed", self._name)

    def update(self, before: int, after: int) -> None:
        """Follow a selection count transition."""
        if not after:
            self.remove()
        elif not before:
            self.install()

    def _on_release(self, event: Any) -> None:
        if not self._armed:
            return
        if is_selectable_click(event):
            return
        if self._is_cancelled(getattr(event, "target", None)):
            return
        self._armed = False
        logger.debug("%s: outside click, clearing selection", self._name)
        self._clear(event)
