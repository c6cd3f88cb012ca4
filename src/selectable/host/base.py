"""Host interfaces: what a UI layer provides to a Selectable."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence


# Interactive controls whose clicks never change the selection
DEFAULT_CANCEL = "button, select, input, textarea, a"


class EventSource(ABC):
    """Global (document/window level) input signals."""

    @abstractmethod
    def on_key_transition(self, handler: Callable) -> None:
        """Call ``handler(KeyEvent)`` on every key down and key up."""
        ...

    @abstractmethod
    def on_window_blur(self, handler: Callable) -> None:
        """Call ``handler()`` whenever the window loses focus."""
        ...

    @abstractmethod
    def on_document_release(self, handler: Callable) -> Any:
        """Call ``handler(PointerEvent)`` on every release anywhere.

        Returns a handle for :meth:`off_document_release`.
        """
        ...

    @abstractmethod
    def off_document_release(self, handle: Any) -> None:
        ...


class ItemHost(ABC):
    """One visual container and its child items.

    Selectors and cancel values are opaque to the core; the host interprets
    them (``None`` selects the direct children).
    """

    @property
    @abstractmethod
    def document(self) -> EventSource:
        """The event source the container lives in."""
        ...

    @abstractmethod
    def enumerate_items(self, selector: Any) -> Sequence:
        """All items matching ``selector``, in document/list order."""
        ...

    @abstractmethod
    def is_visible(self, item: Any) -> bool:
        ...

    @abstractmethod
    def is_in_cancel_zone(self, target: Any, cancel: Any) -> bool:
        """True if ``target`` lies within a region matching ``cancel``."""
        ...

    @abstractmethod
    def mark_selected(self, item: Any, selected: bool) -> None:
        """Apply or remove the visual selected state."""
        ...

    @abstractmethod
    def bind_pointer(self, handler: Callable, selector: Any) -> None:
        """Deliver press/release events on items matching ``selector``.

        The host sets ``event.item`` before calling ``handler(event)``.
        Binding again replaces the previous binding.
        """
        ...

    @abstractmethod
    def unbind_pointer(self) -> None:
        ...
