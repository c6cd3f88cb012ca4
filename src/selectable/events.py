"""Input event records exchanged between a host and a Selectable."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# Key stored on the raw event once a selectable item has handled it
SELECTABLE_CLICK = "selectable_click"


class Phase(Enum):
    PRESS = "press"
    RELEASE = "release"


class PointerKind(Enum):
    MOUSE = "mouse"
    TOUCH = "touch"


@dataclass
class PointerEvent:
    """A pointer press or release delivered by the host.

    ``target`` is the innermost element that was hit and ``item`` the
    selectable item whose handler is running (set by the host before each
    dispatch). ``origin`` is the raw event shared by every listener of one
    dispatch, so marks written on it are seen by the document listeners too.
    """

    phase: Phase
    kind: PointerKind = PointerKind.MOUSE
    target: Any = None
    item: Any = None
    origin: dict | None = None
    default_prevented: bool = False

    @property
    def is_mouse(self) -> bool:
        return self.kind is PointerKind.MOUSE

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass(frozen=True)
class KeyEvent:
    """A global key transition (key down or key up)."""

    key_code: int
    is_down: bool


def mark_selectable_click(event: Any) -> None:
    """Flag ``event`` as handled by a selectable item.

    Works on minimal event stubs: the raw ``origin`` mapping is created when
    the host did not supply one.
    """
    origin = getattr(event, "origin", None)
    if origin is None:
        origin = {}
        event.origin = origin
    origin[SELECTABLE_CLICK] = True


def is_selectable_click(event: Any) -> bool:
    """Return True if a selectable item already handled ``event``."""
    origin = getattr(event, "origin", None)
    return bool(origin) and bool(origin.get(SELECTABLE_CLICK))
