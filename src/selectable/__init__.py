"""selectable: click, Shift+click and Ctrl/Cmd+click selection for item containers."""

from ._version import __version__
from .api import Selectable, SelectableOptions, selectable
from .core.modifiers import ModifierTracker, get_modifier_tracker
from .events import KeyEvent, Phase, PointerEvent, PointerKind


__all__ = [
    "__version__",
    "Selectable",
    "SelectableOptions",
    "selectable",
    "ModifierTracker",
    "get_modifier_tracker",
    "KeyEvent",
    "Phase",
    "PointerEvent",
    "PointerKind",
]
