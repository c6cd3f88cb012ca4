"""Pointer interaction: gesture table, click coordinator, outside-click guard."""

from .coordinator import ClickCoordinator
from .gestures import Action, TargetState, decide
from .outside_click import OutsideClickGuard

__all__ = [
    "ClickCoordinator",
    "Action",
    "TargetState",
    "decide",
    "OutsideClickGuard",
]
