"""Transition table mapping one pointer phase on one item to an action.

The table is keyed by ``(phase, target_state, is_mouse, chord, many_selected)``
and expanded from a short list of rules at import time, first match wins.
Every key is present, so a lookup never falls through.
"""

from __future__ import annotations

import itertools
from enum import Enum

from ..core.modifiers import Chord
from ..events import Phase


class TargetState(Enum):
    # Press phase
    UNSELECTED = "unselected"
    SELECTED = "selected"
    # Release phase: whether the matching press selected the item
    JUST_SELECTED = "just_selected"
    SETTLED = "settled"


class Action(Enum):
    DEFER = "defer"        # wait for the release
    SKIP = "skip"          # the press already handled this gesture
    SELECT = "select"      # add the target
    DESELECT = "deselect"  # remove the target
    REPLACE = "replace"    # selection becomes the target alone
    RANGE = "range"        # extend/shrink from the last-clicked item


ANY = object()

PRESS_STATES = (TargetState.UNSELECTED, TargetState.SELECTED)
RELEASE_STATES = (TargetState.JUST_SELECTED, TargetState.SETTLED)

# (phase, target_state, is_mouse, chord, many_selected, action)
RULES = (
    (Phase.PRESS, TargetState.SELECTED, ANY, ANY, ANY, Action.DEFER),
    (Phase.PRESS, TargetState.UNSELECTED, True, Chord.NONE, ANY, Action.REPLACE),
    (Phase.PRESS, TargetState.UNSELECTED, ANY, Chord.RANGE, ANY, Action.RANGE),
    (Phase.PRESS, TargetState.UNSELECTED, ANY, ANY, ANY, Action.SELECT),
    (Phase.RELEASE, TargetState.JUST_SELECTED, ANY, ANY, ANY, Action.SKIP),
    (Phase.RELEASE, TargetState.SETTLED, True, Chord.NONE, True, Action.REPLACE),
    (Phase.RELEASE, TargetState.SETTLED, ANY, Chord.RANGE, ANY, Action.RANGE),
    (Phase.RELEASE, TargetState.SETTLED, ANY, ANY, ANY, Action.DESELECT),
)


def _matches(rule: tuple, key: tuple) -> bool:
    return all(want is ANY or want == got for want, got in zip(rule, key))


def _build_table() -> dict[tuple, Action]:
    table: dict[tuple, Action] = {}
    for phase, states in ((Phase.PRESS, PRESS_STATES), (Phase.RELEASE, RELEASE_STATES)):
        for key in itertools.product((phase,), states, (True, False), Chord, (True, False)):
            for rule in RULES:
                if _matches(rule[:-1], key):
                    table[key] = rule[-1]
                    break
            else:
                raise RuntimeError(f"No gesture rule matches {key}")
    return table


TRANSITIONS = _build_table()


def decide(
    phase: Phase,
    target_state: TargetState,
    is_mouse: bool,
    chord: Chord,
    many_selected: bool,
) -> Action:
    """Look up the action for one pointer event."""
    return TRANSITIONS[(phase, target_state, is_mouse, chord, many_selected)]
