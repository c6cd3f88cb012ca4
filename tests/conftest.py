"""Shared test fixtures for selectable."""

import pytest

from selectable.api import Selectable
from selectable.core.modifiers import ModifierTracker, reset_modifier_tracker
from selectable.host.memory import MemoryDocument


class ChangeRecorder:
    """Collects change notifications as (selection, selected, deselected) names."""

    def __init__(self):
        self.calls = []

    def __call__(self, event, selection, selected, deselected):
        self.calls.append((event, list(selection), list(selected), list(deselected)))

    @property
    def last(self):
        _, selection, selected, deselected = self.calls[-1]
        return _names(selection), _names(selected), _names(deselected)

    def __len__(self):
        return len(self.calls)


def _names(items):
    return [item.name for item in items]


@pytest.fixture(autouse=True)
def fresh_global_tracker():
    """Keep the process-wide tracker from leaking between tests."""
    reset_modifier_tracker()
    yield
    reset_modifier_tracker()


@pytest.fixture
def document():
    return MemoryDocument()


@pytest.fixture
def tracker():
    return ModifierTracker(platform="other")


@pytest.fixture
def listing(document):
    """A container with items a, b, c, d."""
    container = document.container()
    for name in "abcd":
        container.add_item(name)
    return container


@pytest.fixture
def items(listing):
    """The items of ``listing`` by name."""
    return {node.name: node for node in listing.node.children}


@pytest.fixture
def recorder():
    return ChangeRecorder()


@pytest.fixture
def sel(listing, tracker, recorder):
    return Selectable(listing, modifiers=tracker, on_change=recorder)


@pytest.fixture(name="names")
def names_fixture():
    """Turn a list of nodes into their names."""
    return _names
