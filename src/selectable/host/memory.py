"""In-memory host: a small element tree with pointer and key dispatch.

Implements the host interfaces without a real UI toolkit. Selectors are
matched against :class:`Node` objects: ``"li"`` matches a kind, ``".row"`` a
class, ``"a, .x"`` any of several, and callables are called with the node.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from ..events import KeyEvent, Phase, PointerEvent, PointerKind
from .base import EventSource, ItemHost


@dataclass(eq=False)
class Node:
    """An element: identity-hashed, with a parent link and ordered children."""

    kind: str = "div"
    name: str = ""
    classes: set[str] = field(default_factory=set)
    visible: bool = True
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)

    def append(self, child: Node) -> Node:
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def add(self, kind: str = "div", name: str = "", **kwargs) -> Node:
        """Create a child node and return it."""
        return self.append(Node(kind=kind, name=name, **kwargs))

    def remove(self, child: Node) -> None:
        self.children.remove(child)
        child.parent = None

    def ancestors(self) -> Iterator[Node]:
        """This node, then its parents up to the root."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent

    def descendants(self) -> Iterator[Node]:
        """All nodes below this one, depth-first in document order."""
        for child in self.children:
            yield child
            yield from child.descendants()

    def contains(self, other: Node) -> bool:
        return any(node is self for node in other.ancestors())

    def is_displayed(self) -> bool:
        return all(node.visible for node in self.ancestors())


def matches(node: Node, selector: Any) -> bool:
    """Match a node against a kind/class selector string or a predicate."""
    if selector is None:
        return False
    if callable(selector):
        return bool(selector(node))
    for token in selector.split(","):
        token = token.strip()
        if not token:
            continue
        if token.startswith("."):
            if token[1:] in node.classes:
                return True
        elif token == node.kind:
            return True
    return False


class MemoryDocument(EventSource):
    """The root of a node tree plus its global listeners."""

    def __init__(self) -> None:
        self.root = Node(kind="document")
        self._key_handlers: list[Callable] = []
        self._blur_handlers: list[Callable] = []
        self._release_handlers: dict[int, Callable] = {}
        self._handles = itertools.count()
        self._containers: list[MemoryContainer] = []

    # --- EventSource ---

    def on_key_transition(self, handler: Callable) -> None:
        self._key_handlers.append(handler)

    def on_window_blur(self, handler: Callable) -> None:
        self._blur_handlers.append(handler)

    def on_document_release(self, handler: Callable) -> int:
        handle = next(self._handles)
        self._release_handlers[handle] = handler
        return handle

    def off_document_release(self, handle: Any) -> None:
        self._release_handlers.pop(handle, None)

    @property
    def release_listener_count(self) -> int:
        return len(self._release_handlers)

    # --- tree ---

    def container(self, node: Node | None = None, kind: str = "ul") -> MemoryContainer:
        """Wrap ``node`` (a new child of the root by default) as a container."""
        if node is None:
            node = self.root.add(kind)
        container = MemoryContainer(self, node)
        self._containers.append(container)
        return container

    # --- dispatch ---

    def key_down(self, key_code: int) -> None:
        self._dispatch_key(KeyEvent(key_code, True))

    def key_up(self, key_code: int) -> None:
        self._dispatch_key(KeyEvent(key_code, False))

    def blur(self) -> None:
        for handler in list(self._blur_handlers):
            handler()

    def press(self, target: Node, kind: PointerKind = PointerKind.MOUSE) -> PointerEvent:
        return self._dispatch_pointer(PointerEvent(Phase.PRESS, kind, target, origin={}))

    def release(self, target: Node, kind: PointerKind = PointerKind.MOUSE) -> PointerEvent:
        return self._dispatch_pointer(PointerEvent(Phase.RELEASE, kind, target, origin={}))

    def click(self, target: Node, kind: PointerKind = PointerKind.MOUSE) -> PointerEvent:
        """Press then release on the same target. Returns the release event."""
        self.press(target, kind)
        return self.release(target, kind)

    def _dispatch_key(self, event: KeyEvent) -> None:
        for handler in list(self._key_handlers):
            handler(event)

    def _dispatch_pointer(self, event: PointerEvent) -> PointerEvent:
        # Innermost containers first, like bubbling
        hit = [c for c in self._containers if c.node.contains(event.target)]
        hit.sort(key=lambda c: -sum(1 for _ in c.node.ancestors()))
        for container in hit:
            container.deliver(event)
        if event.phase is Phase.RELEASE:
            for handler in list(self._release_handlers.values()):
                handler(event)
        return event


class MemoryContainer(ItemHost):
    """A container node whose matching descendants are the items."""

    def __init__(self, document: MemoryDocument, node: Node) -> None:
        self._document = document
        self.node = node
        self._handler: Callable | None = None
        self._selector: Any = None

    @property
    def document(self) -> MemoryDocument:
        return self._document

    def add_item(self, name: str, kind: str = "li", **kwargs) -> Node:
        return self.node.add(kind, name, **kwargs)

    def enumerate_items(self, selector: Any) -> list[Node]:
        if selector is None:
            return list(self.node.children)
        return [node for node in self.node.descendants() if matches(node, selector)]

    def is_visible(self, item: Node) -> bool:
        return item.is_displayed()

    def is_in_cancel_zone(self, target: Any, cancel: Any) -> bool:
        if not isinstance(target, Node):
            return False
        return any(matches(node, cancel) for node in target.ancestors())

    def mark_selected(self, item: Node, selected: bool) -> None:
        if selected:
            item.classes.add("selected")
        else:
            item.classes.discard("selected")

    def bind_pointer(self, handler: Callable, selector: Any) -> None:
        self._handler = handler
        self._selector = selector

    def unbind_pointer(self) -> None:
        self._handler = None

    def deliver(self, event: PointerEvent) -> None:
        """Run the bound handler if the event hit one of the items."""
        if self._handler is None:
            return
        items = set(self.enumerate_items(self._selector))
        for node in event.target.ancestors():
            if node is self.node:
                return
            if node in items:
                event.item = node
                self._handler(event)
                return
