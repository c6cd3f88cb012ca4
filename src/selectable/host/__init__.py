"""Host interfaces and the in-memory reference host."""

from .base import DEFAULT_CANCEL, EventSource, ItemHost
from .memory import MemoryContainer, MemoryDocument, Node

__all__ = [
    "DEFAULT_CANCEL",
    "EventSource",
    "ItemHost",
    "MemoryContainer",
    "MemoryDocument",
    "Node",
]
