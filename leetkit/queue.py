"""First-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """FIFO queue of arbitrary items."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def enqueue(self, item: T) -> None:
        """Add ``item`` to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the front item without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)