"""Integer min-heap and max-heap."""

from __future__ import annotations

import heapq


class MinHeap:
    """Heap yielding the smallest value first."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._items)!r})"

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._items, value)

    def pop(self) -> int:
        """Remove and return the smallest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._items)

    def peek(self) -> int:
        """Return the smallest value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap:
    """Heap yielding the largest value first."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted((-v for v in self._items), reverse=True)!r})"

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        heapq.heappush(self._items, -value)

    def pop(self) -> int:
        """Remove and return the largest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty heap")
        return -heapq.heappop(self._items)

    def peek(self) -> int:
        """Return the largest value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return -self._items[0]

    def __len__(self) -> int:
        return len(self._items)