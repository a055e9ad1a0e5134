"""Sorted set of integers stored as a skip list."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Optional

MAX_LEVEL = 16


class _Node:
    __slots__ = ("val", "forward")

    def __init__(self, val: int, level: int) -> None:
        self.val = val
        self.forward: list[Optional[_Node]] = [None] * (level + 1)


class SkipList:
    """Skip list holding distinct integers in ascending order."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._header = _Node(-1, MAX_LEVEL - 1)
        self._level = 0
        self._size = 0
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __len__(self) -> int:
        return self._size

    def _random_level(self) -> int:
        level = 0
        while self._rng.randrange(2) == 0 and level < MAX_LEVEL - 1:
            level += 1
        return level

    def _predecessors(self, value: int) -> list[_Node]:
        update: list[_Node] = [self._header] * MAX_LEVEL
        current = self._header
        for i in range(self._level, -1, -1):
            nxt = current.forward[i]
            while nxt is not None and nxt.val < value:
                current = nxt
                nxt = current.forward[i]
            update[i] = current
        return update

    def search(self, target: int) -> bool:
        """Return True if ``target`` is in the list."""
        candidate = self._predecessors(target)[0].forward[0]
        return candidate is not None and candidate.val == target

    def insert(self, value: int) -> None:
        """Add ``value``; a value already present is left as is."""
        update = self._predecessors(value)
        candidate = update[0].forward[0]
        if candidate is not None and candidate.val == value:
            return
        new_level = self._random_level()
        if new_level > self._level:
            for i in range(self._level + 1, new_level + 1):
                update[i] = self._header
            self._level = new_level
        node = _Node(value, new_level)
        for i in range(new_level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        update = self._predecessors(value)
        target = update[0].forward[0]
        if target is None or target.val != value:
            return False
        for i in range(self._level + 1):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]
        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1
        self._size -= 1
        return True

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value)

    def __iter__(self) -> Iterator[int]:
        node = self._header.forward[0]
        while node is not None:
            yield node.val
            node = node.forward[0]