"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the elements ``0..n-1``."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._parent)}, sets={self._count})"

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def count(self) -> int:
        """Return the number of disjoint sets."""
        return self._count

    def set_size(self, x: int) -> int:
        """Return the size of the set containing ``x``."""
        return self._size[self.find(x)]