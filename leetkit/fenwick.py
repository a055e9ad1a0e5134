"""Fenwick tree (binary indexed tree) for prefix sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Prefix-sum structure over ``size`` integers, indexed from 0."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the element at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < self._size:
            return
        i = index + 1
        while i <= self._size:
            self._tree[i] += delta
            i += i & -i

    def query(self, index: int) -> int:
        """Return the sum of elements ``0..index`` inclusive.

        A negative index yields 0; an index past the end sums everything.
        """
        if index < 0:
            return 0
        index = min(index, self._size - 1)
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def query_range(self, left: int, right: int) -> int:
        """Return the sum of elements ``left..right`` inclusive, or 0 for an invalid range."""
        if left < 0 or right >= self._size or left > right:
            return 0
        return self.query(right) - self.query(left - 1)

    @classmethod
    def from_values(cls, nums: Iterable[int]) -> FenwickTree:
        """Build a tree holding the given values."""
        values = list(nums)
        tree = cls(len(values))
        for index, value in enumerate(values):
            tree.update(index, value)
        return tree