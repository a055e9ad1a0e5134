"""Segment tree for range sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Sum segment tree over a fixed-length sequence of integers, indexed from 0."""

    def __init__(self, data: Iterable[int]) -> None:
        self._data = list(data)
        self._n = len(self._data)
        self._tree = [0] * (4 * self._n)
        if self._n:
            self._build(0, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._data[start]
            return
        mid = (start + end) // 2
        left, right = 2 * node + 1, 2 * node + 2
        self._build(left, start, mid)
        self._build(right, mid + 1, end)
        self._tree[node] = self._tree[left] + self._tree[right]

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``; raise IndexError if out of range."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, 0, self._n - 1, index, value)

    def _update(self, node: int, start: int, end: int, index: int, value: int) -> None:
        if start == end:
            self._data[index] = value
            self._tree[node] = value
            return
        mid = (start + end) // 2
        left, right = 2 * node + 1, 2 * node + 2
        if index <= mid:
            self._update(left, start, mid, index, value)
        else:
            self._update(right, mid + 1, end, index, value)
        self._tree[node] = self._tree[left] + self._tree[right]

    def query(self, start: int, end: int) -> int:
        """Return the sum of elements ``start..end`` inclusive.

        Parts of the range outside the data contribute nothing; an empty or
        disjoint range yields 0.
        """
        if start > end or start >= self._n or end < 0:
            return 0
        return self._query(0, 0, self._n - 1, start, end)

    def _query(self, node: int, start: int, end: int, lo: int, hi: int) -> int:
        if lo > end or hi < start:
            return 0
        if lo <= start and end <= hi:
            return self._tree[node]
        mid = (start + end) // 2
        return self._query(2 * node + 1, start, mid, lo, hi) + self._query(
            2 * node + 2, mid + 1, end, lo, hi
        )