"""Find two indices whose values add up to a target."""

from __future__ import annotations

from collections.abc import Iterable


def two_sum(nums: Iterable[int], target: int) -> list[int] | None:
    """Return the indices ``[i, j]`` (``i < j``) of two numbers summing to ``target``.

    Each element is used at most once. Returns ``None`` when no pair exists.
    """
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], index]
        seen[num] = index
    return None