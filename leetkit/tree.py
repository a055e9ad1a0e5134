"""Binary tree node and level-order conversions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

NULL = -1


@dataclass
class TreeNode:
    """A node in a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def slice_to_tree(nums: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from level-order values where -1 marks a missing node.

    The first value is always taken as the root.
    """
    values = list(nums)
    if not values:
        return None
    root = TreeNode(values[0])
    queue: deque[TreeNode] = deque([root])
    rest = iter(values[1:])
    while queue:
        node = queue.popleft()
        left = next(rest, None)
        if left is None:
            break
        if left != NULL:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(rest, None)
        if right is None:
            break
        if right != NULL:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[int]:
    """Return the level-order values of ``root``, -1 for gaps, trailing -1s removed."""
    if root is None:
        return []
    result: list[int] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(NULL)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] == NULL:
        result.pop()
    return result