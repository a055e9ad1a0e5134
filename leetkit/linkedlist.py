"""Singly linked list node and helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node in a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)


def build_linked_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from ``values``; return None when there are none."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def linked_list_to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``, empty for None."""
    return [] if head is None else head.to_list()