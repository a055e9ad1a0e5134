"""Prefix tree over lowercase English words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


def _check(text: str) -> None:
    for char in text:
        if not "a" <= char <= "z":
            raise ValueError(f"unsupported character {char!r}: only a-z allowed")


class Trie:
    """Set of words over the letters ``a`` to ``z`` with prefix lookup."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, text: str) -> Optional[_Node]:
        _check(text)
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None