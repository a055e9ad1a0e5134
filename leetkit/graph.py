"""Directed graph stored as an adjacency list."""

from __future__ import annotations


class Graph:
    """Directed graph with integer node ids."""

    def __init__(self) -> None:
        self.adj: dict[int, list[int]] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.adj!r})"

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self.adj.setdefault(u, []).append(v)

    def add_node(self, u: int) -> None:
        """Ensure ``u`` exists in the graph, even without edges."""
        self.adj.setdefault(u, [])

    def neighbors(self, u: int) -> list[int]:
        """Return the nodes ``u`` has edges to, in insertion order."""
        return list(self.adj.get(u, ()))

    def nodes(self) -> list[int]:
        """Return every node that has been added or has outgoing edges."""
        return list(self.adj)