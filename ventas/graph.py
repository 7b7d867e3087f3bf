"""Undirected graph with optionally weighted edges."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

N = TypeVar("N", bound=Hashable)


class Graph(Generic[N]):
    """Undirected graph stored as adjacency lists; parallel edges are allowed."""

    def __init__(self) -> None:
        self._adjacency: dict[N, list[tuple[N, int]]] = {}

    def add_node(self, node: N) -> None:
        """Add ``node``; adding an existing node does nothing."""
        self._adjacency.setdefault(node, [])

    def _require(self, *nodes: N) -> None:
        for node in nodes:
            if node not in self._adjacency:
                raise KeyError(node)

    def add_edge(self, origin: N, destination: N, weight: int = 1) -> None:
        """Connect two existing nodes; raise KeyError if either is missing."""
        self._require(origin, destination)
        self._adjacency[origin].append((destination, weight))
        self._adjacency[destination].append((origin, weight))

    def remove_node(self, node: N) -> None:
        """Delete ``node`` and every edge touching it; raise KeyError if missing."""
        self._require(node)
        del self._adjacency[node]
        for other, edges in self._adjacency.items():
            self._adjacency[other] = [edge for edge in edges if edge[0] != node]

    def remove_edge(self, origin: N, destination: N) -> None:
        """Delete every edge between two existing nodes."""
        self._require(origin, destination)
        self._adjacency[origin] = [e for e in self._adjacency[origin] if e[0] != destination]
        self._adjacency[destination] = [e for e in self._adjacency[destination] if e[0] != origin]

    def connected(self, origin: N, destination: N) -> bool:
        """Whether a path joins the two nodes; False if either is missing."""
        if origin not in self._adjacency or destination not in self._adjacency:
            return False
        seen = {origin}
        pending = [origin]
        while pending:
            node = pending.pop()
            if node == destination:
                return True
            for neighbor, _ in self._adjacency[node]:
                if neighbor not in seen:
                    seen.add(neighbor)
                    pending.append(neighbor)
        return False

    def neighbors(self, node: N) -> list[tuple[N, int]]:
        """Return ``(neighbor, weight)`` pairs of ``node`` in insertion order."""
        self._require(node)
        return list(self._adjacency[node])

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def render(self) -> str:
        """Return one ``node -> n1 n2 `` line per node, nodes in sorted order."""
        lines = []
        for node in sorted(self._adjacency):  # type: ignore[type-var]
            targets = "".join(f"{neighbor} " for neighbor, _ in self._adjacency[node])
            lines.append(f"{node} -> {targets}")
        return "".join(line + "\n" for line in lines)