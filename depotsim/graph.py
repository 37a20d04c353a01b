"""Adjacency-list graph of warehouses with breadth-first routing."""

from __future__ import annotations

from collections import deque


class Graph:
    """A directed graph stored as adjacency lists, vertices numbered from 0."""

    __slots__ = ("_adjacency",)

    def __init__(self) -> None:
        self._adjacency: list[list[int]] = []

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adjacency):
            raise IndexError(f"vertex {v} out of range")

    def add_vertex(self) -> None:
        """Append a new vertex with no edges."""
        self._adjacency.append([])

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of undirected edges, counting each stored pair once."""
        return sum(len(neighbors) for neighbors in self._adjacency) // 2

    def min_degree(self) -> int:
        if not self._adjacency:
            raise ValueError("graph has no vertices")
        return min(len(neighbors) for neighbors in self._adjacency)

    def max_degree(self) -> int:
        if not self._adjacency:
            raise ValueError("graph has no vertices")
        return max(len(neighbors) for neighbors in self._adjacency)

    def neighbors(self, v: int) -> list[int]:
        """Neighbours of ``v`` in insertion order."""
        self._check(v)
        return list(self._adjacency[v])

    def describe(self) -> str:
        """One line per vertex listing its neighbours."""
        return "\n".join(
            f"Vértice {v}: " + " ".join(str(w) for w in neighbors)
            for v, neighbors in enumerate(self._adjacency)
        )

    def shortest_path(self, origin: int, destination: int) -> list[int]:
        """Vertices on a fewest-hops path from ``origin`` to ``destination``.

        If the destination cannot be reached the result holds the
        destination alone.
        """
        self._check(origin)
        self._check(destination)
        predecessor: dict[int, int] = {}
        visited = {origin}
        queue = deque([origin])
        while queue:
            v = queue.popleft()
            for w in self._adjacency[v]:
                if w not in visited:
                    visited.add(w)
                    predecessor[w] = v
                    queue.append(w)

        path = [destination]
        while path[-1] in predecessor:
            path.append(predecessor[path[-1]])
        path.reverse()
        return path