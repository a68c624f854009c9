"""Weighted graphs stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable
from typing import Any, Generic, TypeVar

V = TypeVar("V", bound=Hashable)


class AdjacencyGraph(Generic[V]):
    """A graph over a fixed set of vertices whose edges live in per-vertex lists.

    Each new edge is placed in front of the ones already recorded for its
    source vertex, so neighbours come out newest first. Adding an edge twice
    records it twice.
    """

    def __init__(self, vertices: Iterable[V] = (), directed: bool = False) -> None:
        self._vertices: list[V] = list(vertices)
        self._index: dict[V, int] = {}
        for i, vertex in enumerate(self._vertices):
            if vertex in self._index:
                raise ValueError(f"duplicate vertex {vertex!r}")
            self._index[vertex] = i
        self.directed = directed
        self._table: list[deque[tuple[int, Any]]] = [deque() for _ in self._vertices]

    @property
    def vertices(self) -> tuple[V, ...]:
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def vertex_index(self, vertex: V) -> int:
        """Return the position of ``vertex``; raise KeyError if it is unknown."""
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(f"unknown vertex {vertex!r}") from None

    def set_edge(self, x: V, y: V, weight: Any) -> None:
        """Record the edge x -> y (and y -> x if undirected) with ``weight``."""
        src = self.vertex_index(x)
        dst = self.vertex_index(y)
        self._table[src].appendleft((dst, weight))
        if not self.directed:
            self._table[dst].appendleft((src, weight))

    def neighbours(self, vertex: V) -> list[tuple[V, Any]]:
        """Return (neighbour, weight) pairs of ``vertex``, newest edge first."""
        return [
            (self._vertices[dst], weight)
            for dst, weight in self._table[self.vertex_index(vertex)]
        ]

    def render(self) -> str:
        """Return one line per vertex listing its (neighbour, weight) pairs."""
        lines = []
        for vertex, row in zip(self._vertices, self._table):
            pairs = "".join(f"({self._vertices[dst]}, {weight}) " for dst, weight in row)
            lines.append(f"{vertex} -> {pairs}")
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()