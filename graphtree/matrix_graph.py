"""Weighted graphs stored as adjacency matrices, with the classic algorithms."""

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .disjoint_set import UnionFindSet

V = TypeVar("V", bound=Hashable)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    src: Any
    dst: Any
    weight: Any


class NegativeCycleError(ValueError):
    """Raised when a shortest path is asked for in a graph with a negative cycle."""


class NotConnectedError(ValueError):
    """Raised when the vertices needed by an algorithm are not all reachable."""


class MatrixGraph(Generic[V]):
    """A graph over a fixed set of vertices whose edges live in a matrix.

    A missing edge is stored as ``None``. Undirected graphs keep the matrix
    symmetric.
    """

    def __init__(self, vertices: Iterable[V] = (), directed: bool = False) -> None:
        self._vertices: list[V] = list(vertices)
        self._index: dict[V, int] = {}
        for i, vertex in enumerate(self._vertices):
            if vertex in self._index:
                raise ValueError(f"duplicate vertex {vertex!r}")
            self._index[vertex] = i
        self.directed = directed
        size = len(self._vertices)
        self._matrix: list[list[Any]] = [[None] * size for _ in range(size)]

    @property
    def vertices(self) -> tuple[V, ...]:
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def _empty_copy(self) -> MatrixGraph[V]:
        return MatrixGraph(self._vertices, self.directed)

    def vertex_index(self, vertex: V) -> int:
        """Return the position of ``vertex``; raise KeyError if it is unknown."""
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(f"unknown vertex {vertex!r}") from None

    def _set(self, src: int, dst: int, weight: Any) -> None:
        self._matrix[src][dst] = weight
        if not self.directed:
            self._matrix[dst][src] = weight

    def set_edge(self, x: V, y: V, weight: Any) -> None:
        """Set the weight of the edge x -> y (both ways if undirected); None removes it."""
        self._set(self.vertex_index(x), self.vertex_index(y), weight)

    def weight(self, x: V, y: V) -> Any:
        """Return the weight of x -> y, or None if there is no such edge."""
        return self._matrix[self.vertex_index(x)][self.vertex_index(y)]

    def edges(self) -> Iterator[Edge]:
        """Yield every edge; an undirected edge is yielded once."""
        for i, row in enumerate(self._matrix):
            for j, weight in enumerate(row):
                if weight is None or (not self.directed and j < i):
                    continue
                yield Edge(self._vertices[i], self._vertices[j], weight)

    def _neighbours(self, idx: int) -> Iterator[int]:
        return (j for j, weight in enumerate(self._matrix[idx]) if weight is not None)

    def render(self) -> str:
        """Return the vertex legend and the weight matrix as text, '#' for no edge."""
        width = max(
            (len(str(w)) for row in self._matrix for w in row if w is not None),
            default=1,
        )
        width = max(width, 1)
        lines = ["Vertex Index:"]
        lines.append("".join(f"[{i}] {v}  " for i, v in enumerate(self._vertices)))
        lines.append("")
        header = " " * (width + 1) + "".join(
            f"{i:>{width + 1}}" for i in range(len(self._vertices))
        )
        lines.append(header)
        for i, row in enumerate(self._matrix):
            cells = "".join(
                f"{'#' if w is None else w:>{width + 1}}" for w in row
            )
            lines.append(f"{i:>{width}} {cells}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def kruskal(self) -> MatrixGraph[V]:
        """Return a minimum spanning tree built by Kruskal's algorithm."""
        size = len(self._vertices)
        candidates = sorted(
            (
                (weight, i, j)
                for i, row in enumerate(self._matrix)
                for j, weight in enumerate(row)
                if weight is not None
            ),
            key=lambda item: item[0],
        )
        tree = self._empty_copy()
        sets = UnionFindSet(size)
        added = 0
        for weight, i, j in candidates:
            if sets.union(i, j):
                tree._set(i, j, weight)
                added += 1
        if added < size - 1:
            raise NotConnectedError(
                f"graph is not connected: {size - 1 - added} tree edges missing"
            )
        return tree

    def prim(self, start: V) -> MatrixGraph[V]:
        """Return a minimum spanning tree grown from ``start`` by Prim's algorithm."""
        src = self.vertex_index(start)
        pending = set(range(len(self._vertices)))
        pending.discard(src)
        heap = [
            (weight, src, i)
            for i, weight in enumerate(self._matrix[src])
            if i != src and weight is not None
        ]
        heapq.heapify(heap)
        tree = self._empty_copy()
        while pending:
            if not heap:
                raise NotConnectedError(
                    f"graph is not connected: {len(pending)} vertices unreachable"
                )
            weight, u, v = heapq.heappop(heap)
            if v not in pending:
                continue
            tree._set(u, v, weight)
            pending.remove(v)
            for i in self._neighbours(v):
                if i in pending:
                    heapq.heappush(heap, (self._matrix[v][i], v, i))
        return tree

    def _path(self, src: int, dst: int, parent: list[int]) -> list[V]:
        if src == dst:
            return [self._vertices[src]]
        if parent[dst] == -1:
            raise NotConnectedError(
                f"{self._vertices[dst]!r} is unreachable from {self._vertices[src]!r}"
            )
        route = [dst]
        idx = dst
        while parent[idx] != src:
            idx = parent[idx]
            route.append(idx)
        route.append(src)
        return [self._vertices[i] for i in reversed(route)]

    def dijkstra(self, start: V, end: V) -> list[V]:
        """Return a shortest path from ``start`` to ``end``; weights must be non-negative."""
        src = self.vertex_index(start)
        dst = self.vertex_index(end)
        size = len(self._vertices)
        dist = [math.inf] * size
        parent = [-1] * size
        dist[src] = 0
        parent[src] = src
        done = [False] * size
        for _ in range(size):
            u = min(
                (i for i in range(size) if not done[i] and dist[i] < math.inf),
                key=dist.__getitem__,
                default=None,
            )
            if u is None:
                break
            for j in self._neighbours(u):
                if done[j]:
                    continue
                candidate = dist[u] + self._matrix[u][j]
                if candidate < dist[j]:
                    dist[j] = candidate
                    parent[j] = u
            done[u] = True
        return self._path(src, dst, parent)

    def bellman_ford(self, start: V, end: V) -> list[V]:
        """Return a shortest path allowing negative weights.

        Raises NegativeCycleError if a negative cycle is reachable from ``start``.
        """
        src = self.vertex_index(start)
        dst = self.vertex_index(end)
        size = len(self._vertices)
        dist = [math.inf] * size
        parent = [-1] * size
        dist[src] = 0
        parent[src] = src
        for round_no in range(1, size + 1):
            log.debug("relaxation round %d", round_no)
            changed = False
            for j, row in enumerate(self._matrix):
                if dist[j] == math.inf:
                    continue
                for k, weight in enumerate(row):
                    if weight is None:
                        continue
                    if dist[j] + weight < dist[k]:
                        log.debug("relax %d -> %d: %s -> %s", j, k, dist[k], dist[j] + weight)
                        dist[k] = dist[j] + weight
                        parent[k] = j
                        changed = True
            if not changed:
                break
            if round_no == size:
                raise NegativeCycleError("graph has a negative-weight cycle")
        return self._path(src, dst, parent)

    def floyd_warshall(self) -> dict[tuple[V, V], list[V]]:
        """Return shortest paths between every ordered pair of distinct, connected vertices."""
        size = len(self._vertices)
        dist = [[math.inf if w is None else w for w in row] for row in self._matrix]
        parent = [
            [-1 if w is None else i for w in row] for i, row in enumerate(self._matrix)
        ]
        for i in range(size):
            dist[i][i] = 0
            parent[i][i] = -1

        for k in range(size):
            for i in range(size):
                dik = dist[i][k]
                if dik == math.inf:
                    continue
                for j in range(size):
                    dkj = dist[k][j]
                    if dkj == math.inf:
                        continue
                    if dist[i][j] > dik + dkj:
                        dist[i][j] = dik + dkj
                        parent[i][j] = parent[k][j]
            log.debug("after pivot %d: dist=%s parent=%s", k, dist, parent)

        if any(dist[i][i] < 0 for i in range(size)):
            raise NegativeCycleError("graph has a negative-weight cycle")

        return {
            (self._vertices[i], self._vertices[j]): self._path(i, j, parent[i])
            for i in range(size)
            for j in range(size)
            if i != j and dist[i][j] < math.inf
        }

    def bfs(self, start: V) -> list[V]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        src = self.vertex_index(start)
        seen = {src}
        order: list[V] = []
        queue = deque([src])
        while queue:
            current = queue.popleft()
            order.append(self._vertices[current])
            for nxt in self._neighbours(current):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return order

    def dfs(self, start: V) -> list[V]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        src = self.vertex_index(start)
        seen = {src}
        order = [self._vertices[src]]
        stack = [self._neighbours(src)]
        while stack:
            for nxt in stack[-1]:
                if nxt not in seen:
                    seen.add(nxt)
                    order.append(self._vertices[nxt])
                    stack.append(self._neighbours(nxt))
                    break
            else:
                stack.pop()
        return order