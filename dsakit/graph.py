"""Weighted graphs with Dijkstra shortest paths, and connected components."""

from __future__ import annotations

import heapq
import sys
from typing import Iterable, Iterator, Sequence


class WeightedGraph:
    """A graph on vertices ``0 .. vertices - 1`` with non-negative edge weights.

    Adding an edge that already exists keeps the smaller of the two weights.
    """

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.directed = directed
        self._adjacency: list[dict[int, float]] = [{} for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """Connect ``u`` to ``v`` (and back, when undirected) with ``weight``."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._set(u, v, weight)
        if not self.directed:
            self._set(v, u, weight)

    def _set(self, u: int, v: int, weight: float) -> None:
        current = self._adjacency[u].get(v)
        if current is None or weight < current:
            self._adjacency[u][v] = weight

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield ``(u, v, weight)`` for every edge, grouped by ``u`` in insertion order.

        An undirected edge is yielded once, with ``u <= v``.
        """
        for u, neighbours in enumerate(self._adjacency):
            for v, weight in neighbours.items():
                if self.directed or u <= v:
                    yield u, v, weight

    def shortest_distances(self, source: int) -> list[float | None]:
        """Return the distance from ``source`` to every vertex, None where unreachable."""
        self._check(source)
        distances: list[float | None] = [None] * self.vertices
        distances[source] = 0
        done = [False] * self.vertices
        queue: list[tuple[float, int]] = [(0, source)]
        while queue:
            dist, u = heapq.heappop(queue)
            if done[u]:
                continue
            done[u] = True
            for v, weight in self._adjacency[u].items():
                candidate = dist + weight
                if not done[v] and (distances[v] is None or candidate < distances[v]):
                    distances[v] = candidate
                    heapq.heappush(queue, (candidate, v))
        return distances


def count_components(vertices: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of connected components of an undirected graph."""
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")
    neighbours: list[list[int]] = [[] for _ in range(vertices)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertices:
                raise IndexError(f"vertex {vertex} out of range")
        neighbours[u].append(v)
        neighbours[v].append(u)

    visited = [False] * vertices
    components = 0
    for start in range(vertices):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        pending = [start]
        while pending:
            for nxt in neighbours[pending.pop()]:
                if not visited[nxt]:
                    visited[nxt] = True
                    pending.append(nxt)
    return components


def main(argv: Sequence[str] | None = None) -> int:
    """Answer single-source shortest-path queries read from standard input.

    Input: a case count, then per case ``V E``, ``E`` lines ``a b w`` with
    1-based vertices, and the source vertex. For each case one line lists the
    distance to every other vertex in order, ``-1`` where unreachable.
    """
    if argv:
        print("usage: takes no arguments; reads cases from standard input", file=sys.stderr)
        return 2
    numbers = iter(int(token) for token in sys.stdin.read().split())
    try:
        for _ in range(next(numbers)):
            vertices, edge_count = next(numbers), next(numbers)
            graph = WeightedGraph(vertices)
            for _ in range(edge_count):
                a, b, weight = next(numbers), next(numbers), next(numbers)
                graph.add_edge(a - 1, b - 1, weight)
            source = next(numbers) - 1
            distances = graph.shortest_distances(source)
            parts = [
                "-1" if dist is None else str(dist)
                for vertex, dist in enumerate(distances)
                if dist is None or vertex != source
            ]
            print("".join(f"{part} " for part in parts))
    except StopIteration:
        print("unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())