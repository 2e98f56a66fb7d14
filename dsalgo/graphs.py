"""Graph traversal, shortest paths, spanning trees and topological order."""

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable
from itertools import count


class CycleError(ValueError):
    """Raised when a directed graph that must be acyclic contains a cycle."""


class Graph:
    """An undirected graph with weighted edges, kept as adjacency lists."""

    def __init__(self, vertices: Iterable[Hashable] = ()) -> None:
        self._adj: dict[Hashable, list[tuple[Hashable, float]]] = {}
        for vertex in vertices:
            self._adj.setdefault(vertex, [])

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 1) -> None:
        """Connect ``u`` and ``v`` in both directions with the given weight."""
        self._adj.setdefault(u, []).append((v, weight))
        self._adj.setdefault(v, []).append((u, weight))

    def _neighbours(self, u: Hashable) -> list[tuple[Hashable, float]]:
        return self._adj.get(u, [])

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Return vertices in breadth-first order from ``source``."""
        visited = {source}
        queue = deque([source])
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v, _ in self._neighbours(u):
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        return order

    def dfs_iterative(self, source: Hashable) -> list[Hashable]:
        """Return vertices in depth-first order using an explicit stack.

        Neighbours are pushed in adjacency order, so the last one is explored first.
        """
        visited: set[Hashable] = set()
        stack = [source]
        order = []
        while stack:
            u = stack.pop()
            if u in visited:
                continue
            visited.add(u)
            order.append(u)
            stack.extend(v for v, _ in self._neighbours(u) if v not in visited)
        return order

    def dfs_recursive(self, source: Hashable) -> list[Hashable]:
        """Return vertices in the pre-order a recursive depth-first search gives.

        Neighbours are explored in adjacency order; deep graphs do not hit the
        interpreter's recursion limit.
        """
        visited = {source}
        order = [source]
        stack = [iter(self._neighbours(source))]
        while stack:
            for v, _ in stack[-1]:
                if v not in visited:
                    visited.add(v)
                    order.append(v)
                    stack.append(iter(self._neighbours(v)))
                    break
            else:
                stack.pop()
        return order

    def two_coloring(self) -> dict[Hashable, int]:
        """Colour every vertex 0 or 1 so that no edge joins equal colours.

        The first vertex of each component, in insertion order, gets colour 0.
        Raises ValueError if the graph is not bipartite.
        """
        colours: dict[Hashable, int] = {}
        for start in self._adj:
            if start in colours:
                continue
            colours[start] = 0
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v, _ in self._adj[u]:
                    if v not in colours:
                        colours[v] = 1 - colours[u]
                        queue.append(v)
                    elif colours[v] == colours[u]:
                        raise ValueError("graph is not bipartite")
        return colours

    def dijkstra(self, source: Hashable) -> dict[Hashable, float]:
        """Return the shortest distance from ``source`` to every vertex.

        Unreachable vertices map to ``math.inf``. Weights must be non-negative.
        """
        if any(w < 0 for edges in self._adj.values() for _, w in edges):
            raise ValueError("dijkstra requires non-negative edge weights")
        dist: dict[Hashable, float] = dict.fromkeys(self._adj, math.inf)
        dist[source] = 0
        tie = count()
        heap = [(0, next(tie), source)]
        while heap:
            d, _, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, w in self._neighbours(u):
                candidate = d + w
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, next(tie), v))
        return dist

    def prim_mst_weight(self, start: Hashable | None = None) -> float:
        """Return the weight of a minimum spanning tree of ``start``'s component.

        Without ``start`` the first vertex added is used; an empty graph gives 0.
        """
        if start is None:
            if not self._adj:
                return 0
            start = next(iter(self._adj))
        visited: set[Hashable] = set()
        total: float = 0
        tie = count()
        heap = [(0, next(tie), start)]
        while heap:
            w, _, u = heapq.heappop(heap)
            if u in visited:
                continue
            visited.add(u)
            total += w
            for v, weight in self._neighbours(u):
                if v not in visited:
                    heapq.heappush(heap, (weight, next(tie), v))
        return total


def _directed_adjacency(
    vertices: Iterable[Hashable], edges: Iterable[tuple[Hashable, Hashable]]
) -> dict[Hashable, list[Hashable]]:
    adj: dict[Hashable, list[Hashable]] = {v: [] for v in vertices}
    for u, v in edges:
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, [])
    return adj


def _postorder(adj: dict[Hashable, list[Hashable]]) -> list[Hashable]:
    """Depth-first post-order over all vertices; raises CycleError on a back edge."""
    in_progress, done = 1, 2
    state: dict[Hashable, int] = {}
    order = []
    for root in adj:
        if root in state:
            continue
        state[root] = in_progress
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                seen = state.get(v)
                if seen == in_progress:
                    raise CycleError(f"cycle through vertex {v!r}")
                if seen is None:
                    state[v] = in_progress
                    stack.append((v, iter(adj[v])))
                    break
            else:
                state[u] = done
                order.append(u)
                stack.pop()
    return order


def has_cycle(
    vertices: Iterable[Hashable], edges: Iterable[tuple[Hashable, Hashable]]
) -> bool:
    """Return True if the directed graph has a cycle."""
    try:
        _postorder(_directed_adjacency(vertices, edges))
    except CycleError:
        return True
    return False


def topological_sort(
    vertices: Iterable[Hashable], edges: Iterable[tuple[Hashable, Hashable]]
) -> list[Hashable]:
    """Return the vertices so every edge ``(u, v)`` has ``u`` before ``v``.

    Raises CycleError if the directed graph is not acyclic.
    """
    return _postorder(_directed_adjacency(vertices, edges))[::-1]