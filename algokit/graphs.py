"""Graph algorithms: depth-first search, Dijkstra, topological sort and island areas."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Iterator, Sequence


def _depth_first(start: Hashable, neighbours) -> list:
    """Visit from ``start`` in recursive depth-first order, without recursion."""
    order = [start]
    visited = {start}
    stack: list[Iterator] = [iter(neighbours(start))]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(neighbours(nxt)))
                break
        else:
            stack.pop()
    return order


class Graph:
    """A directed graph stored as adjacency lists."""

    def __init__(self) -> None:
        self.adjacency: dict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, v: Hashable, w: Hashable) -> None:
        """Add an edge from ``v`` to ``w``."""
        self.adjacency[v].append(w)

    def dfs(self, start: Hashable) -> list:
        """Return the vertices reachable from ``start`` in depth-first order."""
        return _depth_first(start, lambda v: self.adjacency.get(v, ()))


def dfs_undirected(n: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Depth-first order from ``start`` in an undirected graph on vertices 0..n-1.

    Neighbours are visited in ascending order.
    """
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} out of range")
    adjacent: list[set[int]] = [set() for _ in range(n)]
    for first, second in edges:
        if not (0 <= first < n and 0 <= second < n):
            raise ValueError(f"edge ({first}, {second}) out of range")
        adjacent[first].add(second)
        adjacent[second].add(first)
    ordered = [sorted(v for v in vertices if v != i) for i, vertices in enumerate(adjacent)]
    return _depth_first(start, ordered.__getitem__)


def dijkstra(graph: Sequence[Sequence[float]], src: int) -> list[float]:
    """Return shortest distances from ``src`` in a weighted adjacency matrix.

    A weight of 0 means no edge. Unreachable vertices get ``math.inf``.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= src < n:
        raise ValueError(f"source vertex {src} out of range")
    dist = [math.inf] * n
    done = [False] * n
    dist[src] = 0
    for _ in range(n - 1):
        u = None
        lowest = math.inf
        for v in range(n):
            if not done[v] and dist[v] <= lowest:
                lowest, u = dist[v], v
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def topological_sort(nodes: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices 0..nodes-1 so that every edge points forward (Kahn's algorithm).

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    adjacency: list[list[int]] = [[] for _ in range(nodes)]
    indegree = [0] * nodes
    for u, v in edges:
        if not (0 <= u < nodes and 0 <= v < nodes):
            raise ValueError(f"edge ({u}, {v}) out of range")
        adjacency[u].append(v)
        indegree[v] += 1
    queue = deque(v for v in range(nodes) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


_AROUND = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest island, with cells joined in all eight directions.

    An island starts from a cell holding 1 and spreads over non-zero cells.
    The grid is not changed.
    """
    land = {(i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value}
    best = 0
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value != 1 or (i, j) not in land:
                continue
            land.discard((i, j))
            stack = [(i, j)]
            area = 0
            while stack:
                ci, cj = stack.pop()
                area += 1
                for di, dj in _AROUND:
                    cell = (ci + di, cj + dj)
                    if cell in land:
                        land.discard(cell)
                        stack.append(cell)
            best = max(best, area)
    return best