"""Small graph exercises over adjacency lists indexed by vertex number."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence
from typing import Optional

KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def bfs_order(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour in graph[current]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def knight_graph(n: int) -> list[list[int]]:
    """Knight moves on an ``n`` by ``n`` board; square ``(i, j)`` is vertex ``i * n + j``."""
    if n < 0:
        raise ValueError("board size must not be negative")
    graph: list[list[int]] = [[] for _ in range(n * n)]
    for i in range(n):
        for j in range(n):
            for dx, dy in KNIGHT_MOVES:
                x, y = i + dx, j + dy
                if 0 <= x < n and 0 <= y < n:
                    graph[i * n + j].append(x * n + y)
    return graph


def bfs_distances(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Edge counts from ``start`` to every vertex; -1 where unreachable."""
    distances = [-1] * len(graph)
    distances[start] = 0
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in graph[current]:
            if distances[neighbour] == -1:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return distances


def dijkstra(
    adjacency: Sequence[Sequence[tuple[int, int]]], source: int
) -> tuple[list[Optional[int]], list[Optional[int]]]:
    """Shortest distances and predecessors from ``source``.

    ``adjacency[u]`` lists ``(v, weight)`` pairs. Unreachable vertices have
    distance ``None``; vertices without predecessor have ``None``.
    """
    size = len(adjacency)
    if not 0 <= source < size:
        raise IndexError(f"vertex {source} out of range")
    distances: list[Optional[int]] = [None] * size
    predecessors: list[Optional[int]] = [None] * size
    visited = [False] * size
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        _, u = heapq.heappop(heap)
        visited[u] = True
        base = distances[u]
        assert base is not None
        for v, weight in adjacency[u]:
            candidate = base + weight
            if not visited[v] and (distances[v] is None or candidate < distances[v]):
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(heap, (candidate, v))
    return distances, predecessors


def shortest_path(predecessors: Sequence[Optional[int]], target: int) -> list[int]:
    """Vertices from the root of the predecessor tree down to ``target``."""
    path = [target]
    while (previous := predecessors[path[-1]]) is not None:
        if len(path) > len(predecessors):
            raise ValueError("predecessors contain a cycle")
        path.append(previous)
    path.reverse()
    return path


def find_source(adjacency: Sequence[Sequence[int]]) -> Optional[int]:
    """First vertex with no incoming arc, or ``None`` if every vertex has one."""
    in_degree = [0] * len(adjacency)
    for neighbours in adjacency:
        for v in neighbours:
            in_degree[v] += 1
    return next((u for u, degree in enumerate(in_degree) if degree == 0), None)


def is_path(adjacency: Sequence[Sequence[int]], sequence: Sequence[int]) -> bool:
    """True when ``sequence`` has at least two vertices joined consecutively by arcs."""
    if len(sequence) < 2:
        return False
    return all(v in adjacency[u] for u, v in zip(sequence, sequence[1:]))


def follows_sequence(adjacency: Sequence[Sequence[int]], sequence: Sequence[int]) -> bool:
    """True when the rest of ``sequence`` appears, in order, among the
    neighbours of its first vertex."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    pending = list(sequence[1:])
    for neighbour in adjacency[sequence[0]]:
        if pending and neighbour == pending[0]:
            if len(pending) == 1:
                return True
            pending.pop(0)
    return False