"""Connectivity and cycle detection on undirected graphs given as edge lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Build adjacency lists for an undirected graph, validating vertex ids."""
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        first, second, *_ = edge
        for vertex in (first, second):
            if not 0 <= vertex < vertex_count:
                raise ValueError(
                    f"vertex {vertex} outside range 0..{vertex_count - 1}"
                )
        adjacency[first].append(second)
        adjacency[second].append(first)
    return adjacency


def _mark_reachable(start: int, adjacency: list[list[int]], visited: list[bool]) -> None:
    """Mark every vertex reachable from ``start`` as visited (breadth first)."""
    visited[start] = True
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)


def _count_from_adjacency(adjacency: list[list[int]]) -> int:
    visited = [False] * len(adjacency)
    count = 0
    for vertex in range(len(adjacency)):
        if not visited[vertex]:
            count += 1
            _mark_reachable(vertex, adjacency, visited)
    return count


def count_components(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the number of connected components among ``n`` vertices."""
    return _count_from_adjacency(_adjacency(n, edges))


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups described by an adjacency matrix.

    Only the upper triangle (including the diagonal) is consulted; an entry
    equal to 1 joins the two cities.
    """
    size = len(is_connected)
    edges = []
    for i, row in enumerate(is_connected):
        if len(row) != size:
            raise ValueError("adjacency matrix must be square")
        edges.extend((i, j) for j, value in enumerate(row[i:], start=i) if value == 1)
    return count_components(size, edges)


def has_cycle_bfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in an undirected graph with a breadth-first search."""
    adjacency = _adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([(root, -1)])
        while queue:
            vertex, parent = queue.popleft()
            for neighbour in adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append((neighbour, vertex))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_dfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Detect a cycle in an undirected graph with a depth-first search."""
    adjacency = _adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            vertex, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, vertex, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False