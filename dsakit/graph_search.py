"""Breadth-first and depth-first graph traversal and connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

Adjacency = Sequence[Sequence[int]]


def _require_nodes(n: int) -> None:
    if n < 1:
        raise ValueError("the graph must have at least one node to start from")


def bfs(n: int, adj: Adjacency) -> list[int]:
    """Breadth-first order of the nodes reachable from node 0."""
    _require_nodes(n)
    visited = [False] * n
    visited[0] = True
    order: list[int] = []
    queue: deque[int] = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def dfs_iterative(n: int, adj: Adjacency) -> list[int]:
    """Stack-driven order from node 0; nodes are marked when pushed."""
    _require_nodes(n)
    visited = [False] * n
    visited[0] = True
    order: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in adj[node]:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append(nxt)
    return order


def dfs(n: int, adj: Adjacency) -> list[int]:
    """True depth-first order of the nodes reachable from node 0."""
    _require_nodes(n)
    visited = [False] * n
    visited[0] = True
    order = [0]
    stack = [iter(adj[0])]
    while stack:
        for nxt in stack[-1]:
            if not visited[nxt]:
                visited[nxt] = True
                order.append(nxt)
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()
    return order


def _count_components(n: int, neighbours: Callable[[int], Iterable[int]]) -> int:
    visited = [False] * n
    count = 0
    for start in range(n):
        if visited[start]:
            continue
        count += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in neighbours(node):
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append(nxt)
    return count


def count_provinces(n: int, adj: Adjacency) -> int:
    """Number of connected components of an adjacency-list graph."""
    return _count_components(n, lambda node: adj[node])


def count_provinces_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Number of connected components of a graph given as an adjacency matrix."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    return _count_components(
        n, lambda node: (j for j, cell in enumerate(matrix[node]) if cell != 0)
    )