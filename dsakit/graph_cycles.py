"""Cycle detection in undirected and directed graphs, and bipartiteness."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Optional

Adjacency = Sequence[Sequence[int]]


def has_cycle_undirected_bfs(n: int, adj: Adjacency) -> bool:
    """Detect a cycle in an undirected graph by breadth-first search."""
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        queue: deque[tuple[int, Optional[int]]] = deque([(start, None)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def has_cycle_undirected_dfs(n: int, adj: Adjacency) -> bool:
    """Detect a cycle in an undirected graph by depth-first search."""
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack: list[tuple[int, Optional[int], Iterator[int]]] = [
            (start, None, iter(adj[start]))
        ]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, node, iter(adj[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed_dfs(n: int, adj: Adjacency) -> bool:
    """Detect a cycle in a directed graph by tracking the current DFS path."""
    visited = [False] * n
    on_path = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
                if on_path[nxt]:
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def has_cycle_directed_kahn(n: int, adj: Adjacency) -> bool:
    """Detect a cycle in a directed graph: Kahn's algorithm cannot order every node."""
    indegree = [0] * n
    for targets in adj[:n]:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    ordered = 0
    while queue:
        node = queue.popleft()
        ordered += 1
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return ordered != n


def is_bipartite_bfs(n: int, adj: Adjacency) -> bool:
    """Two-colour the graph breadth first; False on an edge with equal colours."""
    color: list[Optional[int]] = [None] * n
    for start in range(n):
        if color[start] is not None:
            continue
        color[start] = 0
        queue: deque[int] = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if color[nxt] is None:
                    color[nxt] = 1 - color[node]
                    queue.append(nxt)
                elif color[nxt] == color[node]:
                    return False
    return True


def is_bipartite_dfs(n: int, adj: Adjacency) -> bool:
    """Two-colour the graph depth first; False on an edge with equal colours."""
    color: list[Optional[int]] = [None] * n
    for start in range(n):
        if color[start] is not None:
            continue
        color[start] = 0
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if color[nxt] is None:
                    color[nxt] = 1 - color[node]
                    stack.append((nxt, iter(adj[nxt])))
                    break
                if color[nxt] == color[node]:
                    return False
            else:
                stack.pop()
    return True