"""Topological ordering, eventually safe nodes, alien alphabets and DAG shortest paths."""

from __future__ import annotations

import math
import string
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[int, float]]]


def _kahn(n: int, successors: Callable[[int], Iterable[int]]) -> list[int]:
    indegree = [0] * n
    for node in range(n):
        for target in successors(node):
            indegree[target] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in successors(node):
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def topo_sort_dfs(n: int, adj: Adjacency) -> list[int]:
    """Topological order from reversed depth-first finishing times."""
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def topo_sort_kahn(n: int, adj: Adjacency) -> list[int]:
    """Topological order by Kahn's algorithm; nodes on a cycle are left out."""
    return _kahn(n, lambda node: adj[node])


def eventual_safe_nodes_dfs(n: int, adj: Adjacency) -> list[int]:
    """Ascending list of nodes from which every path ends at a terminal node."""
    visited = [False] * n
    on_path = [False] * n
    safe = [False] * n
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
                    # A cycle taints every node still on the path.
                    stack.clear()
                    break
            else:
                on_path[node] = False
                safe[node] = True
                stack.pop()
    return [node for node in range(n) if safe[node]]


def eventual_safe_nodes_bfs(n: int, adj: Adjacency) -> list[int]:
    """Safe nodes found by Kahn's algorithm on the reversed graph, in discovery order."""
    reverse: list[list[int]] = [[] for _ in range(n)]
    for node in range(n):
        for target in adj[node]:
            reverse[target].append(node)
    outdegree = [len(adj[node]) for node in range(n)]
    queue = deque(node for node in range(n) if outdegree[node] == 0)
    safe: list[int] = []
    while queue:
        node = queue.popleft()
        safe.append(node)
        for source in reverse[node]:
            outdegree[source] -= 1
            if outdegree[source] == 0:
                queue.append(source)
    return safe


def alien_order(words: Sequence[str], k: int) -> str:
    """Order of the first k lowercase letters implied by a sorted alien dictionary."""
    if not 0 <= k <= len(string.ascii_lowercase):
        raise ValueError("k must be between 0 and 26")
    letters = string.ascii_lowercase[:k]

    def index(char: str) -> int:
        position = letters.find(char)
        if position < 0:
            raise ValueError(f"letter {char!r} is outside the first {k} letters")
        return position

    adj: list[list[int]] = [[] for _ in range(k)]
    for first, second in zip(words, words[1:]):
        for a, b in zip(first, second):
            if a != b:
                adj[index(a)].append(index(b))
                break
    return "".join(letters[node] for node in _kahn(k, lambda node: adj[node]))


def _check_source(n: int, source: int) -> None:
    if not 0 <= source < n:
        raise ValueError(f"source {source} is not a node of a graph with {n} nodes")


def shortest_path_dag(n: int, adj: WeightedAdjacency, source: int) -> list[float]:
    """Distances from source in a weighted DAG; unreachable nodes get math.inf."""
    _check_source(n, source)
    order = _kahn(n, lambda node: (target for target, _ in adj[node]))
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for node in order:
        if dist[node] == math.inf:
            continue
        for target, weight in adj[node]:
            dist[target] = min(dist[target], dist[node] + weight)
    return dist


def shortest_path_relaxation(n: int, adj: WeightedAdjacency, source: int) -> list[float]:
    """Distances from source by queue-driven edge relaxation; unreachable is math.inf.

    Raises ValueError when a negative cycle is reachable from source.
    """
    _check_source(n, source)
    dist: list[float] = [math.inf] * n
    edges_used = [0] * n
    dist[source] = 0
    queue: deque[int] = deque([source])
    while queue:
        node = queue.popleft()
        for target, weight in adj[node]:
            candidate = dist[node] + weight
            if candidate < dist[target]:
                dist[target] = candidate
                edges_used[target] = edges_used[node] + 1
                if edges_used[target] >= n:
                    raise ValueError("the graph has a negative cycle reachable from source")
                queue.append(target)
    return dist