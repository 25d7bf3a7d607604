"""Prim's minimum spanning tree and breadth- and depth-first traversal.

Graphs are adjacency matrices whose vertices are numbered from 1; row and
column 0 are unused.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INFINITY = 32767


@dataclass(frozen=True)
class Edge:
    """An undirected edge between vertices u and v with its cost."""

    u: int
    v: int
    cost: int


def prim_mst(cost: Sequence[Sequence[int]]) -> list[Edge]:
    """Edges of a minimum spanning tree of a cost matrix.

    Costs of INFINITY or more mean "no edge". Raises ValueError if the
    graph is not connected.
    """
    size = len(cost)
    vertices = range(1, size)
    if size - 1 < 2:
        return []

    best = INFINITY
    u = v = 0
    for i in vertices:
        for j in range(i, size):
            if cost[i][j] < best:
                best = cost[i][j]
                u, v = i, j
    if best >= INFINITY:
        raise ValueError("graph is not connected")

    edges = [Edge(u, v, cost[u][v])]
    nearest = {
        i: (u if cost[i][u] < cost[i][v] else v)
        for i in vertices
        if i not in (u, v)
    }

    while nearest:
        best = INFINITY
        k = 0
        for j, t in nearest.items():
            if cost[j][t] < best:
                best = cost[j][t]
                k = j
        if best >= INFINITY:
            raise ValueError("graph is not connected")
        edges.append(Edge(k, nearest[k], cost[k][nearest[k]]))
        del nearest[k]
        for j, t in nearest.items():
            if cost[j][k] < cost[j][t]:
                nearest[j] = k
    return edges


def total_cost(edges: Iterable[Edge]) -> int:
    """Sum of the costs of the given edges."""
    return sum(edge.cost for edge in edges)


def _check_start(graph: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"start vertex {start} out of range")


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from start, in breadth-first order."""
    _check_start(graph, start)
    visited = {start}
    order = [start]
    pending = deque([start])
    while pending:
        i = pending.popleft()
        for j in range(1, len(graph)):
            if graph[i][j] == 1 and j not in visited:
                visited.add(j)
                order.append(j)
                pending.append(j)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from start, in depth-first order."""
    _check_start(graph, start)
    visited: set[int] = set()
    order: list[int] = []

    def visit(i: int) -> None:
        visited.add(i)
        order.append(i)
        for j in range(1, len(graph)):
            if graph[i][j] == 1 and j not in visited:
                visit(j)

    visit(start)
    return order