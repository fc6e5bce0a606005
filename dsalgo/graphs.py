"""Shortest paths (Dijkstra, Floyd-Warshall) and Prim's minimum spanning tree."""

from __future__ import annotations

import math
from typing import Hashable, Iterable, Optional, Sequence

INF = 99999
"""Sentinel used in adjacency matrices for vertices that are not connected."""

_MATRIX_HEADER = "The following matrix shows the shortest distances between every pair of vertices "


def dijkstra(
    edges: Iterable[tuple[Hashable, Hashable, float]], start: Hashable
) -> tuple[dict[Hashable, float], dict[Hashable, Optional[Hashable]]]:
    """Single-source shortest paths over undirected weighted edges.

    Returns ``(distances, previous)``: the distance from ``start`` to every
    node (``math.inf`` when unreachable) and each node's predecessor on its
    shortest route (``None`` for the start and for unreachable nodes).
    Between two nodes joined by several edges, the first edge's weight counts.
    """
    edge_list = list(edges)
    nodes: list[Hashable] = []
    known: set[Hashable] = set()
    for u, v, _ in edge_list:
        for node in (u, v):
            if node not in known:
                known.add(node)
                nodes.append(node)
    if start not in known:
        known.add(start)
        nodes.append(start)

    weight: dict[tuple[Hashable, Hashable], float] = {}
    neighbours: dict[Hashable, list[Hashable]] = {node: [] for node in nodes}
    for u, v, w in edge_list:
        weight.setdefault((u, v), w)
        weight.setdefault((v, u), w)
        neighbours[u].append(v)
        if u != v:
            neighbours[v].append(u)

    distances: dict[Hashable, float] = {node: math.inf for node in nodes}
    previous: dict[Hashable, Optional[Hashable]] = {node: None for node in nodes}
    distances[start] = 0

    remaining = list(nodes)
    pending = set(nodes)
    while remaining:
        smallest = min(remaining, key=distances.__getitem__)
        remaining.remove(smallest)
        pending.discard(smallest)
        for adjacent in neighbours[smallest]:
            if adjacent not in pending:
                continue
            candidate = distances[smallest] + weight[(smallest, adjacent)]
            if candidate < distances[adjacent]:
                distances[adjacent] = candidate
                previous[adjacent] = smallest
    return distances, previous


def shortest_route(
    edges: Iterable[tuple[Hashable, Hashable, float]], start: Hashable, destination: Hashable
) -> tuple[float, list[Hashable]]:
    """Distance and node sequence of the shortest route from ``start`` to ``destination``."""
    distances, previous = dijkstra(edges, start)
    if destination not in distances:
        raise KeyError(destination)
    if math.isinf(distances[destination]):
        raise ValueError(f"{destination!r} is not reachable from {start!r}")
    route: list[Hashable] = []
    node: Optional[Hashable] = destination
    while node is not None:
        route.append(node)
        node = previous[node]
    route.reverse()
    return distances[destination], route


def _check_square(graph: Sequence[Sequence[float]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; ``INF`` marks missing edges and unreachable pairs."""
    size = _check_square(graph)
    dist = [list(row) for row in graph]
    for k in range(size):
        through_k = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j in range(size):
                if through_k[j] != INF and row[j] > via + through_k[j]:
                    row[j] = via + through_k[j]
    return dist


def format_distance_matrix(dist: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as text, writing ``INF`` for unreachable pairs."""
    lines = [_MATRIX_HEADER]
    for row in dist:
        lines.append("".join(("INF" if value == INF else str(value)) + "\t " for value in row))
    return "\n".join(lines) + "\n"


def prim_mst(graph: Sequence[Sequence[float]]) -> list[tuple[int, int, float]]:
    """Minimum spanning tree of a connected graph given as an adjacency matrix.

    Zero entries mean "no edge". Returns ``(parent, vertex, weight)`` for
    every vertex but the root 0, in vertex order.
    """
    size = _check_square(graph)
    if size == 0:
        return []
    key = [math.inf] * size
    parent: list[Optional[int]] = [None] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, w in enumerate(graph[u]):
            if w and not in_tree[v] and w < key[v]:
                parent[v] = u
                key[v] = w

    tree = []
    for vertex in range(1, size):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("graph is not connected")
        tree.append((origin, vertex, graph[vertex][origin]))
    return tree