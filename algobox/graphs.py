"""Shortest paths: Floyd-Warshall over a matrix and Dijkstra over an edge list."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

INF = 999
"""Distance that marks a missing edge in a matrix."""


def floyd_warshall(graph: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the all-pairs shortest distances of a square distance matrix.

    Missing edges may be given as ``INF`` or as ``math.inf``.
    """
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        through_k = dist[k]
        for row in dist:
            via = row[k]
            for j, onward in enumerate(through_k):
                if via + onward < row[j]:
                    row[j] = via + onward
    return dist


def format_matrix(matrix: Iterable[Iterable[float]]) -> str:
    """Render a distance matrix with four-character cells, missing edges as INF."""
    lines = []
    for row in matrix:
        cells = (
            "%4s" % "INF" if cell == INF or cell == math.inf else "%4d" % cell
            for cell in row
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def dijkstra(
    vertex_count: int,
    edges: Iterable[Sequence[int]],
    source: int,
    destination: int,
) -> int | None:
    """Return the shortest distance between two vertices of an undirected graph.

    Vertices are numbered 0 to ``vertex_count``; each edge is (u, v, weight).
    Returns None when the destination cannot be reached.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    vertices = range(vertex_count + 1)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in vertices]
    for u, v, weight in edges:
        if u not in vertices or v not in vertices:
            raise ValueError(f"edge ({u}, {v}) names an unknown vertex")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    if source not in vertices or destination not in vertices:
        raise ValueError("source and destination must be known vertices")

    pending = [(0, source)]
    visited: set[int] = set()
    while pending:
        distance, vertex = heapq.heappop(pending)
        if vertex in visited:
            continue
        visited.add(vertex)
        if vertex == destination:
            return distance
        for neighbour, weight in adjacency[vertex]:
            if neighbour not in visited:
                heapq.heappush(pending, (distance + weight, neighbour))
    return None