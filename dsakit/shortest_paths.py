"""Single-source shortest paths over adjacency lists of weighted directed edges."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed edge to vertex v."""

    v: int
    weight: int


def _check(adjacency: Sequence[Sequence[Edge]], src: int) -> None:
    n = len(adjacency)
    if not 0 <= src < n:
        raise IndexError(f"source {src} is out of range")
    for edges in adjacency:
        for edge in edges:
            if not 0 <= edge.v < n:
                raise IndexError(f"edge target {edge.v} is out of range")


def dijkstra(adjacency: Sequence[Sequence[Edge]], src: int) -> list[float]:
    """Distances from src by Dijkstra's method; unreachable vertices get infinity."""
    _check(adjacency, src)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for edge in adjacency[u]:
            candidate = dist[u] + edge.weight
            if candidate < dist[edge.v]:
                dist[edge.v] = candidate
                heapq.heappush(heap, (candidate, edge.v))
    return dist


def bellman_ford(adjacency: Sequence[Sequence[Edge]], src: int) -> list[float]:
    """Distances from src after len(adjacency)-1 rounds of relaxing every edge."""
    _check(adjacency, src)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[src] = 0
    for _ in range(len(adjacency) - 1):
        changed = False
        for u, edges in enumerate(adjacency):
            if dist[u] == math.inf:
                continue
            for edge in edges:
                candidate = dist[u] + edge.weight
                if candidate < dist[edge.v]:
                    dist[edge.v] = candidate
                    changed = True
        if not changed:
            break
    return dist