"""Weighted undirected graphs, union-find, and minimum spanning tree costs."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from operator import attrgetter


class DisjointSet:
    """Union-find over 0..size-1 with union by rank and path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")

    def find(self, x: int) -> int:
        """Representative of the set holding x."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of a and b; return False if they were already one set."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] == self._rank[root_b]:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_a] = root_b
        return True

    def info(self) -> list[tuple[int, int]]:
        """The (parent, rank) pair of every element."""
        return list(zip(self._parent, self._rank))


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge between u and v."""

    u: int
    v: int
    weight: int


class WeightedGraph:
    """An undirected graph on vertices 0..vertices-1 with weighted edges."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertices}")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]
        self._edges: list[WeightedEdge] = []

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect u and v with an edge of the given weight."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))
        self._edges.append(WeightedEdge(u, v, weight))

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """(neighbour, weight) pairs of u, in insertion order."""
        self._check(u)
        return list(self._adjacency[u])

    def edges(self) -> list[WeightedEdge]:
        """Every edge, in insertion order."""
        return list(self._edges)

    def prim_mst_cost(self, src: int = 0) -> int:
        """Cost of the minimum spanning tree of src's component, grown by Prim's method."""
        self._check(src)
        seen = [False] * len(self._adjacency)
        heap = [(0, src)]
        total = 0
        while heap:
            weight, u = heapq.heappop(heap)
            if seen[u]:
                continue
            seen[u] = True
            total += weight
            for v, edge_weight in self._adjacency[u]:
                if not seen[v]:
                    heapq.heappush(heap, (edge_weight, v))
        return total

    def kruskal_mst_cost(self) -> int:
        """Cost of the minimum spanning forest, built by Kruskal's method."""
        components = DisjointSet(len(self._adjacency))
        return sum(
            edge.weight
            for edge in sorted(self._edges, key=attrgetter("weight"))
            if components.union(edge.u, edge.v)
        )