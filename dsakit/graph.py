"""Unweighted adjacency-list graph with traversals, reachability, cycles, colouring and orderings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

_UNSEEN, _ON_STACK, _DONE = 0, 1, 2


class Graph:
    """A graph on vertices 0..vertices-1, undirected unless told otherwise."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertices}")
        self.directed = directed
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect u to v, and v to u as well when the graph is undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if not self.directed:
            self._adjacency[v].append(u)

    def neighbors(self, u: int) -> list[int]:
        """Vertices reachable from u over one edge, in insertion order."""
        self._check(u)
        return list(self._adjacency[u])

    def bfs(self) -> list[list[int]]:
        """Breadth-first order of every component, each started from its lowest vertex."""
        seen = [False] * len(self._adjacency)
        components = []
        for start in range(len(self._adjacency)):
            if seen[start]:
                continue
            seen[start] = True
            order = []
            queue = deque([start])
            while queue:
                u = queue.popleft()
                order.append(u)
                for v in self._adjacency[u]:
                    if not seen[v]:
                        seen[v] = True
                        queue.append(v)
            components.append(order)
        return components

    def dfs(self) -> list[list[int]]:
        """Depth-first order of every component, each started from its lowest vertex."""
        seen = [False] * len(self._adjacency)
        components = []
        for start in range(len(self._adjacency)):
            if seen[start]:
                continue
            seen[start] = True
            order = [start]
            stack = [iter(self._adjacency[start])]
            while stack:
                for v in stack[-1]:
                    if not seen[v]:
                        seen[v] = True
                        order.append(v)
                        stack.append(iter(self._adjacency[v]))
                        break
                else:
                    stack.pop()
            components.append(order)
        return components

    def has_path(self, src: int, dest: int) -> bool:
        """Tell whether dest can be reached from src."""
        self._check(src)
        self._check(dest)
        seen = {src}
        stack = [src]
        while stack:
            u = stack.pop()
            if u == dest:
                return True
            for v in self._adjacency[u]:
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
        return False

    def has_undirected_cycle(self) -> bool:
        """Tell whether the graph, read as undirected, contains a cycle."""
        parent: dict[int, int] = {}
        for start in range(len(self._adjacency)):
            if start in parent:
                continue
            parent[start] = -1
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v in self._adjacency[u]:
                    if v not in parent:
                        parent[v] = u
                        queue.append(v)
                    elif v != parent[u]:
                        return True
        return False

    def has_directed_cycle(self) -> bool:
        """Tell whether following edges forward can lead back to a vertex."""
        state = [_UNSEEN] * len(self._adjacency)
        for start in range(len(self._adjacency)):
            if state[start] != _UNSEEN:
                continue
            state[start] = _ON_STACK
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if state[v] == _ON_STACK:
                        return True
                    if state[v] == _UNSEEN:
                        state[v] = _ON_STACK
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    state[u] = _DONE
                    stack.pop()
        return False

    def is_bipartite(self) -> bool:
        """Tell whether the vertices can be two-coloured with no edge inside a colour."""
        colour: dict[int, bool] = {}
        for start in range(len(self._adjacency)):
            if start in colour:
                continue
            colour[start] = False
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v in self._adjacency[u]:
                    if v not in colour:
                        colour[v] = not colour[u]
                        queue.append(v)
                    elif colour[v] == colour[u]:
                        return False
        return True

    def all_paths(self, src: int, dest: int) -> Iterator[list[int]]:
        """Yield every simple path from src to dest, in depth-first order."""
        self._check(src)
        self._check(dest)
        on_path = [False] * len(self._adjacency)
        path: list[int] = []

        def walk(u: int) -> Iterator[list[int]]:
            if u == dest:
                yield [*path, dest]
                return
            on_path[u] = True
            path.append(u)
            for v in self._adjacency[u]:
                if not on_path[v]:
                    yield from walk(v)
            path.pop()
            on_path[u] = False

        yield from walk(src)

    def topological_sort(self) -> list[int]:
        """Order the vertices by reversed depth-first finishing time."""
        seen = [False] * len(self._adjacency)
        finished = []
        for start in range(len(self._adjacency)):
            if seen[start]:
                continue
            seen[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if not seen[v]:
                        seen[v] = True
                        stack.append((v, iter(self._adjacency[v])))
                        break
                else:
                    finished.append(u)
                    stack.pop()
        finished.reverse()
        return finished

    def topological_sort_kahn(self) -> list[int]:
        """Order the vertices by repeatedly taking those with no incoming edges.

        Vertices on or behind a cycle never lose all incoming edges and are left out.
        """
        indegree = [0] * len(self._adjacency)
        for targets in self._adjacency:
            for v in targets:
                indegree[v] += 1
        queue = deque(u for u, degree in enumerate(indegree) if degree == 0)
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._adjacency[u]:
                indegree[v] -= 1
                if indegree[v] == 0:
                    queue.append(v)
        return order