"""Undirected graphs with breadth-first and depth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import deque


class Graph:
    """An undirected graph on vertices ``0 .. size - 1`` held as adjacency lists."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("graph size must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise ValueError(f"vertex {vertex} is not in the graph")

    def add_edge(self, a: int, b: int) -> None:
        """Connect ``a`` and ``b`` in both directions."""
        self._check(a)
        self._check(b)
        self._adjacency[b].append(a)
        self._adjacency[a].append(b)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def bfs(self) -> list[int]:
        """Visit every vertex breadth first, starting a new search at each unseen vertex."""
        visited = [False] * self.size
        order: list[int] = []
        for source in range(self.size):
            if visited[source]:
                continue
            visited[source] = True
            queue = deque([source])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for neighbour in self._adjacency[vertex]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        queue.append(neighbour)
        return order

    def dfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first preorder."""
        self._check(start)
        visited = [False] * self.size
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if visited[vertex]:
                continue
            visited[vertex] = True
            order.append(vertex)
            stack.extend(n for n in reversed(self._adjacency[vertex]) if not visited[n])
        return order


def parse_graph(text: str) -> Graph:
    """Build a graph from ``"n e"`` followed by ``e`` pairs of vertices."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as error:
        raise ValueError("graph description must hold integers only") from error
    if len(numbers) < 2:
        raise ValueError("graph description needs a vertex and an edge count")
    size, edges = numbers[0], numbers[1]
    if edges < 0:
        raise ValueError("edge count must not be negative")
    pairs = numbers[2:]
    if len(pairs) < 2 * edges:
        raise ValueError(f"expected {edges} edges, found {len(pairs) // 2}")
    graph = Graph(size)
    for a, b in zip(pairs[0:2 * edges:2], pairs[1:2 * edges:2]):
        graph.add_edge(a, b)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print a traversal of it."""
    parser = argparse.ArgumentParser(
        prog="algokit-graph",
        description="Traverse an undirected graph read from standard input.",
    )
    parser.add_argument("traversal", nargs="?", choices=("bfs", "dfs"), default="bfs")
    parser.add_argument("--start", type=int, default=0, help="start vertex for dfs")
    args = parser.parse_args(argv)
    try:
        graph = parse_graph(sys.stdin.read())
        order = graph.bfs() if args.traversal == "bfs" else graph.dfs(args.start)
    except ValueError as error:
        parser.error(str(error))
    print(" ".join(map(str, order)))
    return 0