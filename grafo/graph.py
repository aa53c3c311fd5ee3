"""Adjacency-list graph with degree statistics, shortest paths and edge-list loading."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator

from grafo.priority_queue import PriorityQueue

_EDGE_LINE = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")


class GraphError(Exception):
    """Raised for operations on vertices that do not exist or on an empty graph."""


@dataclass(frozen=True)
class Edge:
    """An outgoing edge to ``target`` with the given weight."""

    target: int
    weight: float


class Graph:
    """A graph of labelled vertices stored as adjacency lists."""

    def __init__(self, capacity: int = 100, directed: bool = False, weighted: bool = False) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.directed = bool(directed)
        self.weighted = bool(weighted)
        self._labels: list[str] = []
        self._adjacency: list[list[Edge]] = []

    def __len__(self) -> int:
        return len(self._labels)

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < len(self._labels):
                raise GraphError(f"vertex {v} does not exist")

    def add_vertex(self, label: str) -> int:
        """Add a vertex, growing capacity by half when full; return its index."""
        if len(self._labels) >= self.capacity:
            self.capacity = max(self.capacity + self.capacity // 2, self.capacity + 1)
        self._labels.append(str(label))
        self._adjacency.append([])
        return len(self._labels) - 1

    def add_edge(self, u: int, v: int, weight: float = 1.0) -> bool:
        """Add edge u->v (and v->u if undirected); return False if it already exists."""
        self._check(u, v)
        if any(edge.target == v for edge in self._adjacency[u]):
            return False
        self._adjacency[u].append(Edge(v, weight))
        if not self.directed:
            self._adjacency[v].append(Edge(u, weight))
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """Remove edge u->v (and v->u if undirected); return False if it is absent."""
        self._check(u, v)
        if not self._drop(u, v):
            return False
        if not self.directed:
            self._drop(v, u)
        return True

    def _drop(self, u: int, v: int) -> bool:
        edges = self._adjacency[u]
        for position, edge in enumerate(edges):
            if edge.target == v:
                del edges[position]
                return True
        return False

    def neighbors(self, v: int) -> Iterator[Edge]:
        """Yield the outgoing edges of v, most recently added first."""
        self._check(v)
        yield from reversed(self._adjacency[v])

    def degree(self, v: int) -> int:
        """Number of adjacency entries of v."""
        self._check(v)
        return len(self._adjacency[v])

    def average_degree(self) -> float:
        """Mean degree over all vertices."""
        if not self._labels:
            raise GraphError("graph is empty")
        return sum(map(len, self._adjacency)) / len(self._labels)

    def max_degree(self) -> tuple[int, int]:
        """Return (degree, vertex) for the first vertex of highest degree."""
        if not self._labels:
            raise GraphError("graph is empty")
        vertex = max(range(len(self._labels)), key=lambda i: len(self._adjacency[i]))
        return len(self._adjacency[vertex]), vertex

    def edge_count(self) -> int:
        """Number of edges; undirected edges are counted once."""
        entries = sum(map(len, self._adjacency))
        return entries if self.directed else entries // 2

    def label(self, v: int) -> str:
        self._check(v)
        return self._labels[v]

    def dijkstra(self, source: int) -> tuple[list[float], list[int | None]]:
        """Shortest distances and predecessors from source; unreachable is infinity."""
        self._check(source)
        count = len(self._labels)
        distances = [math.inf] * count
        predecessors: list[int | None] = [None] * count
        visited = [False] * count
        distances[source] = 0.0
        queue = PriorityQueue(sum(map(len, self._adjacency)) + 1)
        queue.push(source, 0.0)
        while queue:
            item = queue.pop()
            u = item.vertex
            if visited[u]:
                continue
            visited[u] = True
            for edge in self._adjacency[u]:
                step = edge.weight if self.weighted else 1.0
                candidate = distances[u] + step
                if candidate < distances[edge.target]:
                    distances[edge.target] = candidate
                    predecessors[edge.target] = u
                    queue.push(edge.target, candidate)
        return distances, predecessors

    def average_shortest_path(self) -> float:
        """Mean shortest-path length over all ordered pairs of distinct reachable vertices."""
        if not self._labels:
            raise GraphError("graph is empty")
        total = 0.0
        pairs = 0
        for source in range(len(self._labels)):
            distances, _ = self.dijkstra(source)
            for target, distance in enumerate(distances):
                if target != source and distance != math.inf:
                    total += distance
                    pairs += 1
        return total / pairs if pairs else 0.0

    def load_edges(self, path: str | PathLike[str]) -> int:
        """Read an edge list of integer id pairs; return the number of edges added."""
        index: dict[str, int] = {}
        added = 0
        with open(path, encoding="utf-8") as stream:
            for line in stream:
                if line.startswith(("#", "%")):
                    continue
                match = _EDGE_LINE.match(line)
                if match is None:
                    continue
                u_label, v_label = (str(int(token)) for token in match.groups())
                for label in (u_label, v_label):
                    if label not in index:
                        index[label] = self.add_vertex(label)
                if self.add_edge(index[u_label], index[v_label], 1.0):
                    added += 1
        return added