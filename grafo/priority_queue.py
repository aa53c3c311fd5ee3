"""A bounded binary min-heap of (vertex, distance) items used by Dijkstra."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass


@dataclass(frozen=True)
class QueueItem:
    """A vertex together with its tentative distance."""

    vertex: int
    distance: float


class PriorityQueue:
    """Min-priority queue ordered by distance, holding at most ``capacity`` items."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._heap: list[tuple[float, int, int]] = []
        self._order = itertools.count()

    def push(self, vertex: int, distance: float) -> None:
        """Insert a vertex with the given distance."""
        if self.capacity is not None and len(self._heap) >= self.capacity:
            raise OverflowError("priority queue is full")
        heapq.heappush(self._heap, (distance, next(self._order), vertex))

    def pop(self) -> QueueItem:
        """Remove and return the item with the smallest distance."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        distance, _, vertex = heapq.heappop(self._heap)
        return QueueItem(vertex, distance)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)