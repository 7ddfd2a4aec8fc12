"""Worklists driving the searches: stack and queue frontiers, min-priority queue."""
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, List, Tuple
import heapq

from .types import EmptyStructureError, VertexDistancePair, WeightedEdge


class Structure(ABC):
    """A worklist that hands elements back according to its own discipline.

    Searches only rely on ``add``, ``remove`` and ``is_empty``; which element
    ``remove`` returns is up to the subclass.
    """

    @abstractmethod
    def add(self, item: Any) -> None:
        """Insert one element."""

    @abstractmethod
    def remove(self) -> Any:
        """Extract the next element, raising EmptyStructureError when empty."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True when nothing is left to remove."""


class StructureStack(Structure):
    """Last-in-first-out structure."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def add(self, item: Any) -> None:
        self._items.append(item)

    def remove(self) -> Any:
        if not self._items:
            raise EmptyStructureError("remove from empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class StructureQueue(Structure):
    """First-in-first-out structure."""

    def __init__(self) -> None:
        self._items = deque()

    def add(self, item: Any) -> None:
        self._items.append(item)

    def remove(self) -> Any:
        if not self._items:
            raise EmptyStructureError("remove from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class MinPriorityQueue:
    """Min-heap of (vertex, distance) pairs ordered by distance.

    Holds pairs rather than bare nodes, so it is not a Structure.

    Equal distances come out in insertion order, and vertices are never
    compared with each other, so they need not be orderable.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, int, VertexDistancePair]] = []
        self._counter = 0

    def add(self, item: WeightedEdge) -> None:
        pair = VertexDistancePair(*item)
        self._counter += 1
        heapq.heappush(self._heap, (pair.distance, self._counter, pair))

    def remove(self) -> VertexDistancePair:
        if not self._heap:
            raise EmptyStructureError("remove from empty priority queue")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
