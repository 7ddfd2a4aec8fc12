"""Single-source shortest distance over non-negative edge weights."""
import logging
from typing import Set

from .structures import MinPriorityQueue
from .types import NO_PATH, Node, VertexDistancePair, Weight, WeightedAdjacency
from .validation import validate_search_input

logger = logging.getLogger(__name__)


def dijkstra_shortest_path(start: Node, adjacency: WeightedAdjacency,
                           goal: Node) -> Weight:
    """Shortest distance from start to goal, or NO_PATH (-1) if unreachable.

    Edge weights must be non-negative. Instead of decreasing keys, every
    relaxation pushes a fresh candidate and stale ones are skipped when they
    are extracted for a vertex that is already finalized.

    Raises:
        InvalidArgumentError: if an argument is None or start/goal is not a
            key of ``adjacency``.
    """
    validate_search_input(start, adjacency, goal)
    logger.debug("Computing distance from %r to %r", start, goal)

    queue = MinPriorityQueue()
    visited: Set[Node] = set()
    queue.add(VertexDistancePair(start, 0))
    for edge in adjacency[start]:
        queue.add(edge)

    while not queue.is_empty():
        current = queue.remove()
        while current.vertex in visited:
            if queue.is_empty():
                return _no_path(visited)
            current = queue.remove()

        visited.add(current.vertex)
        if current.vertex == goal:
            logger.debug("Reached %r at distance %s after finalizing %d node(s)",
                         goal, current.distance, len(visited))
            return current.distance

        for neighbor, weight in adjacency.get(current.vertex, ()):
            queue.add(VertexDistancePair(neighbor, current.distance + weight))

    return _no_path(visited)


def _no_path(visited: Set[Node]) -> int:
    logger.debug("Goal unreachable; finalized %d node(s)", len(visited))
    return NO_PATH


shortest_distance = dijkstra_shortest_path
