"""Reachability search: one algorithm body, BFS or DFS by injected structure."""
import logging
from typing import Any, Set

from .structures import Structure, StructureQueue, StructureStack
from .types import Adjacency, Node
from .validation import validate_search_input

logger = logging.getLogger(__name__)

# Marks an exhausted structure; None may be a legitimate node elsewhere
_EXHAUSTED = object()


def general_graph_search(start: Node, structure: Structure,
                         adjacency: Adjacency, goal: Node) -> bool:
    """Return True if goal is reachable from start.

    The traversal order comes entirely from ``structure``: a stack gives a
    depth-first search and a queue a breadth-first one. Neighbors are added in
    the order the adjacency list gives them. Duplicates may sit in the
    structure; nodes already visited are dropped when they come back out.
    The goal itself is never expanded and nothing more is removed once it
    has been reached.

    Raises:
        InvalidArgumentError: if an argument is None or start/goal is not a
            key of ``adjacency``.
    """
    validate_search_input(start, adjacency, goal)
    logger.debug("Searching for %r from %r with %s",
                 goal, start, type(structure).__name__)

    visited: Set[Node] = set()
    current = start
    found = False
    while current is not _EXHAUSTED:
        # The goal ends the search as soon as it leaves the structure
        if current == goal:
            found = True
            break
        for neighbor in adjacency.get(current, ()):
            if neighbor not in visited:
                structure.add(neighbor)
        visited.add(current)
        current = _next_unvisited(structure, visited)

    logger.debug("Visited %d node(s); goal %s", len(visited),
                 "reached" if found else "unreachable")
    return found


def _next_unvisited(structure: Structure, visited: Set[Node]) -> Any:
    """Pop until an unvisited node turns up or the structure runs dry."""
    while not structure.is_empty():
        node = structure.remove()
        if node not in visited:
            return node
    return _EXHAUSTED


def breadth_first_search(start: Node, adjacency: Adjacency, goal: Node) -> bool:
    """Breadth-first reachability from start to goal."""
    return general_graph_search(start, StructureQueue(), adjacency, goal)


def depth_first_search(start: Node, adjacency: Adjacency, goal: Node) -> bool:
    """Depth-first reachability from start to goal."""
    return general_graph_search(start, StructureStack(), adjacency, goal)


reachable_breadth_first = breadth_first_search
reachable_depth_first = depth_first_search
