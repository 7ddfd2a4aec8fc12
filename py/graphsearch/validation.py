"""Input checks shared by every search."""
import logging
from typing import Any, Mapping

from .types import InvalidArgumentError

logger = logging.getLogger(__name__)


def validate_search_input(start: Any, adjacency: Mapping, goal: Any) -> None:
    """Reject missing arguments and endpoints that are not keys of the mapping."""
    problem = None
    if start is None:
        problem = "start node must not be None"
    elif goal is None:
        problem = "goal node must not be None"
    elif adjacency is None:
        problem = "adjacency mapping must not be None"
    elif start not in adjacency:
        problem = f"start node {start!r} is not in the graph"
    elif goal not in adjacency:
        problem = f"goal node {goal!r} is not in the graph"

    if problem is not None:
        logger.debug("Rejected search input: %s", problem)
        raise InvalidArgumentError(problem)
