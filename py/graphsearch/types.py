"""Type definitions and errors for the graph search library."""
from typing import Any, Hashable, Mapping, NamedTuple, Sequence, Tuple, Union

Node = Hashable
Weight = Union[int, float]

# Sentinel distance returned when the goal cannot be reached
NO_PATH = -1


class VertexDistancePair(NamedTuple):
    """A vertex together with a distance.

    Inside a weighted adjacency mapping the distance is the edge weight; inside
    the priority structure it is the accumulated distance from the start node.
    """
    vertex: Any
    distance: Weight


Adjacency = Mapping[Node, Sequence[Node]]
WeightedEdge = Union[VertexDistancePair, Tuple[Node, Weight]]
WeightedAdjacency = Mapping[Node, Sequence[WeightedEdge]]


# Errors
class GraphSearchError(Exception):
    """Base error for graph search operations."""
    pass


class InvalidArgumentError(GraphSearchError, ValueError):
    """Start, goal or adjacency mapping is missing or inconsistent."""
    pass


class EmptyStructureError(GraphSearchError, IndexError):
    """An element was requested from an empty structure."""
    pass
