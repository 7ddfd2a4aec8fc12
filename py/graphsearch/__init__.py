"""Graph search library - public API."""
from .types import (
    Node, Weight, Adjacency, WeightedEdge, WeightedAdjacency,
    VertexDistancePair, NO_PATH,
    GraphSearchError, InvalidArgumentError, EmptyStructureError,
)
from .structures import Structure, StructureStack, StructureQueue, MinPriorityQueue
from .validation import validate_search_input
from .search import (
    general_graph_search, breadth_first_search, depth_first_search,
    reachable_breadth_first, reachable_depth_first,
)
from .paths import dijkstra_shortest_path, shortest_distance

__all__ = [
    # Types
    'Node', 'Weight', 'Adjacency', 'WeightedEdge', 'WeightedAdjacency',
    'VertexDistancePair', 'NO_PATH',
    'GraphSearchError', 'InvalidArgumentError', 'EmptyStructureError',
    # Structures
    'Structure', 'StructureStack', 'StructureQueue', 'MinPriorityQueue',
    # Searches
    'validate_search_input',
    'general_graph_search', 'breadth_first_search', 'depth_first_search',
    'reachable_breadth_first', 'reachable_depth_first',
    'dijkstra_shortest_path', 'shortest_distance',
]
