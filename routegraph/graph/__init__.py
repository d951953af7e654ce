"""Graph model, construction and path-finding.

This subpackage holds the in-memory multigraph built from trip records
and the Dijkstra search that runs on top of it.
"""

from .builder import GraphBuilder, build_graph
from .dijkstra import SearchResult, ShortestPathTree, search, shortest_paths
from .model import Graph
from .walk import Walk, WalkProjection

__all__ = [
    "Graph",
    "GraphBuilder",
    "build_graph",
    "ShortestPathTree",
    "SearchResult",
    "search",
    "shortest_paths",
    "Walk",
    "WalkProjection",
]
