"""Top-level package for routegraph.

routegraph builds a directed multigraph from point-to-point trip
records and searches it for the cheapest walks between locations.

The graph and search live in ``routegraph.graph``; loading, wiring and
reporting sit in the adapters, services and pipeline modules.
"""

from .graph import Graph, Walk, build_graph, search

__all__ = ["Graph", "Walk", "build_graph", "search"]
