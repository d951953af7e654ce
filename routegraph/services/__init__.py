"""Services layer - Application orchestration.

Available services:
- RouteSearchService: Builds the graph and runs direction queries
"""

from .route_search import RouteSearchService

__all__ = ["RouteSearchService"]
