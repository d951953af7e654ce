"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateVertexError,
    GraphFrozenError,
    IncompleteSearchError,
    InvalidTripError,
    NotFoundError,
    RouteGraphError,
    TripDataError,
)
from .models import (
    DirectionQuery,
    Edge,
    FoundRoute,
    LoadStats,
    MissingVertex,
    SearchReport,
    TripRecord,
    Unreachable,
    Vertex,
)

__all__ = [
    # Models
    "TripRecord",
    "DirectionQuery",
    "Vertex",
    "Edge",
    "Unreachable",
    "FoundRoute",
    "MissingVertex",
    "LoadStats",
    "SearchReport",
    # Errors
    "RouteGraphError",
    "NotFoundError",
    "DuplicateVertexError",
    "GraphFrozenError",
    "IncompleteSearchError",
    "InvalidTripError",
    "TripDataError",
    "ConfigurationError",
]
