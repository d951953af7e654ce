"""Typed domain errors for the route graph.

All errors inherit from RouteGraphError and can optionally wrap a root
cause exception for debugging.

An unreachable target is not an error: searches return an
``Unreachable`` value for it (see ``domain.models``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RouteGraphError(Exception):
    """Base error for the route graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NotFoundError(RouteGraphError):
    """A referenced vertex id does not exist in the graph.

    Raised by direct lookups and by searches whose source or target
    is absent. Always a caller-input problem.

    Attributes:
        vertex_id: The id that was looked up
    """

    vertex_id: str = ""


@dataclass
class DuplicateVertexError(RouteGraphError):
    """A vertex id was created twice through the low-level model API.

    Attributes:
        vertex_id: The id that already exists
    """

    vertex_id: str = ""


@dataclass
class GraphFrozenError(RouteGraphError):
    """The graph was mutated after being frozen for searching."""


@dataclass
class InvalidTripError(RouteGraphError):
    """A trip record cannot become an edge (e.g. negative weight).

    Attributes:
        record: The offending trip record
    """

    record: Any = None


@dataclass
class TripDataError(RouteGraphError):
    """Trip or direction data could not be read.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RouteGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class IncompleteSearchError(RouteGraphError):
    """A search stopped early and never finalized the requested vertex.

    Attributes:
        vertex_id: The vertex whose distance is not final
    """

    vertex_id: str = ""
