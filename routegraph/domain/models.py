"""Immutable domain models for the route graph.

All models are frozen dataclasses with slots. They carry no behaviour
beyond small derived properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..graph.walk import Walk


@dataclass(frozen=True, slots=True)
class TripRecord:
    """A validated point-to-point trip offered by a provider.

    Attributes:
        departure: Location code the trip leaves from (e.g. 'PRG')
        arrival: Location code the trip arrives at
        weight: Non-negative cost of the trip
        provider: Provider selling the trip
        carrier: Operating carrier, if known
        segments: Number of legs the provider's trip consists of
    """

    departure: str
    arrival: str
    weight: int
    provider: str
    carrier: Optional[str] = None
    segments: int = 0


@dataclass(frozen=True, slots=True)
class DirectionQuery:
    """A requested (departure, arrival) pair with its reference values.

    ``expected_weight`` and ``expected_count`` come from the direction
    data and are only used for reporting.
    """

    departure: str
    arrival: str
    expected_weight: int = 0
    expected_count: int = 0


@dataclass(frozen=True, slots=True)
class Vertex:
    """A location in the graph.

    Attributes:
        id: Unique location code
        index: Stable arena index assigned on creation
    """

    id: str
    index: int


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection between two vertices.

    Parallel edges between the same pair are distinct objects and are
    told apart by their insertion ``index``.
    """

    index: int
    source: str
    target: str
    weight: int
    provider: str
    carrier: Optional[str] = None
    segments: int = 0


@dataclass(frozen=True, slots=True)
class Unreachable:
    """Search outcome when the target exists but no directed path leads to it."""

    source: str
    target: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class FoundRoute:
    """A direction query together with the cheapest walk found for it."""

    query: DirectionQuery
    walk: Walk


@dataclass(frozen=True, slots=True)
class MissingVertex:
    """A direction query skipped because one endpoint is not in the graph."""

    query: DirectionQuery
    vertex_id: str


@dataclass(frozen=True, slots=True)
class LoadStats:
    """Row counts collected while reading a delimited data file.

    Attributes:
        rows_read: Non-empty rows seen in the file
        rows_skipped: Rows dropped for a wrong field count or bad numbers
    """

    rows_read: int = 0
    rows_skipped: int = 0

    @property
    def rows_loaded(self) -> int:
        """Return the number of rows that became records."""
        return self.rows_read - self.rows_skipped


@dataclass(frozen=True, slots=True)
class SearchReport:
    """Outcome of running every direction query against one graph.

    Attributes:
        trip_count: Trip records the graph was built from
        vertex_count: Vertices in the built graph
        edge_count: Edges in the built graph
        found: Queries with a walk, in query order
        unreachable: Queries whose target cannot be reached
        missing: Queries whose departure or arrival is not in the graph
        elapsed_seconds: Time spent building the graph and searching
        trip_stats: Row counts of the trip data
    """

    trip_count: int
    vertex_count: int
    edge_count: int
    found: tuple[FoundRoute, ...] = field(default_factory=tuple)
    unreachable: tuple[DirectionQuery, ...] = field(default_factory=tuple)
    missing: tuple[MissingVertex, ...] = field(default_factory=tuple)
    elapsed_seconds: float = 0.0
    trip_stats: LoadStats = field(default_factory=LoadStats)

    @property
    def query_count(self) -> int:
        """Return the number of queries that were run."""
        return len(self.found) + len(self.unreachable) + len(self.missing)
