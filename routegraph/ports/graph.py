"""Graph ports - Abstractions for trip data loading and routing.

These protocols define the contracts for graph operations: loading the
trip records the graph is built from and computing shortest walks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DirectionQuery, LoadStats, TripRecord
    from ..graph.dijkstra import SearchResult
    from ..graph.model import Graph


class TripRepositoryPort(Protocol):
    """Port for loading trip data.

    Implementation: adapters/trips/csv_repository.py

    The repository reads and caches the trip records, the direction
    queries and the location normalization table.
    """

    def load_trips(self) -> Sequence[TripRecord]:
        """Load the trip records.

        Returns:
            Trip records in file order.
        """
        ...

    def load_directions(self) -> Sequence[DirectionQuery]:
        """Load the direction queries to run against the graph.

        Returns:
            Direction queries in file order.
        """
        ...

    def load_agglomerations(self) -> Mapping[str, str]:
        """Load the location normalization table.

        Returns:
            Mapping of location code to the vertex id it collapses into.
            Empty when no table is configured.
        """
        ...

    @property
    def trip_stats(self) -> LoadStats:
        """Row counts of the last trip load."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (search)
    """

    def solve(
        self,
        graph: Graph,
        departure: str,
        arrival: str,
    ) -> SearchResult:
        """Find the cheapest walk between two vertices.

        Args:
            graph: The frozen route graph.
            departure: Departure vertex id.
            arrival: Arrival vertex id.

        Returns:
            The walk, or Unreachable when no directed path exists.

        Raises:
            NotFoundError: If either vertex is not in the graph.
        """
        ...
