"""Graph construction from trip records.

Each trip record becomes exactly one directed edge. Location codes are
first passed through an optional normalization table (for instance a
city code mapped to its agglomeration code) so that equivalent
locations collapse into a single vertex.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..domain.errors import InvalidTripError
from ..domain.models import Edge, TripRecord
from .model import Graph


class GraphBuilder:
    """Accumulates trip records into a graph.

    ``add_trip`` and ``add_trips`` may be called any number of times,
    with overlapping records; vertices are created only on first
    reference. ``build`` freezes the graph and hands it out.
    """

    def __init__(self, agglomerations: Optional[Mapping[str, str]] = None) -> None:
        self._agglomerations: Mapping[str, str] = agglomerations or {}
        self._graph = Graph()

    def resolve(self, location: str) -> str:
        """Map a location code to its vertex id."""
        return self._agglomerations.get(location, location)

    def add_trip(self, trip: TripRecord) -> Edge:
        weight = int(trip.weight)
        if weight < 0:
            raise InvalidTripError(
                f"Negative weight {weight} for {trip.departure}->{trip.arrival}",
                record=trip,
            )

        departure = self._graph.get_or_create_vertex(self.resolve(trip.departure))
        arrival = self._graph.get_or_create_vertex(self.resolve(trip.arrival))

        return self._graph.add_edge(
            departure.id,
            arrival.id,
            weight,
            provider=trip.provider,
            carrier=trip.carrier,
            segments=int(trip.segments or 0),
        )

    def add_trips(self, trips: Iterable[TripRecord]) -> GraphBuilder:
        for trip in trips:
            self.add_trip(trip)
        return self

    def build(self) -> Graph:
        """Freeze and return the accumulated graph."""
        return self._graph.freeze()


def build_graph(
    trips: Iterable[TripRecord],
    agglomerations: Optional[Mapping[str, str]] = None,
) -> Graph:
    """Build a frozen graph from ``trips`` in one call.

    The result depends only on the records and their order: the same
    sequence always yields the same vertices and the same edge order.

    Raises:
        InvalidTripError: If a record carries a negative weight.
    """
    return GraphBuilder(agglomerations).add_trips(trips).build()
