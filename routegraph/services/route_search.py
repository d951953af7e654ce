"""Route search service - Main orchestrator.

Builds the graph from the trip repository, then runs one fresh search
per direction query and collects the outcomes into a SearchReport.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Union

from ..config import SearchConfig
from ..domain.errors import NotFoundError
from ..domain.models import (
    DirectionQuery,
    FoundRoute,
    MissingVertex,
    SearchReport,
    Unreachable,
)
from ..graph.builder import GraphBuilder
from ..graph.model import Graph
from ..monitoring import Stopwatch
from ..ports.graph import RouteSolverPort, TripRepositoryPort

Outcome = Union[FoundRoute, MissingVertex, DirectionQuery]


@dataclass
class RouteSearchService:
    """Main service for finding cheapest alternative routes.

    Attributes:
        trip_repository: Provides trips, directions and agglomerations
        route_solver: Computes cheapest walks
        config: Search settings (worker count)
    """

    trip_repository: TripRepositoryPort
    route_solver: RouteSolverPort
    config: SearchConfig = field(default_factory=SearchConfig)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _agglomerations(self) -> Mapping[str, str]:
        return self.trip_repository.load_agglomerations()

    def build_graph(self) -> Graph:
        """Build the frozen graph from every loaded trip.

        Raises:
            TripDataError: If the trip data cannot be read.
            InvalidTripError: If a trip carries a negative weight.
        """
        trips = self.trip_repository.load_trips()
        graph = GraphBuilder(self._agglomerations()).add_trips(trips).build()
        self._logger.info(
            "Graph built",
            extra={
                "trips": len(trips),
                "vertices": graph.vertex_count(),
                "edges": graph.edge_count(),
            },
        )
        return graph

    def search_one(self, graph: Graph, query: DirectionQuery) -> Outcome:
        """Run a single query, normalizing its endpoints first.

        Returns:
            FoundRoute, MissingVertex, or the query itself when its
            arrival is unreachable.
        """
        agglomerations = self._agglomerations()
        departure = agglomerations.get(query.departure, query.departure)
        arrival = agglomerations.get(query.arrival, query.arrival)

        try:
            result = self.route_solver.solve(graph, departure, arrival)
        except NotFoundError as e:
            self._logger.warning(
                "Direction skipped, vertex not in graph",
                extra={
                    "departure": query.departure,
                    "arrival": query.arrival,
                    "vertex": e.vertex_id,
                },
            )
            return MissingVertex(query=query, vertex_id=e.vertex_id)

        if isinstance(result, Unreachable):
            return query
        return FoundRoute(query=query, walk=result)

    def run(self, queries: Optional[Sequence[DirectionQuery]] = None) -> SearchReport:
        """Build the graph and run every query against it.

        Args:
            queries: Queries to run; defaults to the repository's directions.

        Returns:
            SearchReport with outcomes in query order.

        Raises:
            TripDataError: If trip or direction data cannot be read.
        """
        if queries is None:
            queries = self.trip_repository.load_directions()

        with Stopwatch() as watch:
            graph = self.build_graph()
            outcomes = self._search_all(graph, queries)

        found: List[FoundRoute] = []
        unreachable: List[DirectionQuery] = []
        missing: List[MissingVertex] = []
        for outcome in outcomes:
            if isinstance(outcome, FoundRoute):
                found.append(outcome)
            elif isinstance(outcome, MissingVertex):
                missing.append(outcome)
            else:
                unreachable.append(outcome)

        report = SearchReport(
            trip_count=len(self.trip_repository.load_trips()),
            vertex_count=graph.vertex_count(),
            edge_count=graph.edge_count(),
            found=tuple(found),
            unreachable=tuple(unreachable),
            missing=tuple(missing),
            elapsed_seconds=watch.elapsed,
            trip_stats=self.trip_repository.trip_stats,
        )
        self._logger.info(
            "Search finished",
            extra={
                "queries": report.query_count,
                "found": len(report.found),
                "unreachable": len(report.unreachable),
                "missing": len(report.missing),
                "elapsed_seconds": report.elapsed_seconds,
            },
        )
        return report

    def _search_all(
        self, graph: Graph, queries: Sequence[DirectionQuery]
    ) -> List[Outcome]:
        if self.config.max_workers <= 1 or len(queries) <= 1:
            return [self.search_one(graph, query) for query in queries]

        # The graph is frozen, so searches share it without locking.
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            return list(pool.map(lambda query: self.search_one(graph, query), queries))
