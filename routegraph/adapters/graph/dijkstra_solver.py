"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds logging. It does not
catch anything: a missing vertex propagates as NotFoundError and an
unreachable target is returned as an Unreachable value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import Unreachable
from ...graph.dijkstra import SearchResult, search
from ...graph.model import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        stop_at_target: Stop each search once the arrival is finalized
    """

    stop_at_target: bool = True
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            NotFoundError: If departure or arrival is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        result = search(departure, arrival, graph, stop_at_target=self.stop_at_target)

        if isinstance(result, Unreachable):
            self._logger.debug(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
        else:
            self._logger.debug(
                "Route found",
                extra={
                    "departure": departure,
                    "arrival": arrival,
                    "edges": len(result),
                    "total_weight": result.total_weight,
                },
            )

        return result
