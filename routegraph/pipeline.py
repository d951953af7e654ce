"""High-level pipeline for searching alternative routes.

The pipeline is organized in a few stages:

1. Trip and direction loading (CSV files named in the configuration).
2. Graph building.
3. One shortest-path search per direction.
4. A plain-text summary of the outcome.

Each stage delegates to the service wired in the container; this
module only turns the resulting report into text.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import RouteGraphError
from .domain.models import FoundRoute, SearchReport
from .monitoring import configure_logging
from .services import RouteSearchService

FOUND_ROUTE_MESSAGE = (
    "{departure} {arrival} ({expected}) FOUND: {route} "
    "via {providers} with costs {weights} ({total})"
)
TOTAL_FOUND_MESSAGE = "Found {count} shortest routes"


def describe_route(found: FoundRoute) -> str:
    """Render one found route on a single line."""
    projection = found.walk.project()
    return FOUND_ROUTE_MESSAGE.format(
        departure=found.query.departure,
        arrival=found.query.arrival,
        expected=found.query.expected_weight,
        route=" -> ".join(projection.route),
        providers=" -> ".join(projection.providers),
        weights=" -> ".join(str(weight) for weight in projection.weights),
        total=projection.total_weight,
    )


def format_report(report: SearchReport, verbose: bool = False) -> str:
    """Render a search report as the command's text summary."""
    lines: List[str] = [
        f"Trips: {report.trip_count}",
        f"Vertices: {report.vertex_count}",
        f"Edges: {report.edge_count}",
        "",
        f"Processing time: {report.elapsed_seconds} seconds",
    ]
    if report.trip_stats.rows_skipped:
        lines.append(f"Skipped malformed trip rows: {report.trip_stats.rows_skipped}")
    if report.missing:
        lines.append(f"Directions with unknown locations: {len(report.missing)}")
    if report.unreachable:
        lines.append(f"Unreachable directions: {len(report.unreachable)}")

    if verbose:
        lines.append("")
        lines.extend(describe_route(found) for found in report.found)

    lines.append("")
    lines.append(TOTAL_FOUND_MESSAGE.format(count=len(report.found)))
    return "\n".join(lines)


def solve_directions(service: RouteSearchService, verbose: bool = False) -> str:
    """Run every configured direction and return the summary text.

    Raises:
        TripDataError: If trip or direction data cannot be read.
    """
    return format_report(service.run(), verbose=verbose)


def run_pipeline(config: Optional[AppConfig] = None) -> None:
    """Run the end-to-end search with the configured data files.

    Domain errors (unreadable data, invalid trips) are printed and end
    the process with exit status 1.
    """
    config = config or get_config()
    configure_logging(config.observability)

    container = Container.create_default(config)
    service = container.resolve(RouteSearchService)

    print("Shortest alternative paths")
    try:
        print(solve_directions(service, verbose=config.search.verbose))
    except RouteGraphError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run_pipeline()
