"""Shortest-path computation using Dijkstra's algorithm.

Every call runs a fresh search: the distance table, predecessor table
and frontier belong to that call only, so searches over a frozen graph
may run concurrently.

Edge weights must be non-negative. They are not re-checked here; a
negative weight yields non-minimal results.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..domain.errors import IncompleteSearchError
from ..domain.models import Edge, Unreachable
from .model import Graph
from .walk import Walk

INFINITY = float("inf")

SearchResult = Union[Walk, Unreachable]


@dataclass(frozen=True)
class ShortestPathTree:
    """Predecessor-edge tree produced by one Dijkstra run.

    When the run stopped early at a target, only finalized vertices
    (the target included) can be queried; asking about any other vertex
    raises IncompleteSearchError instead of returning a provisional
    answer.
    """

    graph: Graph
    source: str
    distances: Sequence[float]
    previous: Sequence[Optional[int]]
    finalized: Sequence[bool]
    complete: bool = True

    def _final_index(self, vertex_id: str) -> int:
        index = self.graph.get_vertex(vertex_id).index
        if not self.complete and not self.finalized[index]:
            raise IncompleteSearchError(
                f"Search from {self.source} stopped before finalizing {vertex_id}",
                vertex_id=vertex_id,
            )
        return index

    def distance_to(self, vertex_id: str) -> float:
        """Return the shortest known distance to ``vertex_id``.

        Raises:
            NotFoundError: If the vertex does not exist.
            IncompleteSearchError: If the search stopped before the
                vertex was finalized.
        """
        return self.distances[self._final_index(vertex_id)]

    def is_reachable(self, vertex_id: str) -> bool:
        return self.distance_to(vertex_id) != INFINITY

    def walk_to(self, vertex_id: str) -> SearchResult:
        """Extract the walk from the source to ``vertex_id``.

        Returns:
            The walk, or ``Unreachable`` when no predecessor chain leads
            back to the source.

        Raises:
            NotFoundError: If the vertex does not exist.
            IncompleteSearchError: If the search stopped before the
                vertex was finalized.
        """
        target_index = self._final_index(vertex_id)
        if vertex_id == self.source:
            return Walk(source=self.source, target=vertex_id)

        if self.previous[target_index] is None:
            return Unreachable(source=self.source, target=vertex_id)

        edges: List[Edge] = []
        current = target_index
        edge_index = self.previous[current]
        while edge_index is not None:
            edge = self.graph.edge_at(edge_index)
            edges.append(edge)
            current = self.graph.get_vertex(edge.source).index
            edge_index = self.previous[current]

        edges.reverse()
        return Walk(source=self.source, target=vertex_id, edges=tuple(edges))


def shortest_paths(
    graph: Graph, source: str, target: Optional[str] = None
) -> ShortestPathTree:
    """Run Dijkstra from ``source``.

    Parameters
    ----------
    graph:
        Graph to search; it is only read.
    source:
        Identifier of the departure vertex.
    target:
        Optional vertex to stop at once its distance is final. Without
        it the whole reachable component is explored.

    Returns
    -------
    ShortestPathTree
        Distances and predecessor edges for the explored vertices.

    Notes
    -----
    Relaxation uses a strict ``<``. Among edges giving the same
    candidate distance, the first one met in edge insertion order keeps
    the predecessor slot, so results are deterministic.

    Raises
    ------
    NotFoundError
        If ``source`` or ``target`` is not a vertex of ``graph``.
    """
    start = graph.get_vertex(source).index
    stop = graph.get_vertex(target).index if target is not None else None

    size = graph.vertex_count()
    distances: List[float] = [INFINITY] * size
    previous: List[Optional[int]] = [None] * size
    finalized = [False] * size
    distances[start] = 0

    # Push order breaks distance ties first-in, first-out.
    order = itertools.count()
    heap: List[Tuple[float, int, int]] = [(0, next(order), start)]
    complete = True

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if finalized[u]:
            continue

        finalized[u] = True

        if u == stop:
            complete = False
            break

        for edge_index in graph.outgoing_indices(u):
            edge = graph.edge_at(edge_index)
            v = graph.get_vertex(edge.target).index
            if finalized[v]:
                continue

            new_distance = current_distance + edge.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = edge_index
                heapq.heappush(heap, (new_distance, next(order), v))

    return ShortestPathTree(
        graph=graph,
        source=source,
        distances=tuple(distances),
        previous=tuple(previous),
        finalized=tuple(finalized),
        complete=complete,
    )


def search(
    source: str, target: str, graph: Graph, stop_at_target: bool = True
) -> SearchResult:
    """Find the cheapest walk from ``source`` to ``target``.

    Returns:
        The walk, or ``Unreachable`` if both vertices exist but no
        directed path connects them.

    Raises:
        NotFoundError: If ``source`` or ``target`` is not in the graph.
    """
    graph.get_vertex(source)
    graph.get_vertex(target)

    tree = shortest_paths(graph, source, target if stop_at_target else None)
    return tree.walk_to(target)
