"""Directed weighted multigraph used for routing.

Vertices and edges live in arenas (plain lists) and are addressed by
stable integer indices. Outgoing adjacency is kept as lists of edge
indices per vertex, so parallel edges between the same pair of
vertices stay distinct and iteration follows insertion order.

Once frozen, a graph is read-only and can be shared between threads
running independent searches.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence

from ..domain.errors import DuplicateVertexError, GraphFrozenError, NotFoundError
from ..domain.models import Edge, Vertex


class Graph:
    """Arena-backed directed multigraph keyed by location code."""

    __slots__ = ("_vertices", "_index", "_edges", "_outgoing", "_frozen")

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._index: Dict[str, int] = {}
        self._edges: List[Edge] = []
        self._outgoing: List[List[int]] = []
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)}, "
            f"frozen={self._frozen})"
        )

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._index

    # -- mutation -----------------------------------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Graph is frozen and can no longer be modified")

    def _insert_vertex(self, vertex_id: str) -> Vertex:
        vertex = Vertex(id=vertex_id, index=len(self._vertices))
        self._vertices.append(vertex)
        self._outgoing.append([])
        self._index[vertex_id] = vertex.index
        return vertex

    def create_vertex(self, vertex_id: str) -> Vertex:
        """Create a new vertex.

        Raises:
            DuplicateVertexError: If ``vertex_id`` already exists.
            GraphFrozenError: If the graph is frozen.
        """
        self._check_mutable()
        if vertex_id in self._index:
            raise DuplicateVertexError(
                f"Vertex already exists: {vertex_id}",
                vertex_id=vertex_id,
            )
        return self._insert_vertex(vertex_id)

    def get_or_create_vertex(self, vertex_id: str) -> Vertex:
        """Return the vertex for ``vertex_id``, creating it if absent."""
        index = self._index.get(vertex_id)
        if index is not None:
            return self._vertices[index]
        self._check_mutable()
        return self._insert_vertex(vertex_id)

    def add_edge(
        self,
        source: str,
        target: str,
        weight: int,
        provider: str,
        carrier: Optional[str] = None,
        segments: int = 0,
    ) -> Edge:
        """Append a directed edge from ``source`` to ``target``.

        The weight sign is not checked here. A negative weight is
        accepted but makes shortest-path results non-minimal.

        Raises:
            NotFoundError: If either endpoint is not a vertex.
            GraphFrozenError: If the graph is frozen.
        """
        self._check_mutable()
        source_index = self._require(source)
        self._require(target)

        edge = Edge(
            index=len(self._edges),
            source=source,
            target=target,
            weight=weight,
            provider=provider,
            carrier=carrier,
            segments=segments,
        )
        self._edges.append(edge)
        self._outgoing[source_index].append(edge.index)
        return edge

    def freeze(self) -> Graph:
        """Make the graph read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -- lookup -------------------------------------------------------

    def _require(self, vertex_id: str) -> int:
        index = self._index.get(vertex_id)
        if index is None:
            raise NotFoundError(
                f"Vertex not in graph: {vertex_id}",
                vertex_id=vertex_id,
            )
        return index

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self._index

    def get_vertex(self, vertex_id: str) -> Vertex:
        """Return the vertex for ``vertex_id``.

        Raises:
            NotFoundError: If the vertex does not exist.
        """
        return self._vertices[self._require(vertex_id)]

    def edge_at(self, index: int) -> Edge:
        return self._edges[index]

    @property
    def vertices(self) -> Sequence[Vertex]:
        """Vertices in creation order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Sequence[Edge]:
        """Edges in insertion order."""
        return tuple(self._edges)

    def outgoing(self, vertex_id: str) -> Iterator[Edge]:
        """Yield the edges leaving ``vertex_id`` in insertion order."""
        for edge_index in self._outgoing[self._require(vertex_id)]:
            yield self._edges[edge_index]

    def outgoing_indices(self, vertex_index: int) -> Sequence[int]:
        """Edge indices leaving the vertex at ``vertex_index``."""
        return self._outgoing[vertex_index]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)
