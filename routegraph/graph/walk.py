"""Walks through the graph and their presentation projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..domain.models import Edge


@dataclass(frozen=True, slots=True)
class WalkProjection:
    """Parallel sequences describing a walk for display.

    Attributes:
        route: Vertex ids from source to target
        providers: Provider of each edge
        carriers: Carrier of each edge
        weights: Weight of each edge
        total_weight: Sum of ``weights``
    """

    route: tuple[str, ...]
    providers: tuple[str, ...]
    carriers: tuple[Optional[str], ...]
    weights: tuple[int, ...]
    total_weight: int


@dataclass(frozen=True, slots=True)
class Walk:
    """An ordered, connected sequence of edges from ``source`` to ``target``.

    Raises:
        ValueError: On construction, if the edges are not contiguous or
            do not start at ``source`` and end at ``target``.
    """

    source: str
    target: str
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.edges:
            if self.source != self.target:
                raise ValueError(
                    f"Empty walk must start and end at the same vertex, "
                    f"got {self.source} and {self.target}"
                )
            return

        if self.edges[0].source != self.source:
            raise ValueError(f"Walk does not start at {self.source}")
        if self.edges[-1].target != self.target:
            raise ValueError(f"Walk does not end at {self.target}")
        for previous, current in zip(self.edges, self.edges[1:]):
            if previous.target != current.source:
                raise ValueError(
                    f"Edges {previous.index} and {current.index} are not contiguous"
                )

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __bool__(self) -> bool:
        # An empty walk (source == target) is still a found walk.
        return True

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)

    @property
    def vertices(self) -> tuple[str, ...]:
        """Source followed by the target of each edge."""
        return (self.source,) + tuple(edge.target for edge in self.edges)

    @property
    def providers(self) -> tuple[str, ...]:
        return tuple(edge.provider for edge in self.edges)

    @property
    def carriers(self) -> tuple[Optional[str], ...]:
        return tuple(edge.carrier for edge in self.edges)

    @property
    def weights(self) -> tuple[int, ...]:
        return tuple(edge.weight for edge in self.edges)

    @property
    def segments(self) -> tuple[int, ...]:
        return tuple(edge.segments for edge in self.edges)

    def project(self) -> WalkProjection:
        """Return the display projection of this walk."""
        weights = self.weights
        return WalkProjection(
            route=self.vertices,
            providers=self.providers,
            carriers=self.carriers,
            weights=weights,
            total_weight=sum(weights),
        )
