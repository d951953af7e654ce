import pytest

from routegraph.domain.models import Edge, TripRecord
from routegraph.graph import Walk, build_graph, search


def test_projection_lists_route_providers_carriers_and_weights():
    graph = build_graph(
        [
            TripRecord("PRG", "VIE", 20, "kiwi", "OK", 1),
            TripRecord("VIE", "BUD", 15, "omio", None, 2),
        ]
    )

    walk = search("PRG", "BUD", graph)
    projection = walk.project()

    assert projection.route == ("PRG", "VIE", "BUD")
    assert projection.providers == ("kiwi", "omio")
    assert projection.carriers == ("OK", None)
    assert projection.weights == (20, 15)
    assert projection.total_weight == 35
    assert walk.segments == (1, 2)


def test_empty_walk_is_truthy_and_weightless():
    walk = Walk(source="A", target="A")

    assert walk
    assert len(walk) == 0
    assert walk.project().route == ("A",)
    assert walk.project().total_weight == 0


def test_empty_walk_between_different_vertices_is_invalid():
    with pytest.raises(ValueError):
        Walk(source="A", target="B")


def test_non_contiguous_edges_are_rejected():
    first = Edge(index=0, source="A", target="B", weight=1, provider="P")
    second = Edge(index=1, source="C", target="D", weight=1, provider="P")

    with pytest.raises(ValueError):
        Walk(source="A", target="D", edges=(first, second))


def test_walk_must_end_at_target():
    edge = Edge(index=0, source="A", target="B", weight=1, provider="P")

    with pytest.raises(ValueError):
        Walk(source="A", target="C", edges=(edge,))
