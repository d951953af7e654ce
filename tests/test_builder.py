import pytest

from routegraph.domain.errors import GraphFrozenError, InvalidTripError
from routegraph.domain.models import TripRecord
from routegraph.graph import GraphBuilder, build_graph, search


def test_build_graph_creates_one_edge_per_trip():
    trips = [
        TripRecord("PRG", "VIE", 20, "kiwi", "OK", 1),
        TripRecord("PRG", "VIE", 25, "other", "OS", 2),
        TripRecord("VIE", "BUD", 15, "kiwi", "OS", 1),
    ]

    graph = build_graph(trips)

    assert graph.vertex_count() == 3
    assert graph.edge_count() == 3
    assert [vertex.id for vertex in graph.vertices] == ["PRG", "VIE", "BUD"]
    second = graph.edges[1]
    assert (second.source, second.target, second.weight) == ("PRG", "VIE", 25)
    assert (second.provider, second.carrier, second.segments) == ("other", "OS", 2)


def test_build_graph_is_deterministic():
    trips = [
        TripRecord("A", "B", 1, "P"),
        TripRecord("B", "C", 2, "P"),
        TripRecord("C", "A", 3, "P"),
    ]

    first = build_graph(trips)
    second = build_graph(trips)

    assert first.vertices == second.vertices
    assert first.edges == second.edges


def test_agglomerations_collapse_locations():
    agglomerations = {"ORY": "PAR", "CDG": "PAR"}
    trips = [
        TripRecord("PRG", "ORY", 30, "P1"),
        TripRecord("CDG", "LIS", 40, "P2"),
    ]

    graph = build_graph(trips, agglomerations)

    assert not graph.has_vertex("ORY")
    assert not graph.has_vertex("CDG")
    assert graph.vertex_count() == 3
    walk = search("PRG", "LIS", graph)
    assert walk.vertices == ("PRG", "PAR", "LIS")
    assert walk.total_weight == 70


def test_repeated_overlapping_batches_reuse_vertices():
    batch = [TripRecord("A", "B", 1, "P"), TripRecord("B", "A", 1, "P")]
    builder = GraphBuilder()

    builder.add_trips(batch).add_trips(batch)
    graph = builder.build()

    assert graph.vertex_count() == 2
    assert graph.edge_count() == 4


def test_weight_is_coerced_to_int():
    graph = build_graph([TripRecord("A", "B", "12", "P", segments="2")])

    edge = graph.edges[0]
    assert edge.weight == 12
    assert edge.segments == 2


def test_negative_weight_is_rejected():
    bad = TripRecord("A", "B", -5, "P")

    with pytest.raises(InvalidTripError) as excinfo:
        build_graph([bad])

    assert excinfo.value.record == bad


def test_built_graph_is_frozen():
    builder = GraphBuilder()
    builder.add_trip(TripRecord("A", "B", 1, "P"))
    builder.build()

    with pytest.raises(GraphFrozenError):
        builder.add_trip(TripRecord("B", "C", 1, "P"))
