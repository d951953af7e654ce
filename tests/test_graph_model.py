import pytest

from routegraph.domain.errors import DuplicateVertexError, GraphFrozenError, NotFoundError
from routegraph.graph import Graph


def test_create_vertex_assigns_sequential_indices():
    graph = Graph()

    first = graph.create_vertex("PRG")
    second = graph.create_vertex("VIE")

    assert (first.id, first.index) == ("PRG", 0)
    assert (second.id, second.index) == ("VIE", 1)
    assert graph.has_vertex("PRG")
    assert "VIE" in graph
    assert graph.vertex_count() == 2


def test_create_vertex_twice_raises_duplicate():
    graph = Graph()
    graph.create_vertex("PRG")

    with pytest.raises(DuplicateVertexError) as excinfo:
        graph.create_vertex("PRG")

    assert excinfo.value.vertex_id == "PRG"


def test_get_or_create_vertex_reuses_existing():
    graph = Graph()
    created = graph.create_vertex("PRG")

    assert graph.get_or_create_vertex("PRG") is created
    assert graph.get_or_create_vertex("BRQ").index == 1
    assert graph.vertex_count() == 2


def test_get_vertex_missing_raises_not_found():
    graph = Graph()

    assert not graph.has_vertex("PRG")
    with pytest.raises(NotFoundError):
        graph.get_vertex("PRG")


def test_add_edge_requires_both_endpoints():
    graph = Graph()
    graph.create_vertex("PRG")

    with pytest.raises(NotFoundError) as excinfo:
        graph.add_edge("PRG", "VIE", 10, "P1")

    assert excinfo.value.vertex_id == "VIE"
    assert graph.edge_count() == 0


def test_parallel_edges_are_kept_in_insertion_order():
    graph = Graph()
    graph.create_vertex("PRG")
    graph.create_vertex("VIE")

    first = graph.add_edge("PRG", "VIE", 10, "P1", carrier="OK", segments=1)
    second = graph.add_edge("PRG", "VIE", 8, "P2")

    assert graph.edge_count() == 2
    assert list(graph.outgoing("PRG")) == [first, second]
    assert list(graph.outgoing("VIE")) == []
    assert [edge.index for edge in graph.edges] == [0, 1]
    assert first.carrier == "OK"
    assert second.carrier is None
    assert second.segments == 0


def test_negative_weight_is_accepted_by_model():
    graph = Graph()
    graph.create_vertex("A")
    graph.create_vertex("B")

    edge = graph.add_edge("A", "B", -1, "P")

    assert edge.weight == -1


def test_frozen_graph_rejects_mutation():
    graph = Graph()
    graph.create_vertex("A")
    graph.freeze()

    with pytest.raises(GraphFrozenError):
        graph.create_vertex("B")
    with pytest.raises(GraphFrozenError):
        graph.get_or_create_vertex("B")
    with pytest.raises(GraphFrozenError):
        graph.add_edge("A", "A", 1, "P")

    # Lookups of existing vertices still work.
    assert graph.get_or_create_vertex("A").index == 0


def test_vertices_iterate_in_creation_order():
    graph = Graph()
    for code in ("C", "A", "B"):
        graph.create_vertex(code)

    assert [vertex.id for vertex in graph.vertices] == ["C", "A", "B"]
