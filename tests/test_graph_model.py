import pytest
from helpers import build, edge_set, names

from components import strongly_connected_components
from graph_model import Adjacency, Graph
from matrices import incidence_matrix

# --- Vertices ---


def test_add_vertex_generates_lowest_free_name() -> None:
    graph = Graph()
    v1 = graph.add_vertex()
    v2 = graph.add_vertex()
    v3 = graph.add_vertex()
    graph.remove_vertex(v2)

    assert (v1.name, v3.name) == ("V1", "V3")
    assert graph.add_vertex().name == "V2"
    assert graph.add_vertex().name == "V4"
    assert names(graph.vertices) == ["V1", "V3", "V2", "V4"]


def test_add_vertex_keeps_position() -> None:
    graph = Graph()
    v = graph.add_vertex("A", position=(10, 20))
    assert v.position == (10, 20)
    assert v.adjacency == []


def test_find_vertex_is_case_insensitive_and_trims() -> None:
    graph, vs = build(False, [], names=["Alpha", "beta"])
    assert graph.find_vertex("  ALPHA ") is vs["Alpha"]
    assert graph.find_vertex("Beta") is vs["beta"]
    assert graph.find_vertex("gamma") is None
    assert graph.find_vertex("   ") is None
    assert graph.find_vertex(None) is None


def test_find_vertex_returns_first_of_case_duplicates() -> None:
    graph, _ = build(False, [], names=["a"])
    first = graph.vertices[0]
    graph.add_vertex("A")
    assert graph.find_vertex("A") is first


def test_vertices_compare_by_identity() -> None:
    graph = Graph()
    a = graph.add_vertex("X")
    b = graph.add_vertex("X")
    assert a != b
    assert len({a, b}) == 2


# --- Edge mutation ---


def test_add_edge_undirected_mirrors_entries() -> None:
    graph, vs = build(False, [("A", "B", 3)])
    assert vs["A"].adjacency == [Adjacency(vs["B"], 3)]
    assert vs["B"].adjacency == [Adjacency(vs["A"], 3)]


def test_add_edge_directed_stores_single_entry() -> None:
    graph, vs = build(True, [("A", "B", 3)])
    assert vs["A"].adjacency == [Adjacency(vs["B"], 3)]
    assert vs["B"].adjacency == []


@pytest.mark.parametrize("directed", [False, True])
def test_self_loop_is_stored_once(directed: bool) -> None:
    graph, vs = build(directed, [("A", "A", 2)])
    assert vs["A"].adjacency == [Adjacency(vs["A"], 2)]


def test_multi_edges_are_kept() -> None:
    graph, vs = build(False, [("A", "B", 1), ("A", "B", 7)])
    assert [e.weight for e in vs["A"].adjacency] == [1, 7]
    assert [e.weight for e in vs["B"].adjacency] == [1, 7]


def test_add_edge_rejects_negative_weight() -> None:
    graph, vs = build(False, [], names=["A", "B"])
    with pytest.raises(ValueError):
        graph.add_edge(vs["A"], vs["B"], -1)
    assert vs["A"].adjacency == []


@pytest.mark.parametrize("weight", [1.5, "3", True, None])
def test_add_edge_rejects_non_integer_weight(weight) -> None:
    graph, vs = build(False, [], names=["A", "B"])
    with pytest.raises(TypeError):
        graph.add_edge(vs["A"], vs["B"], weight)


def test_add_edge_rejects_foreign_vertex() -> None:
    graph, vs = build(False, [], names=["A"])
    other = Graph().add_vertex("B")
    with pytest.raises(ValueError, match="does not exist"):
        graph.add_edge(vs["A"], other, 1)


def test_remove_edge_undirected_removes_both_sides() -> None:
    graph, vs = build(False, [("A", "B", 1), ("A", "C", 2)])
    assert graph.remove_edge(vs["B"], vs["A"])
    assert vs["A"].adjacency == [Adjacency(vs["C"], 2)]
    assert vs["B"].adjacency == []


def test_remove_edge_removes_first_match_only() -> None:
    graph, vs = build(True, [("A", "B", 1), ("A", "B", 5)])
    assert graph.remove_edge(vs["A"], vs["B"])
    assert vs["A"].adjacency == [Adjacency(vs["B"], 5)]


def test_remove_edge_directed_ignores_reverse() -> None:
    graph, vs = build(True, [("A", "B", 1)])
    assert not graph.remove_edge(vs["B"], vs["A"])
    assert vs["A"].adjacency == [Adjacency(vs["B"], 1)]


def test_remove_self_loop_undirected() -> None:
    graph, vs = build(False, [("A", "A", 1), ("A", "B", 2)])
    assert graph.remove_edge(vs["A"], vs["A"])
    assert vs["A"].adjacency == [Adjacency(vs["B"], 2)]
    assert vs["B"].adjacency == [Adjacency(vs["A"], 2)]


def test_update_edge_weight_mirrors() -> None:
    graph, vs = build(False, [("A", "B", 1)])
    graph.update_edge_weight(vs["B"], vs["A"], 9)
    assert vs["A"].adjacency == [Adjacency(vs["B"], 9)]
    assert vs["B"].adjacency == [Adjacency(vs["A"], 9)]


def test_update_edge_weight_missing_edge() -> None:
    graph, vs = build(True, [("A", "B", 1)])
    with pytest.raises(ValueError, match="does not exist"):
        graph.update_edge_weight(vs["B"], vs["A"], 2)


# --- Vertex removal ---


@pytest.mark.parametrize("directed", [False, True])
def test_remove_vertex_leaves_no_references(directed: bool) -> None:
    graph, vs = build(directed, [
        ("A", "B", 1), ("B", "C", 2), ("C", "B", 3), ("B", "B", 4), ("D", "B", 5), ("A", "D", 6),
    ])
    graph.remove_vertex(vs["B"])

    assert vs["B"] not in graph
    for v in graph.vertices:
        assert all(entry.neighbor is not vs["B"] for entry in v.adjacency)
    assert edge_set(graph.edges()) == {("A", "D", 6)}


def test_remove_vertex_reports_removed_edges() -> None:
    graph, vs = build(True, [("A", "B", 1), ("C", "A", 2), ("B", "C", 3)])
    removed = graph.remove_vertex(vs["A"])
    assert edge_set(removed) == {("A", "B", 1), ("C", "A", 2)}


def test_remove_unknown_vertex_is_noop() -> None:
    graph, _ = build(False, [("A", "B", 1)])
    stranger = Graph().add_vertex("Z")
    assert graph.remove_vertex(stranger) == []
    assert len(graph) == 2


# --- Queries ---


def test_are_adjacent() -> None:
    graph, _ = build(True, [("A", "B", 1)], names=["A", "B", "C"])
    assert graph.are_adjacent("a", "B")
    assert not graph.are_adjacent("B", "A")
    assert not graph.are_adjacent("A", "C")


@pytest.mark.parametrize("pair", [("", "A"), ("A", "  "), ("A", "missing"), (None, "A")])
def test_are_adjacent_fails_closed(pair) -> None:
    graph, _ = build(False, [("A", "B", 1)])
    assert not graph.are_adjacent(*pair)


def test_are_adjacent_undirected_checks_either_side() -> None:
    graph, vs = build(False, [], names=["A", "B"])
    # a one-sided entry written behind the graph's back
    vs["B"].adjacency.append(Adjacency(vs["A"], 1))
    assert graph.are_adjacent("A", "B")
    assert graph.are_adjacent("B", "A")


def test_list_adjacency() -> None:
    graph, _ = build(False, [("A", "B", 4), ("A", "C", 1)], names=["A", "B", "C", "D"])
    assert graph.list_adjacency().splitlines() == [
        "A → B(4) C(1)",
        "B → A(4)",
        "C → A(1)",
        "D → (isolated)",
    ]


def test_edges_undirected_deduplicates() -> None:
    graph, _ = build(False, [("B", "A", 2), ("B", "C", 3), ("C", "C", 1)])
    edges = graph.edges()
    assert edge_set(edges) == {("A", "B", 2), ("B", "C", 3), ("C", "C", 1)}
    # vertex order is B, A, C; each undirected edge is reported from its lower-named end
    assert [e.label for e in edges] == ["B-C", "A-B", "C-C"]


def test_edges_directed_labels() -> None:
    graph, _ = build(True, [("A", "B", 2), ("B", "A", 3)])
    assert [e.label for e in graph.edges()] == ["A->B", "B->A"]


def test_edges_undirected_between_same_named_vertices() -> None:
    """The edge is reported once, from the vertex inserted first."""
    graph = Graph()
    first = graph.add_vertex("X")
    second = graph.add_vertex("X")
    graph.add_edge(second, first, 3)

    edges = graph.edges()
    assert len(edges) == 1
    assert edges[0].origin is first
    assert edges[0].destination is second

    matrix, columns = incidence_matrix(graph)
    assert matrix == [[1], [1]]
    assert columns == edges

    result = strongly_connected_components(graph)
    assert result.components == [edges]


# --- Direction and clearing ---


def test_set_directed_only_without_edges() -> None:
    graph, vs = build(False, [], names=["A", "B"])
    graph.set_directed(True)
    assert graph.directed

    graph.add_edge(vs["A"], vs["B"], 1)
    with pytest.raises(ValueError):
        graph.set_directed(False)
    assert graph.directed


def test_clear() -> None:
    graph, vs = build(False, [("A", "B", 1)])
    graph.clear()
    assert graph.vertices == []
    assert vs["A"].adjacency == []
    assert graph.add_vertex().name == "V1"
