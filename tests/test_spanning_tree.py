"""Tests for the minimum spanning tree algorithms and enumeration."""

import pytest

from graph_core import (
    EngineSettings,
    Graph,
    GraphTooLargeError,
    MSTAlgorithm,
    StructuralError,
    UnknownAlgorithmError,
    boruvka,
    calculate_minimum_spanning_forest,
    calculate_minimum_spanning_tree,
    find_all_spanning_trees,
    kruskal,
    prim,
)
from graph_core.spanning_tree import is_spanning_tree


def test_kruskal_triangle(triangle) -> None:
    """Kruskal keeps the two unit edges of the triangle."""
    result = kruskal(triangle)
    assert result.edge_ids == ["e1", "e2"]
    assert result.total_weight == 2
    assert result.algorithm == "kruskal"


@pytest.mark.parametrize("algorithm", [prim, kruskal, boruvka])
def test_all_algorithms_agree_on_weight(sample, algorithm) -> None:
    """Every algorithm finds a tree of weight 10 with |V|-1 edges."""
    result = algorithm(sample)
    assert result.total_weight == 10
    assert len(result.edges) == len(sample.vertices) - 1
    assert is_spanning_tree(sample, result.edges)


def test_prim_and_kruskal_agree_with_ties(graph_factory) -> None:
    """Equal-weight edges may be chosen differently, totals match."""
    graph = graph_factory(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("D", "A", 1), ("A", "C", 2)],
    )
    assert prim(graph).total_weight == kruskal(graph).total_weight == boruvka(graph).total_weight == 3


def test_direction_is_ignored(graph_factory) -> None:
    """A directed edge pointing into the tree can still join it."""
    graph = graph_factory(["A", "B", "C"], [("B", "A", 3), ("C", "B", 1)], directed=True)
    for algorithm in (prim, kruskal, boruvka):
        result = algorithm(graph)
        assert sorted(result.edge_ids) == ["e1", "e2"]
        assert result.total_weight == 4


def test_prim_stops_at_first_component(disconnected) -> None:
    """Prim on a disconnected graph returns the first component's tree only."""
    result = prim(disconnected)
    assert result.edge_ids == ["e1"]
    assert result.total_weight == 1


def test_kruskal_and_boruvka_span_every_component(disconnected) -> None:
    """Disconnected input terminates with one tree per component."""
    for algorithm in (kruskal, boruvka):
        result = algorithm(disconnected)
        assert sorted(result.edge_ids) == ["e1", "e2"]
        assert result.total_weight == 3


def test_boruvka_with_isolated_vertex(graph_factory) -> None:
    """A vertex with no edges cannot merge; the loop must still end."""
    graph = graph_factory(["A", "B", "C"], [("A", "B", 2)])
    result = boruvka(graph)
    assert result.edge_ids == ["e1"]


def test_self_loops_are_never_chosen(graph_factory) -> None:
    graph = graph_factory(["A", "B"], [("A", "A", 0), ("A", "B", 5)])
    for algorithm in (prim, kruskal, boruvka):
        assert algorithm(graph).edge_ids == ["e2"]


def test_empty_graph_gives_empty_tree() -> None:
    for algorithm in (prim, kruskal, boruvka):
        result = algorithm(Graph())
        assert result.edges == []
        assert result.total_weight == 0


def test_dispatch_by_name_and_enum(sample) -> None:
    """The selector accepts strings and enum members."""
    assert calculate_minimum_spanning_tree(sample, "kruskal").algorithm == "kruskal"
    assert calculate_minimum_spanning_tree(sample, MSTAlgorithm.BORUVKA).algorithm == "boruvka"
    assert calculate_minimum_spanning_tree(sample).algorithm == "prim"


def test_dispatch_uses_settings_default(sample) -> None:
    settings = EngineSettings(default_mst_algorithm="kruskal")
    assert calculate_minimum_spanning_tree(sample, settings=settings).algorithm == "kruskal"


def test_unknown_algorithm_raises(sample) -> None:
    """Anything outside prim/kruskal/boruvka is a structural error."""
    with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm: dijkstra") as excinfo:
        calculate_minimum_spanning_tree(sample, "dijkstra")
    assert isinstance(excinfo.value, StructuralError)
    assert excinfo.value.details["choices"] == ["prim", "kruskal", "boruvka"]


def test_minimum_spanning_forest(disconnected) -> None:
    """The forest holds one tree per component and sums their weights."""
    result = calculate_minimum_spanning_forest(disconnected)
    assert [tree.component for tree in result.forest] == [["A", "B"], ["C", "D"]]
    assert [tree.weight for tree in result.forest] == [1, 2]
    assert [e.id for e in result.edges] == ["e1", "e2"]
    assert result.total_weight == 3


def test_forest_of_connected_graph_matches_tree(sample) -> None:
    result = calculate_minimum_spanning_forest(sample)
    assert len(result.forest) == 1
    assert result.total_weight == prim(sample).total_weight


def test_enumeration_refuses_seven_vertices(graph_factory) -> None:
    """More than six vertices exceeds the enumeration guard."""
    graph = graph_factory(list("ABCDEFG"), [])
    with pytest.raises(GraphTooLargeError) as excinfo:
        find_all_spanning_trees(graph)
    assert excinfo.value.vertex_count == 7
    assert excinfo.value.limit == 6


def test_enumeration_limit_is_configurable(triangle) -> None:
    with pytest.raises(GraphTooLargeError):
        find_all_spanning_trees(triangle, settings=EngineSettings(max_enumeration_vertices=2))


def test_enumeration_of_complete_graph_matches_cayley(complete_six) -> None:
    """K6 has 6^4 = 1296 spanning trees."""
    trees = find_all_spanning_trees(complete_six)
    assert len(trees) == 1296
    assert all(len(tree) == 5 for tree in trees)


def test_enumeration_of_triangle(triangle) -> None:
    trees = find_all_spanning_trees(triangle)
    assert [[e.id for e in tree] for tree in trees] == [["e1", "e2"], ["e1", "e3"], ["e2", "e3"]]


def test_enumeration_of_disconnected_graph_is_empty(disconnected) -> None:
    assert find_all_spanning_trees(disconnected) == []
