"""Tests for breadth-first and depth-first traversal."""

import pytest

from graph_core import (
    Edge,
    Graph,
    InvalidGraphError,
    Vertex,
    breadth_first_search,
    depth_first_search,
)


@pytest.fixture
def diamond(graph_factory) -> Graph:
    return graph_factory(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


def test_bfs_visits_level_by_level(diamond) -> None:
    """BFS visits both neighbors of A before D."""
    assert breadth_first_search(diamond, "A") == ["A", "B", "C", "D"]


def test_dfs_follows_recursive_order(diamond) -> None:
    """DFS goes deep through B to D before reaching C via D."""
    assert depth_first_search(diamond, "A") == ["A", "B", "D", "C"]


def test_directed_edges_only_walk_forward(graph_factory) -> None:
    """A directed edge is not traversable from its target."""
    graph = graph_factory(["A", "B", "C"], [("A", "B", 1), ("C", "A", 1)], directed=True)
    assert breadth_first_search(graph, "A") == ["A", "B"]
    assert depth_first_search(graph, "A") == ["A", "B"]
    assert breadth_first_search(graph, "C") == ["C", "A", "B"]


def test_mixed_directedness_uses_each_edge_flag(graph_factory) -> None:
    """Undirected edges in a directed graph still walk both ways."""
    graph = graph_factory(["A", "B", "C"], [("A", "B", 1, True), ("C", "B", 1, False)], directed=True)
    assert breadth_first_search(graph, "A") == ["A", "B", "C"]


def test_absent_start_or_empty_graph_returns_empty(diamond) -> None:
    """Missing start vertices are not errors."""
    assert breadth_first_search(diamond, "Q") == []
    assert depth_first_search(diamond, "Q") == []
    assert breadth_first_search(Graph(), "A") == []
    assert depth_first_search(Graph(), "A") == []


def test_traversal_returns_labels() -> None:
    """Visitation order is reported by vertex label."""
    graph = Graph(
        vertices=[Vertex(id=1, label="start"), Vertex(id=2, label="end")],
        edges=[Edge(id=1, source=1, target=2)],
    )
    assert breadth_first_search(graph, 1) == ["start", "end"]
    assert depth_first_search(graph, 1) == ["start", "end"]


def test_unreachable_part_is_skipped(disconnected) -> None:
    """Traversal stops when the frontier is exhausted."""
    assert breadth_first_search(disconnected, "A") == ["A", "B"]


def test_dfs_handles_paths_deeper_than_recursion_limit(graph_factory) -> None:
    """The explicit stack copes with a long chain."""
    ids = list(range(2000))
    graph = graph_factory(ids, [(i, i + 1, 1) for i in range(1999)])
    order = depth_first_search(graph, 0)
    assert len(order) == 2000
    assert order[:3] == ["0", "1", "2"]


def test_dangling_edge_is_rejected(graph_factory) -> None:
    """An edge to a missing vertex is an input error."""
    graph = graph_factory(["A", "B"], [("A", "B", 1), ("B", "Z", 1)])
    with pytest.raises(InvalidGraphError, match="non-existent target"):
        breadth_first_search(graph, "A")
