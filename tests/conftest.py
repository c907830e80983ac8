"""Pytest configuration and shared graph fixtures.

This module provides:
- A `graph_factory` fixture for building graphs from compact edge tuples
- The small named graphs reused across the algorithm tests
"""

from typing import Callable

import pytest

from graph_core import Edge, Graph, Vertex


def _build_graph(
    vertex_ids: list,
    edges: list[tuple],
    directed: bool = False,
    weighted: bool = True,
) -> Graph:
    """Edges are (source, target, weight) or (source, target, weight, directed)."""
    graph_edges = []
    for index, row in enumerate(edges, start=1):
        source, target, weight, *rest = row
        graph_edges.append(Edge(
            id=f"e{index}",
            source=source,
            target=target,
            weight=weight,
            directed=rest[0] if rest else directed,
        ))
    return Graph(
        vertices=[Vertex(id=v) for v in vertex_ids],
        edges=graph_edges,
        directed=directed,
        weighted=weighted,
    )


@pytest.fixture
def graph_factory() -> Callable[..., Graph]:
    """Provide the graph builder to tests that need a one-off graph."""
    return _build_graph


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle A-B=1, B-C=1, A-C=5."""
    return _build_graph(["A", "B", "C"], [("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def sample() -> Graph:
    """Connected undirected five-vertex graph with distinct shortest paths.

    Shortest distances from A: A=0, C=2, B=3, D=8, E=10.
    Minimum spanning tree weight: 10.
    """
    return _build_graph(
        ["A", "B", "C", "D", "E"],
        [
            ("A", "B", 4),
            ("A", "C", 2),
            ("B", "C", 1),
            ("B", "D", 5),
            ("C", "D", 8),
            ("C", "E", 10),
            ("D", "E", 2),
        ],
    )


@pytest.fixture
def disconnected() -> Graph:
    """Two components {A, B} and {C, D}."""
    return _build_graph(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def star() -> Graph:
    """Star with center Z and leaves A-D, unit weights."""
    return _build_graph(
        ["A", "B", "C", "D", "Z"],
        [("Z", leaf, 1) for leaf in ["A", "B", "C", "D"]],
    )


@pytest.fixture
def complete_six() -> Graph:
    """Complete undirected graph on six vertices."""
    ids = [f"v{i}" for i in range(1, 7)]
    edges = [(ids[i], ids[j], 1) for i in range(6) for j in range(i + 1, 6)]
    return _build_graph(ids, edges)
