"""
Spanning tree algorithms.

Provides minimum spanning trees (Prim, Kruskal, Borůvka), a minimum
spanning forest over connected components, and exhaustive enumeration of
every spanning tree of a small graph.

All algorithms work on the undirected view of the graph: an edge's
`directed` flag is ignored.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from itertools import combinations
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from .analysis import find_connected_components
from .config import DEFAULT_SETTINGS, EngineSettings, MSTAlgorithm
from .errors import GraphTooLargeError, UnknownAlgorithmError
from .union_find import UnionFind
from .validation import ensure_valid

if TYPE_CHECKING:
    from .models import Edge, Graph

logger = logging.getLogger(__name__)


@dataclass
class SpanningTreeResult:
    """Edges chosen for a spanning tree and their summed weight."""
    edges: list["Edge"] = field(default_factory=list)
    total_weight: float = 0
    algorithm: Optional[str] = None

    @property
    def edge_ids(self) -> list:
        return [e.id for e in self.edges]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "algorithm": self.algorithm,
            "edges": [e.model_dump() for e in self.edges],
            "total_weight": self.total_weight,
        }


@dataclass
class ComponentTree:
    """Minimum spanning tree of one connected component."""
    component: list
    edges: list["Edge"] = field(default_factory=list)
    weight: float = 0


@dataclass
class SpanningForestResult:
    """One minimum spanning tree per connected component."""
    forest: list[ComponentTree] = field(default_factory=list)
    total_weight: float = 0

    @property
    def edges(self) -> list["Edge"]:
        return [edge for tree in self.forest for edge in tree.edges]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "forest": [
                {
                    "component": tree.component,
                    "edges": [e.id for e in tree.edges],
                    "weight": tree.weight,
                }
                for tree in self.forest
            ],
            "total_weight": self.total_weight,
        }


def prim(graph: "Graph") -> SpanningTreeResult:
    """
    Prim's algorithm, grown from the first vertex.

    On a disconnected graph the tree stops growing once its component is
    exhausted and the partial tree is returned; use
    `calculate_minimum_spanning_forest` to cover every component.
    """
    ensure_valid(graph)
    if not graph.vertices:
        return SpanningTreeResult(algorithm=MSTAlgorithm.PRIM.value)

    in_tree = {graph.vertices[0].id}
    tree_edges: list["Edge"] = []
    total_weight = 0

    while len(in_tree) < len(graph.vertices):
        min_edge = None
        min_weight = math.inf

        for edge in graph.edges:
            # Crossing edges have exactly one endpoint in the tree
            if (edge.source in in_tree) != (edge.target in in_tree):
                if edge.weight < min_weight:
                    min_weight = edge.weight
                    min_edge = edge

        if min_edge is None:
            logger.debug("Prim stopped with %d of %d vertices: graph is disconnected",
                         len(in_tree), len(graph.vertices))
            break

        tree_edges.append(min_edge)
        total_weight += min_edge.weight
        inside = min_edge.source if min_edge.source in in_tree else min_edge.target
        in_tree.add(min_edge.other_end(inside))

    return SpanningTreeResult(edges=tree_edges, total_weight=total_weight,
                              algorithm=MSTAlgorithm.PRIM.value)


def kruskal(graph: "Graph") -> SpanningTreeResult:
    """Kruskal's algorithm over edges sorted by ascending weight."""
    ensure_valid(graph)
    if not graph.vertices:
        return SpanningTreeResult(algorithm=MSTAlgorithm.KRUSKAL.value)

    sets = UnionFind(graph.vertex_ids())
    tree_edges: list["Edge"] = []
    total_weight = 0
    target_size = len(graph.vertices) - 1

    # sorted() is stable, so equal weights keep edge order
    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if len(tree_edges) == target_size:
            break
        if sets.union(edge.source, edge.target):
            tree_edges.append(edge)
            total_weight += edge.weight

    return SpanningTreeResult(edges=tree_edges, total_weight=total_weight,
                              algorithm=MSTAlgorithm.KRUSKAL.value)


def boruvka(graph: "Graph") -> SpanningTreeResult:
    """
    Borůvka's algorithm.

    Each round picks the cheapest edge leaving every component (the first
    such edge in edge order on ties) and merges along all of them. Stops at
    a single component, or when a round merges nothing (disconnected input).
    """
    ensure_valid(graph)
    if not graph.vertices:
        return SpanningTreeResult(algorithm=MSTAlgorithm.BORUVKA.value)

    sets = UnionFind(graph.vertex_ids())
    tree_edges: list["Edge"] = []
    total_weight = 0
    component_count = len(graph.vertices)
    rounds = 0

    while component_count > 1:
        rounds += 1
        cheapest: dict = {}

        for edge in graph.edges:
            root_source = sets.find(edge.source)
            root_target = sets.find(edge.target)
            if root_source == root_target:
                continue

            for root in (root_source, root_target):
                if root not in cheapest or edge.weight < cheapest[root].weight:
                    cheapest[root] = edge

        merged = False
        for edge in cheapest.values():
            if sets.union(edge.source, edge.target):
                tree_edges.append(edge)
                total_weight += edge.weight
                component_count -= 1
                merged = True

        if not merged:
            logger.debug("Borůvka stopped with %d components after %d rounds",
                         component_count, rounds)
            break

    return SpanningTreeResult(edges=tree_edges, total_weight=total_weight,
                              algorithm=MSTAlgorithm.BORUVKA.value)


_MST_ALGORITHMS: dict[MSTAlgorithm, Callable[["Graph"], SpanningTreeResult]] = {
    MSTAlgorithm.PRIM: prim,
    MSTAlgorithm.KRUSKAL: kruskal,
    MSTAlgorithm.BORUVKA: boruvka,
}


def calculate_minimum_spanning_tree(
    graph: "Graph",
    algorithm: MSTAlgorithm | str | None = None,
    settings: Optional[EngineSettings] = None
) -> SpanningTreeResult:
    """
    Compute a minimum spanning tree with the named algorithm.

    Args:
        graph: The graph to span
        algorithm: "prim", "kruskal" or "boruvka" (or an MSTAlgorithm);
            defaults to the settings' default algorithm
        settings: Engine settings (module defaults if omitted)

    Raises:
        UnknownAlgorithmError: If algorithm names no known algorithm
    """
    settings = settings or DEFAULT_SETTINGS
    if algorithm is None:
        algorithm = settings.default_mst_algorithm

    try:
        choice = MSTAlgorithm(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(algorithm, [a.value for a in MSTAlgorithm]) from None

    return _MST_ALGORITHMS[choice](graph)


def calculate_minimum_spanning_forest(graph: "Graph") -> SpanningForestResult:
    """Run Prim on each connected component and aggregate the trees."""
    ensure_valid(graph)

    forest: list[ComponentTree] = []
    total_weight = 0

    for component in find_connected_components(graph):
        tree = prim(graph.subgraph(component.vertex_ids))
        forest.append(ComponentTree(
            component=component.vertex_ids,
            edges=tree.edges,
            weight=tree.total_weight
        ))
        total_weight += tree.total_weight

    return SpanningForestResult(forest=forest, total_weight=total_weight)


def is_spanning_tree(graph: "Graph", edges: Iterable["Edge"]) -> bool:
    """True if `edges` has |V|-1 members and reaches every vertex of graph."""
    edges = list(edges)
    if not graph.vertices or len(edges) != len(graph.vertices) - 1:
        return False

    adjacency: dict = {v.id: [] for v in graph.vertices}
    for edge in edges:
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)

    start = graph.vertices[0].id
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in adjacency[current]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return len(visited) == len(graph.vertices)


def find_all_spanning_trees(
    graph: "Graph",
    settings: Optional[EngineSettings] = None
) -> list[list["Edge"]]:
    """
    Enumerate every spanning tree of a small graph.

    Tries each (|V|-1)-edge subset, so cost grows combinatorially; graphs
    above `settings.max_enumeration_vertices` are refused.

    Returns:
        List of edge lists, one per spanning tree, in combination order

    Raises:
        GraphTooLargeError: If the graph has too many vertices
    """
    settings = settings or DEFAULT_SETTINGS
    vertex_count = len(graph.vertices)
    if vertex_count > settings.max_enumeration_vertices:
        logger.warning("Refusing to enumerate spanning trees of %d vertices", vertex_count)
        raise GraphTooLargeError(vertex_count, settings.max_enumeration_vertices)

    ensure_valid(graph)
    if vertex_count == 0:
        return []

    return [
        list(subset)
        for subset in combinations(graph.edges, vertex_count - 1)
        if is_spanning_tree(graph, subset)
    ]
