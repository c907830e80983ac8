"""
Graph analysis - Connectivity, degree and clustering utilities.

Connectivity questions (components, bridges, articulation points) are
answered on the undirected view of the graph. Degree keeps direction:
every edge adds one outgoing occurrence at its source and one incoming
occurrence at its target, so a self-loop contributes 2.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .errors import VertexNotFoundError
from .traversal import neighbors
from .validation import ensure_valid

if TYPE_CHECKING:
    from .models import Edge, Graph, VertexId

logger = logging.getLogger(__name__)


@dataclass
class ConnectedComponent:
    """A connected component in the graph."""
    vertex_ids: list = field(default_factory=list)
    edge_count: int = 0

    @property
    def size(self) -> int:
        return len(self.vertex_ids)


@dataclass
class DegreeInfo:
    """Degree information for a single vertex."""
    vertex_id: "VertexId"
    label: str
    incoming: int = 0   # Edges ending at this vertex
    outgoing: int = 0   # Edges starting at this vertex

    @property
    def total(self) -> int:
        return self.incoming + self.outgoing


@dataclass
class GraphSummary:
    """Complete summary of a graph's structure."""
    total_vertices: int
    total_edges: int
    directed_edges: int
    self_loops: int
    connected_components: int
    is_connected: bool
    most_connected_vertices: list[DegreeInfo]
    isolated_count: int
    average_clustering: float

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_vertices": self.total_vertices,
            "total_edges": self.total_edges,
            "directed_edges": self.directed_edges,
            "self_loops": self.self_loops,
            "connected_components": self.connected_components,
            "is_connected": self.is_connected,
            "most_connected_vertices": [
                {
                    "id": d.vertex_id,
                    "label": d.label,
                    "degree": d.total,
                    "incoming": d.incoming,
                    "outgoing": d.outgoing
                }
                for d in self.most_connected_vertices
            ],
            "isolated_count": self.isolated_count,
            "average_clustering": self.average_clustering
        }


def _undirected_adjacency(graph: "Graph") -> dict:
    """Neighbors per vertex ignoring direction, in edge order, no repeats."""
    # dict-of-dicts keeps insertion order while deduplicating
    adjacency: dict = {v.id: {} for v in graph.vertices}
    for edge in graph.edges:
        if edge.is_self_loop:
            continue
        adjacency[edge.source][edge.target] = None
        adjacency[edge.target][edge.source] = None
    return adjacency


def _components(graph: "Graph") -> list[list]:
    """BFS over the undirected view; vertex ids grouped per component."""
    adjacency = _undirected_adjacency(graph)
    visited: set = set()
    components: list[list] = []

    for vertex in graph.vertices:
        if vertex.id in visited:
            continue

        component = [vertex.id]
        visited.add(vertex.id)
        queue = deque([vertex.id])

        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.append(neighbor)
                    queue.append(neighbor)

        components.append(component)

    return components


def find_connected_components(graph: "Graph") -> list[ConnectedComponent]:
    """
    Find all connected components in the graph using BFS.

    A connected component is a set of vertices where every vertex is
    reachable from every other vertex (treating edges as undirected).

    Args:
        graph: The graph to analyze

    Returns:
        List of ConnectedComponent objects, ordered by their first vertex
    """
    ensure_valid(graph)

    components = []
    for vertex_ids in _components(graph):
        members = set(vertex_ids)
        edge_count = sum(1 for e in graph.edges if e.source in members)
        components.append(ConnectedComponent(vertex_ids=vertex_ids, edge_count=edge_count))
    return components


def is_connected(graph: "Graph") -> bool:
    """True if every vertex reaches every other ignoring direction (or the graph is empty)."""
    ensure_valid(graph)
    return len(_components(graph)) <= 1


def get_adjacent_vertices(graph: "Graph", vertex_id: "VertexId") -> list:
    """Vertices one traversable edge away from vertex_id, without repeats."""
    ensure_valid(graph)
    return list(dict.fromkeys(neighbors(graph, vertex_id)))


def calculate_degrees(graph: "Graph") -> dict:
    """
    Calculate in/out degree for all vertices.

    Args:
        graph: The graph to analyze

    Returns:
        Dictionary mapping vertex_id to DegreeInfo
    """
    ensure_valid(graph)

    degrees: dict = {}
    for vertex in graph.vertices:
        degrees[vertex.id] = DegreeInfo(vertex_id=vertex.id, label=vertex.label)

    for edge in graph.edges:
        degrees[edge.source].outgoing += 1
        degrees[edge.target].incoming += 1

    return degrees


def get_vertex_degree(graph: "Graph", vertex_id: "VertexId") -> int:
    """Total degree of a vertex; a self-loop counts twice."""
    degrees = calculate_degrees(graph)
    if vertex_id not in degrees:
        raise VertexNotFoundError(vertex_id)
    return degrees[vertex_id].total


def find_shortest_path_bfs(
    graph: "Graph",
    start: "VertexId",
    end: "VertexId"
) -> Optional[list]:
    """
    Find a path with the fewest edges, ignoring weights.

    Returns:
        List of vertex ids from start to end, or None if unreachable
    """
    ensure_valid(graph)
    for vertex_id, role in ((start, "start vertex"), (end, "end vertex")):
        if not graph.has_vertex(vertex_id):
            raise VertexNotFoundError(vertex_id, role)

    if start == end:
        return [start]

    visited = {start}
    queue = deque([[start]])

    while queue:
        path = queue.popleft()
        for neighbor in neighbors(graph, path[-1]):
            if neighbor in visited:
                continue
            if neighbor == end:
                return path + [neighbor]
            visited.add(neighbor)
            queue.append(path + [neighbor])

    return None


def find_bridges(graph: "Graph") -> list["Edge"]:
    """
    Find edges whose removal increases the number of connected components.

    Each edge is removed in turn inside `graph.without()`, which puts it
    back when the check finishes or fails.
    """
    ensure_valid(graph)
    baseline = len(_components(graph))
    bridges = []

    for edge in list(graph.edges):
        with graph.without(edge_ids=[edge.id]):
            if len(_components(graph)) > baseline:
                bridges.append(edge)

    logger.debug("Found %d bridges among %d edges", len(bridges), len(graph.edges))
    return bridges


def find_articulation_points(graph: "Graph") -> list:
    """
    Find vertices whose removal increases the number of connected components.

    Removing a vertex also hides its incident edges; both are restored
    before the next candidate is tried.
    """
    ensure_valid(graph)
    baseline = len(_components(graph))
    points = []

    for vertex in list(graph.vertices):
        with graph.without(vertex_ids=[vertex.id]):
            if len(_components(graph)) > baseline:
                points.append(vertex.id)

    logger.debug("Found %d articulation points among %d vertices",
                 len(points), len(graph.vertices))
    return points


def calculate_clustering_coefficient(graph: "Graph", vertex_id: "VertexId") -> float:
    """
    Local clustering coefficient of a vertex.

    Neighbors follow edge direction, as in `get_adjacent_vertices`, with the
    vertex itself excluded. A pair of neighbors (earlier, later) is linked by
    an edge earlier -> later, or by an undirected edge written either way.
    The score is links / (k * (k - 1) / 2); fewer than two neighbors score 0.
    """
    ensure_valid(graph)
    if not graph.has_vertex(vertex_id):
        raise VertexNotFoundError(vertex_id)

    around = [v for v in dict.fromkeys(neighbors(graph, vertex_id)) if v != vertex_id]
    k = len(around)
    if k < 2:
        return 0.0

    linked = set()
    for edge in graph.edges:
        linked.add((edge.source, edge.target))
        if not edge.directed:
            linked.add((edge.target, edge.source))

    links = 0
    for i in range(k):
        for j in range(i + 1, k):
            if (around[i], around[j]) in linked:
                links += 1

    return links / (k * (k - 1) / 2)


def calculate_average_clustering_coefficient(graph: "Graph") -> float:
    """Mean local clustering coefficient over all vertices (0 when empty)."""
    if not graph.vertices:
        return 0.0
    total = sum(calculate_clustering_coefficient(graph, v.id) for v in graph.vertices)
    return total / len(graph.vertices)


def summarize_graph(graph: "Graph", top_n: int = 5) -> GraphSummary:
    """
    Generate a comprehensive summary of a graph.

    Args:
        graph: The graph to summarize
        top_n: Number of top connected vertices to include

    Returns:
        GraphSummary object with all analysis results
    """
    components = find_connected_components(graph)
    degrees = calculate_degrees(graph)

    sorted_by_degree = sorted(
        degrees.values(),
        key=lambda d: d.total,
        reverse=True
    )
    most_connected = [d for d in sorted_by_degree[:top_n] if d.total > 0]

    return GraphSummary(
        total_vertices=len(graph.vertices),
        total_edges=len(graph.edges),
        directed_edges=sum(1 for e in graph.edges if e.directed),
        self_loops=sum(1 for e in graph.edges if e.is_self_loop),
        connected_components=len(components),
        is_connected=len(components) <= 1,
        most_connected_vertices=most_connected,
        isolated_count=sum(1 for d in degrees.values() if d.total == 0),
        average_clustering=calculate_average_clustering_coefficient(graph)
    )
