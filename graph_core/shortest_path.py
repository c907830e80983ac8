"""
Shortest path algorithms.

Provides single-source (Dijkstra, Bellman-Ford) and all-pairs
(Floyd-Warshall) shortest paths, path reconstruction for both, and the
graph center query built on the all-pairs distances.

Undirected edges are relaxed in both directions everywhere.
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .errors import NegativeCycleError, VertexNotFoundError
from .validation import ensure_valid

if TYPE_CHECKING:
    from .models import Graph, VertexId

logger = logging.getLogger(__name__)


@dataclass
class ShortestPathResult:
    """Single-source distances and the predecessor map that explains them."""
    source: "VertexId"
    distances: dict = field(default_factory=dict)
    previous: dict = field(default_factory=dict)

    def is_reachable(self, vertex_id: "VertexId") -> bool:
        return self.distances.get(vertex_id, math.inf) != math.inf

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "distances": dict(self.distances),
            "previous": dict(self.previous),
        }


@dataclass
class FloydWarshallResult:
    """
    All-pairs shortest paths.

    `dist[i][j]` is the shortest distance from vertex index i to j and
    `next[i][j]` the index of the first hop on that path (None when j is
    unreachable from i). Indices follow `vertex_index_map`.
    """
    dist: list[list[float]]
    next: list[list[Optional[int]]]
    vertex_index_map: dict

    def distance(self, source: "VertexId", target: "VertexId") -> float:
        return self.dist[self.vertex_index_map[source]][self.vertex_index_map[target]]

    def path(self, source: "VertexId", target: "VertexId") -> list:
        """Vertex ids on the shortest path from source to target."""
        return reconstruct_path(
            self.vertex_index_map[source],
            self.vertex_index_map[target],
            self.next,
            self.vertex_index_map,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "dist": [row[:] for row in self.dist],
            "next": [row[:] for row in self.next],
            "vertex_index_map": dict(self.vertex_index_map),
        }


def _weighted_adjacency(graph: "Graph") -> dict[object, list[tuple[object, float]]]:
    """Outgoing (neighbor, weight) pairs per vertex, in edge order."""
    adjacency: dict = defaultdict(list)
    for edge in graph.edges:
        adjacency[edge.source].append((edge.target, edge.weight))
        if not edge.directed and not edge.is_self_loop:
            adjacency[edge.target].append((edge.source, edge.weight))
    return adjacency


def _require_vertex(graph: "Graph", vertex_id: "VertexId", role: str) -> None:
    if not graph.has_vertex(vertex_id):
        raise VertexNotFoundError(vertex_id, role)


def dijkstra(
    graph: "Graph",
    start: "VertexId",
    end: Optional["VertexId"] = None
) -> ShortestPathResult:
    """
    Dijkstra's single-source shortest paths.

    Weights must be non-negative; that is the caller's responsibility and
    is not checked here (use `bellman_ford` for negative weights).

    Args:
        graph: The graph to search
        start: Source vertex id
        end: Optional target; the search stops once it is settled

    Returns:
        ShortestPathResult over every vertex. Unreached vertices keep an
        infinite distance and a None predecessor.

    Raises:
        VertexNotFoundError: If start (or end, when given) is missing
    """
    ensure_valid(graph)
    _require_vertex(graph, start, "start vertex")
    if end is not None:
        _require_vertex(graph, end, "end vertex")

    distances = {v.id: math.inf for v in graph.vertices}
    previous: dict = {v.id: None for v in graph.vertices}
    distances[start] = 0

    # dict keeps insertion order, so ties go to the first vertex found
    unvisited = dict.fromkeys(distances)
    adjacency = _weighted_adjacency(graph)

    while unvisited:
        current = None
        min_distance = math.inf
        for vertex_id in unvisited:
            if distances[vertex_id] < min_distance:
                min_distance = distances[vertex_id]
                current = vertex_id

        if current is None:
            break

        if end is not None and current == end:
            break

        del unvisited[current]

        for neighbor, weight in adjacency[current]:
            if neighbor in unvisited:
                alt = distances[current] + weight
                if alt < distances[neighbor]:
                    distances[neighbor] = alt
                    previous[neighbor] = current

    return ShortestPathResult(source=start, distances=distances, previous=previous)


def get_shortest_path(
    graph: "Graph",
    start: "VertexId",
    end: "VertexId"
) -> Optional[list]:
    """
    Reconstruct the Dijkstra shortest path from start to end.

    Returns:
        List of vertex ids from start to end, or None if there is no path
    """
    result = dijkstra(graph, start, end)

    path = []
    current = end
    while current is not None:
        path.append(current)
        # Cycle guard for a corrupted predecessor map
        if len(path) > len(graph.vertices):
            return None
        current = result.previous[current]

    path.reverse()
    if path[0] != start:
        return None
    return path


def bellman_ford(graph: "Graph", start: "VertexId") -> ShortestPathResult:
    """
    Bellman-Ford single-source shortest paths; negative weights allowed.

    An undirected edge with a negative weight is itself a negative cycle.

    Raises:
        VertexNotFoundError: If start is missing
        NegativeCycleError: If a negative-weight cycle is reachable from start
    """
    ensure_valid(graph)
    _require_vertex(graph, start, "start vertex")

    distances = {v.id: math.inf for v in graph.vertices}
    previous: dict = {v.id: None for v in graph.vertices}
    distances[start] = 0

    for iteration in range(len(graph.vertices) - 1):
        updated = False

        for edge in graph.edges:
            if distances[edge.source] + edge.weight < distances[edge.target]:
                distances[edge.target] = distances[edge.source] + edge.weight
                previous[edge.target] = edge.source
                updated = True

            if not edge.directed and distances[edge.target] + edge.weight < distances[edge.source]:
                distances[edge.source] = distances[edge.target] + edge.weight
                previous[edge.source] = edge.target
                updated = True

        if not updated:
            logger.debug("Bellman-Ford converged after %d passes", iteration + 1)
            break

    for edge in graph.edges:
        relaxes = distances[edge.source] + edge.weight < distances[edge.target]
        if not edge.directed:
            relaxes = relaxes or distances[edge.target] + edge.weight < distances[edge.source]
        if relaxes:
            logger.warning("Negative cycle detected through edge %s", edge.id)
            raise NegativeCycleError(edge.id)

    return ShortestPathResult(source=start, distances=distances, previous=previous)


def floyd_warshall(graph: "Graph") -> FloydWarshallResult:
    """
    Floyd-Warshall all-pairs shortest paths.

    The diagonal starts at 0. Each direct edge seeds its cell with its
    weight (the lightest one wins between parallel edges) and undirected
    edges are mirrored.
    """
    ensure_valid(graph)

    size = len(graph.vertices)
    index_map = graph.vertex_index_map()
    dist = [[math.inf] * size for _ in range(size)]
    next_hop: list[list[Optional[int]]] = [[None] * size for _ in range(size)]

    for i in range(size):
        dist[i][i] = 0
        next_hop[i][i] = i

    for edge in graph.edges:
        i = index_map[edge.source]
        j = index_map[edge.target]
        if edge.weight < dist[i][j]:
            dist[i][j] = edge.weight
            next_hop[i][j] = j
        if not edge.directed and edge.weight < dist[j][i]:
            dist[j][i] = edge.weight
            next_hop[j][i] = i

    for k in range(size):
        for i in range(size):
            for j in range(size):
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
                    next_hop[i][j] = next_hop[i][k]

    return FloydWarshallResult(dist=dist, next=next_hop, vertex_index_map=index_map)


def reconstruct_path(
    i: int,
    j: int,
    next_matrix: list[list[Optional[int]]],
    vertex_index_map: dict
) -> list:
    """
    Walk a Floyd-Warshall `next` matrix from index i to index j.

    Returns:
        Vertex ids on the path (both ends included), or an empty list if
        j is unreachable from i
    """
    if next_matrix[i][j] is None:
        return []

    ids_by_index = {index: vertex_id for vertex_id, index in vertex_index_map.items()}
    path = [ids_by_index[i]]
    current = i

    while current != j:
        current = next_matrix[current][j]
        # A negative cycle can make `next` loop forever
        if current is None or len(path) > len(next_matrix):
            return []
        path.append(ids_by_index[current])

    return path


def eccentricities(dist: list[list[float]]) -> list[float]:
    """Largest finite distance from each vertex index to any other."""
    result = []
    for row in dist:
        finite = [d for d in row if d != math.inf]
        result.append(max(finite, default=0))
    return result


def find_graph_center(graph: "Graph") -> Optional["VertexId"]:
    """
    Find the vertex with minimum eccentricity.

    Returns:
        The first vertex id achieving the minimum, or None for an empty graph
    """
    result = floyd_warshall(graph)
    if not graph.vertices:
        return None

    values = eccentricities(result.dist)
    center_index = 0
    min_eccentricity = math.inf
    for index, value in enumerate(values):
        if value < min_eccentricity:
            min_eccentricity = value
            center_index = index

    return graph.vertices[center_index].id
