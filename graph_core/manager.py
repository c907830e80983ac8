"""
Graph Manager - The mutation contract for a single graph.

This module implements:
- Vertex/edge creation with monotonic ids (v1, v2, ... / e1, e2, ...)
- O(1) vertex/edge lookups via index dictionaries
- Cascading vertex removal
- Change callbacks so views can refresh after every mutation

Algorithms only ever read `manager.graph`; all writes go through here.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULT_SETTINGS, EngineSettings
from .errors import DuplicateEdgeError, VertexNotFoundError
from .models import Edge, EdgeId, Graph, Vertex, VertexId

logger = logging.getLogger(__name__)


@dataclass
class GraphMetrics:
    """Vertex/edge counts plus a readable graph-type description."""
    vertex_count: int
    edge_count: int
    graph_type: str

    def to_dict(self) -> dict:
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "graph_type": self.graph_type,
        }


class GraphManager:
    """
    Manages a single graph's state and indexes.

    Features:
    - O(1) vertex/edge lookups via index dictionaries
    - Incident-edge index for cascading deletes
    - Change callbacks for real-time sync
    """

    def __init__(
        self,
        graph: Optional[Graph] = None,
        settings: Optional[EngineSettings] = None
    ):
        self._graph = graph if graph is not None else Graph()
        self._settings = settings or DEFAULT_SETTINGS
        self._on_change_callbacks: list[Callable] = []
        self._next_vertex_id = 1
        self._next_edge_id = 1

        # O(1) lookup indexes
        self._vertex_index: dict[VertexId, Vertex] = {}    # vertex_id -> Vertex
        self._edge_index: dict[EdgeId, Edge] = {}          # edge_id -> Edge
        self._edges_by_vertex: dict[VertexId, set] = {}    # vertex_id -> set of edge_ids

        self._rebuild_indexes()

    # --- Index Management ---

    def _rebuild_indexes(self):
        """Rebuild all indexes from the current graph state."""
        self._vertex_index.clear()
        self._edge_index.clear()
        self._edges_by_vertex.clear()

        for vertex in self._graph.vertices:
            self._vertex_index[vertex.id] = vertex
        for edge in self._graph.edges:
            self._index_edge(edge)

        # Resume numbering after any generated ids already present
        self._next_vertex_id = self._next_counter("v", self._vertex_index)
        self._next_edge_id = self._next_counter("e", self._edge_index)

    @staticmethod
    def _next_counter(prefix: str, index: dict) -> int:
        highest = 0
        for key in index:
            if isinstance(key, str) and key.startswith(prefix) and key[1:].isdigit():
                highest = max(highest, int(key[1:]))
        return highest + 1

    def _index_edge(self, edge: Edge):
        """Add an edge to the indexes."""
        self._edge_index[edge.id] = edge
        self._edges_by_vertex.setdefault(edge.source, set()).add(edge.id)
        self._edges_by_vertex.setdefault(edge.target, set()).add(edge.id)

    def _unindex_edge(self, edge: Edge):
        """Remove an edge from the indexes."""
        self._edge_index.pop(edge.id, None)
        if edge.source in self._edges_by_vertex:
            self._edges_by_vertex[edge.source].discard(edge.id)
        if edge.target in self._edges_by_vertex:
            self._edges_by_vertex[edge.target].discard(edge.id)

    # --- Properties ---

    @property
    def graph(self) -> Graph:
        """Get the managed graph."""
        return self._graph

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # --- Change Callbacks ---

    def on_change(self, callback: Callable):
        """Register a callback for graph changes."""
        self._on_change_callbacks.append(callback)

    def _notify_change(self):
        """Notify all registered callbacks of a change."""
        for callback in self._on_change_callbacks:
            callback()

    # --- Validation helpers ---

    def _check_weight(self, weight) -> float:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not math.isfinite(weight):
            raise ValueError(f"Invalid edge weight: {weight!r}")
        if weight < 0 and not self._settings.allow_negative_weights:
            raise ValueError(f"Negative edge weights are disabled: {weight}")
        return weight

    def _find_connection(
        self,
        source: VertexId,
        target: VertexId,
        directed: bool,
        exclude: Optional[EdgeId] = None
    ) -> Optional[Edge]:
        """An existing edge that already joins source to target, if any."""
        for edge_id in self._edges_by_vertex.get(source, ()):
            if edge_id == exclude:
                continue
            edge = self._edge_index[edge_id]
            if edge.source == source and edge.target == target:
                return edge
            # Undirected on either side means the reverse pair is the same connection
            if (not directed or not edge.directed) and edge.connects(source, target):
                return edge
        return None

    # --- Vertex Operations (with O(1) lookups) ---

    def add_vertex(
        self,
        x: float = 0,
        y: float = 0,
        label: Optional[str] = None,
        color: Optional[str] = None
    ) -> Vertex:
        """Add a new vertex with the next generated id."""
        for coordinate in (x, y):
            if isinstance(coordinate, bool) or not isinstance(coordinate, (int, float)) \
                    or not math.isfinite(coordinate):
                raise ValueError(f"Invalid vertex coordinate: {coordinate!r}")

        vertex_id = f"v{self._next_vertex_id}"
        self._next_vertex_id += 1

        fields = {"id": vertex_id, "x": x, "y": y}
        if label:
            fields["label"] = label
        if color:
            fields["color"] = color
        vertex = Vertex(**fields)

        self._graph.vertices.append(vertex)
        self._vertex_index[vertex.id] = vertex
        logger.info("Added vertex %s", vertex.id)
        self._notify_change()
        return vertex

    def remove_vertex(self, vertex_id: VertexId) -> bool:
        """Delete a vertex and all incident edges."""
        # O(1) lookup
        if vertex_id not in self._vertex_index:
            return False

        self._graph.vertices = [v for v in self._graph.vertices if v.id != vertex_id]
        del self._vertex_index[vertex_id]

        incident = self._edges_by_vertex.pop(vertex_id, set())
        if incident:
            self._graph.edges = [e for e in self._graph.edges if e.id not in incident]
            for edge_id in incident:
                self._unindex_edge(self._edge_index[edge_id])

        logger.info("Removed vertex %s and %d incident edges", vertex_id, len(incident))
        self._notify_change()
        return True

    def get_vertex(self, vertex_id: VertexId) -> Optional[Vertex]:
        """Get a vertex by ID (O(1) lookup)."""
        return self._vertex_index.get(vertex_id)

    # --- Edge Operations (with O(1) lookups) ---

    def add_edge(
        self,
        source: VertexId,
        target: VertexId,
        weight: Optional[float] = None,
        directed: Optional[bool] = None,
        label: str = ""
    ) -> Edge:
        """
        Add a new edge between two existing vertices.

        `directed` defaults to the graph-level flag. A second edge between
        the same pair is rejected (either orientation when undirected);
        self-loops are exempt.
        """
        if source not in self._vertex_index:
            raise VertexNotFoundError(source, "source vertex")
        if target not in self._vertex_index:
            raise VertexNotFoundError(target, "target vertex")

        if weight is None:
            weight = self._settings.default_weight
        weight = self._check_weight(weight)
        if directed is None:
            directed = self._graph.directed

        if source != target and self._find_connection(source, target, directed):
            raise DuplicateEdgeError(f"Edge already exists between {source} and {target}")

        edge_id = f"e{self._next_edge_id}"
        self._next_edge_id += 1

        edge = Edge(id=edge_id, source=source, target=target,
                    directed=directed, weight=weight, label=label)
        self._graph.edges.append(edge)
        self._index_edge(edge)
        logger.info("Added edge %s (%s -> %s, weight %s)", edge.id, source, target, weight)
        self._notify_change()
        return edge

    def remove_edge(self, edge_id: EdgeId) -> bool:
        """Delete an edge."""
        # O(1) lookup
        edge = self._edge_index.get(edge_id)
        if edge is None:
            return False

        self._graph.edges = [e for e in self._graph.edges if e.id != edge_id]
        self._unindex_edge(edge)
        logger.info("Removed edge %s", edge_id)
        self._notify_change()
        return True

    def get_edge(self, edge_id: EdgeId) -> Optional[Edge]:
        """Get an edge by ID (O(1) lookup)."""
        return self._edge_index.get(edge_id)

    def update_edge_weight(self, edge_id: EdgeId, weight: float) -> Optional[Edge]:
        """Change an edge's weight."""
        edge = self._edge_index.get(edge_id)
        if edge is None:
            return None

        edge.weight = self._check_weight(weight)
        self._notify_change()
        return edge

    def update_edge_direction(self, edge_id: EdgeId, directed: bool) -> Optional[Edge]:
        """
        Change an edge's own `directed` flag.

        Making an edge undirected is refused when an edge in the opposite
        direction already exists, since both would then be one connection.
        """
        edge = self._edge_index.get(edge_id)
        if edge is None:
            return None

        if edge.directed != directed:
            if not directed and not edge.is_self_loop \
                    and self._find_connection(edge.target, edge.source, True, exclude=edge.id):
                raise DuplicateEdgeError(
                    f"An edge from {edge.target} to {edge.source} already exists"
                )
            edge.directed = directed
            self._notify_change()
        return edge

    # --- Graph Info ---

    def set_directed(self, directed: bool) -> Graph:
        """Set the graph-level default for new edges; existing edges keep their flag."""
        self._graph.directed = directed
        logger.info("Graph direction set to %s", "directed" if directed else "undirected")
        self._notify_change()
        return self._graph

    def set_all_edges_directed(self, directed: bool) -> Graph:
        """
        Rewrite the `directed` flag of every existing edge.

        Making edges undirected is refused as a whole, before anything
        changes, when two edges join the same pair in opposite directions.
        """
        if not directed:
            for edge in self._graph.edges:
                if edge.is_self_loop:
                    continue
                clash = self._find_connection(edge.target, edge.source, True, exclude=edge.id)
                if clash:
                    raise DuplicateEdgeError(
                        f"Edges {edge.id} and {clash.id} would join {edge.source} "
                        f"and {edge.target} twice"
                    )

        for edge in self._graph.edges:
            edge.directed = directed
        logger.info("All edges set to %s", "directed" if directed else "undirected")
        self._notify_change()
        return self._graph

    def set_weighted(self, weighted: bool) -> Graph:
        """Set the graph-level weighted flag."""
        self._graph.weighted = weighted
        self._notify_change()
        return self._graph

    def clear(self) -> Graph:
        """Remove everything and restart id numbering."""
        self._graph.vertices = []
        self._graph.edges = []
        self._rebuild_indexes()
        logger.info("Graph cleared")
        self._notify_change()
        return self._graph

    def get_metrics(self) -> GraphMetrics:
        """Vertex count, edge count and a description of the graph type."""
        kind = "Directed" if self._graph.directed else "Undirected"
        if self._graph.weighted:
            kind += " Weighted"
        return GraphMetrics(
            vertex_count=len(self._graph.vertices),
            edge_count=len(self._graph.edges),
            graph_type=kind,
        )
