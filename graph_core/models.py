"""
Core data models for graphs.

These models define the canonical graph schema consumed by every algorithm:
- Vertices keyed by a caller-assigned id, with optional display metadata
- Edges carrying their own `directed` flag and a numeric `weight`
- A Graph holding both collections plus graph-level defaults

The containers are flat ordered lists keyed by id. Nothing holds a reference
to another model; algorithms resolve ids through `Graph.vertex_index_map()`,
which is rebuilt on every call.
"""

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional

from pydantic import BaseModel, Field, model_validator

VertexId = str | int
EdgeId = str | int


class Vertex(BaseModel):
    """A vertex in the graph. Position and color belong to the renderer."""
    id: VertexId
    label: str = ""
    x: float = 0
    y: float = 0
    color: str = "#6f42c1"

    @model_validator(mode='before')
    @classmethod
    def default_label(cls, data: Any) -> Any:
        """Label a vertex with its id unless told otherwise."""
        if isinstance(data, dict) and not data.get('label') and 'id' in data:
            data = {**data, 'label': str(data['id'])}
        return data


class Edge(BaseModel):
    """
    An edge between two vertices.

    `directed` is the edge's own flag; a graph may mix directed and
    undirected edges. An undirected edge is traversable both ways.
    """
    id: EdgeId
    source: VertexId
    target: VertexId
    directed: bool = False
    weight: float = 1
    label: str = ""

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def connects(self, u: VertexId, v: VertexId) -> bool:
        """True if this edge joins u and v, ignoring direction."""
        return (self.source == u and self.target == v) or (self.source == v and self.target == u)

    def other_end(self, vertex_id: VertexId) -> VertexId:
        """The endpoint opposite `vertex_id` (itself for a self-loop)."""
        return self.target if self.source == vertex_id else self.source


class Graph(BaseModel):
    """
    The complete graph structure.

    `directed` and `weighted` are defaults for new edges; they do not rewrite
    the `directed` flag of edges that already exist.

    Callers must not mutate a graph while an algorithm call on it is in
    flight. No locking is provided.
    """
    vertices: list[Vertex] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    directed: bool = False
    weighted: bool = False

    def get_vertex(self, vertex_id: VertexId) -> Optional[Vertex]:
        """Get a vertex by ID (O(n) - use GraphManager for indexed access)."""
        for vertex in self.vertices:
            if vertex.id == vertex_id:
                return vertex
        return None

    def get_edge(self, edge_id: EdgeId) -> Optional[Edge]:
        """Get an edge by ID (O(n) - use GraphManager for indexed access)."""
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return any(v.id == vertex_id for v in self.vertices)

    def vertex_ids(self) -> list[VertexId]:
        return [v.id for v in self.vertices]

    def vertex_index_map(self) -> dict[VertexId, int]:
        """Map each vertex id to its position in the current vertex order."""
        return {vertex.id: index for index, vertex in enumerate(self.vertices)}

    def subgraph(self, vertex_ids: Iterable[VertexId]) -> "Graph":
        """
        Build the subgraph induced by `vertex_ids`.

        The returned graph shares its Vertex and Edge objects with this one.
        """
        keep = set(vertex_ids)
        return Graph(
            vertices=[v for v in self.vertices if v.id in keep],
            edges=[e for e in self.edges if e.source in keep and e.target in keep],
            directed=self.directed,
            weighted=self.weighted,
        )

    @contextmanager
    def without(
        self,
        edge_ids: Iterable[EdgeId] = (),
        vertex_ids: Iterable[VertexId] = ()
    ) -> Iterator["Graph"]:
        """
        Temporarily remove edges and/or vertices from this graph.

        Removing a vertex also hides its incident edges. The original
        collections are restored when the block exits, including when it
        exits with an exception.
        """
        dropped_edges = set(edge_ids)
        dropped_vertices = set(vertex_ids)
        original_vertices = self.vertices
        original_edges = self.edges
        try:
            self.vertices = [v for v in original_vertices if v.id not in dropped_vertices]
            self.edges = [
                e for e in original_edges
                if e.id not in dropped_edges
                and e.source not in dropped_vertices
                and e.target not in dropped_vertices
            ]
            yield self
        finally:
            self.vertices = original_vertices
            self.edges = original_edges
