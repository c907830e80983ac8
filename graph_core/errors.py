"""
Exceptions raised by the graph engine.

Structural errors (bad input, unknown algorithm, oversize requests) and the
negative-cycle condition live on separate branches so a caller can catch one
without swallowing the other.
"""

from typing import Any, Optional


class GraphError(Exception):
    """Base exception for graph engine errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class StructuralError(GraphError):
    """Raised when the input graph or the request itself is invalid."""
    pass


class VertexNotFoundError(StructuralError):
    """Raised when a referenced vertex does not exist."""

    def __init__(self, vertex_id: Any, role: str = "vertex"):
        super().__init__(f"{role.capitalize()} not found: {vertex_id}", {"vertex_id": vertex_id})
        self.vertex_id = vertex_id


class InvalidGraphError(StructuralError):
    """Raised when the graph breaks a structural invariant (e.g. dangling edges)."""

    def __init__(self, message: str, issues: Optional[list] = None):
        super().__init__(message, {"issues": len(issues or [])})
        self.issues = issues or []


class DuplicateEdgeError(StructuralError):
    """Raised when an edge would duplicate an existing connection."""
    pass


class UnknownAlgorithmError(StructuralError):
    """Raised when an algorithm selector does not name a known algorithm."""

    def __init__(self, algorithm: Any, choices: Optional[list[str]] = None):
        super().__init__(f"Unknown algorithm: {algorithm}", {"choices": choices or []})
        self.algorithm = algorithm


class GraphTooLargeError(StructuralError):
    """Raised when a combinatorial operation is requested on too many vertices."""

    def __init__(self, vertex_count: int, limit: int):
        super().__init__(
            f"Graph is too large to enumerate all spanning trees "
            f"({vertex_count} vertices, limit is {limit})",
            {"vertex_count": vertex_count, "limit": limit},
        )
        self.vertex_count = vertex_count
        self.limit = limit


class NegativeCycleError(GraphError):
    """Raised by Bellman-Ford when a negative-weight cycle is reachable."""

    def __init__(self, edge_id: Any = None):
        details = {"edge_id": edge_id} if edge_id is not None else None
        super().__init__("Graph contains a negative-weight cycle", details)
        self.edge_id = edge_id
