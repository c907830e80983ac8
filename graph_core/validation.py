"""
Graph validation - Check graphs for structural issues.

Algorithms call `ensure_valid` before reading a graph so that a dangling
edge reference fails loudly instead of being skipped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidGraphError

if TYPE_CHECKING:
    from .models import Graph


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Breaks an invariant, algorithms refuse the graph
    WARNING = "warning"  # Legal, but probably not what the user meant
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a graph."""
    severity: IssueSeverity
    message: str
    vertex_id: str | int | None = None
    edge_id: str | int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.vertex_id is not None:
            result["vertex_id"] = self.vertex_id
        if self.edge_id is not None:
            result["edge_id"] = self.edge_id
        return result


def validate_graph(graph: "Graph") -> list[ValidationIssue]:
    """
    Validate a graph and return a list of issues.

    Checks for:
    - Duplicate vertex or edge ids - ERROR
    - Edges referencing missing vertices - ERROR
    - Duplicate connections between the same vertices - WARNING
    - Self-loops - INFO
    - Isolated vertices - INFO
    - Empty graph - INFO

    Args:
        graph: The graph to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    if not graph.vertices:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Graph has no vertices"
        ))

    vertex_ids: set = set()
    for vertex in graph.vertices:
        if vertex.id in vertex_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Duplicate vertex id: {vertex.id}",
                vertex_id=vertex.id
            ))
        vertex_ids.add(vertex.id)

    edge_ids: set = set()
    for edge in graph.edges:
        if edge.id in edge_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Duplicate edge id: {edge.id}",
                edge_id=edge.id
            ))
        edge_ids.add(edge.id)

    for edge in graph.edges:
        if edge.source not in vertex_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Edge references non-existent source vertex: {edge.source}",
                edge_id=edge.id
            ))
        if edge.target not in vertex_ids:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"Edge references non-existent target vertex: {edge.target}",
                edge_id=edge.id
            ))

    for edge in graph.edges:
        if edge.is_self_loop:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message="Self-loop (vertex connects to itself)",
                edge_id=edge.id,
                vertex_id=edge.source
            ))

    # Undirected edges occupy both orientations of a pair
    seen_pairs: set[tuple] = set()
    for edge in graph.edges:
        if edge.is_self_loop:
            continue
        pair = (edge.source, edge.target)
        if pair in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate edge from {edge.source} to {edge.target}",
                edge_id=edge.id
            ))
        seen_pairs.add(pair)
        if not edge.directed:
            seen_pairs.add((edge.target, edge.source))

    connected: set = set()
    for edge in graph.edges:
        connected.add(edge.source)
        connected.add(edge.target)
    for vertex in graph.vertices:
        if vertex.id not in connected:
            issues.append(ValidationIssue(
                severity=IssueSeverity.INFO,
                message=f"Isolated vertex: {vertex.label}",
                vertex_id=vertex.id
            ))

    return issues


def ensure_valid(graph: "Graph") -> None:
    """Raise InvalidGraphError if the graph has any error-severity issue."""
    errors = [i for i in validate_graph(graph) if i.severity == IssueSeverity.ERROR]
    if errors:
        raise InvalidGraphError(errors[0].message, errors)


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    errors = len([i for i in issues if i.severity == IssueSeverity.ERROR])
    return {
        "total": len(issues),
        "errors": errors,
        "warnings": len([i for i in issues if i.severity == IssueSeverity.WARNING]),
        "info": len([i for i in issues if i.severity == IssueSeverity.INFO]),
        "valid": errors == 0
    }
