"""
Matrix calculations for graphs.

Every matrix is a list of rows indexed by `graph.vertex_index_map()`, i.e.
by the current vertex order. The adjacency and incidence builders skip
edges whose endpoints do not resolve to an index instead of failing.
"""

import cmath
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .shortest_path import eccentricities, floyd_warshall

if TYPE_CHECKING:
    from .models import Graph


@dataclass
class EigenResult:
    """Eigenvalues and eigenvectors of the adjacency matrix."""
    eigenvalues: list = field(default_factory=list)
    eigenvectors: list = field(default_factory=list)
    # False when the matrix size has no closed form and zeros were returned
    exact: bool = True

    def to_dict(self) -> dict:
        return {
            "eigenvalues": self.eigenvalues,
            "eigenvectors": self.eigenvectors,
            "exact": self.exact,
        }


def get_adjacency_matrix(graph: "Graph") -> list[list[float]]:
    """
    Dense adjacency matrix.

    Cells hold the edge weight on a weighted graph and 1 otherwise;
    undirected edges fill both (i, j) and (j, i).
    """
    size = len(graph.vertices)
    index_map = graph.vertex_index_map()
    matrix = [[0] * size for _ in range(size)]

    for edge in graph.edges:
        i = index_map.get(edge.source)
        j = index_map.get(edge.target)
        if i is None or j is None:
            continue

        value = edge.weight if graph.weighted else 1
        matrix[i][j] = value
        if not edge.directed:
            matrix[j][i] = value

    return matrix


def get_incidence_matrix(graph: "Graph") -> list[list[int]]:
    """
    Vertex-by-edge incidence matrix.

    A directed edge marks -1 at its source and +1 at its target; an
    undirected edge marks +1 at both ends. Marks accumulate, so an
    undirected self-loop shows 2 and a directed one cancels to 0.
    """
    index_map = graph.vertex_index_map()
    matrix = [[0] * len(graph.edges) for _ in range(len(graph.vertices))]

    for column, edge in enumerate(graph.edges):
        i = index_map.get(edge.source)
        j = index_map.get(edge.target)
        if i is None or j is None:
            continue

        if edge.directed:
            matrix[i][column] -= 1
            matrix[j][column] += 1
        else:
            matrix[i][column] += 1
            matrix[j][column] += 1

    return matrix


def get_distance_matrix(graph: "Graph") -> list[list[float]]:
    """All-pairs shortest distances (math.inf where unreachable)."""
    return floyd_warshall(graph).dist


def get_reachability_matrix(graph: "Graph") -> list[list[int]]:
    """1 where a path exists (every vertex reaches itself), 0 otherwise."""
    return [
        [1 if d != math.inf else 0 for d in row]
        for row in get_distance_matrix(graph)
    ]


def get_eccentricities(graph: "Graph") -> dict:
    """Map each vertex id to its largest finite distance to another vertex."""
    values = eccentricities(get_distance_matrix(graph))
    return {vertex.id: value for vertex, value in zip(graph.vertices, values)}


def get_radius_and_diameter(graph: "Graph") -> dict:
    """Minimum and maximum eccentricity; both 0 for an empty graph."""
    values = list(get_eccentricities(graph).values())
    if not values:
        return {"radius": 0, "diameter": 0}
    return {"radius": min(values), "diameter": max(values)}


def get_graph_center(graph: "Graph") -> list:
    """All vertex ids whose eccentricity equals the radius."""
    by_vertex = get_eccentricities(graph)
    if not by_vertex:
        return []
    radius = min(by_vertex.values())
    return [vertex_id for vertex_id, value in by_vertex.items() if value == radius]


def get_eigenvalues_and_eigenvectors(graph: "Graph") -> EigenResult:
    """
    Eigen-decomposition of the adjacency matrix, 2x2 only.

    A 2x2 matrix [[a, b], [c, d]] is solved in closed form:
    lambda = (a + d +/- sqrt((a - d)^2 + 4bc)) / 2, with eigenvectors
    [1, (lambda - a) / b] (b taken as 1 when zero). Any other size gets a
    zero-filled placeholder of the matrix's shape with `exact=False`.
    """
    matrix = get_adjacency_matrix(graph)
    size = len(matrix)

    if size == 0:
        return EigenResult()

    if size != 2:
        return EigenResult(
            eigenvalues=[0] * size,
            eigenvectors=[[0] * size for _ in range(size)],
            exact=False,
        )

    (a, b), (c, d) = matrix
    discriminant = (a - d) ** 2 + 4 * b * c
    if discriminant >= 0:
        root = math.sqrt(discriminant)
    else:
        root = cmath.sqrt(discriminant)

    first = (a + d + root) / 2
    second = (a + d - root) / 2
    divisor = b or 1

    return EigenResult(
        eigenvalues=[first, second],
        eigenvectors=[
            [1, (first - a) / divisor],
            [1, (second - a) / divisor],
        ],
    )
