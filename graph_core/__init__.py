"""
Graph Core - Graph model and algorithms for the diagram editor.

This package provides the graph model, its mutation contract, and every
algorithm the editor displays: traversal, shortest paths, spanning trees,
connectivity analysis and matrix views. Algorithms read a Graph and return
plain result values; callers must not mutate a graph while an algorithm
call on it is running.
"""

from .models import (
    # Core models
    Vertex,
    Edge,
    Graph,
)

from .config import EngineSettings, MSTAlgorithm, DEFAULT_SETTINGS
from .errors import (
    GraphError,
    StructuralError,
    VertexNotFoundError,
    InvalidGraphError,
    DuplicateEdgeError,
    UnknownAlgorithmError,
    GraphTooLargeError,
    NegativeCycleError,
)
from .manager import GraphManager, GraphMetrics
from .validation import validate_graph, ensure_valid, validation_summary, ValidationIssue, IssueSeverity
from .traversal import breadth_first_search, depth_first_search
from .shortest_path import (
    ShortestPathResult,
    FloydWarshallResult,
    dijkstra,
    get_shortest_path,
    bellman_ford,
    floyd_warshall,
    reconstruct_path,
    find_graph_center,
)
from .union_find import UnionFind
from .spanning_tree import (
    SpanningTreeResult,
    SpanningForestResult,
    prim,
    kruskal,
    boruvka,
    calculate_minimum_spanning_tree,
    calculate_minimum_spanning_forest,
    find_all_spanning_trees,
)
from .analysis import (
    ConnectedComponent,
    DegreeInfo,
    GraphSummary,
    find_connected_components,
    is_connected,
    get_adjacent_vertices,
    calculate_degrees,
    get_vertex_degree,
    find_shortest_path_bfs,
    find_bridges,
    find_articulation_points,
    calculate_clustering_coefficient,
    calculate_average_clustering_coefficient,
    summarize_graph,
)
from .matrix import (
    EigenResult,
    get_adjacency_matrix,
    get_incidence_matrix,
    get_distance_matrix,
    get_reachability_matrix,
    get_eccentricities,
    get_radius_and_diameter,
    get_graph_center,
    get_eigenvalues_and_eigenvectors,
)

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "Graph",
    "GraphManager",
    "GraphMetrics",
    # Settings
    "EngineSettings",
    "MSTAlgorithm",
    "DEFAULT_SETTINGS",
    # Errors
    "GraphError",
    "StructuralError",
    "VertexNotFoundError",
    "InvalidGraphError",
    "DuplicateEdgeError",
    "UnknownAlgorithmError",
    "GraphTooLargeError",
    "NegativeCycleError",
    # Validation
    "validate_graph",
    "ensure_valid",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
    # Traversal
    "breadth_first_search",
    "depth_first_search",
    # Shortest paths
    "ShortestPathResult",
    "FloydWarshallResult",
    "dijkstra",
    "get_shortest_path",
    "bellman_ford",
    "floyd_warshall",
    "reconstruct_path",
    "find_graph_center",
    # Spanning trees
    "UnionFind",
    "SpanningTreeResult",
    "SpanningForestResult",
    "prim",
    "kruskal",
    "boruvka",
    "calculate_minimum_spanning_tree",
    "calculate_minimum_spanning_forest",
    "find_all_spanning_trees",
    # Analysis
    "ConnectedComponent",
    "DegreeInfo",
    "GraphSummary",
    "find_connected_components",
    "is_connected",
    "get_adjacent_vertices",
    "calculate_degrees",
    "get_vertex_degree",
    "find_shortest_path_bfs",
    "find_bridges",
    "find_articulation_points",
    "calculate_clustering_coefficient",
    "calculate_average_clustering_coefficient",
    "summarize_graph",
    # Matrices
    "EigenResult",
    "get_adjacency_matrix",
    "get_incidence_matrix",
    "get_distance_matrix",
    "get_reachability_matrix",
    "get_eccentricities",
    "get_radius_and_diameter",
    "get_graph_center",
    "get_eigenvalues_and_eigenvectors",
]
