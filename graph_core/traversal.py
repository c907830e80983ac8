"""
Graph traversal - breadth-first and depth-first visitation order.

An edge can always be walked from source to target, and from target back
to source when it is undirected.
"""

from collections import deque
from typing import TYPE_CHECKING

from .validation import ensure_valid

if TYPE_CHECKING:
    from .models import Graph, VertexId


def neighbors(graph: "Graph", vertex_id: "VertexId") -> list["VertexId"]:
    """
    List the vertices reachable from `vertex_id` over one edge.

    Neighbors appear in edge order and may repeat when parallel edges exist.
    """
    result = []
    for edge in graph.edges:
        if edge.source == vertex_id:
            result.append(edge.target)
        elif not edge.directed and edge.target == vertex_id:
            result.append(edge.source)
    return result


def breadth_first_search(graph: "Graph", start: "VertexId") -> list[str]:
    """
    Visit the graph breadth-first from `start`.

    Returns:
        Vertex labels in visitation order, or an empty list if `start`
        is not in the graph.
    """
    if not graph.vertices or not graph.has_vertex(start):
        return []
    ensure_valid(graph)

    labels = {v.id: v.label for v in graph.vertices}
    visited = {start}
    queue = deque([start])
    order: list[str] = []

    while queue:
        current = queue.popleft()
        order.append(labels[current])

        for neighbor in neighbors(graph, current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order


def depth_first_search(graph: "Graph", start: "VertexId") -> list[str]:
    """
    Visit the graph depth-first from `start`.

    Uses an explicit stack of neighbor iterators so deep graphs do not hit
    the recursion limit; the order is that of the recursive formulation.

    Returns:
        Vertex labels in visitation order, or an empty list if `start`
        is not in the graph.
    """
    if not graph.vertices or not graph.has_vertex(start):
        return []
    ensure_valid(graph)

    labels = {v.id: v.label for v in graph.vertices}
    visited = {start}
    order = [labels[start]]
    stack = [iter(neighbors(graph, start))]

    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(labels[neighbor])
                stack.append(iter(neighbors(graph, neighbor)))
                break
        else:
            stack.pop()

    return order
