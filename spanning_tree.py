# spanning_tree.py
import logging
from typing import Iterable, List, Optional

from graph_model import Edge, Graph, Vertex, make_edge

logger = logging.getLogger(__name__)


def minimum_spanning_tree(graph: Graph, start: Optional[Vertex] = None) -> List[Edge]:
    """Prim's algorithm over an undirected weighted graph.

    Grows the tree from ``start`` (the first vertex by default). Each round
    takes the lightest frontier edge with exactly one visited endpoint; ties go
    to the edge that entered the frontier first. When no such edge is left the
    tree is complete for ``start``'s component: other components of a
    disconnected graph are not covered, and that is not an error.
    """
    if not graph.vertices:
        return []
    if graph.directed:
        raise ValueError("Minimum spanning tree needs an undirected graph.")
    if start is None:
        start = graph.vertices[0]
    elif start not in graph:
        raise ValueError(f"Vertex {start.name!r} is not in the graph.")

    tree: List[Edge] = []
    visited = {start}
    frontier = [make_edge(start, n, w, False) for n, w in start.adjacency]

    while len(visited) < len(graph.vertices) and frontier:
        best = None
        for edge in frontier:
            if (edge.origin in visited) == (edge.destination in visited):
                continue
            if best is None or edge.weight < best.weight:
                best = edge
        if best is None:
            break

        tree.append(best)
        new = best.destination if best.origin in visited else best.origin
        visited.add(new)
        for neighbor, weight in new.adjacency:
            if neighbor not in visited:
                frontier.append(make_edge(new, neighbor, weight, False))

    logger.debug("Prim from %s: %d edge(s), weight %d", start.name, len(tree), total_weight(tree))
    return tree


def total_weight(edges: Iterable[Edge]) -> int:
    return sum(e.weight for e in edges)
