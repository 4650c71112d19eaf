# traversal.py
import logging
from collections import deque
from typing import List, Optional, Set

from graph_model import Edge, Graph, Vertex, make_edge

logger = logging.getLogger(__name__)


def _check_origin(graph: Graph, origin: Vertex):
    if origin not in graph:
        raise ValueError(f"Vertex {origin.name!r} is not in the graph.")


def breadth_first(graph: Graph, origin: Vertex) -> List[Edge]:
    """Spanning tree of ``origin``'s reachable part, in BFS order."""
    if not graph.vertices:
        return []
    _check_origin(graph, origin)

    tree: List[Edge] = []
    visited = {origin}
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for neighbor, weight in current.adjacency:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            queue.append(neighbor)
            tree.append(make_edge(current, neighbor, weight, graph.directed))

    logger.debug("BFS from %s: %d edge(s)", origin.name, len(tree))
    return tree


def depth_first(graph: Graph, origin: Vertex) -> List[Edge]:
    """Spanning tree of ``origin``'s reachable part, in DFS pre-order.

    Walks with an explicit stack of adjacency iterators, which yields exactly
    the edges a recursive pre-order walk would: a neighbour is entered as soon
    as it is found, and its parent resumes where it left off afterwards.
    """
    if not graph.vertices:
        return []
    _check_origin(graph, origin)

    tree: List[Edge] = []
    visited = {origin}
    stack = [(origin, iter(origin.adjacency))]

    while stack:
        current, entries = stack[-1]
        for neighbor, weight in entries:
            if neighbor not in visited:
                visited.add(neighbor)
                tree.append(make_edge(current, neighbor, weight, graph.directed))
                stack.append((neighbor, iter(neighbor.adjacency)))
                break
        else:
            stack.pop()

    logger.debug("DFS from %s: %d edge(s)", origin.name, len(tree))
    return tree


def reachable(origin: Vertex, visited: Optional[Set[Vertex]] = None) -> Set[Vertex]:
    """Reachability closure of ``origin`` along outgoing entries, origin included."""
    if visited is None:
        visited = set()
    stack = [origin]
    while stack:
        v = stack.pop()
        if v in visited:
            continue
        visited.add(v)
        stack.extend(entry.neighbor for entry in v.adjacency if entry.neighbor not in visited)
    return visited
