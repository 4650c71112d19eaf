# dijkstra.py
import heapq
import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

from graph_model import Edge, Graph, Vertex, make_edge

logger = logging.getLogger(__name__)

INF = float("inf")


class ShortestPathTree(NamedTuple):
    edges: List[Edge]
    unreachable: List[Vertex]
    distances: Dict[Vertex, float]


def _run(graph: Graph, origin: Vertex, goal: Optional[Vertex] = None):
    # heap entries carry the insertion index so equal distances pop in vertex order
    order = {v: i for i, v in enumerate(graph.vertices)}
    dist: Dict[Vertex, float] = {v: INF for v in graph.vertices}
    prev: Dict[Vertex, Tuple[Vertex, int]] = {}
    dist[origin] = 0
    pq = [(0, order[origin], origin)]
    done = set()

    while pq:
        d, _, u = heapq.heappop(pq)
        if u in done:
            continue
        done.add(u)
        if u is goal:
            break

        for v, w in u.adjacency:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                prev[v] = (u, w)
                heapq.heappush(pq, (nd, order[v], v))

    return dist, prev


def shortest_path_tree(graph: Graph, origin: Vertex) -> ShortestPathTree:
    """Dijkstra from ``origin`` to every vertex.

    Tree edges come out in vertex order, each with the weight of the entry that
    last improved its destination. Vertices the origin cannot reach are listed
    in ``unreachable`` instead of raising.
    """
    if not graph.vertices:
        return ShortestPathTree([], [], {})
    if origin not in graph:
        raise ValueError(f"Vertex {origin.name!r} is not in the graph.")

    dist, prev = _run(graph, origin)

    edges = []
    for v in graph.vertices:
        if v in prev:
            u, w = prev[v]
            edges.append(make_edge(u, v, w, graph.directed))
    unreachable = [v for v in graph.vertices if v is not origin and dist[v] == INF]

    logger.debug("Dijkstra from %s: %d tree edge(s), %d unreachable",
                 origin.name, len(edges), len(unreachable))
    return ShortestPathTree(edges, unreachable, dist)


def shortest_path(graph: Graph,
                  start: Vertex,
                  goal: Vertex) -> Tuple[float, Optional[List[Vertex]]]:
    if start not in graph or goal not in graph:
        raise ValueError("Vertex does not exist.")

    dist, prev = _run(graph, start, goal)
    if dist[goal] == INF:
        return INF, None

    path = [goal]
    u = goal
    while u in prev:
        u = prev[u][0]
        path.append(u)
    path.reverse()
    return dist[goal], path
