# components.py
"""Roy's algorithm for (strongly) connected components.

For the first vertex ``v`` of the working list, the component of ``v`` is the
intersection of the vertices ``v`` reaches and the vertices that reach ``v``.
The component is taken out of the working list and the step repeats on what is
left. Undirected graphs store every edge in both directions, so the same
procedure yields plain connected components there.
"""
import logging
from typing import Iterable, List, NamedTuple, Sequence, Set

from graph_model import Edge, Graph, Vertex, make_edge
from traversal import reachable

logger = logging.getLogger(__name__)

STRONGLY_CONNECTED = "Graph is strongly connected"
CONNECTED = "Graph is connected"
ONLY_ISOLATED = "Graph contains only isolated vertices (no edges)"


class Components(NamedTuple):
    components: List[List[Edge]]
    message: str


def successors(vertex: Vertex) -> Set[Vertex]:
    return reachable(vertex)


def predecessors(vertex: Vertex, candidates: Sequence[Vertex]) -> Set[Vertex]:
    """Vertices of ``candidates`` that reach ``vertex``, plus ``vertex`` itself.

    Only edges leaving a candidate are followed.
    """
    found = {vertex}
    stack = [vertex]
    while stack:
        target = stack.pop()
        for u in candidates:
            if u in found:
                continue
            if any(entry.neighbor is target for entry in u.adjacency):
                found.add(u)
                stack.append(u)
    return found


def induced_edges(graph: Graph, members: Sequence[Vertex]) -> List[Edge]:
    inside = set(members)
    edges = []
    for u in members:
        for w, weight in u.adjacency:
            if w in inside and graph.is_canonical(u, w):
                edges.append(make_edge(u, w, weight, graph.directed))
    return edges


def strongly_connected_components(graph: Graph) -> Components:
    components: List[List[Edge]] = []
    message = ""
    working = list(graph.vertices)

    while working:
        v = working[0]
        reach = successors(v)
        back = predecessors(v, working)
        members = [u for u in working if u in reach and u in back]
        edges = induced_edges(graph, members)

        if len(members) > 1 or edges:
            if len(members) == len(graph.vertices):
                message = STRONGLY_CONNECTED if graph.directed else CONNECTED
            components.append(edges)

        taken = set(members)
        working = [u for u in working if u not in taken]

    if not components and graph.vertices:
        message = ONLY_ISOLATED

    logger.debug("Roy: %d component(s) over %d vertices", len(components), len(graph.vertices))
    return Components(components, message)


def component_vertices(edges: Iterable[Edge]) -> List[Vertex]:
    seen: List[Vertex] = []
    for e in edges:
        for v in (e.origin, e.destination):
            if all(v is not s for s in seen):
                seen.append(v)
    return seen
