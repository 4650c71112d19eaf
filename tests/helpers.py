from typing import Dict, Iterable, Tuple

from graph_model import Graph, Vertex


def build(directed: bool,
          edges: Iterable[Tuple[str, str, int]],
          names: Iterable[str] = ()) -> Tuple[Graph, Dict[str, Vertex]]:
    """Build a graph from ``(origin, destination, weight)`` triples.

    Vertices are created in order of first appearance, ``names`` first.
    """
    graph = Graph(directed=directed)
    by_name: Dict[str, Vertex] = {}

    def vertex(name: str) -> Vertex:
        if name not in by_name:
            by_name[name] = graph.add_vertex(name)
        return by_name[name]

    for name in names:
        vertex(name)
    for u, v, w in edges:
        graph.add_edge(vertex(u), vertex(v), w)
    return graph, by_name


def edge_set(edges) -> set:
    return {(e.origin.name, e.destination.name, e.weight) for e in edges}


def names(vertices) -> list:
    return [v.name for v in vertices]
