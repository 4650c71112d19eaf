# matrices.py
import logging
from typing import List, Tuple

from graph_model import Edge, Graph

logger = logging.getLogger(__name__)

Matrix = List[List[int]]


def adjacency_matrix(graph: Graph) -> Matrix:
    """``m[i][j]`` is the weight of an entry from vertex ``i`` to vertex ``j``, 0 if none.

    With parallel edges the last entry in adjacency order wins. A zero-weight
    edge is indistinguishable from a missing one.
    """
    index = {v: i for i, v in enumerate(graph.vertices)}
    n = len(graph.vertices)
    matrix = [[0] * n for _ in range(n)]
    for i, v in enumerate(graph.vertices):
        for neighbor, weight in v.adjacency:
            matrix[i][index[neighbor]] = weight
    return matrix


def incidence_matrix(graph: Graph) -> Tuple[Matrix, List[Edge]]:
    """Vertex-by-edge matrix and the edge list giving its column order.

    Directed: +1 on the origin row, -1 on the destination row, so a self-loop
    column sums to 0. Undirected: +1 on both rows, so a self-loop column holds 2.
    """
    index = {v: i for i, v in enumerate(graph.vertices)}
    edges = graph.edges()
    matrix = [[0] * len(edges) for _ in graph.vertices]

    for j, edge in enumerate(edges):
        i1 = index[edge.origin]
        i2 = index[edge.destination]
        matrix[i1][j] += 1
        if graph.directed:
            matrix[i2][j] -= 1
        else:
            matrix[i2][j] += 1

    logger.debug("Incidence matrix: %d x %d", len(graph.vertices), len(edges))
    return matrix, edges
