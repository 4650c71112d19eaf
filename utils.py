# utils.py
from typing import Dict, List, Sequence, Tuple

from graph_model import Edge, Graph

COLORS = {
    "canvas_bg": "#fbfbfd",
    "node_fill": "#e8f0fe",
    "node_fill_active": "#fde7c8",
    "node_border": "#3c4a5c",
    "node_text": "#1b2430",
    "edge": "#5f6b7a",
    "edge_text": "#2d3642",
    "accent": "#d9480f",
    "select": "#1c7ed6",
}

# highlight colour per algorithm
ALGORITHM_COLORS = {
    "mst": "#2f9e44",
    "dijkstra": "#7048e8",
    "bfs": "#f08c00",
    "dfs": "#1971c2",
}

# components and colour classes cycle through this list
PALETTE = [
    "#e03131", "#f783ac", "#2f9e44", "#1971c2", "#f08c00",
    "#7048e8", "#0c8599", "#a61e4d", "#5c940d", "#495057",
]


def palette_color(i: int) -> str:
    return PALETTE[i % len(PALETTE)]


def format_matrix(title: str,
                  row_labels: Sequence[str],
                  col_labels: Sequence[str],
                  matrix: List[List[int]]) -> str:
    width = max([4] + [len(s) + 1 for s in col_labels])
    head = max([3] + [len(s) for s in row_labels])
    lines = [title, "=" * 50]
    lines.append(" " * (head + 2) + "".join(f"{s:>{width}}" for s in col_labels))
    for label, row in zip(row_labels, matrix):
        lines.append(f"{label:>{head}}: " + "".join(f"{x:>{width}}" for x in row))
    return "\n".join(lines)


# spacing between parallel curves and for vertices placed without a position
PARALLEL_GAP = 26
GRID_STEP = 80


def default_position(i: int, columns: int = 8) -> Tuple[float, float]:
    row, col = divmod(i, columns)
    return GRID_STEP * (col + 1), GRID_STEP * (row + 1)


def edge_layout(graph: Graph, gap: float = PARALLEL_GAP) -> List[Tuple[Edge, int, float]]:
    """``(edge, k, offset)`` for every logical edge of ``graph``.

    ``k`` counts the edges already drawn between the same two vertices (loop
    radius grows with it); ``offset`` bends the curve along origin -> destination.
    """
    edges = graph.edges()
    index = {v: i for i, v in enumerate(graph.vertices)}

    def key(edge: Edge) -> Tuple[int, int]:
        a, b = index[edge.origin], index[edge.destination]
        return (a, b) if graph.directed else (min(a, b), max(a, b))

    totals: Dict[Tuple[int, int], int] = {}
    for edge in edges:
        totals[key(edge)] = totals.get(key(edge), 0) + 1

    drawn: Dict[Tuple[int, int], int] = {}
    layout = []
    for edge in edges:
        pair = key(edge)
        k = drawn.get(pair, 0)
        drawn[pair] = k + 1
        a, b = pair
        if graph.directed and a != b and (b, a) in totals:
            # arcs in both directions bend away from each other
            offset = gap * (k + 1) * 0.7
        else:
            offset = gap * (k - (totals[pair] - 1) / 2)
            if not graph.directed and index[edge.origin] > index[edge.destination]:
                offset = -offset
        layout.append((edge, k, offset))
    return layout
