# coloring.py
import logging
from typing import Dict, List, Set

from graph_model import Graph, Vertex

logger = logging.getLogger(__name__)


def _neighbors(graph: Graph) -> Dict[Vertex, Set[Vertex]]:
    # colouring ignores direction and self-loops
    nbrs: Dict[Vertex, Set[Vertex]] = {v: set() for v in graph.vertices}
    for u in graph.vertices:
        for entry in u.adjacency:
            if entry.neighbor is not u:
                nbrs[u].add(entry.neighbor)
                nbrs[entry.neighbor].add(u)
    return nbrs


def welsh_powell(graph: Graph) -> Dict[Vertex, int]:
    """Greedy colouring, highest degree first. Colours are numbered from 0."""
    nbrs = _neighbors(graph)
    ordered = sorted(graph.vertices, key=lambda v: len(nbrs[v]), reverse=True)

    coloring: Dict[Vertex, int] = {}
    color = 0
    for v in ordered:
        if v in coloring:
            continue
        members = [v]
        coloring[v] = color
        for u in ordered:
            if u in coloring:
                continue
            if any(m in nbrs[u] for m in members):
                continue
            coloring[u] = color
            members.append(u)
        color += 1

    logger.debug("Welsh-Powell: %d colour(s) for %d vertices", color, len(ordered))
    return {v: coloring[v] for v in graph.vertices}


def color_classes(coloring: Dict[Vertex, int]) -> List[List[Vertex]]:
    classes: Dict[int, List[Vertex]] = {}
    for v, c in coloring.items():
        classes.setdefault(c, []).append(v)
    return [classes[c] for c in sorted(classes)]


def coloring_summary(coloring: Dict[Vertex, int]) -> str:
    classes = color_classes(coloring)
    lines = [f"Colours used: {len(classes)}"]
    for c, members in enumerate(classes):
        names = ", ".join(v.name for v in members)
        lines.append(f"Colour {c + 1}: {names}")
    return "\n".join(lines)
