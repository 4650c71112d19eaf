# graph_model.py
import logging
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Adjacency(NamedTuple):
    neighbor: "Vertex"
    weight: int


@dataclass(eq=False)
class Vertex:
    """Graph vertex. Compared and hashed by identity.

    ``position`` belongs to the view layer; no algorithm reads it.
    """

    name: str
    position: Any = None
    adjacency: List[Adjacency] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Vertex({self.name!r})"


@dataclass(frozen=True)
class Edge:
    origin: Vertex
    destination: Vertex
    weight: int
    label: str = ""


def make_edge(origin: Vertex, destination: Vertex, weight: int, directed: bool) -> Edge:
    sep = "->" if directed else "-"
    return Edge(origin, destination, weight, f"{origin.name}{sep}{destination.name}")


def _check_weight(weight) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an integer, got {weight!r}.")
    if weight < 0:
        raise ValueError("Edge weight cannot be negative.")


class Graph:
    """Ordered vertex list plus a directed/undirected flag.

    Every vertex owns its adjacency list. In undirected mode an edge is stored
    as two mirrored entries (a self-loop as one); only ``_link`` and
    ``_unlink`` write adjacency entries.

    Name lookups are case-insensitive, so two vertices whose names differ only
    by case cannot be told apart by ``find_vertex``: the first one wins.
    """

    def __init__(self, directed: bool = False):
        self._directed = directed
        self.vertices: List[Vertex] = []

    @property
    def directed(self) -> bool:
        return self._directed

    def set_directed(self, directed: bool):
        if directed == self._directed:
            return
        if any(v.adjacency for v in self.vertices):
            raise ValueError("Cannot change graph direction while it has edges.")
        self._directed = directed
        logger.debug("Graph mode set to %s", "directed" if directed else "undirected")

    # ---------- vertices ----------
    def next_vertex_name(self) -> str:
        taken = {v.name for v in self.vertices}
        i = 1
        while f"V{i}" in taken:
            i += 1
        return f"V{i}"

    def add_vertex(self, name: Optional[str] = None, position: Any = None) -> Vertex:
        if name is None:
            name = self.next_vertex_name()
        vertex = Vertex(name=name, position=position)
        self.vertices.append(vertex)
        logger.debug("Added vertex %s", name)
        return vertex

    def find_vertex(self, name: Optional[str]) -> Optional[Vertex]:
        if name is None or not name.strip():
            return None
        key = name.strip().casefold()
        for v in self.vertices:
            if v.name.casefold() == key:
                return v
        return None

    def index_of(self, vertex: Vertex) -> int:
        for i, v in enumerate(self.vertices):
            if v is vertex:
                return i
        raise ValueError(f"Vertex {vertex.name!r} is not in the graph.")

    def __contains__(self, vertex) -> bool:
        return any(v is vertex for v in self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def remove_vertex(self, vertex: Vertex) -> List[Edge]:
        if vertex not in self:
            return []

        removed: List[Edge] = []
        for entry in vertex.adjacency:
            removed.append(make_edge(vertex, entry.neighbor, entry.weight, self._directed))
        self.vertices = [v for v in self.vertices if v is not vertex]

        for u in self.vertices:
            kept = []
            for entry in u.adjacency:
                if entry.neighbor is vertex:
                    if self._directed:
                        removed.append(make_edge(u, vertex, entry.weight, True))
                else:
                    kept.append(entry)
            u.adjacency = kept
        vertex.adjacency = []

        logger.debug("Removed vertex %s and %d edge(s)", vertex.name, len(removed))
        return removed

    # ---------- edges ----------
    def _link(self, u: Vertex, v: Vertex, weight: int):
        u.adjacency.append(Adjacency(v, weight))
        if not self._directed and u is not v:
            v.adjacency.append(Adjacency(u, weight))

    def _unlink(self, u: Vertex, v: Vertex) -> bool:
        if not _drop_first(u, v):
            return False
        if not self._directed and u is not v:
            _drop_first(v, u)
        return True

    def add_edge(self, u: Vertex, v: Vertex, weight: int):
        if u not in self or v not in self:
            raise ValueError("Vertex does not exist.")
        _check_weight(weight)
        self._link(u, v, weight)
        logger.debug("Added edge %s", make_edge(u, v, weight, self._directed).label)

    def remove_edge(self, u: Vertex, v: Vertex) -> bool:
        removed = self._unlink(u, v)
        if not removed and not self._directed:
            # undirected edge picked from the other endpoint's side
            removed = self._unlink(v, u)
        if removed:
            logger.debug("Removed edge %s-%s", u.name, v.name)
        return removed

    def update_edge_weight(self, u: Vertex, v: Vertex, weight: int):
        _check_weight(weight)
        if not self.has_edge(u, v):
            raise ValueError("Edge does not exist.")
        if not _reweight_first(u, v, weight):
            _reweight_first(v, u, weight)
        elif not self._directed and u is not v:
            _reweight_first(v, u, weight)

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        if any(entry.neighbor is v for entry in u.adjacency):
            return True
        if not self._directed:
            return any(entry.neighbor is u for entry in v.adjacency)
        return False

    def are_adjacent(self, name1: Optional[str], name2: Optional[str]) -> bool:
        u = self.find_vertex(name1)
        v = self.find_vertex(name2)
        if u is None or v is None:
            return False
        return self.has_edge(u, v)

    def is_canonical(self, u: Vertex, v: Vertex) -> bool:
        """Whether the entry ``u -> v`` stands for its logical edge.

        Directed graphs: every entry. Undirected graphs keep the side whose
        origin name sorts first, falling back to vertex order when two vertices
        share a name; self-loops are stored once and always count.
        """
        if self._directed or u is v:
            return True
        if u.name == v.name:
            return self.index_of(u) < self.index_of(v)
        return u.name < v.name

    def edges(self) -> List[Edge]:
        result = []
        for u in self.vertices:
            for entry in u.adjacency:
                if self.is_canonical(u, entry.neighbor):
                    result.append(make_edge(u, entry.neighbor, entry.weight, self._directed))
        return result

    def list_adjacency(self) -> str:
        lines = []
        for v in self.vertices:
            if not v.adjacency:
                lines.append(f"{v.name} → (isolated)")
            else:
                nbrs = " ".join(f"{e.neighbor.name}({e.weight})" for e in v.adjacency)
                lines.append(f"{v.name} → {nbrs}")
        return "\n".join(lines)

    def clear(self):
        for v in self.vertices:
            v.adjacency = []
        self.vertices = []


def _drop_first(u: Vertex, v: Vertex) -> bool:
    for i, entry in enumerate(u.adjacency):
        if entry.neighbor is v:
            del u.adjacency[i]
            return True
    return False


def _reweight_first(u: Vertex, v: Vertex, weight: int) -> bool:
    for i, entry in enumerate(u.adjacency):
        if entry.neighbor is v:
            u.adjacency[i] = Adjacency(v, weight)
            return True
    return False
