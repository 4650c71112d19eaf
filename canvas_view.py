# canvas_view.py
import math
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from graph_model import Edge, Graph, Vertex
from utils import COLORS, default_position, edge_layout

RADIUS = 18
LOOP_RADIUS = 14


def _control_point(p1, p2, offset: float) -> Tuple[float, float]:
    (x1, y1), (x2, y2) = p1, p2
    mx, my = (x1 + x2) / 2, (y1 + y2) / 2
    length = math.hypot(x2 - x1, y2 - y1) or 1.0
    # unit normal of p1 -> p2
    nx, ny = -(y2 - y1) / length, (x2 - x1) / length
    return mx + nx * offset, my + ny * offset


def _trim(p, toward) -> Tuple[float, float]:
    # end the curve on the circle border so the arrowhead stays visible
    x, y = p
    dx, dy = toward[0] - x, toward[1] - y
    d = math.hypot(dx, dy) or 1.0
    return x + dx / d * RADIUS, y + dy / d * RADIUS


class GraphCanvas(ttk.Frame):
    def __init__(self, master,
                 on_canvas_click: Callable[[float, float], None],
                 on_vertex_clicked: Callable[[Vertex], None],
                 on_vertex_right_click: Callable[[Vertex], None],
                 on_edge_right_click: Callable[[Vertex, Vertex], None],
                 on_empty_right_click: Callable[[], None],
                 mode_provider: Callable[[], str]):
        super().__init__(master)
        self.on_canvas_click = on_canvas_click
        self.on_vertex_clicked = on_vertex_clicked
        self.on_vertex_right_click = on_vertex_right_click
        self.on_edge_right_click = on_edge_right_click
        self.on_empty_right_click = on_empty_right_click
        self.mode_provider = mode_provider

        self.canvas = tk.Canvas(self, bg=COLORS["canvas_bg"], highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.graph: Optional[Graph] = None
        self.selected: Optional[Vertex] = None
        # canvas item id -> the vertex or (origin, destination) it belongs to
        self.vertex_items: Dict[int, Vertex] = {}
        self.edge_items: Dict[int, Tuple[Vertex, Vertex]] = {}
        self.circle_of: Dict[Vertex, int] = {}
        # curve offset of the first drawn edge per ordered pair, measured along origin -> destination
        self.edge_offsets: Dict[Tuple[Vertex, Vertex], float] = {}

        self.dragging: Optional[Vertex] = None
        self.drag_offset: Tuple[float, float] = (0, 0)

        self.canvas.bind("<Button-1>", self._on_lmb_down)
        self.canvas.bind("<B1-Motion>", self._on_mouse_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_lmb_up)
        self.canvas.bind("<Button-3>", self._on_rmb_down)

    # ---------- Drawing ----------
    def render(self, graph: Graph, selected: Optional[Vertex] = None):
        self.graph = graph
        self.selected = selected
        self._reset_items()

        for i, v in enumerate(graph.vertices):
            if v.position is None:
                v.position = default_position(i)

        for edge, k, offset in edge_layout(graph):
            self.edge_offsets.setdefault((edge.origin, edge.destination), offset)
            self._draw_edge(edge, offset, k, COLORS["edge"], 2, ("edge",))

        for v in graph.vertices:
            self._draw_vertex(v)

    def _draw_vertex(self, v: Vertex):
        x, y = v.position
        selected = v is self.selected
        circle = self.canvas.create_oval(x - RADIUS, y - RADIUS, x + RADIUS, y + RADIUS,
                                         fill=COLORS["node_fill"],
                                         outline=COLORS["select"] if selected else COLORS["node_border"],
                                         width=3 if selected else 2, tags=("vertex",))
        text = self.canvas.create_text(x, y, text=v.name, font=("Segoe UI", 10, "bold"),
                                       fill=COLORS["node_text"], tags=("vertex_label",))
        self.vertex_items[circle] = v
        self.vertex_items[text] = v
        self.circle_of[v] = circle

    def _draw_edge(self, edge: Edge, offset: float, k: int, color: str, width: int, tags):
        u, v = edge.origin, edge.destination
        if u is v:
            x, y = u.position
            r = LOOP_RADIUS + 6 * k
            cy = y - RADIUS - r + 4
            line = self.canvas.create_oval(x - r, cy - r, x + r, cy + r,
                                           outline=color, width=width, tags=tags)
            lx, ly = x, cy - r - 8
        else:
            arrow = tk.LAST if self.graph.directed else tk.NONE
            p1, p2 = u.position, v.position
            cx, cy = _control_point(p1, p2, offset)
            ex, ey = _trim(p2, (cx, cy))
            line = self.canvas.create_line(p1[0], p1[1], cx, cy, ex, ey, smooth=True,
                                           arrow=arrow, width=width, fill=color, tags=tags)
            lx, ly = cx, cy - 10

        label = self.canvas.create_text(lx, ly, text=str(edge.weight), font=("Segoe UI", 9),
                                        fill=color if width > 2 else COLORS["edge_text"],
                                        tags=tags)
        if "edge" in tags:
            self.edge_items[line] = (u, v)
            self.edge_items[label] = (u, v)

    # ---------- Highlight ----------
    def highlight_edges(self, edges: Iterable[Edge], color: str):
        for edge in edges:
            u, v = edge.origin, edge.destination
            if (u, v) in self.edge_offsets:
                offset = self.edge_offsets[(u, v)]
            else:
                # an undirected edge stored from the other side; the normal flips with it
                offset = -self.edge_offsets.get((v, u), 0.0)
            self._draw_edge(edge, offset, 0, color, 4, ("highlight",))
        self.canvas.tag_raise("vertex")
        self.canvas.tag_raise("vertex_label")

    def highlight_vertices(self, colors: Dict[Vertex, str]):
        for v, color in colors.items():
            circle = self.circle_of.get(v)
            if circle is not None:
                self.canvas.itemconfig(circle, fill=color)

    def highlight_path(self, path: List[Vertex], color: str):
        for v in path:
            circle = self.circle_of.get(v)
            if circle is not None:
                self.canvas.itemconfig(circle, fill=COLORS["node_fill_active"], outline=color, width=3)

    def clear_highlight(self):
        if self.graph is not None:
            self.render(self.graph, self.selected)

    def clear_all(self):
        self._reset_items()
        self.graph = None
        self.selected = None

    def _reset_items(self):
        self.canvas.delete("all")
        self.vertex_items.clear()
        self.edge_items.clear()
        self.circle_of.clear()
        self.edge_offsets.clear()

    # ---------- Mouse handlers ----------
    def _on_lmb_down(self, e):
        item = self._item_under_cursor(e.x, e.y)
        if item in self.vertex_items:
            vertex = self.vertex_items[item]
            if self.mode_provider() == "move":
                self.dragging = vertex
                x, y = vertex.position
                self.drag_offset = (e.x - x, e.y - y)
            else:
                self.on_vertex_clicked(vertex)
        elif item is None:
            self.on_canvas_click(e.x, e.y)

    def _on_mouse_move(self, e):
        if self.dragging is not None and self.mode_provider() == "move":
            self.dragging.position = (e.x - self.drag_offset[0], e.y - self.drag_offset[1])
            self.render(self.graph, self.selected)

    def _on_lmb_up(self, e):
        self.dragging = None

    def _on_rmb_down(self, e):
        item = self._item_under_cursor(e.x, e.y)
        if item in self.vertex_items:
            self.on_vertex_right_click(self.vertex_items[item])
        elif item in self.edge_items:
            self.on_edge_right_click(*self.edge_items[item])
        else:
            self.on_empty_right_click()

    # ---------- Helpers ----------
    def _item_under_cursor(self, x, y):
        items = self.canvas.find_overlapping(x - 3, y - 3, x + 3, y + 3)
        for item in reversed(items):
            if item in self.vertex_items:
                return item
        for item in reversed(items):
            if item in self.edge_items:
                return item
        return None
