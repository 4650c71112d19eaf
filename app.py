# app.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox, simpledialog

from canvas_view import GraphCanvas
from coloring import coloring_summary, welsh_powell
from components import component_vertices, strongly_connected_components
from dijkstra import shortest_path, shortest_path_tree
from graph_model import Graph
from matrices import adjacency_matrix, incidence_matrix
from spanning_tree import minimum_spanning_tree, total_weight
from traversal import breadth_first, depth_first
from utils import ALGORITHM_COLORS, COLORS, format_matrix, palette_color

logger = logging.getLogger(__name__)

LOG_LIMIT = 200


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Graph workbench")
        self.geometry("1200x700")
        self.minsize(960, 600)

        self.graph = Graph(directed=False)

        self.mode = tk.StringVar(value="vertex")
        self.directed_var = tk.BooleanVar(value=False)
        self.pending_from = None

        self._build_ui()

    def _build_ui(self):
        toolbar = ttk.Frame(self, padding=8)
        toolbar.pack(side=tk.TOP, fill=tk.X)

        ttk.Label(toolbar, text="Mode:").pack(side=tk.LEFT, padx=(0, 6))
        ttk.Radiobutton(toolbar, text="Add vertex", value="vertex",
                        variable=self.mode, command=self._on_mode_changed).pack(side=tk.LEFT, padx=3)
        ttk.Radiobutton(toolbar, text="Add edge", value="edge",
                        variable=self.mode, command=self._on_mode_changed).pack(side=tk.LEFT, padx=3)
        ttk.Radiobutton(toolbar, text="Move", value="move",
                        variable=self.mode, command=self._on_mode_changed).pack(side=tk.LEFT, padx=3)
        self.directed_cb = ttk.Checkbutton(toolbar, text="Directed", variable=self.directed_var,
                                           command=self._on_direction_changed)
        self.directed_cb.pack(side=tk.LEFT, padx=(12, 3))

        ttk.Separator(toolbar, orient="vertical").pack(side=tk.LEFT, fill=tk.Y, padx=8)

        self.start_var = tk.StringVar(value="")
        self.end_var = tk.StringVar(value="")
        ttk.Label(toolbar, text="Start:").pack(side=tk.LEFT)
        self.start_cb = ttk.Combobox(toolbar, width=6, textvariable=self.start_var, state="readonly")
        self.start_cb.pack(side=tk.LEFT, padx=4)
        ttk.Label(toolbar, text="Finish:").pack(side=tk.LEFT)
        self.end_cb = ttk.Combobox(toolbar, width=6, textvariable=self.end_var, state="readonly")
        self.end_cb.pack(side=tk.LEFT, padx=4)
        ttk.Button(toolbar, text="Shortest path", command=self.on_shortest_path).pack(side=tk.LEFT, padx=8)
        ttk.Button(toolbar, text="Clear highlight", command=self.on_clear_highlight).pack(side=tk.LEFT)
        ttk.Button(toolbar, text="Clear all", command=self.on_clear_all).pack(side=tk.LEFT, padx=(8, 0))

        algos = ttk.Frame(self, padding=(8, 0, 8, 8))
        algos.pack(side=tk.TOP, fill=tk.X)
        for text, command in (
            ("Spanning tree", self.on_tree),
            ("BFS", self.on_bfs),
            ("DFS", self.on_dfs),
            ("Components (Roy)", self.on_components),
            ("Colouring", self.on_coloring),
            ("Adjacent?", self.on_check_adjacency),
            ("Adjacency matrix", self.on_adjacency_matrix),
            ("Incidence matrix", self.on_incidence_matrix),
            ("Clear log", self.on_clear_log),
        ):
            ttk.Button(algos, text=text, command=command).pack(side=tk.LEFT, padx=3)

        bottom = ttk.Frame(self, padding=(10, 4))
        bottom.pack(side=tk.BOTTOM, fill=tk.X)
        ttk.Label(bottom, text="Result:").pack(side=tk.LEFT)
        self.result_var = tk.StringVar(value="—")
        ttk.Label(bottom, textvariable=self.result_var, foreground=COLORS["accent"]).pack(side=tk.LEFT, padx=8)

        body = ttk.PanedWindow(self, orient=tk.HORIZONTAL)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.gcanvas = GraphCanvas(
            body,
            on_canvas_click=self.on_canvas_click,
            on_vertex_clicked=self.on_vertex_clicked,
            on_vertex_right_click=self._delete_vertex,
            on_edge_right_click=self._edge_menu,
            on_empty_right_click=self._reset_edge_add,
            mode_provider=lambda: self.mode.get(),
        )
        body.add(self.gcanvas, weight=3)

        log_frame = ttk.Frame(body)
        self.log_list = tk.Listbox(log_frame, font=("Consolas", 9), activestyle="none")
        scroll = ttk.Scrollbar(log_frame, orient="vertical", command=self.log_list.yview)
        self.log_list.configure(yscrollcommand=scroll.set)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self.log_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        body.add(log_frame, weight=2)

        self.bind("<Escape>", lambda e: self._reset_edge_add())

        self._refresh_vertex_lists()

    # ---------- Activity log ----------
    def _log(self, message: str):
        logger.info(message)
        for line in message.splitlines() or [""]:
            self.log_list.insert(tk.END, line)
        overflow = self.log_list.size() - LOG_LIMIT
        if overflow > 0:
            self.log_list.delete(0, overflow - 1)
        self.log_list.see(tk.END)

    def on_clear_log(self):
        self.log_list.delete(0, tk.END)
        self._log("Activity log cleared")

    # ---------- Editing ----------
    def _redraw(self):
        self.gcanvas.render(self.graph, self.pending_from)
        self.directed_cb.state(["disabled"] if any(v.adjacency for v in self.graph.vertices)
                               else ["!disabled"])

    def _graph_changed(self):
        self._redraw()
        self._refresh_vertex_lists()
        self._log(f"Adjacency list:\n{self.graph.list_adjacency()}")

    def on_canvas_click(self, x, y):
        if self.pending_from is not None:
            self._reset_edge_add()
            self._log("Selection cancelled")
            return
        if self.mode.get() == "vertex":
            vertex = self.graph.add_vertex(position=(x, y))
            self._log(f"New vertex {vertex.name}")
            self._graph_changed()

    def on_vertex_clicked(self, vertex):
        if self.mode.get() != "edge":
            return
        if self.pending_from is None:
            self.pending_from = vertex
            self._log(f"Vertex {vertex.name} selected for connection")
            self._redraw()
            return

        origin = self.pending_from
        weight = self._ask_weight()
        if weight is None:
            self._reset_edge_add()
            return
        try:
            self.graph.add_edge(origin, vertex, weight)
        except ValueError as e:
            messagebox.showerror("Error", str(e))
            self._reset_edge_add()
            return

        if origin is vertex:
            self._log(f"Loop on {vertex.name} created with weight {weight}")
        else:
            kind = "Arc" if self.graph.directed else "Edge"
            self._log(f"{kind} {origin.name}-{vertex.name} created with weight {weight}")
        self.pending_from = None
        self._graph_changed()

    def _delete_vertex(self, vertex):
        self.pending_from = None
        removed = self.graph.remove_vertex(vertex)
        self._log(f"Vertex {vertex.name} removed; edges removed: {len(removed)}")
        self.result_var.set(f"Vertex {vertex.name} removed")
        self._graph_changed()

    def _edge_menu(self, u, v):
        menu = tk.Menu(self, tearoff=0)
        menu.add_command(label="Delete edge", command=lambda: self._delete_edge(u, v))
        menu.add_command(label="Change weight…", command=lambda: self._update_edge_weight(u, v))
        x, y = self.winfo_pointerx(), self.winfo_pointery()
        try:
            menu.tk_popup(x, y)
        finally:
            menu.grab_release()

    def _delete_edge(self, u, v):
        if self.graph.remove_edge(u, v):
            kind = "Arc" if self.graph.directed else "Edge"
            self._log(f"{kind} {u.name}-{v.name} removed")
            self._graph_changed()

    def _update_edge_weight(self, u, v):
        weight = self._ask_weight()
        if weight is None:
            return
        try:
            self.graph.update_edge_weight(u, v, weight)
        except ValueError as e:
            messagebox.showerror("Error", str(e))
            return
        self.result_var.set(f"Weight of {u.name}-{v.name} set to {weight}")
        self._graph_changed()

    def _on_direction_changed(self):
        try:
            self.graph.set_directed(self.directed_var.get())
        except ValueError as e:
            self.directed_var.set(self.graph.directed)
            messagebox.showerror("Error", str(e))
            return
        self._log("Directed mode (Dijkstra)" if self.graph.directed else "Undirected mode (Prim)")
        self._redraw()

    def on_clear_all(self):
        if messagebox.askyesno("Clear all", "Delete the whole graph?"):
            self.pending_from = None
            self.graph.clear()
            self.gcanvas.clear_all()
            self.log_list.delete(0, tk.END)
            self._refresh_vertex_lists()
            self.directed_cb.state(["!disabled"])
            self.result_var.set("—")
            self._log("Graph cleared")

    # ---------- Algorithms ----------
    def _require_vertices(self, what: str) -> bool:
        if not self.graph.vertices:
            self._log(f"Graph is empty - cannot run {what}.")
            return False
        return True

    def _start_vertex(self):
        vertex = self.graph.find_vertex(self.start_var.get())
        if vertex is None:
            self._log(f"Vertex '{self.start_var.get()}' not found. Available: "
                      + ", ".join(v.name for v in self.graph.vertices))
        return vertex

    def on_tree(self):
        if not self._require_vertices("the spanning tree"):
            return
        self.gcanvas.clear_highlight()

        if not self.graph.directed:
            mst = minimum_spanning_tree(self.graph)
            if not mst:
                self._log("No spanning tree: the first vertex has no edges.")
                return
            self.gcanvas.highlight_edges(mst, ALGORITHM_COLORS["mst"])
            if len(mst) < len(self.graph.vertices) - 1:
                self._log("Graph is disconnected; the tree covers the first vertex's component only.")
            self._log(f"Minimum spanning tree (Prim), total weight: {total_weight(mst)}")
            self.result_var.set(f"MST weight = {total_weight(mst)}")
            return

        root = self._start_vertex()
        if root is None:
            return
        tree = shortest_path_tree(self.graph, root)
        if not tree.edges:
            self._log(f"No shortest-path tree: nothing is reachable from {root.name}.")
            return
        self.gcanvas.highlight_edges(tree.edges, ALGORITHM_COLORS["dijkstra"])
        if tree.unreachable:
            self._log(f"Not reachable from {root.name}: "
                      + ", ".join(v.name for v in tree.unreachable))
        else:
            self._log(f"Shortest-path tree (Dijkstra) from {root.name} built.")

    def _run_traversal(self, name: str, walk, color_key: str):
        if not self._require_vertices(name):
            return
        origin = self._start_vertex()
        if origin is None:
            return
        self.gcanvas.clear_highlight()
        tree = walk(self.graph, origin)
        if not tree:
            self._log(f"{name} from {origin.name} found no other connected vertices.")
            return
        self.gcanvas.highlight_edges(tree, ALGORITHM_COLORS[color_key])
        order = [origin.name] + [e.destination.name for e in tree]
        self._log(f"{name} from {origin.name}: " + " → ".join(order))

    def on_bfs(self):
        self._run_traversal("BFS", breadth_first, "bfs")

    def on_dfs(self):
        self._run_traversal("DFS", depth_first, "dfs")

    def on_components(self):
        if not self._require_vertices("Roy's algorithm"):
            return
        self.gcanvas.clear_highlight()
        result = strongly_connected_components(self.graph)
        if result.message:
            self._log(result.message)

        kind = "strongly connected" if self.graph.directed else "connected"
        for i, edges in enumerate(result.components):
            names = sorted(v.name for v in component_vertices(edges))
            self._log(f"Component ({kind}) {i + 1}: [{', '.join(names)}]")
            self.gcanvas.highlight_edges(edges, palette_color(i))
        self._log(f"Roy finished: {len(result.components)} {kind} component(s)")

    def on_coloring(self):
        if not self._require_vertices("colouring"):
            return
        self.gcanvas.clear_highlight()
        coloring = welsh_powell(self.graph)
        self.gcanvas.highlight_vertices({v: palette_color(c) for v, c in coloring.items()})
        self._log(coloring_summary(coloring))

    def on_check_adjacency(self):
        name1 = simpledialog.askstring("Adjacency", "First vertex:", parent=self)
        if name1 is None:
            return
        name2 = simpledialog.askstring("Adjacency", "Second vertex:", parent=self)
        if name2 is None:
            return
        for name in (name1, name2):
            if self.graph.find_vertex(name) is None:
                self._log(f"Vertex {name} not found in the graph.")
                return
        adjacent = self.graph.are_adjacent(name1, name2)
        self._log(f"{name1} and {name2} {'ARE' if adjacent else 'are NOT'} adjacent.")

    def on_adjacency_matrix(self):
        if not self._require_vertices("the adjacency matrix"):
            return
        names = [v.name for v in self.graph.vertices]
        self._log(format_matrix("ADJACENCY MATRIX", names, names, adjacency_matrix(self.graph)))

    def on_incidence_matrix(self):
        if not self._require_vertices("the incidence matrix"):
            return
        matrix, edges = incidence_matrix(self.graph)
        names = [v.name for v in self.graph.vertices]
        self._log(format_matrix("INCIDENCE MATRIX", names, [e.label for e in edges], matrix))

    def on_shortest_path(self):
        self.gcanvas.clear_highlight()
        start = self.graph.find_vertex(self.start_var.get())
        goal = self.graph.find_vertex(self.end_var.get())
        if start is None or goal is None:
            messagebox.showinfo("Choose vertices", "Choose a start and a finish.")
            return

        dist, path = shortest_path(self.graph, start, goal)
        if path is None:
            self.result_var.set("No path.")
            return

        self.gcanvas.highlight_path(path, COLORS["accent"])
        names = [v.name for v in path]
        self.result_var.set(f"Length = {dist}; path: " + " → ".join(names))

    def on_clear_highlight(self):
        self.gcanvas.clear_highlight()
        self.result_var.set("—")

    # ---------- Helpers ----------
    def _ask_weight(self):
        return simpledialog.askinteger("Edge weight", "Enter a non-negative integer weight:",
                                       initialvalue=1, minvalue=0, parent=self)

    def _reset_edge_add(self):
        if self.pending_from is not None:
            self.pending_from = None
            self._redraw()

    def _refresh_vertex_lists(self):
        names = [v.name for v in self.graph.vertices]
        self.start_cb["values"] = names
        self.end_cb["values"] = names
        if self.start_var.get() not in names:
            self.start_var.set(names[0] if names else "")
        if self.end_var.get() not in names:
            self.end_var.set(names[0] if names else "")

    def _on_mode_changed(self):
        self._reset_edge_add()
        if self.mode.get() == "edge":
            self.result_var.set("Edge mode: click two vertices (the same one twice for a loop). "
                                "Right-click an edge for its menu.")
        elif self.mode.get() == "vertex":
            self.result_var.set("Vertex mode: click the canvas to add vertices. Right-click a vertex to delete it.")
        else:
            self.result_var.set("Move mode: drag vertices with the mouse.")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    App().mainloop()


if __name__ == "__main__":
    main()
