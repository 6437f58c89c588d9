"""
    GraphModel - the authoritative set of nodes and edges.

    Every mutation replaces the ``nodes`` / ``edges`` tuples wholesale,
    so a reader holding an earlier tuple never sees it change.
"""
import random
from typing import Callable, Dict, List, Optional, Tuple

from ..types import Label
from .edge import Edge
from .node import Node

AdjacencyMatrix = List[List[int]]
Adjacency = Dict[Label, Dict[Label, int]]


class DuplicateLabelError(ValueError):
    """Raised when a node label is already taken."""
    pass


class GraphModel:
    """
    Directed or undirected multigraph over integer labels.

    Edges are not validated against existing nodes. An edge whose
    endpoint was removed stays until ``prune_dangling_edges`` runs.
    """

    def __init__(
            self,
            directed: bool = False,
            width: float = 800,
            height: float = 600,
            curve_range: float = 100.0,
            rng: Optional[random.Random] = None,
    ):
        """
        Args:
            directed:    Whether an edge a->b also counts as b->a.
            width:       Drawing surface width, used for random placement.
            height:      Drawing surface height, used for random placement.
            curve_range: New edges get a curve offset in [0, curve_range).
            rng:         Random source (seed it for reproducible layouts).
        """
        self.directed = directed
        self.width = width
        self.height = height
        self.curve_range = curve_range
        self._rng = rng or random.Random()
        self._nodes: Tuple[Node, ...] = ()
        self._edges: Tuple[Edge, ...] = ()

    # ── Collections ──────────────────────────────────────────────

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def get_node(self, label: Label) -> Optional[Node]:
        for node in self._nodes:
            if node.label == label:
                return node
        return None

    def has_node(self, label: Label) -> bool:
        return self.get_node(label) is not None

    def labels(self) -> List[Label]:
        return [node.label for node in self._nodes]

    def next_label(self) -> Label:
        """Smallest label guaranteed to be free: one past the current maximum"""
        return max(self.labels(), default=0) + 1

    # ── Mutation ─────────────────────────────────────────────────

    def add_node(self, label: Label, x: Optional[float] = None,
                 y: Optional[float] = None) -> Node:
        """
        Add a node. Missing coordinates are placed at random on the surface.

        Raises:
            DuplicateLabelError: If ``label`` is already used.
        """
        if self.has_node(label):
            raise DuplicateLabelError(f"Node with label {label} already exists")

        if x is None:
            x = float(self._rng.randrange(max(1, int(self.width))))
        if y is None:
            y = float(self._rng.randrange(max(1, int(self.height))))

        node = Node(label, x, y)
        self._nodes = self._nodes + (node,)
        return node

    def add_edge(self, source: Label, target: Label) -> Edge:
        """Append an edge with a random curve offset. Endpoints are not checked."""
        edge = Edge(source, target, self._rng.random() * self.curve_range)
        self._edges = self._edges + (edge,)
        return edge

    def remove_node(self, label: Label) -> None:
        """Remove the node. Incident edges are left in place."""
        self._nodes = tuple(n for n in self._nodes if n.label != label)

    def remove_edge(self, source: Label, target: Label) -> None:
        """Remove every edge joining exactly (source, target)."""
        self._edges = tuple(e for e in self._edges if not e.connects(source, target))

    def replace_node(self, node: Node) -> None:
        """Swap in a new value for the node carrying the same label."""
        self._nodes = tuple(node if n.label == node.label else n for n in self._nodes)

    def map_nodes(self, transition: Callable[[Node], Node]) -> None:
        """Apply a pure ``Node -> Node`` transition across all nodes."""
        self._nodes = tuple(transition(n) for n in self._nodes)

    def bend_edge(self, edge: Edge, delta: float) -> Optional[Edge]:
        """
        Shift the curve offset of ``edge``.

        The edge is matched by identity, so a parallel edge with equal
        fields is left alone.

        Returns:
            The bent replacement, or ``None`` if ``edge`` is no longer
            in the graph.
        """
        for index, current in enumerate(self._edges):
            if current is edge:
                bent = edge.bent(delta)
                self._edges = self._edges[:index] + (bent,) + self._edges[index + 1:]
                return bent
        return None

    def prune_dangling_edges(self) -> List[Edge]:
        """
        Drop edges with a missing endpoint.

        Returns:
            The edges that were dropped.
        """
        present = set(self.labels())
        kept, dropped = [], []
        for edge in self._edges:
            if edge.source in present and edge.target in present:
                kept.append(edge)
            else:
                dropped.append(edge)
        if dropped:
            self._edges = tuple(kept)
        return dropped

    def clear(self) -> None:
        self._nodes = ()
        self._edges = ()

    # ── Export ───────────────────────────────────────────────────

    def max_label(self) -> Label:
        """Largest label among nodes and edge endpoints (0 when empty)"""
        endpoints = [label for e in self._edges for label in (e.source, e.target)]
        return max(self.labels() + endpoints, default=0)

    def export_matrix(self) -> AdjacencyMatrix:
        """
        Build a fresh (max_label + 1) square matrix of edge counts.

        ``matrix[a][b]`` is the number of edges a->b. In an undirected
        graph each edge is counted in both directions.
        """
        size = self.max_label() + 1
        matrix = [[0] * size for _ in range(size)]
        for edge in self._edges:
            matrix[edge.source][edge.target] += 1
            if not self.directed:
                matrix[edge.target][edge.source] += 1
        return matrix

    def adjacency(self) -> Adjacency:
        """Sparse form of ``export_matrix``: label -> {neighbour: count}"""
        result: Adjacency = {}
        for edge in self._edges:
            row = result.setdefault(edge.source, {})
            row[edge.target] = row.get(edge.target, 0) + 1
            if not self.directed:
                back = result.setdefault(edge.target, {})
                back[edge.source] = back.get(edge.source, 0) + 1
        return result

    def neighbours(self, label: Label) -> List[Label]:
        """Labels reachable over one edge from ``label``, ascending"""
        row = self.adjacency().get(label, {})
        return sorted(b for b, count in row.items() if count > 0)

    # ── Dunder ───────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"GraphModel({kind}, nodes={len(self._nodes)}, edges={len(self._edges)})"
