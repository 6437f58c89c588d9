"""
    PointerController — pointer-driven graph editing.

    Consumes one ``PointerState`` snapshot per tick and turns it into
    GraphModel edits:

        • hover over a node              → node becomes the target
        • double click on empty space   → new node at the pointer
        • shift + release over another   → edge target → that node
        • button held on the target      → node follows the pointer
        • primary held on a hovered edge → edge curve bends with the pointer

    Node and edge additions are reported through the notify callback
    with the platform's event names.
"""
import logging
from typing import Optional

from graph_api.models.edge import Edge
from graph_api.models.graph import GraphModel
from graph_api.models.node import Node
from graph_api.plugins.base import Board, PointerState
from graph_api.types import Label, Point

from .config import DisplayConfig
from .events import EVENT_EDGE_ADDED, EVENT_NODE_ADDED, NotifyCallback, ignore

logger = logging.getLogger(__name__)


class PointerController:
    """
    Tracks the hovered node ("target") and hovered edge between ticks.

    Attributes:
        target:         Label of the node under the pointer, if any.
        selected_edge:  The hovered ``Edge`` itself, if any. Held by
                        identity and dropped once it leaves the model.
    """

    def __init__(self, model: GraphModel, display: DisplayConfig,
                 notify: NotifyCallback = ignore):
        self._model = model
        self._display = display
        self._notify = notify
        self.target: Optional[Label] = None
        self.selected_edge: Optional[Edge] = None

    @property
    def radius(self) -> float:
        return self._display.radius

    def handle(self, pointer: PointerState, board: Board) -> Optional[Label]:
        """
        Apply one tick of pointer input.

        Returns:
            Label of the node being dragged this tick, or ``None``.
        """
        self._hover(pointer, board)
        if pointer.double_click and self.target is None:
            self._add_node_at(pointer)

        self._connect(pointer)
        self._bend(pointer)
        return self._drag(pointer)

    def reset(self) -> None:
        self.target = None
        self.selected_edge = None

    # ── Steps ────────────────────────────────────────────────────

    def _add_node_at(self, pointer: PointerState) -> None:
        label = self._model.next_label()
        node = self._model.add_node(label, pointer.x, pointer.y)
        logger.debug("Node %s placed at (%.1f, %.1f)", label, pointer.x, pointer.y)
        self._notify(EVENT_NODE_ADDED, node=node)

    def _hover(self, pointer: PointerState, board: Board) -> None:
        if not pointer.primary:
            self.selected_edge = self._edge_under(pointer, board)
        elif not self._holds_selected_edge():
            self.selected_edge = None

        if self.target is None:
            node = self._node_under(pointer.x, pointer.y)
            if node is not None:
                self.target = node.label

        if self.target is not None:
            self.selected_edge = None
            if pointer.shift or pointer.primary:
                return
            node = self._model.get_node(self.target)
            if node is None or not node.is_near(pointer.x, pointer.y, self.radius):
                self.target = None

    def _connect(self, pointer: PointerState) -> None:
        if self.target is None or not pointer.shift:
            return
        for node in self._model.nodes:
            if node.label == self.target:
                continue
            if node.is_near(pointer.x, pointer.y, self.radius):
                edge = self._model.add_edge(self.target, node.label)
                logger.debug("Edge %s -> %s drawn", self.target, node.label)
                self.target = None
                self._notify(EVENT_EDGE_ADDED, edge=edge)
                return

    def _bend(self, pointer: PointerState) -> None:
        if not pointer.primary or self.selected_edge is None or self.target is not None:
            return
        self.selected_edge = self._model.bend_edge(self.selected_edge, pointer.dx)

    def _drag(self, pointer: PointerState) -> Optional[Label]:
        if not pointer.buttons or pointer.shift or self.target is None:
            return None
        node = self._model.get_node(self.target)
        if node is None:
            self.target = None
            return None
        self._model.replace_node(node.moved_to(pointer.x, pointer.y))
        return node.label

    # ── Hit testing ──────────────────────────────────────────────

    def _holds_selected_edge(self) -> bool:
        return any(edge is self.selected_edge for edge in self._model.edges)

    def _node_under(self, x: float, y: float) -> Optional[Node]:
        for node in self._model.nodes:
            if node.is_near(x, y, self.radius):
                return node
        return None

    def _edge_under(self, pointer: PointerState, board: Board) -> Optional[Edge]:
        here = Point(pointer.x, pointer.y)
        for edge in self._model.edges:
            source = self._model.get_node(edge.source)
            target = self._model.get_node(edge.target)
            if source is None or target is None:
                continue
            apex = board.curve_position(source.x, source.y, target.x, target.y, edge.curve)
            if board.distance(apex, here) < self.radius:
                return edge
        return None
