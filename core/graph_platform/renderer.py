"""
    GraphRenderer — paints one frame of the graph onto a Board.

    Drawing is also where dangling edges are repaired: an edge whose
    endpoint no longer exists is dropped from the model during the
    pass instead of being drawn, and each drop is reported as an
    ``edge_removed`` event.
"""
import logging
from typing import Optional

from graph_api.models.graph import GraphModel
from graph_api.plugins.base import Board, PointerState
from graph_api.types import Label, LabelFormatter

from graph_services.motion_service import MotionScheduler

from .config import DisplayConfig
from .events import EVENT_EDGE_REMOVED, NotifyCallback, ignore

logger = logging.getLogger(__name__)


class GraphRenderer:

    def __init__(self, model: GraphModel, scheduler: MotionScheduler,
                 display: DisplayConfig, notify: NotifyCallback = ignore):
        self._model = model
        self._scheduler = scheduler
        self._display = display
        self._notify = notify

    def draw(self, board: Board, pointer: PointerState,
             target: Optional[Label] = None) -> None:
        """Draw grid, edges, drag line, nodes and motion lines, in that order."""
        board.clear()
        if self._display.show_grid:
            board.draw_grid()
        self.draw_edges(board)
        self.draw_drag_line(board, pointer, target)
        self.draw_nodes(board, target)
        self.draw_motions(board)

    def draw_edges(self, board: Board) -> None:
        dangling = False
        for edge in self._model.edges:
            source = self._model.get_node(edge.source)
            target = self._model.get_node(edge.target)
            if source is None or target is None:
                dangling = True
                continue

            board.draw_curve(source.x, source.y, target.x, target.y, edge.curve)
            if self._model.directed:
                board.draw_directed(source.x, source.y, target.x, target.y, edge.curve)
            if self._display.show_distance:
                board.draw_distance(source.x, source.y, target.x, target.y, edge.curve)

        if dangling:
            dropped = self._model.prune_dangling_edges()
            logger.debug("Pruned %d dangling edge(s): %s", len(dropped), dropped)
            for edge in dropped:
                self._notify(EVENT_EDGE_REMOVED, source=edge.source, target=edge.target)

    def draw_drag_line(self, board: Board, pointer: PointerState,
                       target: Optional[Label]) -> None:
        if not pointer.shift or not pointer.primary or target is None:
            return
        node = self._model.get_node(target)
        if node is not None:
            board.draw_line(node.x, node.y, pointer.x, pointer.y)

    def draw_nodes(self, board: Board, target: Optional[Label] = None) -> None:
        style = self._display.label_style
        for node in self._model.nodes:
            text = str(LabelFormatter.format(node.label, style))
            board.draw_node(node.x, node.y, text, node.label == target)

    def draw_motions(self, board: Board) -> None:
        for step in self._scheduler.steps:
            source = self._model.get_node(step.source)
            target = self._model.get_node(step.target)
            if source is None or target is None:
                continue
            start, head = MotionScheduler.segment(step, source.position, target.position)
            board.draw_motion_line(start.x, start.y, head.x, head.y)
