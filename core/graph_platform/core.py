"""
    GraphPlatform — the composing layer of the application.

    Design Patterns applied
    ───────────────────────
    • Singleton          – one platform instance per process
                           (via ``GraphPlatform.get_instance()``).
    • Strategy           – pluggable Board (input capture + drawing).
    • Facade             – single entry-point for the UI loop and the CLI;
                           hides the model, traversal engine, motion
                           scheduler, pointer controller and renderer.
    • Observer (hooks)   – ``_listeners`` dict notified on every edit
                           and on playback start / stop.

    Frame loop
    ──────────
    The platform owns no timer. The caller invokes ``tick()`` (or
    ``update()`` then ``draw()``) at ``config.motion.tick_rate``;
    tests call it a known number of times.
"""
import logging
import random
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, List, Optional

from graph_api.models.edge import Edge
from graph_api.models.graph import AdjacencyMatrix, GraphModel
from graph_api.models.motion import MotionStep
from graph_api.models.node import Node, drift
from graph_api.plugins.base import Board, PointerState
from graph_api.types import Label

from graph_services.exceptions import BoardNotAttachedError
from graph_services.motion_service import MotionScheduler
from graph_services.traversal_service import TraversalEngine

from .config import PlatformConfig
from .events import (
    EVENT_EDGE_ADDED,
    EVENT_EDGE_REMOVED,
    EVENT_MOTION_STARTED,
    EVENT_MOTION_STOPPED,
    EVENT_NODE_ADDED,
    EVENT_NODE_REMOVED,
)
from .interaction import PointerController
from .plugin_loader import PluginLoader, create_board_loader
from .renderer import GraphRenderer

logger = logging.getLogger(__name__)


class GraphPlatform:
    """
    Central orchestrator — Facade for the graph editor.

    Manages:
        • Node / edge editing on the GraphModel.
        • Adjacency export and neighbour queries.
        • DFS / BFS traversal and their playback.
        • Per-tick pointer handling, idle drift and drawing via a Board.
        • Observer hooks for UI synchronization.
    """

    _instance: Optional['GraphPlatform'] = None

    # ── Singleton ────────────────────────────────────────────────

    @classmethod
    def get_instance(cls, config: Optional[PlatformConfig] = None) -> 'GraphPlatform':
        """
        Return the singleton platform instance, creating it on first call.

        Args:
            config: Optional custom config (only used on first call).
        """
        if cls._instance is None:
            cls._instance = cls(config or PlatformConfig())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Destroy the singleton (useful for testing)."""
        cls._instance = None

    # ── Constructor ──────────────────────────────────────────────

    def __init__(self, config: Optional[PlatformConfig] = None,
                 board: Optional[Board] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the platform.  Prefer ``get_instance()`` for singleton access.

        Args:
            config: Platform configuration (display, motion, surface size).
                    Copied; later set_* calls do not touch it.
            board:  Board to draw on; if omitted, ``config.default_board``
                    is looked up among installed board plugins.
            rng:    Random source for node placement and edge curves.
        """
        config = config or PlatformConfig()
        self._config: PlatformConfig = replace(
            config, display=replace(config.display), motion=replace(config.motion)
        )

        self._model = GraphModel(
            directed=self._config.directed,
            width=self._config.width,
            height=self._config.height,
            curve_range=self._config.curve_range,
            rng=rng,
        )
        self._engine = TraversalEngine()
        self._scheduler = MotionScheduler(self._config.motion.increment)
        self._controller = PointerController(self._model, self._config.display,
                                             notify=self._notify)
        self._renderer = GraphRenderer(self._model, self._scheduler, self._config.display,
                                       notify=self._notify)

        self._board_loader: PluginLoader[Board] = create_board_loader()
        self._board: Optional[Board] = None
        self._pointer = PointerState()

        # Observer listeners: event_name → [callback, ...]
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}

        if board is not None:
            self.attach_board(board)
        elif self._config.default_board:
            self.attach_board_by_name(self._config.default_board)

        logger.info("GraphPlatform initialized (%s).",
                    "directed" if self._config.directed else "undirected")

    # ── Configuration ────────────────────────────────────────────

    @property
    def config(self) -> PlatformConfig:
        return self._config

    @property
    def model(self) -> GraphModel:
        return self._model

    @property
    def scheduler(self) -> MotionScheduler:
        return self._scheduler

    @property
    def target(self) -> Optional[Label]:
        """Label of the node currently under the pointer."""
        return self._controller.target

    def set_directed(self, directed: bool) -> None:
        self._config.directed = directed
        self._model.directed = directed

    def set_radius(self, radius: float) -> None:
        self._config.display.radius = radius
        if self._board is not None:
            self._board.radius = radius

    def set_show_grid(self, show_grid: bool) -> None:
        self._config.display.show_grid = show_grid

    def set_show_distance(self, show_distance: bool) -> None:
        self._config.display.show_distance = show_distance

    def set_character(self, character: bool) -> None:
        self._config.display.character = character

    # ── Board ────────────────────────────────────────────────────

    @property
    def board(self) -> Optional[Board]:
        return self._board

    def attach_board(self, board: Board) -> None:
        """Draw on ``board`` from now on; random placement uses its size."""
        self._board = board
        board.radius = self._config.display.radius
        self._model.width = board.width
        self._model.height = board.height
        logger.info("Board attached: %s (%sx%s)",
                    board.get_plugin_name(), board.width, board.height)

    def attach_board_by_name(self, name: str) -> Board:
        """
        Attach an installed board plugin by entry-point name.

        Raises:
            ValueError: If the plugin is not found.
        """
        board = self._board_loader.get(name)
        if board is None:
            raise ValueError(
                f"Board plugin '{name}' not found. "
                f"Available: {self._board_loader.get_names()}"
            )
        self.attach_board(board)
        return board

    def get_board_names(self) -> List[str]:
        """Sorted list of installed board plugin names."""
        return self._board_loader.get_names()

    # ── Editing ──────────────────────────────────────────────────

    def add_node(self, label: Label, x: Optional[float] = None,
                 y: Optional[float] = None) -> Node:
        """
        Add a node; omitted coordinates are chosen at random.

        Raises:
            DuplicateLabelError: If the label is already used.
        """
        node = self._model.add_node(label, x, y)
        self._notify(EVENT_NODE_ADDED, node=node)
        return node

    def remove_node(self, label: Label) -> None:
        """Remove a node. Its edges are dropped on the next draw."""
        self._model.remove_node(label)
        if self._controller.target == label:
            self._controller.target = None
        self._notify(EVENT_NODE_REMOVED, label=label)

    def add_edge(self, source: Label, target: Label) -> Edge:
        edge = self._model.add_edge(source, target)
        self._controller.target = None
        self._notify(EVENT_EDGE_ADDED, edge=edge)
        return edge

    def remove_edge(self, source: Label, target: Label) -> None:
        """Remove every edge joining exactly (source, target)."""
        self._model.remove_edge(source, target)
        self._controller.selected_edge = None
        self._notify(EVENT_EDGE_REMOVED, source=source, target=target)

    # ── Queries ──────────────────────────────────────────────────

    def export_matrix(self) -> AdjacencyMatrix:
        return self._model.export_matrix()

    def neighbours(self, label: Label) -> List[Label]:
        return self._model.neighbours(label)

    def get_nodes(self) -> List[Dict[str, Any]]:
        """Nodes as dicts, labels shown in the configured style."""
        style = self._config.display.label_style
        return [node.to_dict(style) for node in self._model.nodes]

    def get_edges(self) -> List[Dict[str, Any]]:
        """Edges as dicts, both endpoints shown in the configured style."""
        style = self._config.display.label_style
        return [edge.to_dict(style) for edge in self._model.edges]

    # ── Traversal & playback ─────────────────────────────────────

    def traverse(self, name: str, start: Label) -> List[MotionStep]:
        """
        Run a named traversal ("dfs" / "bfs") and start its playback.

        Raises:
            UnknownTraversalError: If the name is not registered.
        """
        steps = self._engine.run(name, self._model, start)
        self.motion_start(steps)
        logger.info("%s from %s: %d step(s) loaded for playback",
                    name.upper(), start, len(steps))
        return steps

    def deep_first_search(self, start: Label) -> List[MotionStep]:
        return self.traverse("dfs", start)

    def breadth_first_search(self, start: Label) -> List[MotionStep]:
        return self.traverse("bfs", start)

    def motion_start(self, steps: Iterable[MotionStep]) -> None:
        self._scheduler.load(steps)
        self._notify(EVENT_MOTION_STARTED, steps=self._scheduler.steps)

    def motion_stop(self) -> None:
        self._scheduler.clear()
        self._notify(EVENT_MOTION_STOPPED)

    # ── Frame loop ───────────────────────────────────────────────

    def update(self) -> None:
        """
        Advance one frame of state: pointer edits, idle drift of every
        node not being dragged, and one motion step increment.
        """
        dragged: Optional[Label] = None
        if self._board is not None:
            self._pointer = self._board.pointer()
            dragged = self._controller.handle(self._pointer, self._board)

        speed = self._config.motion.drift_speed
        self._model.map_nodes(
            lambda node: node if node.label == dragged else drift(node, speed)
        )
        self._scheduler.tick()

    def draw(self) -> None:
        """
        Paint the current frame.

        Raises:
            BoardNotAttachedError: If no board is attached.
        """
        if self._board is None:
            raise BoardNotAttachedError("No board attached. Call attach_board() first.")
        self._renderer.draw(self._board, self._pointer, self._controller.target)

    def tick(self) -> None:
        """One full frame: ``update()`` then ``draw()`` when a board is attached."""
        self.update()
        if self._board is not None:
            self.draw()

    def run_frames(self, frames: int) -> None:
        """Drive ``frames`` ticks synchronously."""
        for _ in range(frames):
            self.tick()

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a platform event.

        Events:
            - node_added
            - node_removed
            - edge_added
            - edge_removed
            - motion_started
            - motion_stopped
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in self._listeners.get(event, []):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    # ── Dunder ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"GraphPlatform(nodes={len(self._model.nodes)}, "
            f"edges={len(self._model.edges)}, "
            f"motion_steps={len(self._scheduler)})"
        )
