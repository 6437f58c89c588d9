# tests/conftest.py
"""
Shared test fixtures.

RecordingBoard: in-memory Board that records every draw call of the
current frame and serves a pointer snapshot set by the test.
Stub graph: 1 — 2 — 3 path, the worked example used across the suite.
"""
import importlib.metadata
import math
import random
from types import SimpleNamespace
from typing import Any, List, Tuple

import pytest

from graph_api.models.graph import GraphModel
from graph_api.plugins.base import Board, PointerState
from graph_api.types import Point

from graph_platform.config import PlatformConfig
from graph_platform.core import GraphPlatform


class RecordingBoard(Board):
    """Concrete Board for testing purposes."""

    def __init__(self, width: float = 800, height: float = 600):
        self._width = width
        self._height = height
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.frames = 0
        self.state = PointerState()

    def get_plugin_name(self) -> str:
        return "Recording Board"

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    # ── Pointer ──────────────────────────────────────────────────

    def pointer(self) -> PointerState:
        return self.state

    def move_pointer(self, x: float, y: float, buttons: int = 0,
                     shift: bool = False, double_click: bool = False) -> None:
        self.state = PointerState(
            x=x, y=y,
            prev_x=self.state.x, prev_y=self.state.y,
            buttons=buttons, shift=shift, double_click=double_click,
        )

    # ── Drawing ──────────────────────────────────────────────────

    def clear(self) -> None:
        self.calls = []
        self.frames += 1

    def draw_grid(self) -> None:
        self.calls.append(("grid", ()))

    def draw_node(self, x, y, text, highlighted) -> None:
        self.calls.append(("node", (x, y, text, highlighted)))

    def draw_curve(self, x1, y1, x2, y2, curve) -> None:
        self.calls.append(("curve", (x1, y1, x2, y2, curve)))

    def draw_directed(self, x1, y1, x2, y2, curve) -> None:
        self.calls.append(("directed", (x1, y1, x2, y2, curve)))

    def draw_distance(self, x1, y1, x2, y2, curve) -> None:
        self.calls.append(("distance", (x1, y1, x2, y2, curve)))

    def draw_line(self, x1, y1, x2, y2) -> None:
        self.calls.append(("line", (x1, y1, x2, y2)))

    def draw_motion_line(self, x1, y1, x2, y2) -> None:
        self.calls.append(("motion", (x1, y1, x2, y2)))

    def curve_position(self, x1, y1, x2, y2, curve) -> Point:
        # apex: midpoint lifted by the curve offset
        return Point((x1 + x2) / 2, (y1 + y2) / 2 - curve)

    def distance(self, p: Point, q: Point) -> float:
        return math.hypot(p.x - q.x, p.y - q.y)

    def named(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of every call of one kind in the current frame."""
        return [args for kind, args in self.calls if kind == name]


def build_path_graph(directed: bool = False) -> GraphModel:
    """Nodes 1, 2, 3 with edges (1,2), (2,3)."""
    g = GraphModel(directed=directed, rng=random.Random(1))
    g.add_node(1, 100, 100)
    g.add_node(2, 300, 100)
    g.add_node(3, 500, 100)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def path_graph() -> GraphModel:
    """Undirected 1 — 2 — 3."""
    return build_path_graph()


@pytest.fixture
def board() -> RecordingBoard:
    return RecordingBoard()


@pytest.fixture
def platform(board) -> GraphPlatform:
    """Platform drawing on a RecordingBoard; new edges are straight (curve 0)."""
    return GraphPlatform(PlatformConfig(curve_range=0.0), board=board,
                         rng=random.Random(7))


@pytest.fixture
def bare_platform() -> GraphPlatform:
    """Platform without a board: update() only drifts nodes and ticks motion."""
    return GraphPlatform(PlatformConfig(), rng=random.Random(7))


@pytest.fixture(autouse=True)
def _reset_singleton():
    yield
    GraphPlatform.reset_instance()


@pytest.fixture
def board_factory():
    """Build RecordingBoards of a chosen size."""
    return RecordingBoard


def _fake_entry_point(name: str, loaded: Any) -> SimpleNamespace:
    def load():
        if isinstance(loaded, Exception):
            raise loaded
        return loaded
    return SimpleNamespace(name=name, load=load)


@pytest.fixture
def entry_points(monkeypatch):
    """
    Replace entry-point discovery with an in-memory registry.

    Returns a dict ``name → class | exception``; fill it before the
    first plugin lookup.
    """
    registry: dict = {}

    def fake(group=None):
        return [_fake_entry_point(name, loaded) for name, loaded in registry.items()]

    monkeypatch.setattr(importlib.metadata, "entry_points", fake)
    return registry


@pytest.fixture
def no_board_plugins(entry_points):
    return entry_points


@pytest.fixture
def board_plugins(entry_points):
    entry_points["recording"] = RecordingBoard
    return entry_points
