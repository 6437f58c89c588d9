# tests/core_test/test_interaction.py
"""
Tests for pointer-driven editing (core/graph_platform/interaction.py),
driven through GraphPlatform.tick() with a RecordingBoard.
"""
import random

import pytest

from graph_api.models.edge import Edge
from graph_api.models.graph import GraphModel
from graph_api.plugins.base import PointerState

from graph_platform.config import DisplayConfig
from graph_platform.events import EVENT_EDGE_ADDED, EVENT_NODE_ADDED
from graph_platform.interaction import PointerController


@pytest.fixture
def two_nodes(platform):
    """Nodes 1 (100,100) and 2 (300,100), no edges."""
    platform.add_node(1, 100, 100)
    platform.add_node(2, 300, 100)
    return platform


# ═════════════════════════════════════════════════════════════════
#  ADDING NODES
# ═════════════════════════════════════════════════════════════════

class TestDoubleClick:

    def test_adds_node_at_pointer(self, platform, board):
        board.move_pointer(100, 100, double_click=True)
        platform.tick()
        node = platform.model.get_node(1)
        # placed at the pointer, then drifted once
        assert node.x == pytest.approx(100.1)
        assert node.y == pytest.approx(100.1)

    def test_uses_next_free_label(self, platform, board):
        platform.add_node(4, 500, 500)
        board.move_pointer(100, 100, double_click=True)
        platform.tick()
        assert platform.model.labels() == [4, 5]

    def test_ignored_over_existing_node(self, platform, board):
        platform.add_node(1, 100, 100)
        board.move_pointer(105, 100, double_click=True)
        platform.tick()
        assert len(platform.model) == 1

    def test_single_click_does_not_add(self, platform, board):
        board.move_pointer(100, 100, buttons=1)
        platform.tick()
        assert len(platform.model) == 0

    def test_fires_node_added(self, platform, board):
        added = []
        platform.subscribe(EVENT_NODE_ADDED, lambda node: added.append(node))
        board.move_pointer(200, 200, double_click=True)
        platform.tick()
        assert [(n.label, n.x, n.y) for n in added] == [(1, 200, 200)]


# ═════════════════════════════════════════════════════════════════
#  HOVER & DRAG
# ═════════════════════════════════════════════════════════════════

class TestHoverAndDrag:

    def test_hover_sets_and_clears_target(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        assert two_nodes.target == 1
        highlighted = [args[2] for args in board.named("node") if args[3]]
        assert highlighted == ["1"]

        board.move_pointer(400, 400)
        two_nodes.tick()
        assert two_nodes.target is None

    def test_drag_follows_pointer_exactly(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        board.move_pointer(150, 160, buttons=1)
        two_nodes.tick()
        node = two_nodes.model.get_node(1)
        # dragged node does not drift
        assert (node.x, node.y) == (150, 160)

    def test_drag_keeps_target_beyond_radius(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        for x in (150, 200, 250):
            board.move_pointer(x, 100, buttons=1)
            two_nodes.tick()
        assert two_nodes.target == 1
        assert two_nodes.model.get_node(1).x == 250

    def test_other_nodes_still_drift_while_dragging(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        board.move_pointer(120, 100, buttons=1)
        two_nodes.tick()
        assert two_nodes.model.get_node(2).x == pytest.approx(300.2)

    def test_remove_node_clears_target(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        two_nodes.remove_node(1)
        assert two_nodes.target is None


# ═════════════════════════════════════════════════════════════════
#  CONNECTING
# ═════════════════════════════════════════════════════════════════

class TestShiftConnect:

    def test_shift_drag_to_node_adds_edge(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()

        board.move_pointer(200, 100, buttons=1, shift=True)
        two_nodes.tick()
        n1 = two_nodes.model.get_node(1)
        assert board.named("line") == [(n1.x, n1.y, 200, 100)]
        assert two_nodes.model.edges == ()

        board.move_pointer(300, 100, buttons=1, shift=True)
        two_nodes.tick()
        assert two_nodes.model.edges == (Edge(1, 2, 0.0),)
        assert two_nodes.target is None

    def test_shift_connect_fires_edge_added(self, two_nodes, board):
        added = []
        two_nodes.subscribe(EVENT_EDGE_ADDED, lambda edge: added.append(edge))
        board.move_pointer(100, 100)
        two_nodes.tick()
        board.move_pointer(300, 100, buttons=1, shift=True)
        two_nodes.tick()
        assert added == [Edge(1, 2, 0.0)]
        assert added[0] is two_nodes.model.edges[0]

    def test_shift_drag_does_not_move_node(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        board.move_pointer(200, 100, buttons=1, shift=True)
        two_nodes.tick()
        assert two_nodes.model.get_node(1).x == pytest.approx(100.2)

    def test_no_edge_over_empty_space(self, two_nodes, board):
        board.move_pointer(100, 100)
        two_nodes.tick()
        board.move_pointer(200, 300, buttons=1, shift=True)
        two_nodes.tick()
        assert two_nodes.model.edges == ()


# ═════════════════════════════════════════════════════════════════
#  BENDING
# ═════════════════════════════════════════════════════════════════

class TestBend:

    def test_primary_drag_bends_hovered_edge(self, two_nodes, board):
        two_nodes.add_edge(1, 2)
        board.move_pointer(200, 100)
        two_nodes.tick()
        board.move_pointer(230, 100, buttons=1)
        two_nodes.tick()
        assert two_nodes.model.edges[0].curve == 30

    def test_selection_cleared_when_pointer_leaves(self, two_nodes, board):
        two_nodes.add_edge(1, 2)
        board.move_pointer(200, 100)
        two_nodes.tick()
        board.move_pointer(200, 300)
        two_nodes.tick()
        board.move_pointer(230, 300, buttons=1)
        two_nodes.tick()
        assert two_nodes.model.edges[0].curve == 0

    def test_node_hover_wins_over_edge(self, platform, board):
        platform.add_node(1, 100, 100)
        platform.add_node(2, 140, 100)
        platform.add_edge(1, 2)
        # edge apex at (120, 100) is also within reach of node 1
        board.move_pointer(120, 100)
        platform.tick()
        assert platform.target == 1
        board.move_pointer(150, 100, buttons=1)
        platform.tick()
        assert platform.model.edges[0].curve == 0
        assert platform.model.get_node(1).x == 150

    def test_held_edge_survives_pruning_of_earlier_edge(self, platform, board):
        for label, x, y in [(1, 100, 100), (2, 300, 100), (3, 500, 300),
                            (4, 700, 300), (5, 100, 500), (6, 300, 500)]:
            platform.add_node(label, x, y)
        platform.add_edge(3, 4)
        platform.add_edge(1, 2)
        platform.add_edge(5, 6)

        board.move_pointer(200, 100)
        platform.tick()
        platform.remove_node(3)
        for x in (210, 220):
            board.move_pointer(x, 100, buttons=1)
            platform.tick()

        curves = {(e.source, e.target): e.curve for e in platform.model.edges}
        assert curves == {(1, 2): 20, (5, 6): 0}


# ═════════════════════════════════════════════════════════════════
#  CONTROLLER IN ISOLATION
# ═════════════════════════════════════════════════════════════════

class TestPointerController:

    @pytest.fixture
    def model(self):
        model = GraphModel(curve_range=0.0, rng=random.Random(2))
        model.add_node(1, 100, 100)
        return model

    @pytest.fixture
    def controller(self, model):
        return PointerController(model, DisplayConfig(radius=10))

    def test_radius_from_display(self, controller):
        assert controller.radius == 10

    def test_handle_returns_dragged_label(self, controller, board):
        controller.handle(PointerState(x=100, y=100), board)
        dragged = controller.handle(
            PointerState(x=104, y=100, prev_x=100, prev_y=100, buttons=1), board
        )
        assert dragged == 1

    def test_handle_without_drag_returns_none(self, controller, board):
        assert controller.handle(PointerState(x=500, y=500), board) is None

    def test_selection_dropped_when_edge_leaves_model(self, model, controller, board):
        model.add_node(2, 300, 100)
        model.add_edge(1, 2)
        controller.handle(PointerState(x=200, y=100), board)
        assert controller.selected_edge is model.edges[0]

        model.remove_edge(1, 2)
        controller.handle(
            PointerState(x=215, y=100, prev_x=200, prev_y=100, buttons=1), board
        )
        assert controller.selected_edge is None
        assert model.edges == ()

    def test_reset(self, controller, board):
        controller.handle(PointerState(x=100, y=100), board)
        controller.reset()
        assert controller.target is None
        assert controller.selected_edge is None
