# tests/core_test/test_plugin_loader.py
"""
Tests for entry-point discovery of Board plugins
(core/graph_platform/plugin_loader.py).
"""
import logging

from graph_api.plugins.base import Board

from graph_platform.plugin_loader import BOARD_EP_GROUP, PluginLoader, create_board_loader


class NotABoard:
    pass


class TestPluginLoader:

    def test_group_name(self):
        assert BOARD_EP_GROUP == "graph_animator.board"

    def test_loads_board_subclass(self, entry_points, board_factory):
        entry_points["recording"] = board_factory
        loader = create_board_loader()
        plugins = loader.load_all()
        assert list(plugins) == ["recording"]
        assert isinstance(plugins["recording"], board_factory)

    def test_skips_non_board(self, entry_points, board_factory, caplog):
        entry_points["junk"] = NotABoard
        entry_points["recording"] = board_factory
        loader = create_board_loader()
        with caplog.at_level(logging.WARNING):
            assert loader.get_names() == ["recording"]
        assert "does not subclass Board" in caplog.text

    def test_skips_failing_import(self, entry_points, caplog):
        entry_points["broken"] = ImportError("no module named canvas")
        loader = create_board_loader()
        assert len(loader) == 0
        assert "Failed to load plugin 'broken'" in caplog.text

    def test_get_and_contains(self, entry_points, board_factory):
        entry_points["recording"] = board_factory
        loader = PluginLoader(Board, BOARD_EP_GROUP)
        assert "recording" in loader
        assert "canvas" not in loader
        assert loader.get("canvas") is None
        assert loader.get("recording") is loader.get("recording")

    def test_loads_once_until_reload(self, entry_points, board_factory):
        loader = create_board_loader()
        assert loader.get_names() == []
        entry_points["recording"] = board_factory
        assert loader.get_names() == []
        loader.reload()
        assert loader.get_names() == ["recording"]

    def test_repr(self, entry_points, board_factory):
        entry_points["recording"] = board_factory
        loader = create_board_loader()
        loader.load_all()
        assert repr(loader) == "PluginLoader(base=Board, group='graph_animator.board', loaded=1)"
