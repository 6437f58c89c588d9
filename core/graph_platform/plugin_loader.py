"""
    Board plugin discovery and loading via entry_points.

    Design Pattern: Service Locator / Registry
    ────────────────────────────────────────────
    Discovers all installed boards at runtime by scanning the
    ``graph_animator.board`` entry-point group. A board package
    registers itself in its own setup.py:

        entry_points={
            'graph_animator.board': [
                'canvas = canvas_board.plugin:CanvasBoard',
            ],
        }
"""
import importlib.metadata
import logging
from typing import Dict, Generic, List, Optional, Type, TypeVar

from graph_api.plugins.base import Board

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

# Entry-point group name (must match the board package's setup.py)
BOARD_EP_GROUP = 'graph_animator.board'


class PluginLoader(Generic[TPlugin]):
    """
    Generic loader that discovers all installed plugins of a given type
    from a specific entry-point group.

    Usage:
        loader = PluginLoader(Board, 'graph_animator.board')
        boards = loader.load_all()          # Dict[str, Board]
        canvas = loader.get('canvas')       # Optional[Board]
    """

    def __init__(self, plugin_base_class: Type[TPlugin], group: str):
        """
        Args:
            plugin_base_class: The ABC that every discovered plugin must subclass.
            group:             The entry-point group to scan.
        """
        self._base_class = plugin_base_class
        self._group = group
        self._plugins: Dict[str, TPlugin] = {}
        self._loaded = False

    def load_all(self) -> Dict[str, TPlugin]:
        """
        Discover and instantiate every plugin registered under the group.

        A plugin that fails to import or does not subclass the base
        class is logged and skipped.

        Returns:
            Dict mapping entry-point name → plugin instance.
        """
        if self._loaded:
            return self._plugins

        for ep in importlib.metadata.entry_points(group=self._group):
            try:
                plugin_cls = ep.load()
            except Exception as exc:
                logger.error("Failed to load plugin '%s': %s", ep.name, exc)
                continue

            if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, self._base_class):
                logger.warning(
                    "Plugin '%s' does not subclass %s — skipped.",
                    ep.name, self._base_class.__name__
                )
                continue

            self._plugins[ep.name] = plugin_cls()
            logger.info("Loaded plugin: %s (%s)", ep.name, plugin_cls.__name__)

        self._loaded = True
        return self._plugins

    def get(self, name: str) -> Optional[TPlugin]:
        """Get a specific plugin by its entry-point name, or None."""
        if not self._loaded:
            self.load_all()
        return self._plugins.get(name)

    def get_names(self) -> List[str]:
        """Return sorted list of all discovered plugin names."""
        if not self._loaded:
            self.load_all()
        return sorted(self._plugins.keys())

    def reload(self) -> Dict[str, TPlugin]:
        """Force re-discovery of plugins (useful after hot-install)."""
        self._plugins.clear()
        self._loaded = False
        return self.load_all()

    def __len__(self) -> int:
        if not self._loaded:
            self.load_all()
        return len(self._plugins)

    def __contains__(self, name: str) -> bool:
        if not self._loaded:
            self.load_all()
        return name in self._plugins

    def __repr__(self) -> str:
        return (
            f"PluginLoader(base={self._base_class.__name__}, "
            f"group='{self._group}', loaded={len(self._plugins)})"
        )


def create_board_loader() -> PluginLoader[Board]:
    """Create a loader for Board plugins."""
    return PluginLoader(Board, BOARD_EP_GROUP)
