"""
Graph Platform — composing layer of the graph animator.

Public API:
    GraphPlatform       – central orchestrator (Facade / Singleton)
    PointerController   – pointer-driven editing
    GraphRenderer       – per-frame drawing onto a Board
    PlatformConfig      – top-level configuration
    DisplayConfig       – drawing flags
    MotionConfig        – playback cadence
    PluginLoader        – generic plugin discovery
"""
from .core import GraphPlatform
from .config import PlatformConfig, DisplayConfig, MotionConfig
from .interaction import PointerController
from .renderer import GraphRenderer
from .plugin_loader import PluginLoader, create_board_loader

__all__ = [
    'GraphPlatform',
    'PlatformConfig',
    'DisplayConfig',
    'MotionConfig',
    'PointerController',
    'GraphRenderer',
    'PluginLoader',
    'create_board_loader',
]
