"""
    Platform configuration — display flags, playback cadence, surface size.

    Provides typed configuration objects consumed by ``GraphPlatform``.
    Only ``directed`` and ``display.character`` change what the core
    computes; the rest tune drawing and animation.
"""
from dataclasses import dataclass, field
from typing import Optional

from graph_api.types import LabelStyle, LabelFormatter


@dataclass
class DisplayConfig:
    """
    Controls what the renderer draws.

    Attributes:
        show_distance:  Draw a length label on every edge.
        show_grid:      Draw the background grid.
        radius:         Node radius, also the pointer hit tolerance.
        character:      Show labels as letters (1 → "A") instead of numbers.
    """
    show_distance: bool = False
    show_grid: bool = False
    radius: float = 20.0
    character: bool = False

    @property
    def label_style(self) -> LabelStyle:
        return LabelFormatter.style_for(self.character)


@dataclass
class MotionConfig:
    """
    Playback cadence.

    Attributes:
        increment:    Progress added to the active motion step per tick.
        tick_rate:    Nominal ticks per second of the external loop.
        drift_speed:  Distance a node wobbles per tick while idle.
    """
    increment: float = 0.01
    tick_rate: int = 60
    drift_speed: float = 0.1


@dataclass
class PlatformConfig:
    """
    Top-level configuration for the Graph Platform.

    Attributes:
        directed:       Whether edges are one-way.
        display:        Drawing flags.
        motion:         Playback cadence.
        width, height:  Surface size used for random node placement
                        when no board is attached.
        curve_range:    New edges get a curve offset in [0, curve_range).
        default_board:  Entry-point name of the board plugin to attach.
    """
    directed: bool = False
    display: DisplayConfig = field(default_factory=DisplayConfig)
    motion: MotionConfig = field(default_factory=MotionConfig)
    width: float = 800
    height: float = 600
    curve_range: float = 100.0
    default_board: Optional[str] = None
