"""
    Abstract base class for Board plugins.
    Defines the "Contract" between the graph core and whatever
    actually captures the pointer and paints the surface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..types import Point

PRIMARY_BUTTON = 1


@dataclass(frozen=True)
class PointerState:
    """
    Pointer snapshot taken once per tick.

    Attributes:
        x, y:          Current pointer position on the surface.
        prev_x, prev_y: Position on the previous tick.
        buttons:       Bit mask of pressed buttons (1 = primary).
        shift:         Whether the shift modifier is held.
        double_click:  A double click happened since the last tick.
    """
    x: float = 0.0
    y: float = 0.0
    prev_x: float = 0.0
    prev_y: float = 0.0
    buttons: int = 0
    shift: bool = False
    double_click: bool = False

    @property
    def primary(self) -> bool:
        return self.buttons == PRIMARY_BUTTON

    @property
    def dx(self) -> float:
        return self.x - self.prev_x


class Board(ABC):
    """
        Abstract base class for Board plugins.
        Pattern: Strategy (for input capture and drawing).
    """

    radius: float = 20.0

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the board.
            Example: "Canvas Board"
        """
        pass

    @property
    @abstractmethod
    def width(self) -> float:
        pass

    @property
    @abstractmethod
    def height(self) -> float:
        pass

    @abstractmethod
    def pointer(self) -> PointerState:
        """Current pointer snapshot."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def draw_grid(self) -> None:
        pass

    @abstractmethod
    def draw_node(self, x: float, y: float, text: str, highlighted: bool) -> None:
        pass

    @abstractmethod
    def draw_curve(self, x1: float, y1: float, x2: float, y2: float,
                   curve: float) -> None:
        pass

    @abstractmethod
    def draw_directed(self, x1: float, y1: float, x2: float, y2: float,
                      curve: float) -> None:
        """Arrowhead at the (x2, y2) end of a curved edge."""
        pass

    @abstractmethod
    def draw_distance(self, x1: float, y1: float, x2: float, y2: float,
                      curve: float) -> None:
        """Length label placed on a curved edge."""
        pass

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Straight rubber-band line shown while an edge is being dragged."""
        pass

    @abstractmethod
    def draw_motion_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Highlighted segment of an edge under traversal playback."""
        pass

    @abstractmethod
    def curve_position(self, x1: float, y1: float, x2: float, y2: float,
                       curve: float) -> Point:
        """
        Point of a curved edge used for hit testing (its apex).

        Args:
            x1, y1: Edge start.
            x2, y2: Edge end.
            curve:  Rendering offset of the edge.
        """
        pass

    @abstractmethod
    def distance(self, p: Point, q: Point) -> float:
        pass
