"""
    Node model - a labelled point on the drawing surface.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict

from ..types import Label, LabelFormatter, LabelStyle, Point

# Drift phase bounds: a node wobbles forward while move >= 0,
# back while move >= DRIFT_FLOOR, then resets to DRIFT_START.
DRIFT_START = 10.0
DRIFT_FLOOR = -10.0


@dataclass(frozen=True)
class Node:
    """
    Immutable node value.

    Attributes:
        label: Caller-assigned identifier (unique within a graph).
        x, y:  Position on the drawing surface.
        move:  Idle drift phase, independent of traversal animation.
    """
    label: Label
    x: float
    y: float
    move: float = DRIFT_START

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def moved_to(self, x: float, y: float) -> 'Node':
        """Return a copy placed at (x, y)"""
        return replace(self, x=x, y=y)

    def is_near(self, x: float, y: float, radius: float) -> bool:
        """True if (x, y) lies within ``radius`` of the node on both axes"""
        return abs(x - self.x) <= radius and abs(y - self.y) <= radius

    def to_dict(self, style: LabelStyle = LabelStyle.NUMERIC) -> Dict[str, Any]:
        return {
            'label': LabelFormatter.format(self.label, style),
            'x': self.x,
            'y': self.y,
            'move': self.move,
        }

    def __repr__(self) -> str:
        return f"Node({self.label}, x={self.x:.1f}, y={self.y:.1f})"


def drift(node: Node, speed: float = 0.1) -> Node:
    """
    Advance the idle wobble of a node by one tick.

    Pure transition ``Node -> Node``; the input is never modified.
    """
    if node.move >= 0:
        return replace(node, x=node.x + speed, y=node.y + speed, move=node.move - speed)
    if node.move >= DRIFT_FLOOR:
        return replace(node, x=node.x - speed, y=node.y - speed, move=node.move - speed)
    return replace(node, move=DRIFT_START)
