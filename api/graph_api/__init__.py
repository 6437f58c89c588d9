"""
Graph Animator API — models, containers and the Board plugin contract.
"""
from .types import Label, Point, LabelStyle, LabelFormatter, ALPHABET
from .structures import Queue, Stack
from .models.node import Node, drift
from .models.edge import Edge
from .models.motion import MotionStep
from .models.graph import GraphModel, DuplicateLabelError
from .plugins.base import Board, PointerState

__all__ = [
    'Label',
    'Point',
    'LabelStyle',
    'LabelFormatter',
    'ALPHABET',
    'Queue',
    'Stack',
    'Node',
    'drift',
    'Edge',
    'MotionStep',
    'GraphModel',
    'DuplicateLabelError',
    'Board',
    'PointerState',
]
