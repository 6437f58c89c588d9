"""
Value models and the graph container.
"""
from .node import Node, drift
from .edge import Edge
from .motion import MotionStep
from .graph import GraphModel, DuplicateLabelError

__all__ = ['Node', 'drift', 'Edge', 'MotionStep', 'GraphModel', 'DuplicateLabelError']
