"""
Core services — traversal engine, motion scheduler, and base abstractions.
"""
from .base_service import GraphTraversal
from .traversal_service import (
    TraversalEngine,
    DepthFirstTraversal,
    BreadthFirstTraversal,
)
from .motion_service import MotionScheduler, DEFAULT_INCREMENT
from .exceptions import (
    DuplicateLabelError,
    UnknownTraversalError,
    BoardNotAttachedError,
    CommandParseError,
)

__all__ = [
    'GraphTraversal',
    'TraversalEngine',
    'DepthFirstTraversal',
    'BreadthFirstTraversal',
    'MotionScheduler',
    'DEFAULT_INCREMENT',
    'DuplicateLabelError',
    'UnknownTraversalError',
    'BoardNotAttachedError',
    'CommandParseError',
]
