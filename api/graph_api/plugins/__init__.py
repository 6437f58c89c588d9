"""
Plugin contracts — abstract base class for Board plugins.
"""
from .base import Board, PointerState, PRIMARY_BUTTON

__all__ = ['Board', 'PointerState', 'PRIMARY_BUTTON']
