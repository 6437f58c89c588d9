# core/graph_services/exceptions.py
from graph_api.models.graph import DuplicateLabelError


class UnknownTraversalError(ValueError):
    """Raised when a traversal name is not registered."""
    pass

class BoardNotAttachedError(RuntimeError):
    """Raised when drawing or reading the pointer without a board."""
    pass

class CommandParseError(ValueError):
    """Raised when a CLI command has invalid syntax."""
    pass


__all__ = [
    'DuplicateLabelError',
    'UnknownTraversalError',
    'BoardNotAttachedError',
    'CommandParseError',
]
