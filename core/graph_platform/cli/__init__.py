"""
CLI package — Command-Line Interface for graph editing and playback.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with
                  an ``execute()`` method.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor
from .commands import (
    Command,
    CommandResult,
    AddNodeCommand,
    RemoveNodeCommand,
    AddEdgeCommand,
    RemoveEdgeCommand,
    MatrixCommand,
    NeighboursCommand,
    TraverseCommand,
    TickCommand,
    StopCommand,
    SetCommand,
    InfoCommand,
    ListCommand,
    HelpCommand,
)

__all__ = [
    'CommandProcessor',
    'Command',
    'CommandResult',
    'AddNodeCommand',
    'RemoveNodeCommand',
    'AddEdgeCommand',
    'RemoveEdgeCommand',
    'MatrixCommand',
    'NeighboursCommand',
    'TraverseCommand',
    'TickCommand',
    'StopCommand',
    'SetCommand',
    'InfoCommand',
    'ListCommand',
    'HelpCommand',
]
