"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates one platform action as an object with
    ``execute(platform) → CommandResult``. This decouples the invoker
    (CommandProcessor) from the receiver (GraphPlatform) and lets the
    web or terminal layer log every action uniformly.

    Supported commands:
    ───────────────────
        add    node <label> [<x> <y>]
        add    edge <from> <to>
        remove node <label>
        remove edge <from> <to>
        matrix
        neighbours <label>
        dfs <label>
        bfs <label>
        tick [<frames>]
        stop
        list [nodes|edges]
        info
        set directed|grid|distance|character on|off
        set radius <number>
        help
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from graph_api.models.graph import DuplicateLabelError
from graph_api.types import Label, LabelFormatter

from ..core import GraphPlatform


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, platform: GraphPlatform) -> CommandResult:
        """Execute the command on the given platform."""
        ...


def _show(platform: GraphPlatform, label: Label) -> str:
    """Label as the user sees it (letter in character mode)."""
    return str(LabelFormatter.format(label, platform.config.display.label_style))


# ═════════════════════════════════════════════════════════════════
#  NODE COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddNodeCommand(Command):
    """
    Add a node, at a random position unless coordinates are given.

    Syntax:
        add node 3
        add node 3 120 80
    """

    def __init__(self, label: Label, x: Optional[float] = None,
                 y: Optional[float] = None):
        self._label = label
        self._x = x
        self._y = y

    def execute(self, platform: GraphPlatform) -> CommandResult:
        try:
            node = platform.add_node(self._label, self._x, self._y)
        except DuplicateLabelError:
            return CommandResult(
                False, f"Node '{_show(platform, self._label)}' already exists."
            )
        return CommandResult(
            True,
            f"Node '{_show(platform, node.label)}' added at ({node.x:.0f}, {node.y:.0f}).",
            {'node': node.to_dict()},
        )


class RemoveNodeCommand(Command):
    """
    Remove a node. Its edges disappear on the next drawn frame.

    Syntax:
        remove node 3
    """

    def __init__(self, label: Label):
        self._label = label

    def execute(self, platform: GraphPlatform) -> CommandResult:
        if not platform.model.has_node(self._label):
            return CommandResult(False, f"Node '{_show(platform, self._label)}' not found.")
        platform.remove_node(self._label)
        return CommandResult(True, f"Node '{_show(platform, self._label)}' removed.")


# ═════════════════════════════════════════════════════════════════
#  EDGE COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddEdgeCommand(Command):
    """
    Add an edge between two existing nodes.

    Syntax:
        add edge 1 2
    """

    def __init__(self, source: Label, target: Label):
        self._source = source
        self._target = target

    def execute(self, platform: GraphPlatform) -> CommandResult:
        for label in (self._source, self._target):
            if not platform.model.has_node(label):
                return CommandResult(False, f"Node '{_show(platform, label)}' not found.")

        platform.add_edge(self._source, self._target)
        arrow = "->" if platform.model.directed else "--"
        return CommandResult(
            True,
            f"Edge added: {_show(platform, self._source)} {arrow} "
            f"{_show(platform, self._target)}.",
        )


class RemoveEdgeCommand(Command):
    """
    Remove every edge joining the pair, in that direction.

    Syntax:
        remove edge 1 2
    """

    def __init__(self, source: Label, target: Label):
        self._source = source
        self._target = target

    def execute(self, platform: GraphPlatform) -> CommandResult:
        count = sum(1 for e in platform.model.edges if e.connects(self._source, self._target))
        if count == 0:
            return CommandResult(
                False,
                f"No edge {_show(platform, self._source)} -> "
                f"{_show(platform, self._target)}.",
            )
        platform.remove_edge(self._source, self._target)
        return CommandResult(True, f"{count} edge(s) removed.", {'removed': count})


# ═════════════════════════════════════════════════════════════════
#  QUERY COMMANDS
# ═════════════════════════════════════════════════════════════════

class MatrixCommand(Command):
    """
    Print the adjacency matrix (row/column 0 omitted).

    Syntax:
        matrix
    """

    def execute(self, platform: GraphPlatform) -> CommandResult:
        matrix = platform.export_matrix()
        size = len(matrix)
        if size <= 1:
            return CommandResult(True, "Graph is empty.", {'matrix': matrix})

        labels = [_show(platform, i) for i in range(1, size)]
        width = max(len(text) for text in labels)
        lines = [" " * (width + 3) + " ".join(t.rjust(width) for t in labels)]
        for i in range(1, size):
            row = " ".join(str(matrix[i][j]).rjust(width) for j in range(1, size))
            lines.append(f"{labels[i - 1].rjust(width)} | {row}")
        return CommandResult(True, "\n".join(lines), {'matrix': matrix})


class NeighboursCommand(Command):
    """
    List the neighbours of a node in ascending order.

    Syntax:
        neighbours 2
    """

    def __init__(self, label: Label):
        self._label = label

    def execute(self, platform: GraphPlatform) -> CommandResult:
        found = platform.neighbours(self._label)
        shown = ", ".join(_show(platform, label) for label in found) or "(none)"
        return CommandResult(
            True,
            f"Neighbours of '{_show(platform, self._label)}': {shown}",
            {'neighbours': found},
        )


class TraverseCommand(Command):
    """
    Run DFS or BFS from a node and start its playback.

    Syntax:
        dfs 1
        bfs 1
    """

    def __init__(self, name: str, start: Label):
        self._name = name
        self._start = start

    def execute(self, platform: GraphPlatform) -> CommandResult:
        steps = platform.traverse(self._name, self._start)
        path = ", ".join(
            f"{_show(platform, s.source)} -> {_show(platform, s.target)}" for s in steps
        )
        return CommandResult(
            True,
            f"{self._name.upper()} from '{_show(platform, self._start)}': "
            f"{path or '(no edges)'} [{len(steps)} step(s)]",
            {'steps': [s.to_dict() for s in steps]},
        )


# ═════════════════════════════════════════════════════════════════
#  PLAYBACK COMMANDS
# ═════════════════════════════════════════════════════════════════

class TickCommand(Command):
    """
    Advance the frame loop.

    Syntax:
        tick
        tick 100
    """

    def __init__(self, frames: int = 1):
        self._frames = frames

    def execute(self, platform: GraphPlatform) -> CommandResult:
        platform.run_frames(self._frames)
        scheduler = platform.scheduler
        done = sum(1 for s in scheduler.steps if s.is_complete)
        return CommandResult(
            True,
            f"Advanced {self._frames} frame(s); "
            f"{done}/{len(scheduler)} motion step(s) complete.",
            {'steps': [s.to_dict() for s in scheduler.steps]},
        )


class StopCommand(Command):
    """
    Stop playback and clear the motion sequence.

    Syntax:
        stop
    """

    def execute(self, platform: GraphPlatform) -> CommandResult:
        platform.motion_stop()
        return CommandResult(True, "Playback stopped.")


# ═════════════════════════════════════════════════════════════════
#  SETTINGS
# ═════════════════════════════════════════════════════════════════

class SetCommand(Command):
    """
    Change a display or graph setting.

    Syntax:
        set directed on
        set grid off
        set radius 25
    """

    FLAGS = ("directed", "grid", "distance", "character")

    def __init__(self, option: str, value: Any):
        self._option = option
        self._value = value

    def execute(self, platform: GraphPlatform) -> CommandResult:
        setters = {
            "directed": platform.set_directed,
            "grid": platform.set_show_grid,
            "distance": platform.set_show_distance,
            "character": platform.set_character,
            "radius": platform.set_radius,
        }
        setter = setters.get(self._option)
        if setter is None:
            return CommandResult(False, f"Unknown setting: '{self._option}'.")
        setter(self._value)
        shown = ("on" if self._value else "off") if isinstance(self._value, bool) else self._value
        return CommandResult(True, f"{self._option} = {shown}")


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no graph mutation)
# ═════════════════════════════════════════════════════════════════

class InfoCommand(Command):
    """
    Summarize the graph and playback state.

    Syntax:
        info
    """

    def execute(self, platform: GraphPlatform) -> CommandResult:
        model = platform.model
        scheduler = platform.scheduler
        if scheduler.is_playing:
            state = "playing"
        elif scheduler.is_finished:
            state = "finished"
        else:
            state = "idle"
        msg = (
            f"Graph: {len(model.nodes)} node(s), {len(model.edges)} edge(s), "
            f"{'directed' if model.directed else 'undirected'}; "
            f"motion: {state} ({scheduler.progress():.0%})"
        )
        return CommandResult(True, msg)


class ListCommand(Command):
    """
    List all nodes or edges in the graph.

    Syntax:
        list nodes
        list edges
        list   (lists both)
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target  # "nodes", "edges", or None

    def execute(self, platform: GraphPlatform) -> CommandResult:
        lines: List[str] = []

        if self._target in (None, "nodes"):
            nodes = platform.get_nodes()
            lines.append(f"── Nodes ({len(nodes)}) ──")
            for node in nodes:
                lines.append(f"  [{node['label']}] ({node['x']:.0f}, {node['y']:.0f})")

        if self._target in (None, "edges"):
            edges = platform.get_edges()
            arrow = "->" if platform.model.directed else "--"
            lines.append(f"── Edges ({len(edges)}) ──")
            for edge in edges:
                lines.append(f"  {edge['from']} {arrow} {edge['to']}  (curve={edge['curve']:.1f})")

        return CommandResult(True, "\n".join(lines))


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def execute(self, platform: GraphPlatform) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  add node <label> [<x> <y>]
      Add a node (random position when x/y are omitted).

  add edge <from> <to>
      Add an edge between two existing nodes.

  remove node <label>
      Remove a node; its edges vanish on the next frame.

  remove edge <from> <to>
      Remove every edge joining the pair.

  matrix
      Show the adjacency matrix.

  neighbours <label>
      List neighbours in ascending order.

  dfs <label>  |  bfs <label>
      Traverse from a node and start playback.

  tick [<frames>]
      Advance the animation by N frames (default 1).

  stop
      Stop playback.

  set directed|grid|distance|character on|off
  set radius <number>
      Change settings.

  list [nodes|edges]
      List all nodes, edges, or both.

  info
      Show a summary of the graph and playback.

  help
      Show this help text.

Labels may be given as numbers or letters (A = 1).
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
