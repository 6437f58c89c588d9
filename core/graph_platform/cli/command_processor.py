"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Invoker       – executes commands against a ``GraphPlatform``.
    • Facade        – single ``process(text, platform)`` entry-point hides
                      all parsing.
"""
from __future__ import annotations

import logging
import shlex
from typing import List, Optional

from graph_api.types import Label, LabelFormatter

from graph_services.exceptions import CommandParseError

from ..core import GraphPlatform
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

logger = logging.getLogger(__name__)

_ON = ("on", "true", "yes", "1")
_OFF = ("off", "false", "no", "0")


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects and executes
    them on the platform.

    Usage from the terminal layer:
        processor = CommandProcessor()
        result = processor.process("add edge 1 2", platform)
    """

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str, platform: GraphPlatform) -> CommandResult:
        """
        Parse and execute a single CLI command.

        Args:
            text:     Raw command string from the user.
            platform: The platform to act on.

        Returns:
            ``CommandResult`` with success status and message.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            command = self._parse(text)
        except CommandParseError as e:
            logger.warning("Rejected command '%s': %s", text, e)
            return CommandResult(False, f"Parse error: {e}")

        return command.execute(platform)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("add edge 1 2   # first edge")
            'add edge 1 2'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            CommandParseError: If the text cannot be parsed.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()

        if not tokens:
            raise CommandParseError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        # ── Single-word commands ──
        if verb == "help":
            return HelpCommand()
        if verb == "info":
            return InfoCommand()
        if verb == "matrix":
            return MatrixCommand()
        if verb == "stop":
            return StopCommand()

        if verb == "list":
            target = args[0].lower() if args else None
            if target not in (None, "nodes", "edges"):
                raise CommandParseError(f"Unknown list target: '{target}'. Use 'nodes' or 'edges'.")
            return ListCommand(target)

        if verb in ("neighbours", "neighbors"):
            self._expect(args, 1, "neighbours <label>")
            return NeighboursCommand(self._label(args[0]))

        if verb in ("dfs", "bfs"):
            self._expect(args, 1, f"{verb} <label>")
            return TraverseCommand(verb, self._label(args[0]))

        if verb == "tick":
            frames = self._int(args[0], "frames") if args else 1
            if frames < 1:
                raise CommandParseError("tick needs a positive number of frames.")
            return TickCommand(frames)

        if verb == "set":
            return self._parse_set(args)

        # ── add / remove ──
        if verb in ("add", "remove"):
            if not args:
                raise CommandParseError(f"Usage: {verb} <node|edge> ...")
            entity = args[0].lower()
            rest = args[1:]

            if entity == "node":
                return self._parse_node(verb, rest)
            if entity == "edge":
                self._expect(rest, 2, f"{verb} edge <from> <to>")
                source, target = self._label(rest[0]), self._label(rest[1])
                if verb == "add":
                    return AddEdgeCommand(source, target)
                return RemoveEdgeCommand(source, target)

            raise CommandParseError(f"Unknown entity: '{entity}'. Use 'node' or 'edge'.")

        raise CommandParseError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Compound parsers ─────────────────────────────────────────

    def _parse_node(self, verb: str, tokens: List[str]) -> Command:
        if verb == "remove":
            self._expect(tokens, 1, "remove node <label>")
            return RemoveNodeCommand(self._label(tokens[0]))

        if len(tokens) not in (1, 3):
            raise CommandParseError("Usage: add node <label> [<x> <y>]")
        label = self._label(tokens[0])
        x: Optional[float] = None
        y: Optional[float] = None
        if len(tokens) == 3:
            x = self._float(tokens[1], "x")
            y = self._float(tokens[2], "y")
        return AddNodeCommand(label, x, y)

    def _parse_set(self, tokens: List[str]) -> SetCommand:
        self._expect(tokens, 2, "set <option> <value>")
        option, raw = tokens[0].lower(), tokens[1].lower()

        if option == "radius":
            radius = self._float(raw, "radius")
            if radius <= 0:
                raise CommandParseError("radius must be positive.")
            return SetCommand(option, radius)

        if option not in SetCommand.FLAGS:
            raise CommandParseError(
                f"Unknown setting: '{option}'. "
                f"Use one of {', '.join(SetCommand.FLAGS + ('radius',))}."
            )
        if raw in _ON:
            return SetCommand(option, True)
        if raw in _OFF:
            return SetCommand(option, False)
        raise CommandParseError(f"Expected on/off for '{option}', got '{raw}'.")

    # ── Token helpers ────────────────────────────────────────────

    @staticmethod
    def _expect(tokens: List[str], count: int, usage: str) -> None:
        if len(tokens) != count:
            raise CommandParseError(f"Usage: {usage}")

    @staticmethod
    def _label(token: str) -> Label:
        try:
            label = LabelFormatter.parse(token)
        except ValueError as e:
            raise CommandParseError(str(e)) from e
        if label < 1:
            raise CommandParseError(f"Labels start at 1, got {label}.")
        return label

    @staticmethod
    def _int(token: str, name: str) -> int:
        try:
            return int(token)
        except ValueError as e:
            raise CommandParseError(f"Invalid {name}: '{token}'.") from e

    @staticmethod
    def _float(token: str, name: str) -> float:
        try:
            return float(token)
        except ValueError as e:
            raise CommandParseError(f"Invalid {name}: '{token}'.") from e
