"""
    Motion scheduler — sequential, frame-paced playback of traversal steps.

    Only one step moves per tick: the first one that is not yet
    complete. Edge 1 animates to the end, then edge 2, and so on.
    Completed steps stay in the sequence so the renderer can keep
    showing them until the next ``clear()`` / ``load()``.
"""
import logging
from typing import Iterable, Optional, Tuple

from graph_api.models.motion import MotionStep
from graph_api.types import Point

logger = logging.getLogger(__name__)

DEFAULT_INCREMENT = 0.01


class MotionScheduler:
    """
    Holds the active sequence of ``MotionStep`` values.

    States:
        Idle     – empty sequence.
        Playing  – at least one step below 1.
        (finished steps without a clear remain "not playing" but not idle)
    """

    def __init__(self, increment: float = DEFAULT_INCREMENT):
        if increment <= 0:
            raise ValueError(f"Motion increment must be positive, got {increment}")
        self.increment = increment
        self._steps: Tuple[MotionStep, ...] = ()

    # ── Control ──────────────────────────────────────────────────

    def load(self, steps: Iterable[MotionStep]) -> None:
        """Replace the active sequence wholesale and restart playback."""
        self._steps = tuple(steps)
        logger.debug("Motion loaded with %d step(s)", len(self._steps))

    def clear(self) -> None:
        """Drop the active sequence; playback stops immediately."""
        self._steps = ()

    def tick(self) -> Optional[MotionStep]:
        """
        Advance the first incomplete step by one increment.

        Returns:
            The advanced step, or ``None`` when nothing is left to play.
        """
        for index, step in enumerate(self._steps):
            if step.is_complete:
                continue
            advanced = step.advanced(self.increment)
            self._steps = self._steps[:index] + (advanced,) + self._steps[index + 1:]
            return advanced
        return None

    # ── State ────────────────────────────────────────────────────

    @property
    def steps(self) -> Tuple[MotionStep, ...]:
        return self._steps

    @property
    def is_empty(self) -> bool:
        return not self._steps

    @property
    def is_playing(self) -> bool:
        return any(not step.is_complete for step in self._steps)

    @property
    def is_finished(self) -> bool:
        return bool(self._steps) and not self.is_playing

    @property
    def current(self) -> Optional[MotionStep]:
        """The step the next tick would advance."""
        return next((s for s in self._steps if not s.is_complete), None)

    def progress(self) -> float:
        """Share of completed steps, 0.0 for an empty sequence"""
        if not self._steps:
            return 0.0
        done = sum(1 for step in self._steps if step.is_complete)
        return done / len(self._steps)

    # ── Rendering derivation ─────────────────────────────────────

    @staticmethod
    def segment(step: MotionStep, source: Point, target: Point) -> Tuple[Point, Point]:
        """
        Linear interpolation of a step along its edge.

        Returns:
            (start, head) where ``head`` sits ``step.step`` of the way
            from ``source`` to ``target``.
        """
        ratio = step.step
        head = Point(
            source.x + (target.x - source.x) * ratio,
            source.y + (target.y - source.y) * ratio,
        )
        return source, head

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"MotionScheduler(steps={len(self._steps)}, playing={self.is_playing})"
