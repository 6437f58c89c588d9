"""
    MotionStep model - one traversed edge paired with its playback progress.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..types import Label

COMPLETE = 1.0


@dataclass(frozen=True)
class MotionStep:
    """
    Attributes:
        target: Label the traversal arrived at.
        source: Label it came from. ``None`` only for the synthetic root
                entry, which never leaves the traversal engine.
        step:   Animation progress along the edge, in [0, 1].
    """
    target: Label
    source: Optional[Label] = None
    step: float = 0.0

    @property
    def is_complete(self) -> bool:
        return self.step >= COMPLETE

    @property
    def is_root(self) -> bool:
        return self.source is None

    def advanced(self, increment: float) -> 'MotionStep':
        """Return a copy moved ``increment`` closer to completion (clamped at 1)"""
        # rounding keeps repeated 0.01 increments landing exactly on 1.0
        return replace(self, step=min(COMPLETE, round(self.step + increment, 9)))

    def to_dict(self) -> Dict[str, Any]:
        return {'from': self.source, 'to': self.target, 'step': self.step}

    def __repr__(self) -> str:
        return f"MotionStep({self.source} -> {self.target}, step={self.step:.2f})"
