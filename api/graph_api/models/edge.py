"""
    Edge model - a connection between two node labels.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict

from ..types import Label, LabelFormatter, LabelStyle


@dataclass(frozen=True)
class Edge:
    """
    Immutable edge value.

    Several edges may join the same pair of labels. ``curve`` is only a
    rendering offset for the bend of the drawn edge, never a weight.
    """
    source: Label
    target: Label
    curve: float = 0.0

    def connects(self, source: Label, target: Label) -> bool:
        """Exact (source, target) match, direction included"""
        return self.source == source and self.target == target

    def touches(self, label: Label) -> bool:
        return label in (self.source, self.target)

    def bent(self, delta: float) -> 'Edge':
        """Return a copy with the curve offset shifted by ``delta``"""
        return replace(self, curve=self.curve + delta)

    def to_dict(self, style: LabelStyle = LabelStyle.NUMERIC) -> Dict[str, Any]:
        return {
            'from': LabelFormatter.format(self.source, style),
            'to': LabelFormatter.format(self.target, style),
            'curve': self.curve,
        }

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target}, curve={self.curve:.1f})"
