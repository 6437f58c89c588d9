"""
    Shared value types: node labels, 2D points and label display styles.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

# Caller-assigned node identifier (>= 1). Not a storage index.
Label = int

DisplayLabel = Union[int, str]

ALPHABET = "_ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


class LabelStyle(Enum):
    """How node labels are shown to the user"""
    NUMERIC = "numeric"
    CHARACTER = "character"


class LabelFormatter:
    """Maps integer labels to their display form"""

    @staticmethod
    def style_for(character: bool) -> LabelStyle:
        return LabelStyle.CHARACTER if character else LabelStyle.NUMERIC

    @staticmethod
    def format(label: Label, style: LabelStyle) -> DisplayLabel:
        """
        Format a label for display.

        In CHARACTER style label 1 becomes "A", 2 becomes "B" and so on.
        Labels outside the alphabet keep their integer text.
        """
        if style == LabelStyle.NUMERIC:
            return label
        if 0 < label < len(ALPHABET):
            return ALPHABET[label]
        return str(label)

    @staticmethod
    def parse(text: str) -> Label:
        """Inverse of ``format``: accepts "3" or "C" and returns 3."""
        value = text.strip()
        if value.isdigit():
            return int(value)
        upper = value.upper()
        if len(upper) == 1 and upper in ALPHABET[1:]:
            return ALPHABET.index(upper)
        raise ValueError(f"Cannot convert '{text}' to a node label")
