"""
Alignment and direction options for layout containers.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Alignment(str, Enum):
    """Alignment of children along an axis."""
    START = "start"    # Left/Top
    CENTER = "center"  # Center
    END = "end"        # Right/Bottom

    @property
    def factor(self) -> float:
        """Fraction of the free space placed before the child."""
        return _FACTORS[self]

    @classmethod
    def parse(cls, value: Union['Alignment', str]) -> 'Alignment':
        """Parse an alignment, accepting left/top/right/bottom/middle."""
        if isinstance(value, Alignment):
            return value
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown alignment: {value!r}") from None


_FACTORS = {
    Alignment.START: 0.0,
    Alignment.CENTER: 0.5,
    Alignment.END: 1.0,
}

_ALIASES = {
    "left": "start",
    "top": "start",
    "middle": "center",
    "right": "end",
    "bottom": "end",
}


class Direction(str, Enum):
    """Main axis of a stack."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def is_vertical(self) -> bool:
        return self is Direction.VERTICAL
