"""
Width/height values: explicit length, percentage of the parent, or auto.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from diagram.core.units import DEFAULT_FONT_SIZE, parse_unit


class DimensionKind(Enum):
    FIXED = "fixed"
    PERCENT = "percent"
    AUTO = "auto"


@dataclass(frozen=True)
class Dimension:
    """
    A single width or height.

    FIXED values are border-box lengths in pixels. PERCENT values are
    relative to the parent's content box. AUTO is computed from children
    (containers) or from intrinsic size (shapes).
    """
    kind: DimensionKind
    value: float = 0.0

    @classmethod
    def fixed(cls, value: float) -> 'Dimension':
        if value < 0:
            raise ValueError(f"Dimension cannot be negative: {value}")
        return cls(DimensionKind.FIXED, float(value))

    @classmethod
    def percent(cls, value: float) -> 'Dimension':
        if value < 0:
            raise ValueError(f"Percentage cannot be negative: {value}%")
        return cls(DimensionKind.PERCENT, float(value))

    @classmethod
    def auto(cls) -> 'Dimension':
        return cls(DimensionKind.AUTO)

    @classmethod
    def parse(
        cls,
        raw: Union['Dimension', float, str, None],
        base: float = DEFAULT_FONT_SIZE,
    ) -> 'Dimension':
        """
        Parse a dimension.

        Accepts a number, "auto" (or None), "50%", or a unit string
        such as "120px" / "10rem".

        Raises:
            ValueError: For negative or malformed values
        """
        if isinstance(raw, Dimension):
            return raw
        if raw is None:
            return cls.auto()
        if isinstance(raw, bool):
            raise ValueError(f"Invalid dimension: {raw!r}")
        if isinstance(raw, (int, float)):
            return cls.fixed(raw)
        if isinstance(raw, str):
            text = raw.strip().lower()
            if text == "auto":
                return cls.auto()
            if text.endswith("%"):
                try:
                    return cls.percent(float(text[:-1]))
                except ValueError:
                    raise ValueError(f"Invalid percentage: {raw!r}") from None
            return cls.fixed(parse_unit(text, base))
        raise ValueError(f"Invalid dimension: {raw!r}")

    @property
    def is_auto(self) -> bool:
        return self.kind is DimensionKind.AUTO

    @property
    def is_percent(self) -> bool:
        return self.kind is DimensionKind.PERCENT

    @property
    def is_fixed(self) -> bool:
        return self.kind is DimensionKind.FIXED

    def of(self, reference: float) -> float:
        """Resolve a percentage against a reference length."""
        if self.is_percent:
            return reference * self.value / 100.0
        return self.value

    def __str__(self) -> str:
        if self.is_auto:
            return "auto"
        if self.is_percent:
            return f"{self.value:g}%"
        return f"{self.value:g}"


AUTO = Dimension.auto()
