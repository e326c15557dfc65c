"""
Unit parsing for lengths given as CSS-style strings.

All internal layout math is done in pixels. Strings such as "40px",
"2rem" or "1in" are converted here.

Usage:
    parse_unit("100px")      # 100.0
    parse_unit("2rem")       # 32.0
    parse_unit("50%", 800)   # 400.0
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 16.0

_UNIT_PATTERN = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+))([a-z%]*)$", re.IGNORECASE)

# Absolute units, in pixels per unit
_ABSOLUTE_UNITS = {
    "": 1.0,
    "px": 1.0,
    "pt": 4 / 3,
    "cm": 37.8,
    "mm": 3.78,
    "in": 96.0,
}

# Units relative to the base value
_RELATIVE_UNITS = {
    "rem": 1.0,
    "em": 1.0,
    "%": 0.01,
}

UnitValue = Union[str, int, float, None]


def _split(value: str) -> Optional[tuple[float, str]]:
    match = _UNIT_PATTERN.match(value.strip())
    if not match:
        return None
    number, unit = match.groups()
    return float(number), unit.lower()


def parse_unit(value: UnitValue, base: float = DEFAULT_FONT_SIZE) -> float:
    """
    Convert a length to pixels.

    Args:
        value: Number, unit string, or None (treated as 0)
        base: Base value for relative units (rem, em, %)

    Returns:
        Length in pixels

    Raises:
        ValueError: If the string is not a number followed by a unit
    """
    if value is None:
        return 0.0

    if isinstance(value, bool):
        raise ValueError(f"Invalid unit value: {value!r}")

    if isinstance(value, (int, float)):
        return float(value)

    parts = _split(value)
    if parts is None:
        raise ValueError(f"Invalid unit value: {value!r}")

    number, unit = parts

    if unit in _ABSOLUTE_UNITS:
        return number * _ABSOLUTE_UNITS[unit]

    if unit in _RELATIVE_UNITS:
        return number * _RELATIVE_UNITS[unit] * base

    logger.warning(f"Unknown unit {unit!r} in {value!r}, treating as pixels")
    return number


def is_valid_unit(value: UnitValue) -> bool:
    """Check whether a value can be parsed as a length."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == value  # NaN check
    return _split(value) is not None


def format_unit(pixels: float, unit: str = "px") -> str:
    """
    Format a pixel length in an absolute unit.

    Usage:
        format_unit(96, "in")    # "1in"
    """
    unit = unit.lower()
    if unit not in _ABSOLUTE_UNITS:
        raise ValueError(f"Cannot format in non-absolute unit {unit!r}")
    return f"{pixels / _ABSOLUTE_UNITS[unit]:g}{unit}"
