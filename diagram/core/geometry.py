"""
Geometry primitives: points, sizes, boxes and their named anchors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union


@dataclass(frozen=True)
class Point:
    """2D point (or offset)."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def offset(self, dx: float, dy: float) -> 'Point':
        """Return this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def midpoint(self, other: 'Point') -> 'Point':
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, value: Union['Point', Tuple[float, float]]) -> 'Point':
        """Accept a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    """Width and height."""
    width: float = 0.0
    height: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


class Anchor(Enum):
    """
    Named reference points of a box.

    Each anchor carries its horizontal and vertical factors:
    the point is (x + width * fx, y + height * fy).
    """
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    CENTER_LEFT = "center_left"
    CENTER = "center"
    CENTER_RIGHT = "center_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def factors(self) -> Tuple[float, float]:
        return _ANCHOR_FACTORS[self]

    @classmethod
    def parse(cls, value: Union['Anchor', str]) -> 'Anchor':
        """
        Parse an anchor name.

        Accepts snake_case ("top_left"), camelCase ("topLeft") and the
        "centerTop"/"centerBottom" spellings.
        """
        if isinstance(value, Anchor):
            return value
        key = value.strip()
        if not key.isupper():
            key = re.sub(r"(?<!^)(?=[A-Z])", "_", key)
        key = key.lower().replace("-", "_")
        key = _ANCHOR_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown anchor: {value!r}") from None


_ANCHOR_FACTORS: Dict[Anchor, Tuple[float, float]] = {
    Anchor.TOP_LEFT: (0.0, 0.0),
    Anchor.TOP_CENTER: (0.5, 0.0),
    Anchor.TOP_RIGHT: (1.0, 0.0),
    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER: (0.5, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),
    Anchor.BOTTOM_LEFT: (0.0, 1.0),
    Anchor.BOTTOM_CENTER: (0.5, 1.0),
    Anchor.BOTTOM_RIGHT: (1.0, 1.0),
}

_ANCHOR_ALIASES = {
    "center_top": "top_center",
    "center_bottom": "bottom_center",
    "left_center": "center_left",
    "right_center": "center_right",
    "middle": "center",
}


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in absolute (or local) coordinates."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> 'Box':
        return cls(origin.x, origin.y, size.width, size.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def anchor(self, anchor: Union[Anchor, str]) -> Point:
        """Get the absolute point of a named anchor."""
        fx, fy = Anchor.parse(anchor).factors
        return Point(self.x + self.width * fx, self.y + self.height * fy)

    def contains(self, px: float, py: float) -> bool:
        """Check if point is inside box."""
        return (self.x <= px < self.right and
                self.y <= py < self.bottom)

    def contains_box(self, other: 'Box') -> bool:
        """Check if another box lies fully inside this one."""
        return (self.x <= other.x and self.y <= other.y and
                other.right <= self.right and other.bottom <= self.bottom)

    def intersects(self, other: 'Box') -> bool:
        """Check if boxes intersect."""
        return not (
            self.right <= other.x or
            other.right <= self.x or
            self.bottom <= other.y or
            other.bottom <= self.y
        )

    def translate(self, dx: float, dy: float) -> 'Box':
        return Box(self.x + dx, self.y + dy, self.width, self.height)

    def inset(self, top: float, right: float, bottom: float, left: float) -> 'Box':
        """Shrink by the given insets. Size never goes below zero."""
        return Box(
            self.x + left,
            self.y + top,
            max(0.0, self.width - left - right),
            max(0.0, self.height - top - bottom),
        )

    def outset(self, top: float, right: float, bottom: float, left: float) -> 'Box':
        """Grow by the given insets."""
        return Box(
            self.x - left,
            self.y - top,
            self.width + left + right,
            self.height + top + bottom,
        )

    @staticmethod
    def union(boxes: Iterable['Box']) -> Optional['Box']:
        """Tight bounding box of several boxes, or None if empty."""
        boxes = list(boxes)
        if not boxes:
            return None
        min_x = min(b.x for b in boxes)
        min_y = min(b.y for b in boxes)
        max_x = max(b.right for b in boxes)
        max_y = max(b.bottom for b in boxes)
        return Box(min_x, min_y, max_x - min_x, max_y - min_y)


def anchors_of(box: Box) -> Dict[Anchor, Point]:
    """All nine anchors of a box."""
    return {anchor: box.anchor(anchor) for anchor in Anchor}
