"""
Circle shape.
"""

from __future__ import annotations

from typing import Optional

from diagram.core.config import CircleConfig
from diagram.core.geometry import Size
from diagram.elements.shape import Shape


class Circle(Shape):
    """
    Circle sized by its radius.

    Usage:
        dot = Circle(radius=60)
        dot.center   # absolute centre once laid out
    """

    config_type = CircleConfig

    @property
    def radius(self) -> float:
        return self.config.radius

    @property
    def diameter(self) -> float:
        return self.config.radius * 2

    def set_radius(self, radius: float) -> 'Circle':
        """Change the radius (fluent)."""
        self.config.radius = radius
        self.invalidate()
        return self

    def intrinsic_size(self) -> Optional[Size]:
        return Size(self.diameter, self.diameter)
