"""
Horizontal stack - arranges children from left to right.
"""

from __future__ import annotations

from diagram.core.alignment import Direction
from diagram.layouts.stack import Stack


class HStack(Stack):
    """
    Horizontal stack layout.

    Usage:
        row = HStack(spacing=4, alignment="bottom")
        row.add_elements(Circle(radius=10), Circle(radius=20))
    """

    def _configure(self) -> None:
        super()._configure()
        self.direction = Direction.HORIZONTAL
