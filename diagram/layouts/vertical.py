"""
Vertical stack - stacks children from top to bottom.
"""

from __future__ import annotations

from diagram.core.alignment import Direction
from diagram.layouts.stack import Stack


class VStack(Stack):
    """
    Vertical stack layout.

    Stacks children from top to bottom with optional spacing.
    alignment controls the horizontal placement of each child.

    Usage:
        stack = VStack(spacing=8, alignment="center")
        stack.add_element(Rectangle(width=100, height=20))
        stack.add_element(Rectangle(width=60, height=20))
    """

    def _configure(self) -> None:
        super()._configure()
        self.direction = Direction.VERTICAL
