"""
Rectangle shape.
"""

from __future__ import annotations

from diagram.elements.shape import Shape


class Rectangle(Shape):
    """
    Rectangle with explicit (or percentage) width and height.

    Usage:
        rect = Rectangle(width=120, height="50%")
    """
