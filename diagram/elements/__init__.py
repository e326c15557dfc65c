"""
Leaf elements.
"""

from diagram.elements.shape import Shape
from diagram.elements.rectangle import Rectangle
from diagram.elements.circle import Circle
from diagram.elements.text import (
    ApproximateTextMeasurer,
    Text,
    TextMeasurer,
    TextMetrics,
)

__all__ = [
    'Shape',
    'Rectangle',
    'Circle',
    'Text',
    'TextMeasurer',
    'TextMetrics',
    'ApproximateTextMeasurer',
]
