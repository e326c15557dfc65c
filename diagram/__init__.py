"""
Diagram Layout

Declarative layout and positioning engine for vector diagrams: a CSS-like
box model, anchor-relative positioning and auto-sizing containers.

Quick Start:
    from diagram import Artboard, Columns, Circle

    artboard = Artboard(width=800, height=600, box_model={"padding": 40})
    columns = Columns(count=2, column_width=250, height=500, gutter=30)
    artboard.add_element(columns)
    columns.position(artboard.content_box.anchor("top_left"))

    first = Circle(radius=60)
    columns.get_column(0).add_element(first)

    first.center        # Point(x=100.0, y=100.0)
    result = artboard.layout()
"""

__version__ = "0.1.0"
__author__ = "Developer"

# Re-export the public API for convenience
from diagram.core import (
    Alignment,
    Anchor,
    AnchorRef,
    Box,
    BoxModel,
    BoxReference,
    CyclicPositionError,
    Dimension,
    Direction,
    EdgeInsets,
    InvalidBoxModelError,
    InvalidDimensionError,
    LayoutError,
    LayoutSettings,
    Point,
    Size,
    UnmeasurableAutoSizeError,
    UnresolvedTargetError,
    parse_unit,
)
from diagram.element import BoxAccessor, Element
from diagram.container import Container
from diagram.layouts import (
    Column,
    Columns,
    Freeform,
    Grid,
    GridCell,
    HStack,
    Stack,
    VStack,
    ZStack,
)
from diagram.elements import (
    ApproximateTextMeasurer,
    Circle,
    Rectangle,
    Shape,
    Text,
    TextMeasurer,
    TextMetrics,
)
from diagram.artboard import Artboard
from diagram.builder import DiagramBuilder
from diagram.resolve import LayoutResult, ResolvedBox

__all__ = [
    # Geometry
    "Point",
    "Size",
    "Box",
    "Anchor",
    "AnchorRef",
    # Box model
    "BoxModel",
    "BoxReference",
    "EdgeInsets",
    "Dimension",
    "Alignment",
    "Direction",
    "parse_unit",
    # Tree
    "Element",
    "BoxAccessor",
    "Container",
    "Stack",
    "VStack",
    "HStack",
    "Grid",
    "GridCell",
    "Columns",
    "Column",
    "Freeform",
    "ZStack",
    "Artboard",
    # Leaves
    "Shape",
    "Rectangle",
    "Circle",
    "Text",
    "TextMeasurer",
    "TextMetrics",
    "ApproximateTextMeasurer",
    # Output
    "DiagramBuilder",
    "LayoutSettings",
    "LayoutResult",
    "ResolvedBox",
    # Errors
    "LayoutError",
    "InvalidBoxModelError",
    "InvalidDimensionError",
    "UnresolvedTargetError",
    "CyclicPositionError",
    "UnmeasurableAutoSizeError",
]
