"""
Core value types: geometry, units, dimensions, box model, configs, errors.
"""

from diagram.core.alignment import Alignment, Direction
from diagram.core.box_model import (
    BoxModel,
    BoxReference,
    EdgeInsets,
    resolve_insets,
)
from diagram.core.config import (
    ArtboardConfig,
    BoxModelConfig,
    CircleConfig,
    ColumnsConfig,
    ElementConfig,
    GridConfig,
    LayoutConfig,
    LayoutSettings,
    SidesConfig,
    StackConfig,
    TextConfig,
    ZStackConfig,
)
from diagram.core.dimension import AUTO, Dimension, DimensionKind
from diagram.core.errors import (
    CyclicPositionError,
    InvalidBoxModelError,
    InvalidDimensionError,
    LayoutError,
    UnmeasurableAutoSizeError,
    UnresolvedTargetError,
)
from diagram.core.geometry import ORIGIN, Anchor, Box, Point, Size, anchors_of
from diagram.core.placement import AnchorRef, PositionSpec
from diagram.core.units import format_unit, is_valid_unit, parse_unit

__all__ = [
    # Geometry
    "Point",
    "Size",
    "Box",
    "Anchor",
    "ORIGIN",
    "anchors_of",
    # Units
    "parse_unit",
    "is_valid_unit",
    "format_unit",
    # Dimensions
    "Dimension",
    "DimensionKind",
    "AUTO",
    # Box model
    "BoxModel",
    "BoxReference",
    "EdgeInsets",
    "resolve_insets",
    # Placement
    "Alignment",
    "Direction",
    "AnchorRef",
    "PositionSpec",
    # Configs
    "LayoutConfig",
    "SidesConfig",
    "BoxModelConfig",
    "LayoutSettings",
    "ElementConfig",
    "StackConfig",
    "GridConfig",
    "ColumnsConfig",
    "ArtboardConfig",
    "CircleConfig",
    "TextConfig",
    "ZStackConfig",
    # Errors
    "LayoutError",
    "InvalidBoxModelError",
    "InvalidDimensionError",
    "UnresolvedTargetError",
    "CyclicPositionError",
    "UnmeasurableAutoSizeError",
]
