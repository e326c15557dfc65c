"""
Configuration structs for elements and layouts.

Configs are data-only containers using Pydantic for:
- Validation of every recognized option
- Defaults
- Rejection of unknown keys (typos fail loudly at construction)

Usage:
    config = StackConfig(direction="vertical", spacing=10, width="auto")
    stack = Stack(config)

    # Equivalent keyword form
    stack = Stack(direction="vertical", spacing=10, width="auto")
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from diagram.core.alignment import Alignment, Direction
from diagram.core.dimension import Dimension

InsetValue = Union[float, str]


class LayoutConfig(BaseModel):
    """
    Base class for all configuration structs.

    IMPORTANT: unknown keys are rejected, never ignored.
    """

    model_config = ConfigDict(
        # Dimension is a plain dataclass
        arbitrary_types_allowed=True,
        # Validate on assignment
        validate_assignment=True,
        extra='forbid',
    )


class SidesConfig(LayoutConfig):
    """Per-side inset values. Unspecified sides are 0."""
    top: InsetValue = 0
    right: InsetValue = 0
    bottom: InsetValue = 0
    left: InsetValue = 0


class BoxModelConfig(LayoutConfig):
    """
    Padding, border and margin.

    Each accepts a number, a unit string ("40px", "2rem") or a per-side
    mapping. Negative values are rejected when the box model is resolved.
    """
    padding: Union[InsetValue, SidesConfig] = 0
    border: Union[InsetValue, SidesConfig] = 0
    margin: Union[InsetValue, SidesConfig] = 0


def _parse_dimension(value: Any) -> Dimension:
    return Dimension.parse(value)


def _parse_alignment(value: Any) -> Any:
    if isinstance(value, str):
        return Alignment.parse(value)
    return value


class LayoutSettings(LayoutConfig):
    """Settings for a whole layout tree (carried by the artboard)."""
    # Raise UnmeasurableAutoSizeError instead of collapsing to zero size
    strict_auto_size: bool = False


class ElementConfig(LayoutConfig):
    """Options shared by every element."""
    name: str = ""
    width: Dimension = Dimension.auto()
    height: Dimension = Dimension.auto()
    box_model: BoxModelConfig = Field(default_factory=BoxModelConfig)
    z_index: Optional[int] = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, value: Any) -> Dimension:
        return _parse_dimension(value)


class StackConfig(ElementConfig):
    """Linear stack options."""
    direction: Direction = Direction.VERTICAL
    spacing: float = Field(default=0, ge=0)
    # Cross-axis alignment
    alignment: Alignment = Alignment.START
    # Main-axis alignment
    justify: Alignment = Alignment.START
    # Distribute children evenly along a fixed main axis
    spread: bool = False

    @field_validator("alignment", "justify", mode="before")
    @classmethod
    def _alignment(cls, value: Any) -> Any:
        return _parse_alignment(value)


class GridConfig(LayoutConfig):
    """
    Grid options.

    The grid's size is always derived from its cells, so it has no
    width/height options.
    """
    name: str = ""
    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    cell_width: float = Field(gt=0)
    cell_height: float = Field(gt=0)
    gutter: float = Field(default=0, ge=0)
    box_model: BoxModelConfig = Field(default_factory=BoxModelConfig)
    cell_box_model: BoxModelConfig = Field(default_factory=BoxModelConfig)
    z_index: Optional[int] = None


class ColumnsConfig(LayoutConfig):
    """Columns options."""
    name: str = ""
    count: int = Field(gt=0)
    column_width: Dimension = Dimension.auto()
    height: Dimension = Dimension.auto()
    gutter: float = Field(default=0, ge=0)
    # Spacing between children inside each column
    spacing: float = Field(default=0, ge=0)
    # Alignment of the columns against each other (when heights differ)
    alignment: Alignment = Alignment.START
    # Content alignment inside every column
    horizontal_alignment: Alignment = Alignment.START
    vertical_alignment: Alignment = Alignment.START
    box_model: BoxModelConfig = Field(default_factory=BoxModelConfig)
    column_box_model: BoxModelConfig = Field(default_factory=BoxModelConfig)
    z_index: Optional[int] = None

    @field_validator("column_width", "height", mode="before")
    @classmethod
    def _dimension(cls, value: Any) -> Dimension:
        dimension = _parse_dimension(value)
        if dimension.is_percent:
            raise ValueError("Columns dimensions must be fixed or 'auto'")
        return dimension

    @field_validator("alignment", "horizontal_alignment", "vertical_alignment", mode="before")
    @classmethod
    def _alignment(cls, value: Any) -> Any:
        return _parse_alignment(value)


class ZStackConfig(ElementConfig):
    """Layered stack options."""
    horizontal_alignment: Alignment = Alignment.CENTER
    vertical_alignment: Alignment = Alignment.CENTER
    # Per-layer displacement, away from the aligned edge
    layer_offset: float = Field(default=0, ge=0)

    @field_validator("horizontal_alignment", "vertical_alignment", mode="before")
    @classmethod
    def _alignment(cls, value: Any) -> Any:
        return _parse_alignment(value)


class ArtboardConfig(ElementConfig):
    """Root artboard options. Defaults to 800x600."""
    width: Dimension = Dimension.fixed(800)
    height: Dimension = Dimension.fixed(600)
    settings: LayoutSettings = Field(default_factory=LayoutSettings)


class CircleConfig(ElementConfig):
    radius: float = Field(gt=0)


class TextConfig(ElementConfig):
    content: str = ""
    font_size: float = Field(default=16, gt=0)
    # Line height as a multiple of font size
    line_height: float = Field(default=1.2, gt=0)
