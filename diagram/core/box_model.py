"""
CSS-like box model.

Each element has four nested layers:

    margin box  >  border box  >  padding box  >  content box

Width and height of an element always describe its BORDER box. The
content box is the border box inset by border + padding and is where
children are placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from diagram.core.errors import InvalidBoxModelError
from diagram.core.geometry import Box, Point, Size
from diagram.core.units import DEFAULT_FONT_SIZE, parse_unit

if TYPE_CHECKING:
    from diagram.core.config import BoxModelConfig, SidesConfig


class BoxReference(str, Enum):
    """Which layer (or coordinate space) a position is measured on."""
    MARGIN = "margin"
    BORDER = "border"
    PADDING = "padding"
    CONTENT = "content"
    ROOT = "root"

    @classmethod
    def parse(cls, value: Union['BoxReference', str]) -> 'BoxReference':
        if isinstance(value, BoxReference):
            return value
        key = value.strip().lower()
        # "contentBox", "borderBox", "artboard"
        if key.endswith("box"):
            key = key[:-3].rstrip("_")
        if key == "artboard":
            key = "root"
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown box reference: {value!r}") from None

    @property
    def layer(self) -> 'BoxReference':
        """The geometric layer used for anchors (root space uses the border box)."""
        return BoxReference.BORDER if self is BoxReference.ROOT else self


@dataclass(frozen=True)
class EdgeInsets:
    """Insets for the four sides of a box."""
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @classmethod
    def all(cls, value: float) -> 'EdgeInsets':
        """Create uniform insets."""
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, horizontal: float, vertical: float) -> 'EdgeInsets':
        """Create symmetric insets."""
        return cls(vertical, horizontal, vertical, horizontal)

    @property
    def horizontal(self) -> float:
        """Total horizontal inset."""
        return self.left + self.right

    @property
    def vertical(self) -> float:
        """Total vertical inset."""
        return self.top + self.bottom

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    def __add__(self, other: 'EdgeInsets') -> 'EdgeInsets':
        return EdgeInsets(
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
            self.left + other.left,
        )


ZERO_INSETS = EdgeInsets()

_SIDES = ("top", "right", "bottom", "left")


def _resolve_side(value: Any, what: str, base: float) -> float:
    try:
        resolved = parse_unit(value, base)
    except ValueError as exc:
        raise InvalidBoxModelError(f"Invalid {what}: {exc}") from exc
    if resolved < 0:
        raise InvalidBoxModelError(f"Negative {what}: {value!r}")
    return resolved


def resolve_insets(
    raw: Union[None, float, str, Mapping[str, Any], 'SidesConfig', EdgeInsets],
    what: str = "inset",
    base: float = DEFAULT_FONT_SIZE,
) -> EdgeInsets:
    """
    Resolve one padding/border/margin value into EdgeInsets.

    Args:
        raw: Number (all sides), unit string (all sides), or a per-side
            mapping/SidesConfig where missing sides default to 0
        what: Label used in error messages
        base: Base for relative units

    Raises:
        InvalidBoxModelError: If a side is negative or unparseable
    """
    if raw is None:
        return ZERO_INSETS

    if isinstance(raw, EdgeInsets):
        sides = {side: getattr(raw, side) for side in _SIDES}
    elif isinstance(raw, (int, float, str)) and not isinstance(raw, bool):
        value = _resolve_side(raw, what, base)
        return EdgeInsets.all(value)
    elif isinstance(raw, Mapping):
        unknown = set(raw) - set(_SIDES)
        if unknown:
            raise InvalidBoxModelError(f"Unknown {what} sides: {sorted(unknown)}")
        sides = dict(raw)
    elif hasattr(raw, "model_dump"):
        sides = raw.model_dump()
    else:
        raise InvalidBoxModelError(f"Invalid {what}: {raw!r}")

    return EdgeInsets(**{
        side: _resolve_side(sides.get(side, 0), f"{what} {side}", base)
        for side in _SIDES
    })


@dataclass(frozen=True)
class BoxModel:
    """Resolved margin, border and padding of an element."""
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    border: EdgeInsets = field(default_factory=EdgeInsets)
    margin: EdgeInsets = field(default_factory=EdgeInsets)

    @classmethod
    def from_config(
        cls,
        config: Union[None, 'BoxModelConfig', Mapping[str, Any]] = None,
        base: float = DEFAULT_FONT_SIZE,
    ) -> 'BoxModel':
        """Resolve a box model configuration."""
        if config is None:
            return cls()
        layers = ("padding", "border", "margin")
        if isinstance(config, Mapping):
            unknown = set(config) - set(layers)
            if unknown:
                raise InvalidBoxModelError(f"Unknown box model keys: {sorted(unknown)}")
            values = {layer: config.get(layer) for layer in layers}
        else:
            values = {layer: getattr(config, layer) for layer in layers}
        return cls(**{
            layer: resolve_insets(values[layer], layer, base)
            for layer in layers
        })

    @property
    def content_insets(self) -> EdgeInsets:
        """Border + padding."""
        return self.border + self.padding

    @property
    def content_offset(self) -> Point:
        """Offset from border-box top-left to content-box top-left."""
        return self.content_insets.top_left

    def content_size(self, border_size: Size) -> Size:
        """Content size for a given border-box size."""
        insets = self.content_insets
        return Size(
            max(0.0, border_size.width - insets.horizontal),
            max(0.0, border_size.height - insets.vertical),
        )

    def border_size(self, content_size: Size) -> Size:
        """Border-box size needed around a given content size."""
        insets = self.content_insets
        return Size(
            content_size.width + insets.horizontal,
            content_size.height + insets.vertical,
        )

    def outer_size(self, border_size: Size) -> Size:
        """Margin-box size for a given border-box size."""
        return Size(
            border_size.width + self.margin.horizontal,
            border_size.height + self.margin.vertical,
        )

    def layer_offset(self, reference: BoxReference) -> Point:
        """Offset from border-box top-left to the top-left of a layer."""
        layer = BoxReference.parse(reference).layer
        if layer is BoxReference.MARGIN:
            return Point(-self.margin.left, -self.margin.top)
        if layer is BoxReference.PADDING:
            return self.border.top_left
        if layer is BoxReference.CONTENT:
            return self.content_offset
        return Point()

    def layer_box(self, border_box: Box, reference: BoxReference) -> Box:
        """Box of a layer given the border box."""
        layer = BoxReference.parse(reference).layer
        if layer is BoxReference.MARGIN:
            m = self.margin
            return border_box.outset(m.top, m.right, m.bottom, m.left)
        if layer is BoxReference.PADDING:
            b = self.border
            return border_box.inset(b.top, b.right, b.bottom, b.left)
        if layer is BoxReference.CONTENT:
            c = self.content_insets
            return border_box.inset(c.top, c.right, c.bottom, c.left)
        return border_box
