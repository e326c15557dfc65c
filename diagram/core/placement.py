"""
Declarative placement: "put my anchor A at that anchor T plus an offset".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from diagram.core.box_model import BoxReference
from diagram.core.geometry import Anchor, Point

if TYPE_CHECKING:
    from diagram.element import Element


@dataclass(frozen=True, eq=False)
class AnchorRef:
    """
    Lazy reference to an anchor of an element's box layer.

    Created with element.anchor(...) or element.content_box.anchor(...).
    The point itself is only known once the element is resolved.
    """
    element: 'Element'
    anchor: Anchor = Anchor.TOP_LEFT
    layer: BoxReference = BoxReference.BORDER

    def resolve(self) -> Point:
        """Absolute point (resolves the element's tree on demand)."""
        return self.element.box_for(self.layer).anchor(self.anchor)

    def __repr__(self) -> str:
        return f"AnchorRef({self.element!r}, {self.anchor.value}, {self.layer.value})"


PositionTarget = Union[AnchorRef, Point]


@dataclass(frozen=True)
class PositionSpec:
    """
    One explicit position() instruction.

    Attributes:
        self_anchor: Anchor on the positioned element
        target: AnchorRef of another element, or an explicit point
        offset: Added to the target point
        box_reference: Layer the self anchor is measured on; ROOT means the
            target is evaluated in absolute artboard space
    """
    self_anchor: Anchor
    target: PositionTarget
    offset: Point = field(default_factory=Point)
    box_reference: BoxReference = BoxReference.BORDER

    @property
    def target_element(self) -> 'Element | None':
        if isinstance(self.target, AnchorRef):
            return self.target.element
        return None
