"""
ZStack layout - layers children on top of each other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from diagram.core.alignment import Alignment
from diagram.core.config import ZStackConfig
from diagram.core.geometry import Box, Point, Size
from diagram.layouts.layout import Layout

if TYPE_CHECKING:
    from diagram.resolve.graph import LayoutNode


class ZStack(Layout):
    """
    Layered layout.

    Every in-flow child is aligned at the same spot of the content box.
    With a layer_offset each later child is moved that much further away
    from the aligned edge (towards the bottom-right for start/center,
    towards the top-left for end), which gives a card deck look.

    Auto size is the largest child, including the space its offset takes.
    Layers paint in creation order unless z_index says otherwise.

    Usage:
        deck = ZStack(horizontal_alignment="left", vertical_alignment="top",
                      layer_offset=5)
        deck.add_elements(*(Rectangle(width=150, height=200) for _ in range(5)))
    """

    config_type = ZStackConfig
    arrangement_needs_size = True

    def __init__(self, config=None, **options):
        super().__init__(config, **options)
        self.horizontal_alignment: Alignment = self.config.horizontal_alignment
        self.vertical_alignment: Alignment = self.config.vertical_alignment
        self.layer_offset: float = self.config.layer_offset

    # Fluent setters

    def set_alignment(self, horizontal=None, vertical=None) -> 'ZStack':
        """Set horizontal and/or vertical alignment (fluent)."""
        if horizontal is not None:
            self.horizontal_alignment = Alignment.parse(horizontal)
        if vertical is not None:
            self.vertical_alignment = Alignment.parse(vertical)
        self.invalidate()
        return self

    def set_layer_offset(self, offset: float) -> 'ZStack':
        if offset < 0:
            raise ValueError(f"Layer offset cannot be negative: {offset}")
        self.layer_offset = offset
        self.invalidate()
        return self

    # Layout contract

    def size_dependencies(self) -> List['LayoutNode']:
        from diagram.resolve.graph import LayoutNode, NodeKind

        return [LayoutNode(NodeKind.SIZE, child) for child in self.in_flow_children]

    def placement_dependencies(self) -> List['LayoutNode']:
        return self.size_dependencies()

    @staticmethod
    def _align(available: float, outer: float, shift: float, alignment: Alignment) -> float:
        if alignment is Alignment.END:
            return available - outer - shift
        return (available - outer) * alignment.factor + shift

    def arrange_children(self, content_size: Size) -> Dict[int, Point]:
        """Align every in-flow child, displaced by its layer index."""
        positions = {}
        for index, child in enumerate(self.in_flow_children):
            outer = self._outer_size(child)
            margin = child.box_model.margin
            shift = index * self.layer_offset
            x = self._align(content_size.width, outer.width, shift, self.horizontal_alignment)
            y = self._align(content_size.height, outer.height, shift, self.vertical_alignment)
            positions[id(child)] = Point(x + margin.left, y + margin.top)
        return positions

    def _measure(self) -> Optional[Box]:
        """Largest child plus its layer offset, on each axis."""
        children = self.in_flow_children
        if not children:
            return None

        width = height = 0.0
        for index, child in enumerate(children):
            outer = self._outer_size(child)
            shift = index * self.layer_offset
            width = max(width, outer.width + shift)
            height = max(height, outer.height + shift)
        return Box(0.0, 0.0, width, height)
