"""
Stack layout - places children one after another along an axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from diagram.core.alignment import Alignment, Direction
from diagram.core.config import StackConfig
from diagram.core.geometry import Box, Point, Size
from diagram.layouts.layout import Layout

if TYPE_CHECKING:
    from diagram.resolve.graph import LayoutNode


class Stack(Layout):
    """
    Linear stack layout.

    The main axis is sequential: each child starts where the previous
    one's margin box ends, plus spacing. On the cross axis each child is
    offset by (available - child) * alignment factor.

    Main-axis options:
    - justify: start/center/end placement of the whole run (never
      pushed before the content origin)
    - spread: distribute children evenly over a fixed main axis

    Children with an explicit position() are out of flow: they are
    neither arranged nor counted in the stack's auto size.

    Usage:
        stack = Stack(direction="horizontal", spacing=10, alignment="center")
        stack.add_elements(Rectangle(width=20, height=40), Circle(radius=8))
    """

    config_type = StackConfig
    arrangement_needs_size = True

    def __init__(self, config=None, **options):
        super().__init__(config, **options)
        self._configure()

    def _configure(self) -> None:
        """Read stack options from the config."""
        self.direction: Direction = self.config.direction
        self.spacing: float = self.config.spacing
        self.alignment: Alignment = self.config.alignment
        self.justify: Alignment = self.config.justify
        self.spread: bool = self.config.spread

    @property
    def is_vertical(self) -> bool:
        return self.direction.is_vertical

    # Fluent setters

    def set_spacing(self, spacing: float) -> 'Stack':
        """Set spacing between children (fluent)."""
        if spacing < 0:
            raise ValueError(f"Spacing cannot be negative: {spacing}")
        self.spacing = spacing
        self.invalidate()
        return self

    def set_alignment(self, alignment) -> 'Stack':
        """Set cross axis alignment (fluent)."""
        self.alignment = Alignment.parse(alignment)
        self.invalidate()
        return self

    def set_justify(self, justify) -> 'Stack':
        """Set main axis alignment (fluent)."""
        self.justify = Alignment.parse(justify)
        self.invalidate()
        return self

    def set_spread(self, spread: bool = True) -> 'Stack':
        self.spread = spread
        self.invalidate()
        return self

    # Layout contract

    def size_dependencies(self) -> List['LayoutNode']:
        from diagram.resolve.graph import LayoutNode, NodeKind

        return [LayoutNode(NodeKind.SIZE, child) for child in self.in_flow_children]

    def placement_dependencies(self) -> List['LayoutNode']:
        return self.size_dependencies()

    def _main_cross(self, size: Size):
        if self.is_vertical:
            return size.height, size.width
        return size.width, size.height

    def _point(self, main: float, cross: float) -> Point:
        if self.is_vertical:
            return Point(cross, main)
        return Point(main, cross)

    def _main_is_auto(self) -> bool:
        dimension = self.height_dimension if self.is_vertical else self.width_dimension
        return dimension.is_auto

    def _effective_spacing(self, available: float, total_children: float, count: int) -> float:
        """Spacing between children, spread over the available space if enabled."""
        if not self.spread or count <= 1 or self._main_is_auto():
            return self.spacing
        return max(0.0, (available - total_children) / (count - 1))

    def arrange_children(self, content_size: Size) -> Dict[int, Point]:
        """Position in-flow children along the main axis."""
        children = self.in_flow_children
        if not children:
            return {}

        available_main, available_cross = self._main_cross(content_size)
        outer = [self._main_cross(self._outer_size(child)) for child in children]
        total_children = sum(main for main, _ in outer)

        spacing = self._effective_spacing(available_main, total_children, len(children))
        total = total_children + spacing * (len(children) - 1)

        # Calculate starting offset based on justification
        if self.spread:
            current = 0.0
        else:
            current = max(0.0, (available_main - total) * self.justify.factor)

        positions = {}
        for child, (child_main, child_cross) in zip(children, outer):
            margin = child.box_model.margin
            lead_main, lead_cross = (
                (margin.top, margin.left) if self.is_vertical else (margin.left, margin.top)
            )

            cross = (available_cross - child_cross) * self.alignment.factor + lead_cross
            positions[id(child)] = self._point(current + lead_main, cross)

            # Move to next position
            current += child_main + spacing

        return positions

    def _measure(self) -> Optional[Box]:
        """Sum of main sizes plus spacing by the largest cross size."""
        children = self.in_flow_children
        if not children:
            return None

        main_total = 0.0
        cross_max = 0.0
        for child in children:
            main, cross = self._main_cross(self._outer_size(child))
            main_total += main
            cross_max = max(cross_max, cross)
        main_total += self.spacing * (len(children) - 1)

        if self.is_vertical:
            return Box(0.0, 0.0, cross_max, main_total)
        return Box(0.0, 0.0, main_total, cross_max)
