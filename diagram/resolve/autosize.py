"""
Size resolution for explicit, percentage and auto dimensions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from diagram.core.dimension import Dimension
from diagram.core.errors import InvalidDimensionError, UnmeasurableAutoSizeError
from diagram.core.geometry import Box, Point, Size
from diagram.resolve.graph import LayoutNode, NodeKind

if TYPE_CHECKING:
    from diagram.core.config import LayoutSettings
    from diagram.element import Element

logger = logging.getLogger(__name__)


class AutoSizeResolver:
    """
    Computes SIZE nodes.

    - Fixed dimensions pass through.
    - Percentages resolve against the parent's content size.
    - Auto dimensions use the container's measured children (or the leaf's
      intrinsic size) plus border and padding.

    An auto freeform container also records its frame shift: the offset
    that moves its children's union to the content origin.
    """

    def __init__(self, settings: 'LayoutSettings'):
        self.settings = settings

    def dependencies(self, element: 'Element') -> List[LayoutNode]:
        """
        Nodes the element's size is computed from.

        Raises:
            InvalidDimensionError: Percentage size on an element without parent
        """
        from diagram.container import Container

        nodes = []
        dimensions = (element.width_dimension, element.height_dimension)

        if any(d.is_percent for d in dimensions):
            if element.parent is None:
                raise InvalidDimensionError(
                    f"{element!r} has a percentage size but no parent"
                )
            nodes.append(LayoutNode(NodeKind.SIZE, element.parent))

        if any(d.is_auto for d in dimensions) and isinstance(element, Container):
            nodes.extend(element.size_dependencies())

        return nodes

    def resolve(self, element: 'Element') -> Size:
        """Compute and store the element's border-box size."""
        from diagram.container import Container

        width_dim = element.width_dimension
        height_dim = element.height_dimension

        parent_content = Size()
        if (width_dim.is_percent or height_dim.is_percent) and element.parent is not None:
            parent = element.parent
            parent_content = parent.box_model.content_size(parent._size)

        measured = Box()
        if width_dim.is_auto or height_dim.is_auto:
            measured = self._measure(element)

        insets = element.box_model.content_insets
        size = Size(
            self._axis(width_dim, parent_content.width, measured.width + insets.horizontal),
            self._axis(height_dim, parent_content.height, measured.height + insets.vertical),
        )

        shift = Point()
        if isinstance(element, Container) and element.normalizes_frame():
            shift = Point(
                measured.x if width_dim.is_auto else 0.0,
                measured.y if height_dim.is_auto else 0.0,
            )

        element._size = size
        element._frame_shift = shift
        return size

    @staticmethod
    def _axis(dimension: Dimension, parent_content: float, auto_value: float) -> float:
        if dimension.is_auto:
            return auto_value
        if dimension.is_percent:
            return dimension.of(parent_content)
        return dimension.value

    def _measure(self, element: 'Element') -> Box:
        """Content bounds of an auto element (zero box when unmeasurable)."""
        from diagram.container import Container

        bounds: Optional[Box]
        if isinstance(element, Container):
            bounds = element._measure()
        else:
            intrinsic = element.intrinsic_size()
            bounds = Box.from_origin(Point(), intrinsic) if intrinsic is not None else None

        if bounds is None:
            if self.settings.strict_auto_size:
                raise UnmeasurableAutoSizeError(
                    f"{element!r} is auto-sized but has nothing to measure"
                )
            logger.debug(f"{element!r} has nothing to measure, using zero size")
            return Box()
        return bounds
