"""
Container element for holding child elements.

The base container is freeform: it does not arrange its children.
Un-positioned children sit at the content top-left (plus their margin);
positioned children go where their position() puts them. An auto axis
takes the union of the children's margin boxes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from diagram.core.geometry import Box, Point, Size
from diagram.element import Element

if TYPE_CHECKING:
    from diagram.resolve.graph import LayoutNode


class Container(Element):
    """
    Element that contains child elements.

    Provides:
    - Child management (add, remove, clear)
    - Arrangement of in-flow children (override in layout subclasses)
    - Content measurement used by auto sizing

    Usage:
        group = Container(width="auto", height="auto")
        group.add_element(Rectangle(width=40, height=20))
    """

    # Whether arrange_children() needs this container's own size
    arrangement_needs_size: bool = False

    def __init__(self, config=None, **options):
        super().__init__(config, **options)
        self._children: List[Element] = []

    # Child management

    @property
    def children(self) -> Tuple[Element, ...]:
        return tuple(self._children)

    def add_element(self, element: Element) -> 'Container':
        """
        Add a child element.

        Args:
            element: Element to add (detached, or moved from another parent)

        Returns:
            Self for chaining

        Raises:
            ValueError: If the element is this container or one of its ancestors
        """
        if element is self or self.is_descendant_of(element):
            raise ValueError(f"Cannot add {element!r} inside itself")
        if element.parent is not None:
            element.parent.remove_element(element)

        # The element stops being a root of its own tree
        element.parent = self
        self._children.append(element)
        self.invalidate()
        return self

    def add_elements(self, *elements: Element) -> 'Container':
        """Add multiple children."""
        for element in elements:
            self.add_element(element)
        return self

    def remove_element(self, element: Element) -> bool:
        """
        Remove a child element.

        Returns:
            True if the element was found and removed
        """
        if element not in self._children:
            return False
        self._children.remove(element)
        element.parent = None
        element.invalidate()
        self.invalidate()
        return True

    def clear(self) -> None:
        """Remove all children."""
        for child in self._children:
            child.parent = None
            child.invalidate()
        self._children.clear()
        self.invalidate()

    def get_child(self, index: int) -> Optional[Element]:
        """Get child by index."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def child_count(self) -> int:
        return len(self._children)

    def iter_children(self, recursive: bool = False) -> Iterator[Element]:
        """
        Iterate over children.

        Args:
            recursive: If True, also iterate over children's children
        """
        for child in self._children:
            yield child
            if recursive and isinstance(child, Container):
                yield from child.iter_children(recursive=True)

    @property
    def in_flow_children(self) -> List[Element]:
        """Children placed by this container (those without a position)."""
        return [c for c in self._children if c.position_spec is None]

    # Layout contract

    def size_dependencies(self) -> List['LayoutNode']:
        """
        Graph nodes an auto dimension of this container is computed from.

        Freeform: size and placement of every child.
        """
        from diagram.resolve.graph import LayoutNode, NodeKind

        nodes = []
        for child in self._children:
            nodes.append(LayoutNode(NodeKind.SIZE, child))
            nodes.append(LayoutNode(NodeKind.PLACE, child))
        return nodes

    def placement_dependencies(self) -> List['LayoutNode']:
        """
        Graph nodes arrange_children() reads, besides this container's own
        size (see arrangement_needs_size).
        """
        return []

    def arrange_children(self, content_size: Size) -> Dict[int, Point]:
        """
        Local border-box top-left of every in-flow child.

        Freeform places them at the content origin, offset by their margin.
        Child sizes are already resolved when this runs.

        Args:
            content_size: This container's content size (only meaningful
                when arrangement_needs_size is set)

        Returns:
            Mapping of id(child) to its position in the content frame
        """
        return {
            id(child): child.box_model.margin.top_left
            for child in self.in_flow_children
        }

    def _measure(self) -> Optional[Box]:
        """
        Tight bounds of the children in the raw content frame.

        Freeform: union of the children's margin boxes. None without children.
        """
        boxes = []
        for child in self._children:
            margin = child.box_model.margin
            outer = child.box_model.outer_size(child._size)
            place = child._place
            boxes.append(Box(place.x - margin.left, place.y - margin.top,
                             outer.width, outer.height))
        return Box.union(boxes)

    def normalizes_frame(self) -> bool:
        """Whether auto axes translate children so their union starts at 0."""
        return True

    def measure_content_box(self) -> Box:
        """Tight children bounds in this container's content frame."""
        self.resolve()
        bounds = self._measure()
        if bounds is None:
            return Box()
        return bounds.translate(-self._frame_shift.x, -self._frame_shift.y)

    def measure_content_size(self) -> Size:
        return self.measure_content_box().size
