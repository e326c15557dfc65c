"""
Base layout class for automatic element positioning.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict

from diagram.container import Container
from diagram.core.geometry import Point, Size

if TYPE_CHECKING:
    from diagram.element import Element


class Layout(Container):
    """
    Base class for layout containers.

    Layouts automatically position their in-flow children according
    to a specific strategy (stack, grid, columns). Unlike a freeform
    container they never translate their children to normalize bounds.
    """

    @abstractmethod
    def arrange_children(self, content_size: Size) -> Dict[int, Point]:
        """Recalculate child positions."""

    def normalizes_frame(self) -> bool:
        return False

    def _outer_size(self, child: 'Element') -> Size:
        """Get child's size including margins."""
        return child.box_model.outer_size(child._size)
