"""
Freeform container - children are placed only by their own position().
"""

from __future__ import annotations

from diagram.container import Container
from diagram.core.geometry import Box


class Freeform(Container):
    """
    Container without automatic arrangement.

    On an auto axis the container wraps the union of its children's
    margin boxes and shifts the children so that union starts at the
    content origin.

    Usage:
        group = Freeform(width="auto", height="auto")
        group.add_elements(a, b)
        b.position(a.anchor("center_right"), anchor="center_left", x=10)
        bounds = group.finalize_freeform_layout()
    """

    def finalize_freeform_layout(self) -> Box:
        """
        Resolve the layout and return the children's union bounds.

        Returns:
            Bounds in this container's content frame (starting at the
            content origin on every auto axis)
        """
        return self.measure_content_box()
