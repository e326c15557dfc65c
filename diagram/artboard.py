"""
Artboard - the root of a diagram and its absolute coordinate space.
"""

from __future__ import annotations

from diagram.core.config import ArtboardConfig, LayoutSettings
from diagram.core.errors import LayoutError
from diagram.layouts.freeform import Freeform
from diagram.resolve.result import LayoutResult


class Artboard(Freeform):
    """
    Freeform root container.

    The artboard's border box starts at (0, 0). It defaults to 800x600;
    either dimension may be "auto" to wrap its content.

    Usage:
        artboard = Artboard(width=800, height=600, box_model={"padding": 40})
        artboard.add_element(Circle(radius=60))
        result = artboard.layout()
    """

    config_type = ArtboardConfig

    @property
    def settings(self) -> LayoutSettings:
        return self.config.settings

    def position(self, *args, **kwargs):
        raise LayoutError("The artboard is the coordinate root and cannot be positioned")

    def layout(self) -> LayoutResult:
        """
        Resolve the whole tree.

        Returns:
            Final boxes of every element
        """
        self.resolve()
        return LayoutResult.collect(self)
