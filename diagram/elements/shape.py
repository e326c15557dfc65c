"""
Base class for leaf shapes.
"""

from __future__ import annotations

from typing import Optional

from diagram.core.geometry import Size
from diagram.element import Element


class Shape(Element):
    """
    Leaf element with optional intrinsic content size.

    Subclasses override intrinsic_size() to size themselves when a
    dimension is auto. Path geometry and styling are handled by the
    renderer, not here.
    """

    def intrinsic_size(self) -> Optional[Size]:
        return None
