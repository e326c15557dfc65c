"""
DiagramBuilder - explicit construction context for a diagram.

The builder owns an artboard and a stack of "current" containers. Factory
methods create an element and attach it to the current container; the
within() context manager changes which container is current. Nothing is
stored globally, so several diagrams can be built side by side.

Usage:
    builder = DiagramBuilder(width=800, height=600, box_model={"padding": 40})
    columns = builder.columns(count=2, column_width=250, height=500, gutter=30)
    columns.position(builder.artboard.content_box.anchor("top_left"))

    with builder.within(columns.get_column(0)):
        builder.circle(radius=60)
        builder.circle(radius=60)

    result = builder.layout()
"""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, List, Optional, TypeVar

from diagram.artboard import Artboard
from diagram.container import Container
from diagram.core.config import ArtboardConfig
from diagram.element import Element
from diagram.elements.circle import Circle
from diagram.elements.rectangle import Rectangle
from diagram.elements.text import Text, TextMeasurer
from diagram.layouts.columns import Columns
from diagram.layouts.freeform import Freeform
from diagram.layouts.grid import Grid
from diagram.layouts.horizontal import HStack
from diagram.layouts.stack import Stack
from diagram.layouts.vertical import VStack
from diagram.layouts.zstack import ZStack
from diagram.resolve.result import LayoutResult

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Element)


class DiagramBuilder:
    """Builds one diagram onto its own artboard."""

    def __init__(self, artboard: Optional[Artboard] = None, **options: Any):
        if artboard is not None and options:
            raise TypeError("Pass either an artboard or artboard options, not both")
        self.artboard: Artboard = artboard or Artboard(ArtboardConfig(**options))
        self._stack: List[Container] = [self.artboard]

    @property
    def current(self) -> Container:
        """Container new elements are added to."""
        return self._stack[-1]

    @contextlib.contextmanager
    def within(self, container: Container) -> Iterator[Container]:
        """
        Make `container` current for the duration of the block.

        Raises:
            ValueError: If the container is not part of this builder's artboard
        """
        if container.tree_root() is not self.artboard:
            raise ValueError(f"{container!r} is not attached to this builder's artboard")
        self._stack.append(container)
        try:
            yield container
        finally:
            self._stack.pop()

    def add(self, element: E) -> E:
        """Attach an existing element to the current container."""
        self.current.add_element(element)
        return element

    # Factories

    def vstack(self, **options: Any) -> VStack:
        return self.add(VStack(**options))

    def hstack(self, **options: Any) -> HStack:
        return self.add(HStack(**options))

    def stack(self, **options: Any) -> Stack:
        return self.add(Stack(**options))

    def freeform(self, **options: Any) -> Freeform:
        return self.add(Freeform(**options))

    def zstack(self, **options: Any) -> ZStack:
        return self.add(ZStack(**options))

    def grid(self, **options: Any) -> Grid:
        return self.add(Grid(**options))

    def columns(self, **options: Any) -> Columns:
        return self.add(Columns(**options))

    def rectangle(self, **options: Any) -> Rectangle:
        return self.add(Rectangle(**options))

    def circle(self, **options: Any) -> Circle:
        return self.add(Circle(**options))

    def text(self, content: str = "", measurer: Optional[TextMeasurer] = None,
             **options: Any) -> Text:
        return self.add(Text(content=content, measurer=measurer, **options))

    # Output

    def layout(self) -> LayoutResult:
        """Resolve the artboard and return every element's final boxes."""
        result = self.artboard.layout()
        logger.debug(f"Built diagram with {len(result)} elements")
        return result
