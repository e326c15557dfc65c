"""
Columns layout - a horizontal run of vertical stacks.
"""

from __future__ import annotations

from typing import List, Tuple

from diagram.core.alignment import Alignment, Direction
from diagram.core.config import ColumnsConfig
from diagram.core.dimension import AUTO, Dimension
from diagram.element import Element
from diagram.layouts.stack import Stack
from diagram.layouts.vertical import VStack


class Column(VStack):
    """One column of a Columns layout."""

    def __init__(self, index: int, config=None, **options):
        super().__init__(config, **options)
        self.index = index

    def __repr__(self) -> str:
        return f"Column({self.index})"


class Columns(Stack):
    """
    Columns layout.

    A horizontal stack (spacing = gutter) of `count` columns. Every column
    is a vertical stack of column_width x height with its own box model.
    horizontal_alignment places content across a column, and
    vertical_alignment places the run of content down a column.
    The Columns size follows from its columns, so it is explicit whenever
    the column dimensions are.

    Usage:
        columns = Columns(count=2, column_width=250, height=500, gutter=30)
        columns.get_column(0).add_element(Circle(radius=60))
    """

    config_type = ColumnsConfig

    def __init__(self, config=None, **options):
        super().__init__(config, **options)
        self.count: int = self.config.count

        self._columns: List[Column] = []
        for index in range(self.count):
            column = Column(
                index,
                width=self.config.column_width,
                height=self.config.height,
                box_model=self.config.column_box_model,
                spacing=self.config.spacing,
                alignment=self.config.horizontal_alignment,
                justify=self.config.vertical_alignment,
            )
            Stack.add_element(self, column)
            self._columns.append(column)

    def _configure(self) -> None:
        self.direction = Direction.HORIZONTAL
        self.spacing = self.config.gutter
        self.alignment = self.config.alignment
        self.justify = Alignment.START
        self.spread = False

    def _dimensions(self) -> Tuple[Dimension, Dimension]:
        return AUTO, AUTO

    @property
    def gutter(self) -> float:
        return self.spacing

    def get_column(self, index: int) -> Column:
        """
        Get a column by index (0-indexed).

        Raises:
            IndexError: If the column is out of bounds
        """
        if not 0 <= index < self.count:
            raise IndexError(f"Column {index} is out of bounds")
        return self._columns[index]

    @property
    def columns(self) -> List[Column]:
        return list(self._columns)

    def add_element(self, element: Element) -> 'Columns':
        raise TypeError("Add content to a column: columns.get_column(index).add_element(...)")

    def remove_element(self, element: Element) -> bool:
        raise TypeError("Columns cannot be removed")

    def clear(self) -> None:
        raise TypeError("Columns cannot be removed")
