"""
Grid layout - a fixed rows x columns arrangement of equal cells.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from diagram.core.config import GridConfig
from diagram.core.dimension import Dimension
from diagram.core.geometry import Box, Point, Size
from diagram.element import Element
from diagram.layouts.freeform import Freeform
from diagram.layouts.layout import Layout


class GridCell(Freeform):
    """One grid cell: a freeform container that knows its row and column."""

    def __init__(self, row: int, column: int, config=None, **options):
        super().__init__(config, **options)
        self.row = row
        self.column = column

    def __repr__(self) -> str:
        return f"GridCell({self.row}, {self.column})"


class Grid(Layout):
    """
    Grid layout.

    Cells are cell_width x cell_height border boxes separated by gutter.
    The grid's own size is always derived from the cell geometry plus its
    box model. Content goes into cells, never into the grid itself.

    Usage:
        grid = Grid(rows=2, columns=3, cell_width=100, cell_height=80, gutter=10)
        grid.get_cell(1, 2).add_element(Circle(radius=20))
    """

    config_type = GridConfig

    def __init__(self, config=None, **options):
        super().__init__(config, **options)
        self.rows: int = self.config.rows
        self.columns: int = self.config.columns
        self.cell_width: float = self.config.cell_width
        self.cell_height: float = self.config.cell_height
        self.gutter: float = self.config.gutter

        self._cells: List[List[GridCell]] = []
        for row in range(self.rows):
            cells = []
            for column in range(self.columns):
                cell = GridCell(
                    row,
                    column,
                    width=self.cell_width,
                    height=self.cell_height,
                    box_model=self.config.cell_box_model,
                )
                Layout.add_element(self, cell)
                cells.append(cell)
            self._cells.append(cells)

    def _grid_content_size(self) -> Size:
        config = self.config
        return Size(
            config.columns * config.cell_width + (config.columns - 1) * config.gutter,
            config.rows * config.cell_height + (config.rows - 1) * config.gutter,
        )

    def _dimensions(self) -> Tuple[Dimension, Dimension]:
        size = self.box_model.border_size(self._grid_content_size())
        return Dimension.fixed(size.width), Dimension.fixed(size.height)

    def set_box_model(self, **box_model) -> 'Grid':
        """Replace the box model and re-derive the grid's border size."""
        super().set_box_model(**box_model)
        self.width_dimension, self.height_dimension = self._dimensions()
        return self

    # Cell access

    def get_cell(self, row: int, column: int) -> GridCell:
        """
        Get a cell by row and column (0-indexed).

        Raises:
            IndexError: If the cell is out of bounds
        """
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"Cell ({row}, {column}) is out of bounds")
        return self._cells[row][column]

    def get_row(self, row: int) -> List[GridCell]:
        """All cells of a row, left to right."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} is out of bounds")
        return list(self._cells[row])

    def get_column(self, column: int) -> List[GridCell]:
        """All cells of a column, top to bottom."""
        if not 0 <= column < self.columns:
            raise IndexError(f"Column {column} is out of bounds")
        return [cells[column] for cells in self._cells]

    @property
    def cells(self) -> List[List[GridCell]]:
        return [list(cells) for cells in self._cells]

    def add_element(self, element: Element) -> 'Grid':
        raise TypeError("Add content to a cell: grid.get_cell(row, column).add_element(...)")

    def remove_element(self, element: Element) -> bool:
        raise TypeError("Grid cells cannot be removed")

    def clear(self) -> None:
        raise TypeError("Grid cells cannot be removed")

    # Layout contract

    def size_dependencies(self):
        return []

    def arrange_children(self, content_size: Size) -> Dict[int, Point]:
        """Cell (row, column) sits at column * (cell_width + gutter), row * (cell_height + gutter)."""
        step_x = self.cell_width + self.gutter
        step_y = self.cell_height + self.gutter
        return {
            id(cell): Point(cell.column * step_x, cell.row * step_y)
            for cell in self.in_flow_children
            if isinstance(cell, GridCell)
        }

    def _measure(self) -> Optional[Box]:
        return Box.from_origin(Point(), self._grid_content_size())
