import pytest
from diagram.core.geometry import Point, Size
from diagram.elements.circle import Circle
from diagram.elements.rectangle import Rectangle
from diagram.layouts.grid import Grid, GridCell


@pytest.fixture
def grid(artboard):
    grid = Grid(rows=2, columns=3, cell_width=100, cell_height=80, gutter=10)
    artboard.add_element(grid)
    return grid


def test_grid_size_is_explicit(grid):
    assert grid.size == Size(3 * 100 + 2 * 10, 2 * 80 + 10)
    assert grid.width_dimension.is_fixed


def test_grid_size_includes_box_model(artboard):
    grid = Grid(rows=1, columns=1, cell_width=50, cell_height=50,
                box_model={"padding": 5, "border": 1})
    artboard.add_element(grid)
    assert grid.size == Size(62, 62)
    assert grid.get_cell(0, 0).top_left == Point(6, 6)


def test_cell_geometry(grid):
    cell = grid.get_cell(1, 2)
    assert isinstance(cell, GridCell)
    assert (cell.row, cell.column) == (1, 2)
    assert cell.absolute_box.origin == Point(220, 90)
    assert cell.size == Size(100, 80)


def test_cell_content_is_freeform(grid):
    cell = grid.get_cell(0, 1)
    dot = Circle(radius=10)
    cell.add_element(dot)
    dot.position(cell.anchor("center"), anchor="center")

    assert dot.center == Point(160, 40)


def test_cell_box_model(artboard):
    grid = Grid(rows=1, columns=2, cell_width=40, cell_height=40,
                cell_box_model={"padding": 4})
    artboard.add_element(grid)
    cell = grid.get_cell(0, 1)
    assert cell.content_box.top_left == Point(44, 4)


def test_rows_and_columns(grid):
    row = grid.get_row(1)
    assert [c.column for c in row] == [0, 1, 2]
    assert all(c.row == 1 for c in row)

    column = grid.get_column(2)
    assert [c.row for c in column] == [0, 1]
    assert len(grid.cells) == 2


@pytest.mark.parametrize("row, column", [(-1, 0), (2, 0), (0, 3)])
def test_get_cell_out_of_bounds(grid, row, column):
    with pytest.raises(IndexError):
        grid.get_cell(row, column)


def test_get_row_and_column_out_of_bounds(grid):
    with pytest.raises(IndexError):
        grid.get_row(2)
    with pytest.raises(IndexError):
        grid.get_column(-1)


def test_grid_rejects_direct_children(grid):
    with pytest.raises(TypeError):
        grid.add_element(Rectangle(width=1, height=1))
    with pytest.raises(TypeError):
        grid.remove_element(grid.get_cell(0, 0))


def test_set_box_model_resizes_grid(artboard):
    grid = Grid(rows=1, columns=2, cell_width=50, cell_height=50, gutter=10)
    artboard.add_element(grid)
    assert grid.size == Size(110, 50)

    grid.set_box_model(padding=10)
    assert grid.size == Size(130, 70)
    cell = grid.get_cell(0, 1)
    assert cell.top_left == Point(70, 10)
    assert cell.bottom_right == grid.content_box.bottom_right
    assert grid.config.box_model.padding == 10
