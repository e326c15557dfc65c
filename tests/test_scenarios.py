"""
End-to-end diagrams built the way callers write them.
"""

import pytest
from diagram.artboard import Artboard
from diagram.builder import DiagramBuilder
from diagram.core.geometry import Point, Size
from diagram.elements.circle import Circle
from diagram.layouts.columns import Columns


def test_two_columns_of_circles():
    artboard = Artboard(width=800, height=600, box_model={"padding": 40})
    columns = Columns(count=2, column_width=250, height=500, gutter=30)
    artboard.add_element(columns)
    columns.position(artboard.content_box.anchor("top_left"))

    first, second = Circle(radius=60), Circle(radius=60)
    columns.get_column(0).add_elements(first, second)
    third = Circle(radius=60)
    columns.get_column(1).add_element(third)

    assert columns.size == Size(530, 500)
    assert columns.top_left == Point(40, 40)
    assert first.center == Point(100, 100)
    assert second.center == Point(100, 220)
    assert second.center.y == first.center.y + 120
    assert columns.get_column(1).top_left == Point(320, 40)
    assert third.center == Point(380, 100)


def test_same_diagram_through_builder(builder):
    columns = builder.columns(count=2, column_width=250, height=500, gutter=30)
    columns.position(builder.artboard.content_box.anchor("top_left"))
    with builder.within(columns.get_column(0)):
        first = builder.circle(radius=60)
        second = builder.circle(radius=60)

    result = builder.layout()
    assert result[first].border.origin == Point(40, 40)
    assert result[second].border.origin == Point(40, 160)


def test_label_next_to_shape(builder):
    box = builder.rectangle(width=120, height=60)
    box.position(builder.artboard.content_box.anchor("center"), anchor="center")
    label = builder.text("Total", font_size=12)
    label.position(box.anchor("center_right"), anchor="center_left", x=8)

    assert box.center == Point(400, 300)
    assert label.center_left.x == 468
    assert label.center_left.y == pytest.approx(300)
