import pytest
from diagram.artboard import Artboard
from diagram.core.errors import UnmeasurableAutoSizeError
from diagram.core.geometry import Point, Size
from diagram.elements.circle import Circle
from diagram.elements.rectangle import Rectangle
from diagram.layouts.freeform import Freeform
from diagram.layouts.vertical import VStack


def test_circle_intrinsic_size():
    circle = Circle(radius=10, box_model={"padding": 2, "border": 1})
    assert circle.size == Size(26, 26)
    assert circle.content_box.box.size == Size(20, 20)


def test_explicit_dimension_overrides_intrinsic():
    circle = Circle(radius=10, width=50)
    assert circle.size == Size(50, 20)


def test_auto_leaf_without_intrinsic_size_is_zero(artboard):
    shape = Rectangle()
    artboard.add_element(shape)
    assert shape.size == Size(0, 0)


def test_strict_mode_rejects_unmeasurable_leaf():
    artboard = Artboard(settings={"strict_auto_size": True})
    artboard.add_element(Rectangle(height=10))
    with pytest.raises(UnmeasurableAutoSizeError):
        artboard.layout()


def test_strict_mode_rejects_empty_auto_container():
    artboard = Artboard(settings={"strict_auto_size": True})
    stack = VStack()
    artboard.add_element(stack)
    with pytest.raises(UnmeasurableAutoSizeError):
        stack.get_absolute_position()


def test_strict_mode_accepts_measurable_tree():
    artboard = Artboard(settings={"strict_auto_size": True})
    stack = VStack()
    stack.add_element(Circle(radius=4))
    artboard.add_element(stack)
    assert stack.size == Size(8, 8)


def test_auto_artboard_wraps_content():
    artboard = Artboard(width="auto", height="auto", box_model={"padding": 10})
    a = Rectangle(width=100, height=50)
    b = Rectangle(width=20, height=20)
    artboard.add_elements(a, b)
    b.position(a.anchor("bottom_right"))

    assert artboard.size == Size(140, 90)
    assert artboard.get_absolute_position() == Point(0, 0)


def test_auto_artboard_normalizes_negative_positions():
    artboard = Artboard(width="auto", height=300)
    a = Rectangle(width=10, height=10)
    b = Rectangle(width=10, height=10)
    artboard.add_elements(a, b)
    b.position(a.anchor("top_left"), anchor="top_right", x=-5)

    assert artboard.width == 25
    assert b.top_left == Point(0, 0)
    assert a.top_left == Point(15, 0)


def test_percentage_of_parent_content(artboard):
    group = Freeform(width=400, height=200, box_model={"padding": 50})
    child = Rectangle(width="50%", height="100%")
    group.add_element(child)
    artboard.add_element(group)

    assert child.size == Size(150, 100)


def test_nested_auto_containers(artboard):
    outer = Freeform(box_model={"padding": 5})
    middle = VStack(spacing=10)
    middle.add_elements(Circle(radius=5), Circle(radius=10))
    outer.add_element(middle)
    artboard.add_element(outer)

    assert middle.size == Size(20, 40)
    assert outer.size == Size(30, 50)
