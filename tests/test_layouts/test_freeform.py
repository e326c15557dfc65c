from diagram.core.geometry import Box, Point, Size
from diagram.elements.rectangle import Rectangle
from diagram.layouts.freeform import Freeform


def square(side, **options):
    return Rectangle(width=side, height=side, **options)


def test_unpositioned_children_sit_at_content_origin(artboard):
    group = Freeform(width=200, height=200, box_model={"padding": 10})
    a = square(20)
    b = square(20, box_model={"margin": 5})
    group.add_elements(a, b)
    artboard.add_element(group)

    assert a.top_left == Point(10, 10)
    assert b.top_left == Point(15, 15)


def test_auto_freeform_union_law(artboard):
    group = Freeform()
    a = square(10)
    b = square(10)
    group.add_elements(a, b)
    artboard.add_element(group)
    b.position(a.anchor("top_left"), x=-20, y=30)

    # width == max(x + w) - min(x), and the union starts at the content origin
    assert group.size == Size(30, 40)
    assert a.top_left == Point(20, 0)
    assert b.top_left == Point(0, 30)
    assert group.finalize_freeform_layout() == Box(0, 0, 30, 40)


def test_union_includes_margin_boxes(artboard):
    group = Freeform(box_model={"padding": 2})
    a = square(10, box_model={"margin": 3})
    group.add_element(a)
    artboard.add_element(group)

    assert group.size == Size(20, 20)
    assert a.top_left == Point(5, 5)


def test_fixed_axis_is_not_normalized(artboard):
    group = Freeform(height=100)
    a, b = square(10), square(10)
    group.add_elements(a, b)
    artboard.add_element(group)
    b.position(a.anchor("bottom_right"), x=-40, y=-30)

    assert group.size == Size(40, 100)
    # x shifted by the union min, y untouched
    assert a.top_left == Point(30, 0)
    assert b.top_left == Point(0, -20)


def test_sibling_chain_in_nested_auto_freeform(artboard):
    outer = Freeform()
    inner = Freeform()
    a, b = square(10), square(10)
    inner.add_element(a)
    outer.add_elements(inner, b)
    artboard.add_element(outer)
    b.position(a.anchor("center_right"), anchor="center_left", x=5)

    assert b.top_left == Point(15, 0)
    assert outer.size == Size(25, 10)


def test_empty_auto_freeform_has_only_insets(artboard):
    group = Freeform(box_model={"border": 1})
    artboard.add_element(group)
    assert group.size == Size(2, 2)
    assert group.finalize_freeform_layout() == Box()


def test_child_positioned_against_auto_parent_top_left(artboard):
    group = Freeform()
    a, b = square(10), square(10)
    group.add_elements(a, b)
    artboard.add_element(group)
    b.position(group.content_box.anchor("top_left"), x=30)

    assert group.size == Size(40, 10)
    assert a.top_left == Point(0, 0)
    assert b.top_left == Point(30, 0)


def test_auto_parent_top_left_respects_insets(artboard):
    group = Freeform(box_model={"padding": 4})
    a, b = square(10), square(10)
    group.add_elements(a, b)
    artboard.add_element(group)
    group.position((100, 100))
    b.position(group.content_box.anchor("top_left"), x=30)

    assert group.size == Size(48, 18)
    assert b.top_left == Point(134, 104)
    assert group.finalize_freeform_layout() == Box(0, 0, 40, 10)
