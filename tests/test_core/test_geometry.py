import pytest
from diagram.core.alignment import Alignment
from diagram.core.geometry import Anchor, Box, Point, Size, anchors_of


@pytest.mark.parametrize("box", [
    Box(0, 0, 10, 20),
    Box(-5, 7.5, 33, 0),
    Box(100, 200, 0.5, 1000),
])
def test_anchor_identities(box):
    anchors = anchors_of(box)
    top_left = anchors[Anchor.TOP_LEFT]

    assert top_left.x + box.width == anchors[Anchor.TOP_RIGHT].x
    assert top_left.y + box.height == anchors[Anchor.BOTTOM_LEFT].y
    assert anchors[Anchor.CENTER] == top_left.midpoint(anchors[Anchor.BOTTOM_RIGHT])
    assert len(anchors) == 9


def test_edge_midpoints():
    box = Box(0, 0, 10, 20)
    assert box.anchor("top_center") == Point(5, 0)
    assert box.anchor("bottom_center") == Point(5, 20)
    assert box.anchor("center_left") == Point(0, 10)
    assert box.anchor("center_right") == Point(10, 10)


@pytest.mark.parametrize("name, expected", [
    ("topLeft", Anchor.TOP_LEFT),
    ("bottomRight", Anchor.BOTTOM_RIGHT),
    ("centerTop", Anchor.TOP_CENTER),
    ("centerBottom", Anchor.BOTTOM_CENTER),
    ("TOP_RIGHT", Anchor.TOP_RIGHT),
    ("center-left", Anchor.CENTER_LEFT),
    ("center", Anchor.CENTER),
])
def test_anchor_parse(name, expected):
    assert Anchor.parse(name) is expected


def test_anchor_parse_unknown():
    with pytest.raises(ValueError):
        Anchor.parse("north")


def test_box_union():
    union = Box.union([Box(0, 0, 10, 10), Box(-5, 20, 10, 5)])
    assert union == Box(-5, 0, 15, 25)
    assert Box.union([]) is None


def test_box_inset_clamps():
    assert Box(0, 0, 10, 10).inset(8, 8, 8, 8) == Box(8, 8, 0, 0)


def test_box_relations():
    outer = Box(0, 0, 100, 100)
    assert outer.contains(0, 0)
    assert not outer.contains(100, 50)
    assert outer.contains_box(Box(10, 10, 90, 90))
    assert outer.intersects(Box(99, 99, 5, 5))
    assert not outer.intersects(Box(100, 0, 5, 5))


def test_point_arithmetic():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
    assert Point.coerce((3, 4)) == Point(3.0, 4.0)
    assert Box.from_origin(Point(1, 2), Size(3, 4)).size == Size(3, 4)


def test_alignment_parse():
    assert Alignment.parse("left") is Alignment.START
    assert Alignment.parse("middle") is Alignment.CENTER
    assert Alignment.parse("bottom") is Alignment.END
    assert Alignment.END.factor == 1.0
    with pytest.raises(ValueError):
        Alignment.parse("stretch")
