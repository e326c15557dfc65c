import pytest
from diagram.core.geometry import Box, Point, Size
from diagram.elements.circle import Circle
from diagram.elements.text import ApproximateTextMeasurer, Text, TextMeasurer, TextMetrics


class FixedMeasurer:
    """Every text is 50x10 with one segment."""

    def measure(self, content, font_size, line_height):
        return TextMetrics(50, 10, [Box(0, 0, 50, 10)])


def test_circle_exposes_radius():
    circle = Circle(radius=7)
    assert circle.radius == 7
    assert circle.diameter == 14
    assert circle.intrinsic_size() == Size(14, 14)


def test_set_radius_resizes(artboard):
    circle = Circle(radius=5)
    artboard.add_element(circle)
    assert circle.size == Size(10, 10)
    circle.set_radius(8)
    assert circle.size == Size(16, 16)


def test_approximate_measurer():
    metrics = ApproximateTextMeasurer().measure("abcd\nab", font_size=10, line_height=1.5)
    assert metrics.width == pytest.approx(24)
    assert metrics.height == pytest.approx(30)
    second = metrics.segments[1]
    assert (second.x, second.y) == (0, 15)
    assert second.width == pytest.approx(12)


def test_measurer_rejects_bad_char_width():
    with pytest.raises(ValueError):
        ApproximateTextMeasurer(char_width=0)


def test_text_is_sized_by_its_measurer(artboard):
    label = Text(content="hello", measurer=FixedMeasurer(), box_model={"padding": 5})
    artboard.add_element(label)
    assert label.size == Size(60, 20)
    assert isinstance(label.measurer, TextMeasurer)


def test_text_absolute_segments(artboard):
    label = Text(content="hi\nthere", font_size=10, line_height=1.0,
                 box_model={"padding": 2})
    artboard.add_element(label)
    label.position((100, 50))

    segments = label.absolute_segments()
    assert len(segments) == 2
    assert segments[0].origin == Point(102, 52)
    assert segments[1].origin == Point(102, 62)


def test_set_content_remeasures(artboard):
    label = Text(content="ab", font_size=10)
    artboard.add_element(label)
    width = label.width
    label.set_content("abcd")
    assert label.width == pytest.approx(width * 2)
