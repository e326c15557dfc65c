import pytest
from pydantic import ValidationError
from diagram.core.alignment import Alignment, Direction
from diagram.core.config import (
    ArtboardConfig,
    CircleConfig,
    ColumnsConfig,
    ElementConfig,
    GridConfig,
    StackConfig,
)
from diagram.core.dimension import Dimension
from diagram.elements.circle import Circle
from diagram.layouts.stack import Stack


def test_element_defaults_are_auto():
    config = ElementConfig()
    assert config.width.is_auto
    assert config.height.is_auto
    assert config.z_index is None


def test_dimensions_are_parsed():
    config = ElementConfig(width="50%", height=30)
    assert config.width == Dimension.percent(50)
    assert config.height == Dimension.fixed(30)


def test_unknown_key_rejected():
    with pytest.raises(ValidationError):
        ElementConfig(widht=10)
    with pytest.raises(ValidationError):
        Stack(spacing=4, gap=3)


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        ElementConfig(width="-3px")
    with pytest.raises(ValidationError):
        StackConfig(spacing=-1)
    with pytest.raises(ValidationError):
        CircleConfig(radius=0)
    with pytest.raises(ValidationError):
        GridConfig(rows=0, columns=1, cell_width=10, cell_height=10)


def test_stack_config_aliases():
    config = StackConfig(direction="horizontal", alignment="middle", justify="right")
    assert config.direction is Direction.HORIZONTAL
    assert config.alignment is Alignment.CENTER
    assert config.justify is Alignment.END


def test_columns_reject_percentages():
    with pytest.raises(ValidationError):
        ColumnsConfig(count=2, column_width="50%")


def test_artboard_defaults():
    config = ArtboardConfig()
    assert config.width == Dimension.fixed(800)
    assert config.height == Dimension.fixed(600)
    assert config.settings.strict_auto_size is False


def test_element_accepts_config_or_options():
    from_config = Circle(CircleConfig(radius=5, name="dot"))
    from_options = Circle(radius=5, name="dot")
    assert from_config.radius == from_options.radius == 5
    assert from_config.name == "dot"


def test_element_rejects_wrong_config_type():
    with pytest.raises(TypeError):
        Circle(StackConfig())


def test_assignment_is_validated():
    circle = Circle(radius=5)
    with pytest.raises(ValidationError):
        circle.set_radius(-2)
