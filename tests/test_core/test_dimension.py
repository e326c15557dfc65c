import pytest
from diagram.core.dimension import Dimension, DimensionKind


@pytest.mark.parametrize("raw, kind, value", [
    (120, DimensionKind.FIXED, 120.0),
    ("120px", DimensionKind.FIXED, 120.0),
    ("2rem", DimensionKind.FIXED, 32.0),
    ("50%", DimensionKind.PERCENT, 50.0),
    ("auto", DimensionKind.AUTO, 0.0),
    (None, DimensionKind.AUTO, 0.0),
])
def test_parse(raw, kind, value):
    dimension = Dimension.parse(raw)
    assert dimension.kind is kind
    assert dimension.value == pytest.approx(value)


@pytest.mark.parametrize("raw", [-1, "-5px", "-10%", "x%", True, [1]])
def test_parse_rejects(raw):
    with pytest.raises(ValueError):
        Dimension.parse(raw)


def test_percent_of_reference():
    assert Dimension.parse("25%").of(400) == 100
    assert Dimension.fixed(30).of(400) == 30


def test_str():
    assert str(Dimension.auto()) == "auto"
    assert str(Dimension.percent(50)) == "50%"
    assert str(Dimension.fixed(12.5)) == "12.5"


def test_parse_is_idempotent():
    dimension = Dimension.percent(10)
    assert Dimension.parse(dimension) is dimension
