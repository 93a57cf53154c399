import pytest

from chromaramp.types.color_types import ColorSpaces, as_triplet_array, is_hue_space
from chromaramp.types.format_type import FormatType, scale_unit
from chromaramp.utils.num_utils import approx_equal, wrap_unit


def test_color_space_navigation_wraps():
    assert ColorSpaces.YUV.next() is ColorSpaces.RGB
    assert ColorSpaces.RGB.prev() is ColorSpaces.YUV
    assert ColorSpaces.LAB.next() is ColorSpaces.FAST_LAB


def test_color_space_resolve():
    assert ColorSpaces.resolve("luv") is ColorSpaces.LUV
    assert ColorSpaces.resolve("HSB_SHORT") is ColorSpaces.HSB_SHORT
    assert ColorSpaces.resolve(ColorSpaces.TEMP) is ColorSpaces.TEMP
    with pytest.raises(ValueError):
        ColorSpaces.resolve("hsl")


def test_hue_spaces():
    assert is_hue_space(ColorSpaces.LCH)
    assert not is_hue_space(ColorSpaces.LAB)


def test_triplet_validation():
    assert as_triplet_array((1, 2, 3)).dtype.kind == "f"
    with pytest.raises(ValueError):
        as_triplet_array(5.0)
    with pytest.raises(ValueError):
        as_triplet_array([[1.0, 2.0]])


def test_scale_unit():
    assert scale_unit(0.5, FormatType.INT) == 128
    assert scale_unit(0.5, FormatType.FLOAT) == 0.5
    assert scale_unit(0.5, FormatType.PERCENTAGE) == 50.0


@pytest.mark.parametrize("value, expected", [
    (0.0, 0.0),
    (1.0, 1.0),
    (0.25, 0.25),
    (1.25, 0.25),
    (-0.25, 0.75),
    (-3.5, 0.5),
    (7.0, 0.0),
])
def test_wrap_unit(value, expected):
    assert wrap_unit(value) == pytest.approx(expected)


def test_approx_equal():
    assert approx_equal(0.5, 0.5009, 1e-3)
    assert not approx_equal(0.5, 0.502, 1e-3)
