import numpy as np
import pytest

from chromaramp.conversions import (
    COLOR_SPACE_OPS,
    convert,
    from_rgb,
    interpolate,
    lab_to_rgb,
    rgb_to_lab,
    rgb_to_luv,
    to_rgb,
)
from chromaramp.types.color_types import HUE_SPACES, ColorSpaces
from chromaramp.utils.interpolate_hue import HueMode


def test_every_space_has_operations():
    assert set(COLOR_SPACE_OPS) == set(ColorSpaces)


def test_hue_channels():
    hue_spaces = {s for s, ops in COLOR_SPACE_OPS.items() if ops.hue_channel is not None}
    assert hue_spaces == HUE_SPACES
    assert COLOR_SPACE_OPS[ColorSpaces.LCH].hue_channel == 2
    assert COLOR_SPACE_OPS[ColorSpaces.HCG].hue_channel == 0
    assert COLOR_SPACE_OPS[ColorSpaces.HSB_LONG].hue_mode == HueMode.LONGEST


def test_names_resolve():
    rgb = [0.3, 0.5, 0.7]
    np.testing.assert_array_equal(from_rgb(rgb, "lab"), rgb_to_lab(rgb))
    np.testing.assert_array_equal(from_rgb(rgb, "FAST_LAB"), rgb_to_lab(rgb))
    with pytest.raises(ValueError):
        from_rgb(rgb, "cmyk")


def test_rejects_non_triplets():
    with pytest.raises(ValueError):
        from_rgb([1.0, 0.0], ColorSpaces.RGB)
    with pytest.raises(ValueError):
        to_rgb(np.zeros((4, 2)), ColorSpaces.LAB)


@pytest.mark.parametrize("space", list(ColorSpaces))
def test_shape_is_preserved(space, rng):
    rgb = rng.random((4, 5, 3))
    native = from_rgb(rgb, space)
    assert native.shape == (4, 5, 3)
    assert to_rgb(native, space).shape == (4, 5, 3)


def test_rgb_is_a_copy():
    rgb = np.array([0.1, 0.2, 0.3])
    out = from_rgb(rgb, ColorSpaces.RGB)
    out[0] = 1.0
    assert rgb[0] == 0.1


def test_convert_goes_through_rgb():
    lab = rgb_to_lab([0.2, 0.4, 0.8])
    np.testing.assert_allclose(convert(lab, "lab", "luv"), rgb_to_luv(lab_to_rgb(lab)))
    np.testing.assert_allclose(convert(lab, "lab", ColorSpaces.LAB), lab)


def test_interpolate_linear_channels():
    start = np.array([0.0, 10.0, -4.0])
    end = np.array([1.0, 20.0, 4.0])
    np.testing.assert_allclose(interpolate("lab", start, end, 0.0), start)
    np.testing.assert_allclose(interpolate("lab", start, end, 1.0), end)
    np.testing.assert_allclose(interpolate("lab", start, end, 0.25), [0.25, 12.5, -2.0])


def test_interpolate_short_hue_crosses_zero():
    out = interpolate(ColorSpaces.HSB_SHORT, [350.0, 1.0, 1.0], [10.0, 0.0, 0.0], 0.5)
    assert out[0] == pytest.approx(0.0, abs=1e-9)
    np.testing.assert_allclose(out[1:], [0.5, 0.5])


def test_interpolate_long_hue_goes_around():
    out = interpolate(ColorSpaces.HSB_LONG, [350.0, 1.0, 1.0], [10.0, 1.0, 1.0], 0.5)
    assert out[0] == pytest.approx(180.0)


def test_interpolate_lch_hue_is_last_channel():
    out = interpolate(ColorSpaces.LCH, [50.0, 30.0, 300.0], [70.0, 30.0, 20.0], 0.5)
    np.testing.assert_allclose(out, [60.0, 30.0, 340.0])


def test_interpolate_array_of_steps():
    t = np.array([0.0, 0.5, 1.0])
    out = interpolate(ColorSpaces.HCG, [300.0, 0.0, 0.0], [60.0, 1.0, 1.0], t)
    assert out.shape == (3, 3)
    np.testing.assert_allclose(out[:, 0], [300.0, 0.0, 60.0], atol=1e-9)
    np.testing.assert_allclose(out[:, 1], t)
