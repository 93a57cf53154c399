import numpy as np
import pytest

from chromaramp.conversions import from_rgb, get_ops, kelvin_to_rgb, rgb_to_kelvin, to_rgb
from chromaramp.types.color_types import ColorSpaces

exact_tolerance = 1e-6
fast_tolerance = 5e-4
very_fast_tolerance = 0.05

EXACT_SPACES = [s for s in ColorSpaces if get_ops(s).exact and get_ops(s).lossless]


@pytest.mark.parametrize("space", EXACT_SPACES)
def test_round_trip_exact(space, rgb_samples):
    native = from_rgb(rgb_samples, space)
    np.testing.assert_allclose(to_rgb(native, space), rgb_samples, rtol=0, atol=exact_tolerance)


@pytest.mark.parametrize("space", EXACT_SPACES)
def test_round_trip_single_triplet(space):
    rgb = np.array([0.2, 0.6, 0.9])
    back = to_rgb(from_rgb(rgb, space), space)
    assert back.shape == (3,)
    np.testing.assert_allclose(back, rgb, rtol=0, atol=exact_tolerance)


@pytest.mark.parametrize("space, tolerance", [
    (ColorSpaces.FAST_LAB, fast_tolerance),
    (ColorSpaces.FAST_LUV, fast_tolerance),
    (ColorSpaces.VERY_FAST_LAB, very_fast_tolerance),
])
def test_round_trip_quick(space, tolerance, rgb_samples):
    native = from_rgb(rgb_samples, space)
    np.testing.assert_allclose(to_rgb(native, space), rgb_samples, rtol=0, atol=tolerance)


def test_quick_spaces_share_forward_conversion(rgb_samples):
    lab = from_rgb(rgb_samples, ColorSpaces.LAB)
    np.testing.assert_array_equal(from_rgb(rgb_samples, ColorSpaces.FAST_LAB), lab)
    np.testing.assert_array_equal(from_rgb(rgb_samples, ColorSpaces.VERY_FAST_LAB), lab)
    np.testing.assert_array_equal(
        from_rgb(rgb_samples, ColorSpaces.FAST_LUV), from_rgb(rgb_samples, ColorSpaces.LUV)
    )


@pytest.mark.parametrize("kelvin", [2500.0, 3000.0, 5000.0, 10000.0, 20000.0, 35000.0])
def test_temperature_round_trip_on_black_body_curve(kelvin):
    rgb = kelvin_to_rgb(kelvin)
    assert rgb_to_kelvin(rgb) == pytest.approx(kelvin, rel=1e-3)
    native = from_rgb(rgb, ColorSpaces.TEMP)
    np.testing.assert_allclose(to_rgb(native, ColorSpaces.TEMP), rgb, atol=1e-3)


def test_kelvin_search_range_is_configurable():
    rgb = kelvin_to_rgb(20000.0)
    assert rgb_to_kelvin(rgb, kelvin_max=10000.0) == pytest.approx(10000.0, rel=1e-3)
    coarse = rgb_to_kelvin(rgb, iterations=4)
    assert abs(coarse - 20000.0) > abs(rgb_to_kelvin(rgb) - 20000.0)


def test_temperature_native_triplet_is_kelvin_only(rgb_samples):
    native = from_rgb(rgb_samples, ColorSpaces.TEMP)
    assert native.shape == rgb_samples.shape
    assert np.all(native[:, 1:] == 0.0)
    assert np.all((native[:, 0] >= 1000.0) & (native[:, 0] <= 40000.0))


def test_temperature_is_lossy():
    assert not get_ops(ColorSpaces.TEMP).lossless
    magenta = np.array([1.0, 0.0, 1.0])
    assert not np.allclose(to_rgb(from_rgb(magenta, "temp"), "temp"), magenta, atol=0.05)
