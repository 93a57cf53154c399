import numpy as np
import pytest

from chromaramp.conversions import rgb_to_lab, rgb_to_luv
from chromaramp.gradients import ColorStop
from chromaramp.samples.colors import GREEN, HALF_TRANSPARENT_RED, RED
from chromaramp.types.color_types import ColorSpaces


def test_alpha_accessors():
    stop = ColorStop(HALF_TRANSPARENT_RED, 0.5)
    assert stop.alpha == 0x80
    assert stop.unit_alpha == pytest.approx(128 / 255)
    np.testing.assert_array_equal(stop.rgb, [1.0, 0.0, 0.0])


def test_components_are_cached_per_space():
    stop = ColorStop(RED, 0.0)
    lab = stop.components(ColorSpaces.LAB)
    assert stop.components("lab") is lab
    np.testing.assert_allclose(lab, rgb_to_lab([1.0, 0.0, 0.0]))

    luv = stop.components(ColorSpaces.LUV)
    np.testing.assert_allclose(luv, rgb_to_luv([1.0, 0.0, 0.0]))
    assert stop.components(ColorSpaces.LUV) is luv


@pytest.mark.parametrize("space", [ColorSpaces.RGB, ColorSpaces.LAB, ColorSpaces.TEMP])
def test_cached_components_are_read_only(space):
    stop = ColorStop(RED, 0.0)
    components = stop.components(space)
    with pytest.raises(ValueError):
        components[0] = 0.5
    np.testing.assert_array_equal(stop.components(space), components)


def test_set_color_invalidates_cache():
    stop = ColorStop(RED, 0.0)
    before = stop.components(ColorSpaces.RGB)
    stop.set_color(GREEN)
    np.testing.assert_array_equal(stop.components(ColorSpaces.RGB), [0.0, 1.0, 0.0])
    np.testing.assert_array_equal(before, [1.0, 0.0, 0.0])


def test_from_components():
    lab = rgb_to_lab([1.0, 0.0, 0.0])
    stop = ColorStop.from_components(ColorSpaces.LAB, lab, 0.3)
    assert stop.color == RED
    assert stop.position == 0.3
    translucent = ColorStop.from_components("hsb_short", [120.0, 1.0, 1.0], 0.6, alpha=0x80)
    assert translucent.color == 0x8000FF00


def test_ordering():
    stops = [ColorStop(RED, 0.8), ColorStop(RED, 0.1), ColorStop(RED, 0.5)]
    assert [s.position for s in sorted(stops)] == [0.1, 0.5, 0.8]


def test_approx_position():
    a = ColorStop(RED, 0.5)
    assert a.approx_position(ColorStop(GREEN, 0.5005))
    assert not a.approx_position(ColorStop(GREEN, 0.502))
    assert a.approx_position(ColorStop(GREEN, 0.502), tolerance=0.01)


def test_set_position_resets_original():
    stop = ColorStop(RED, 0.2)
    stop.position = 0.7
    assert stop.original_position == 0.2
    stop.set_position(0.4)
    assert stop.original_position == 0.4


def test_mutate_changes_color_keeps_alpha(rng):
    stop = ColorStop(0x80808080, 0.0)
    stop.components(ColorSpaces.RGB)
    stop.mutate(16, rng)
    assert stop.color != 0x80808080
    assert stop.alpha == 0x80
    np.testing.assert_allclose(stop.components(ColorSpaces.RGB), stop.rgb)


def test_copy_is_independent():
    stop = ColorStop(RED, 0.2)
    stop.position = 0.3
    clone = stop.copy()
    clone.set_color(GREEN)
    assert stop.color == RED
    assert clone.position == 0.3
    assert clone.original_position == 0.2
