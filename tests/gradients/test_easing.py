import math

import numpy as np
import pytest

from chromaramp.fastmath import SIN_QUICK_MAX_ERROR
from chromaramp.gradients.easing import EASING_FUNCTIONS, ease, get_easing_function
from chromaramp.types.transform_types import Easing

# easings routed through fast pow / fast exp inherit their error
fast_math_tolerance = 1e-3

ENDPOINT_EXEMPT = {Easing.SINE, Easing.PARABOLA, Easing.EXPIMPULSE}


def test_every_member_has_a_function():
    assert set(EASING_FUNCTIONS) == set(Easing)


@pytest.mark.parametrize("easing", [e for e in Easing if e not in ENDPOINT_EXEMPT])
def test_endpoints(easing):
    assert ease(easing, 0.0) == pytest.approx(0.0, abs=fast_math_tolerance)
    assert ease(easing, 1.0) == pytest.approx(1.0, abs=fast_math_tolerance)


def test_sine_is_raw_sin_of_t():
    assert ease(Easing.SINE, 0.0) == 0.0
    assert ease(Easing.SINE, 1.0) == pytest.approx(math.sin(1.0), abs=SIN_QUICK_MAX_ERROR)
    assert ease(Easing.SINE, 0.5) == pytest.approx(math.sin(0.5), abs=SIN_QUICK_MAX_ERROR)


def test_parabola_returns_to_zero():
    assert ease(Easing.PARABOLA, 0.0) == 0.0
    assert ease(Easing.PARABOLA, 0.5) == pytest.approx(1.0)
    assert ease(Easing.PARABOLA, 1.0) == 0.0


def test_exp_impulse_shape():
    assert ease(Easing.EXPIMPULSE, 0.0) == 0.0
    assert ease(Easing.EXPIMPULSE, 0.5) == pytest.approx(1.0, rel=fast_math_tolerance)
    assert ease(Easing.EXPIMPULSE, 1.0) == pytest.approx(2.0 / math.e, rel=fast_math_tolerance)


@pytest.mark.parametrize("easing, t, expected", [
    (Easing.LINEAR, 0.3, 0.3),
    (Easing.IDENTITY, 0.5, 0.375),
    (Easing.SMOOTH_STEP, 0.25, 0.15625),
    (Easing.SMOOTH_STEP, 0.5, 0.5),
    (Easing.SMOOTHER_STEP, 0.5, 0.5),
    (Easing.CUBIC, 0.5, 0.125),
    (Easing.CIRCULAR, 0.5, math.sqrt(0.75)),
    (Easing.BOUNCE, 0.2, 7.5625 * 0.04),
])
def test_exact_formulas(easing, t, expected):
    assert ease(easing, t) == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("easing, t, expected", [
    (Easing.EXPONENTIAL, 0.5, 1.0 - 2.0 ** -5),
    (Easing.GAIN1, 0.25, 0.5 * 0.5 ** 0.3),
    (Easing.GAIN1, 0.75, 1.0 - 0.5 * 0.5 ** 0.3),
    (Easing.GAIN2, 0.25, 0.5 * 0.5 ** 3.3333),
    (Easing.GAIN2, 0.75, 1.0 - 0.5 * 0.5 ** 3.3333),
])
def test_fast_pow_formulas(easing, t, expected):
    assert ease(easing, t) == pytest.approx(expected, abs=fast_math_tolerance)


def test_bounce_is_continuous_at_breakpoints():
    for breakpoint in (1.0 / 2.75, 2.0 / 2.75, 2.5 / 2.75):
        before = ease(Easing.BOUNCE, breakpoint - 1e-9)
        after = ease(Easing.BOUNCE, breakpoint + 1e-9)
        assert before == pytest.approx(after, abs=1e-6)


@pytest.mark.parametrize("easing", list(Easing))
def test_array_matches_scalar(easing):
    t = np.linspace(0.0, 1.0, 101)
    expected = np.array([ease(easing, float(x)) for x in t])
    np.testing.assert_allclose(ease(easing, t), expected, rtol=0, atol=1e-12)


@pytest.mark.parametrize("easing", [
    Easing.LINEAR, Easing.IDENTITY, Easing.SMOOTH_STEP, Easing.SMOOTHER_STEP,
    Easing.CUBIC, Easing.CIRCULAR, Easing.GAIN1, Easing.GAIN2,
])
def test_monotonic(easing):
    warped = ease(easing, np.linspace(0.0, 1.0, 1001))
    assert np.all(np.diff(warped) >= -1e-12)


def test_resolve_by_name():
    assert get_easing_function("smooth_step") is EASING_FUNCTIONS[Easing.SMOOTH_STEP]
    assert ease("CUBIC", 0.5) == 0.125
    with pytest.raises(ValueError):
        get_easing_function("wobble")


def test_cyclic_navigation():
    assert Easing.EXPIMPULSE.next() is Easing.LINEAR
    assert Easing.LINEAR.prev() is Easing.EXPIMPULSE
    assert Easing.LINEAR.next() is Easing.IDENTITY
