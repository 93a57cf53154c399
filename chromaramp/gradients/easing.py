"""
Step-warping functions applied to the local fraction between two stops.

Every function maps ``t`` in [0, 1] to a warped step, accepting a float or
a numpy array. All satisfy f(0) = 0 and f(1) = 1 except:

- SINE returns the quick-sine approximation of ``sin(t)`` as-is, so
  f(1) = sin(1) ~ 0.841.
- PARABOLA peaks at t = 0.5 and returns to 0 at t = 1.
- EXPIMPULSE peaks at t = 0.5 and ends at 2 / e ~ 0.736.

EXPONENTIAL, GAIN1, GAIN2 and EXPIMPULSE go through the fast-pow tables and
inherit their error (e.g. EXPONENTIAL(0) is about -1.7e-4, not 0).
"""

from __future__ import annotations

from typing import Dict, Union

import numpy as np
from numpy.typing import NDArray

from ..fastmath import BASE_TWO, fast_exp, fast_pow, fast_pow_constant_base, sin_quick
from ..types.transform_types import Easing, UnitTransform

Step = Union[float, NDArray]

_GAIN1_EXPONENT = 0.3
_GAIN2_EXPONENT = 3.3333

_BOUNCE_SCALE = 7.5625
_BOUNCE_DIVISOR = 2.75


def _scalar_or_array(result) -> Step:
    if np.ndim(result) == 0:
        return float(result)
    return result


def linear(t: Step) -> Step:
    return t


def identity(t: Step) -> Step:
    return t * t * (2.0 - t)


def smooth_step(t: Step) -> Step:
    return t * t * (3.0 - 2.0 * t)


def smoother_step(t: Step) -> Step:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def exponential(t: Step) -> Step:
    t = np.asarray(t, dtype=np.float64)
    return _scalar_or_array(np.where(t == 1.0, 1.0, 1.0 - fast_pow_constant_base(BASE_TWO, -10.0 * t)))


def cubic(t: Step) -> Step:
    return t * t * t


def bounce(t: Step) -> Step:
    """Classic four-bounce ease-out: one parabola per segment, peaks at 1."""
    t = np.asarray(t, dtype=np.float64)
    d = _BOUNCE_DIVISOR
    result = np.select(
        [t < 1.0 / d, t < 2.0 / d, t < 2.5 / d],
        [
            _BOUNCE_SCALE * t * t,
            _BOUNCE_SCALE * (t - 1.5 / d) ** 2 + 0.75,
            _BOUNCE_SCALE * (t - 2.25 / d) ** 2 + 0.9375,
        ],
        default=_BOUNCE_SCALE * (t - 2.625 / d) ** 2 + 0.984375,
    )
    return _scalar_or_array(result)


def circular(t: Step) -> Step:
    return _scalar_or_array(np.sqrt(np.maximum((2.0 - t) * t, 0.0)))


def sine(t: Step) -> Step:
    return sin_quick(t)


def parabola(t: Step) -> Step:
    return _scalar_or_array(np.sqrt(np.maximum(4.0 * t * (1.0 - t), 0.0)))


def _gain(t: Step, exponent: float) -> Step:
    t = np.asarray(t, dtype=np.float64)
    low = 0.5 * np.asarray(fast_pow(np.maximum(2.0 * t, 0.0), exponent))
    high = 1.0 - 0.5 * np.asarray(fast_pow(np.maximum(2.0 * (1.0 - t), 0.0), exponent))
    return _scalar_or_array(np.where(t < 0.5, low, high))


def gain1(t: Step) -> Step:
    return _gain(t, _GAIN1_EXPONENT)


def gain2(t: Step) -> Step:
    return _gain(t, _GAIN2_EXPONENT)


def exp_impulse(t: Step) -> Step:
    return _scalar_or_array(2.0 * np.asarray(t) * np.asarray(fast_exp(np.subtract(1.0, np.multiply(2.0, t)))))


EASING_FUNCTIONS: Dict[Easing, UnitTransform] = {
    Easing.LINEAR: linear,
    Easing.IDENTITY: identity,
    Easing.SMOOTH_STEP: smooth_step,
    Easing.SMOOTHER_STEP: smoother_step,
    Easing.EXPONENTIAL: exponential,
    Easing.CUBIC: cubic,
    Easing.BOUNCE: bounce,
    Easing.CIRCULAR: circular,
    Easing.SINE: sine,
    Easing.PARABOLA: parabola,
    Easing.GAIN1: gain1,
    Easing.GAIN2: gain2,
    Easing.EXPIMPULSE: exp_impulse,
}


def get_easing_function(easing: Union[Easing, str]) -> UnitTransform:
    return EASING_FUNCTIONS[Easing.resolve(easing)]


def ease(easing: Union[Easing, str], t: Step) -> Step:
    """Warp ``t`` with the named easing."""
    return get_easing_function(easing)(t)
