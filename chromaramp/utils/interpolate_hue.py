"""
Hue interpolation utilities.

Hue channels are angles, so blending two hues must follow an arc around the
color wheel instead of the numeric range: 350° -> 10° is a 20° step, not a
340° sweep through every other hue.
"""

from enum import IntEnum
from typing import Union

import numpy as np
from numpy.typing import NDArray

from ..types.format_type import HUE_360

HueValue = Union[float, NDArray]


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (≤180° arc) - most common
    LONGEST:  Longest path (≥180° arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def hue_delta(h0: HueValue, h1: HueValue, mode: HueMode = HueMode.SHORTEST, period: float = HUE_360) -> HueValue:
    """
    Signed angular distance to travel from ``h0`` to ``h1`` under ``mode``.

    Identical hues always give a zero delta, whatever the mode.
    """
    delta = np.mod(np.subtract(h1, h0), period)
    half = period / 2.0
    if mode == HueMode.CW:
        d = delta
    elif mode == HueMode.CCW:
        d = np.where(delta > 0.0, delta - period, 0.0)
    elif mode == HueMode.SHORTEST:
        d = np.where(delta <= half, delta, delta - period)
    elif mode == HueMode.LONGEST:
        d = np.where(delta == 0.0, 0.0, np.where(delta <= half, delta - period, delta))
    else:
        raise ValueError(f"Invalid hue mode: {mode}")
    if np.ndim(d) == 0:
        return float(d)
    return d


def hue_lerp(
    h0: HueValue,
    h1: HueValue,
    u: HueValue,
    mode: HueMode = HueMode.SHORTEST,
    period: float = HUE_360,
) -> HueValue:
    """
    Interpolate hue values with wrapping support.

    Args:
        h0: Start hue(s) in [0, period)
        h1: End hue(s) in [0, period)
        u: Interpolation coefficients (0 -> h0, 1 -> h1)
        mode: Which arc to follow
        period: Length of a full turn (360 for degrees)

    Returns:
        Interpolated hue values in [0, period)
    """
    d = hue_delta(h0, h1, mode, period)
    result = np.mod(np.add(h0, np.multiply(u, d)), period)
    if np.ndim(result) == 0:
        return float(result)
    return result
