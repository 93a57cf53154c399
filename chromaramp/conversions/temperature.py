"""
Correlated color temperature.

The native triplet is ``(kelvin, 0, 0)``: a gradient in this space blends
the temperatures of its stops and renders each blend on the black-body
curve. Kelvin -> RGB uses Neil Bartlett's fit of Mitchell Charity's
black-body table; RGB -> kelvin inverts it by bisection on the blue/red
ratio, so colors off the curve do not survive a round trip.
"""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..defaults import KELVIN_MAX, KELVIN_MIN, KELVIN_SEARCH_ITERATIONS
from ..types.color_types import TripletLike, as_triplet_array
from ..utils.default import value_or_default

_TINY = 1e-9


def kelvin_to_rgb(kelvin: ArrayLike) -> NDArray:
    """Black-body color (encoded sRGB, 0..1) for one or many temperatures."""
    t = np.asarray(kelvin, dtype=float) / 100.0
    warm = t < 66.0

    red = np.where(
        warm,
        255.0,
        351.97690566805693 + 0.114206453784165 * (t - 55.0)
        - 40.25366309332127 * np.log(np.maximum(t - 55.0, _TINY)),
    )
    green = np.where(
        warm,
        -155.25485562709179 - 0.44596950469579133 * (t - 2.0)
        + 104.49216199393888 * np.log(np.maximum(t - 2.0, _TINY)),
        325.4494125711974 + 0.07943456536662342 * (t - 50.0)
        - 28.0852963507957 * np.log(np.maximum(t - 50.0, _TINY)),
    )
    blue = np.select(
        [t >= 66.0, t <= 20.0],
        [
            255.0,
            0.0,
        ],
        default=-254.76935184120902 + 0.8274096064007395 * (t - 10.0)
        + 115.67994401066147 * np.log(np.maximum(t - 10.0, _TINY)),
    )
    return np.clip(np.stack([red, green, blue], axis=-1), 0.0, 255.0) / 255.0


def rgb_to_kelvin(
    rgb: TripletLike,
    kelvin_min: Optional[float] = None,
    kelvin_max: Optional[float] = None,
    iterations: Optional[int] = None,
) -> NDArray:
    """
    Temperature whose black-body blue/red ratio matches ``rgb``'s.

    The search range and bisection depth default to ``KELVIN_MIN``,
    ``KELVIN_MAX`` and ``KELVIN_SEARCH_ITERATIONS``; results are confined
    to that range.
    """
    kelvin_min = value_or_default(kelvin_min, KELVIN_MIN)
    kelvin_max = value_or_default(kelvin_max, KELVIN_MAX)
    iterations = value_or_default(iterations, KELVIN_SEARCH_ITERATIONS)
    rgb = as_triplet_array(rgb)
    red = rgb[..., 0]
    target = np.divide(rgb[..., 2], red, out=np.full(red.shape, np.inf), where=red > 0.0)

    lo = np.full(red.shape, float(kelvin_min))
    hi = np.full(red.shape, float(kelvin_max))
    for _ in range(iterations):
        mid = 0.5 * (lo + hi)
        probe = kelvin_to_rgb(mid)
        too_blue = probe[..., 2] / probe[..., 0] >= target
        hi = np.where(too_blue, mid, hi)
        lo = np.where(too_blue, lo, mid)
    return 0.5 * (lo + hi)


def rgb_to_temperature(rgb: TripletLike) -> NDArray:
    kelvin = rgb_to_kelvin(rgb)
    zeros = np.zeros_like(kelvin)
    return np.stack([kelvin, zeros, zeros], axis=-1)


def temperature_to_rgb(temperature: TripletLike) -> NDArray:
    return kelvin_to_rgb(as_triplet_array(temperature)[..., 0])
