"""
RYB (red, yellow, blue) painter's wheel, after Sugita and Takahashi (2015).

Whiteness is removed, yellow is split out of red + green (or folded back
in), and the result is rescaled so the brightest channel is preserved.
"""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array


def _rescale(reference: NDArray, channels: NDArray) -> NDArray:
    peak = np.max(channels, axis=-1)
    safe_peak = np.where(peak > 0.0, peak, 1.0)
    return np.where(peak > 0.0, np.max(reference, axis=-1) / safe_peak, 1.0)


def rgb_to_ryb(rgb: TripletLike) -> NDArray:
    rgb = as_triplet_array(rgb)
    white = np.min(rgb, axis=-1)
    stripped = rgb - white[..., None]
    r, g, b = stripped[..., 0], stripped[..., 1], stripped[..., 2]

    y = np.minimum(r, g)
    r = r - y
    g = g - y

    both = (b > 0.0) & (g > 0.0)
    b = np.where(both, b / 2.0, b)
    g = np.where(both, g / 2.0, g)

    y = y + g
    b = b + g

    ryb = np.stack([r, y, b], axis=-1)
    n = _rescale(stripped, ryb)
    return ryb * n[..., None] + white[..., None]


def ryb_to_rgb(ryb: TripletLike) -> NDArray:
    ryb = as_triplet_array(ryb)
    white = np.min(ryb, axis=-1)
    stripped = ryb - white[..., None]
    r, y, b = stripped[..., 0], stripped[..., 1], stripped[..., 2]

    g = np.minimum(y, b)
    y = y - g
    b = b - g

    both = (b > 0.0) & (g > 0.0)
    b = np.where(both, b * 2.0, b)
    g = np.where(both, g * 2.0, g)

    r = r + y
    g = g + y

    rgb = np.stack([r, g, b], axis=-1)
    n = _rescale(stripped, rgb)
    return rgb * n[..., None] + white[..., None]
