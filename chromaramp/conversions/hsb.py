"""
HSB (a.k.a. HSV). Hue in degrees [0, 360), saturation and brightness in [0, 1].

Achromatic colors get hue 0.
"""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from ..types.format_type import HUE_360


def rgb_to_hsb(rgb: TripletLike) -> NDArray:
    rgb = as_triplet_array(rgb)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    delta = mx - mn
    safe_delta = np.where(delta > 0.0, delta, 1.0)

    h = np.select(
        [delta == 0.0, mx == r, mx == g],
        [0.0, np.mod((g - b) / safe_delta, 6.0), (b - r) / safe_delta + 2.0],
        default=(r - g) / safe_delta + 4.0,
    )
    h = np.mod(h * 60.0, HUE_360)
    s = np.where(mx > 0.0, delta / np.where(mx > 0.0, mx, 1.0), 0.0)
    return np.stack([h, s, mx], axis=-1)


def hsb_to_rgb(hsb: TripletLike) -> NDArray:
    hsb = as_triplet_array(hsb)
    h, s, v = hsb[..., 0], hsb[..., 1], hsb[..., 2]
    h6 = np.mod(h, HUE_360) / 60.0
    sector = np.floor(h6)
    f = h6 - sector
    sector = sector.astype(np.int64) % 6

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])
    return np.stack([r, g, b], axis=-1)
