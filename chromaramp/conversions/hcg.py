"""
HCG (hue, chroma, grayness). Hue in degrees, chroma and gray in [0, 1].

Grayness is the position of the color between black and white once the
pure hue has been removed.
"""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from ..types.format_type import HUE_360


def rgb_to_hcg(rgb: TripletLike) -> NDArray:
    rgb = as_triplet_array(rgb)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    chroma = mx - mn
    has_chroma = chroma > 0.0
    safe_chroma = np.where(has_chroma, chroma, 1.0)

    grayscale = np.where(chroma < 1.0, mn / np.where(chroma < 1.0, 1.0 - chroma, 1.0), 0.0)

    hue = np.select(
        [~has_chroma, mx == r, mx == g],
        [0.0, np.mod((g - b) / safe_chroma, 6.0), 2.0 + (b - r) / safe_chroma],
        default=4.0 + (r - g) / safe_chroma,
    )
    return np.stack([np.mod(hue * 60.0, HUE_360), chroma, grayscale], axis=-1)


def hcg_to_rgb(hcg: TripletLike) -> NDArray:
    hcg = as_triplet_array(hcg)
    h = np.mod(hcg[..., 0], HUE_360) / HUE_360
    c, g = hcg[..., 1], hcg[..., 2]

    hi = np.mod(h, 1.0) * 6.0
    sector = np.floor(hi).astype(np.int64) % 6
    v = hi - np.floor(hi)
    w = 1.0 - v

    conditions = [sector == i for i in range(6)]
    pr = np.select(conditions, [1.0, w, 0.0, 0.0, v, 1.0])
    pg = np.select(conditions, [v, 1.0, 1.0, w, 0.0, 0.0])
    pb = np.select(conditions, [0.0, 0.0, v, 1.0, 1.0, w])

    mg = (1.0 - c) * g
    return np.stack([c * pr + mg, c * pg + mg, c * pb + mg], axis=-1)
