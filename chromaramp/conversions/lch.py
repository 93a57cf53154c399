"""CIE LCh(ab): L*a*b* in polar form. Hue is the last channel, in degrees [0, 360)."""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from ..types.format_type import HUE_360
from .lab import lab_to_rgb, rgb_to_lab


def lab_to_lch(lab: TripletLike) -> NDArray:
    lab = as_triplet_array(lab)
    C = np.hypot(lab[..., 1], lab[..., 2])
    H = np.mod(np.degrees(np.arctan2(lab[..., 2], lab[..., 1])), HUE_360)
    return np.stack([lab[..., 0], C, H], axis=-1)


def lch_to_lab(lch: TripletLike) -> NDArray:
    lch = as_triplet_array(lch)
    h = np.radians(lch[..., 2])
    return np.stack([lch[..., 0], lch[..., 1] * np.cos(h), lch[..., 1] * np.sin(h)], axis=-1)


def rgb_to_lch(rgb: TripletLike) -> NDArray:
    return lab_to_lch(rgb_to_lab(rgb))


def lch_to_rgb(lch: TripletLike) -> NDArray:
    return lab_to_rgb(lch_to_lab(lch))
