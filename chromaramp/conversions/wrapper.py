"""
Dispatch table tying every :class:`ColorSpaces` member to its conversions.

All conversions go through the canonical triplet, encoded sRGB in [0, 1].
Native triplets are only ever produced and consumed by the functions in
this table, so gradients can cache them per stop and interpolate them
without knowing anything about the space.
"""

from typing import Callable, Dict, NamedTuple, Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..types.color_types import ColorSpaces, TripletLike, as_triplet_array
from ..utils.interpolate_hue import HueMode, hue_lerp
from .din99 import din99_to_rgb, rgb_to_din99
from .hcg import hcg_to_rgb, rgb_to_hcg
from .hsb import hsb_to_rgb, rgb_to_hsb
from .hunter_lab import hunter_lab_to_rgb, rgb_to_hunter_lab
from .ictcp import ictcp_to_rgb, rgb_to_ictcp
from .jzazbz import jzazbz_to_rgb, rgb_to_jzazbz
from .lab import fast_lab_to_rgb, lab_to_rgb, rgb_to_lab, very_fast_lab_to_rgb
from .lch import lch_to_rgb, rgb_to_lch
from .luv import fast_luv_to_rgb, luv_to_rgb, rgb_to_luv
from .ryb import rgb_to_ryb, ryb_to_rgb
from .temperature import rgb_to_temperature, temperature_to_rgb
from .xyz import rgb_to_xyz, xyz_to_rgb
from .yuv import rgb_to_yuv, yuv_to_rgb

TripletConverter = Callable[[TripletLike], NDArray]


def _identity(rgb: TripletLike) -> NDArray:
    return np.array(as_triplet_array(rgb), dtype=np.float64)


class ColorSpaceOps(NamedTuple):
    from_rgb: TripletConverter
    to_rgb: TripletConverter
    # channel holding a hue angle in degrees, if any
    hue_channel: Optional[int] = None
    hue_mode: HueMode = HueMode.SHORTEST
    # False when to_rgb trades accuracy for speed
    exact: bool = True
    # False when from_rgb cannot represent every color
    lossless: bool = True


COLOR_SPACE_OPS: Dict[ColorSpaces, ColorSpaceOps] = {
    ColorSpaces.RGB: ColorSpaceOps(_identity, _identity),
    ColorSpaces.RYB: ColorSpaceOps(rgb_to_ryb, ryb_to_rgb),
    ColorSpaces.HSB_SHORT: ColorSpaceOps(rgb_to_hsb, hsb_to_rgb, hue_channel=0, hue_mode=HueMode.SHORTEST),
    ColorSpaces.HSB_LONG: ColorSpaceOps(rgb_to_hsb, hsb_to_rgb, hue_channel=0, hue_mode=HueMode.LONGEST),
    ColorSpaces.XYZ: ColorSpaceOps(rgb_to_xyz, xyz_to_rgb),
    ColorSpaces.LAB: ColorSpaceOps(rgb_to_lab, lab_to_rgb),
    ColorSpaces.FAST_LAB: ColorSpaceOps(rgb_to_lab, fast_lab_to_rgb, exact=False),
    ColorSpaces.VERY_FAST_LAB: ColorSpaceOps(rgb_to_lab, very_fast_lab_to_rgb, exact=False),
    ColorSpaces.HUNTER_LAB: ColorSpaceOps(rgb_to_hunter_lab, hunter_lab_to_rgb),
    ColorSpaces.LUV: ColorSpaceOps(rgb_to_luv, luv_to_rgb),
    ColorSpaces.FAST_LUV: ColorSpaceOps(rgb_to_luv, fast_luv_to_rgb, exact=False),
    ColorSpaces.JZAZBZ: ColorSpaceOps(rgb_to_jzazbz, jzazbz_to_rgb),
    ColorSpaces.LCH: ColorSpaceOps(rgb_to_lch, lch_to_rgb, hue_channel=2),
    ColorSpaces.HCG: ColorSpaceOps(rgb_to_hcg, hcg_to_rgb, hue_channel=0),
    ColorSpaces.DIN99: ColorSpaceOps(rgb_to_din99, din99_to_rgb),
    ColorSpaces.ICTCP: ColorSpaceOps(rgb_to_ictcp, ictcp_to_rgb),
    ColorSpaces.TEMP: ColorSpaceOps(rgb_to_temperature, temperature_to_rgb, lossless=False),
    ColorSpaces.YUV: ColorSpaceOps(rgb_to_yuv, yuv_to_rgb),
}


def get_ops(space: Union[ColorSpaces, str]) -> ColorSpaceOps:
    return COLOR_SPACE_OPS[ColorSpaces.resolve(space)]


def from_rgb(rgb: TripletLike, space: Union[ColorSpaces, str]) -> NDArray:
    """
    Convert canonical triplet(s) to the native representation of ``space``.

    Args:
        rgb: encoded sRGB in [0, 1], shape (3,) or (..., 3)
        space: target space (member or name)

    Returns:
        float ndarray with the same shape as ``rgb``
    """
    return get_ops(space).from_rgb(rgb)


def to_rgb(native: TripletLike, space: Union[ColorSpaces, str]) -> NDArray:
    """Convert native triplet(s) of ``space`` back to canonical triplets (unclamped)."""
    return get_ops(space).to_rgb(native)


def convert(triplet: TripletLike, from_space: Union[ColorSpaces, str], to_space: Union[ColorSpaces, str]) -> NDArray:
    """Convert native triplet(s) between two spaces via the canonical triplet."""
    if ColorSpaces.resolve(from_space) == ColorSpaces.resolve(to_space):
        return _identity(triplet)
    return from_rgb(to_rgb(triplet, from_space), to_space)


def interpolate(
    space: Union[ColorSpaces, str],
    start: TripletLike,
    end: TripletLike,
    t: ArrayLike,
) -> NDArray:
    """
    Blend native triplets of ``space`` channel-wise.

    Hue channels follow the arc chosen by the space's hue mode; every other
    channel is interpolated linearly.

    Args:
        space: space the triplets belong to
        start: native triplet(s) returned at t = 0
        end: native triplet(s) returned at t = 1
        t: scalar, or array broadcasting against the leading axes

    Returns:
        Blended native triplet(s)
    """
    ops = get_ops(space)
    start = as_triplet_array(start)
    end = as_triplet_array(end)
    t = np.asarray(t, dtype=np.float64)
    t_col = t[..., None]

    out = start + t_col * (end - start)
    if ops.hue_channel is not None:
        hc = ops.hue_channel
        out[..., hc] = hue_lerp(start[..., hc], end[..., hc], t, mode=ops.hue_mode)
    return out
