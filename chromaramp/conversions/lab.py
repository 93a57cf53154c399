"""
CIE L*a*b* (D65).

``fast_lab_to_rgb`` and ``very_fast_lab_to_rgb`` differ from the exact
inverse only in the sRGB encoding step, which they run through the
table-driven fast pow (< 0.02% error) or the table-free very fast pow (a
few percent). The forward direction is always exact: it runs once per
color stop and its result is cached.
"""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .srgb import fast_linear_to_srgb, linear_to_srgb, very_fast_linear_to_srgb
from .xyz import WHITE_D65, Encoder, rgb_to_xyz, xyz_to_rgb

_DELTA = 6.0 / 29.0
_EPSILON = _DELTA ** 3
_LINEAR_SLOPE = 3.0 * _DELTA ** 2
_LINEAR_OFFSET = 4.0 / 29.0


def lab_f(t: NDArray) -> NDArray:
    """CIE companding: cube root with a linear toe near black."""
    return np.where(t > _EPSILON, np.cbrt(t), t / _LINEAR_SLOPE + _LINEAR_OFFSET)


def lab_f_inv(f: NDArray) -> NDArray:
    return np.where(f > _DELTA, f ** 3, _LINEAR_SLOPE * (f - _LINEAR_OFFSET))


def xyz_to_lab(xyz: TripletLike, white: NDArray = WHITE_D65) -> NDArray:
    f = lab_f(as_triplet_array(xyz) / white)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: TripletLike, white: NDArray = WHITE_D65) -> NDArray:
    lab = as_triplet_array(lab)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    return lab_f_inv(np.stack([fx, fy, fz], axis=-1)) * white


def rgb_to_lab(rgb: TripletLike) -> NDArray:
    return xyz_to_lab(rgb_to_xyz(rgb))


def _lab_to_rgb_with(lab: TripletLike, encode: Encoder) -> NDArray:
    return xyz_to_rgb(lab_to_xyz(lab), encode=encode)


def lab_to_rgb(lab: TripletLike) -> NDArray:
    return _lab_to_rgb_with(lab, linear_to_srgb)


def fast_lab_to_rgb(lab: TripletLike) -> NDArray:
    return _lab_to_rgb_with(lab, fast_linear_to_srgb)


def very_fast_lab_to_rgb(lab: TripletLike) -> NDArray:
    return _lab_to_rgb_with(lab, very_fast_linear_to_srgb)
