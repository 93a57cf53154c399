"""
CIE L*u*v* (D65).

Black has no chromaticity, so u'v' falls back to the white point there
(u* = v* = 0). ``fast_luv_to_rgb`` approximates only the sRGB encoding.
"""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .lab import lab_f
from .srgb import fast_linear_to_srgb, linear_to_srgb
from .xyz import WHITE_D65, Encoder, rgb_to_xyz, xyz_to_rgb

_KAPPA = (29.0 / 3.0) ** 3


def _uv_prime(xyz: NDArray):
    X, Y, Z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    denom = X + 15.0 * Y + 3.0 * Z
    valid = denom > 0.0
    safe = np.where(valid, denom, 1.0)
    return valid, 4.0 * X / safe, 9.0 * Y / safe


_, _UN, _VN = _uv_prime(WHITE_D65)


def xyz_to_luv(xyz: TripletLike) -> NDArray:
    xyz = as_triplet_array(xyz)
    valid, u_prime, v_prime = _uv_prime(xyz)
    u_prime = np.where(valid, u_prime, _UN)
    v_prime = np.where(valid, v_prime, _VN)

    L = 116.0 * lab_f(xyz[..., 1] / WHITE_D65[1]) - 16.0
    u = 13.0 * L * (u_prime - _UN)
    v = 13.0 * L * (v_prime - _VN)
    return np.stack([L, u, v], axis=-1)


def luv_to_xyz(luv: TripletLike) -> NDArray:
    luv = as_triplet_array(luv)
    L, u, v = luv[..., 0], luv[..., 1], luv[..., 2]

    Y = WHITE_D65[1] * np.where(L > 8.0, ((L + 16.0) / 116.0) ** 3, L / _KAPPA)

    lit = L > 0.0
    safe_L = np.where(lit, L, 1.0)
    u_prime = u / (13.0 * safe_L) + _UN
    v_prime = v / (13.0 * safe_L) + _VN
    safe_v = np.where(v_prime != 0.0, v_prime, 1.0)

    X = np.where(lit, Y * 9.0 * u_prime / (4.0 * safe_v), 0.0)
    Z = np.where(lit, Y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * safe_v), 0.0)
    return np.stack([X, np.where(lit, Y, 0.0), Z], axis=-1)


def rgb_to_luv(rgb: TripletLike) -> NDArray:
    return xyz_to_luv(rgb_to_xyz(rgb))


def _luv_to_rgb_with(luv: TripletLike, encode: Encoder) -> NDArray:
    return xyz_to_rgb(luv_to_xyz(luv), encode=encode)


def luv_to_rgb(luv: TripletLike) -> NDArray:
    return _luv_to_rgb_with(luv, linear_to_srgb)


def fast_luv_to_rgb(luv: TripletLike) -> NDArray:
    return _luv_to_rgb_with(luv, fast_linear_to_srgb)
