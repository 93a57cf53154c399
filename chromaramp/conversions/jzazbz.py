"""
JzAzBz (Safdar et al. 2017).

Relative XYZ is scaled so sRGB white sits at ``JZAZBZ_WHITE_LUMINANCE``
cd/m^2 before the PQ-style compression.
"""

import numpy as np
from numpy.typing import NDArray

from ..defaults import JZAZBZ_WHITE_LUMINANCE
from ..types.color_types import TripletLike, as_triplet_array
from .pq import PQ_PEAK, pq_decode, pq_encode
from .xyz import apply_matrix, rgb_to_xyz, xyz_to_rgb

_B = 1.15
_G = 0.66
_P = 1.7 * 2523.0 / 32.0
_D = -0.56
_D0 = 1.6295499532821566e-11

_XYZ_TO_LMS = np.array([
    [0.41478972, 0.579999, 0.0146480],
    [-0.2015100, 1.120649, 0.0531008],
    [-0.0166008, 0.264800, 0.6684799],
])
_LMS_TO_XYZ = np.linalg.inv(_XYZ_TO_LMS)

_LMS_TO_IAB = np.array([
    [0.5, 0.5, 0.0],
    [3.524000, -4.066708, 0.542708],
    [0.199076, 1.096799, -1.295875],
])
_IAB_TO_LMS = np.linalg.inv(_LMS_TO_IAB)


def xyz_to_jzazbz(xyz: TripletLike) -> NDArray:
    xyz = as_triplet_array(xyz) * JZAZBZ_WHITE_LUMINANCE
    X, Y, Z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    x_prime = _B * X - (_B - 1.0) * Z
    y_prime = _G * Y - (_G - 1.0) * X

    lms = apply_matrix(_XYZ_TO_LMS, np.stack([x_prime, y_prime, Z], axis=-1))
    iab = apply_matrix(_LMS_TO_IAB, pq_encode(lms / PQ_PEAK, m2=_P))

    iz = iab[..., 0]
    jz = (1.0 + _D) * iz / (1.0 + _D * iz) - _D0
    return np.stack([jz, iab[..., 1], iab[..., 2]], axis=-1)


def jzazbz_to_xyz(jzazbz: TripletLike) -> NDArray:
    jzazbz = as_triplet_array(jzazbz)
    jz = jzazbz[..., 0] + _D0
    iz = jz / (1.0 + _D - _D * jz)

    lms_prime = apply_matrix(_IAB_TO_LMS, np.stack([iz, jzazbz[..., 1], jzazbz[..., 2]], axis=-1))
    lms = pq_decode(lms_prime, m2=_P) * PQ_PEAK

    primed = apply_matrix(_LMS_TO_XYZ, lms)
    x_prime, y_prime, Z = primed[..., 0], primed[..., 1], primed[..., 2]
    X = (x_prime + (_B - 1.0) * Z) / _B
    Y = (y_prime + (_G - 1.0) * X) / _G
    return np.stack([X, Y, Z], axis=-1) / JZAZBZ_WHITE_LUMINANCE


def rgb_to_jzazbz(rgb: TripletLike) -> NDArray:
    return xyz_to_jzazbz(rgb_to_xyz(rgb))


def jzazbz_to_rgb(jzazbz: TripletLike) -> NDArray:
    return xyz_to_rgb(jzazbz_to_xyz(jzazbz))
