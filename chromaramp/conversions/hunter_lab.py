"""Hunter Lab (1948), with Ka / Kb derived from the D65 white point."""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .xyz import WHITE_D65, rgb_to_xyz, xyz_to_rgb

# Hunter Lab works on the 0..100 XYZ scale
_XN, _YN, _ZN = WHITE_D65 * 100.0
_KA = 175.0 / 198.04 * (_XN + _YN)
_KB = 70.0 / 218.11 * (_YN + _ZN)


def xyz_to_hunter_lab(xyz: TripletLike) -> NDArray:
    xyz = as_triplet_array(xyz) * 100.0
    yr = xyz[..., 1] / _YN
    root = np.sqrt(np.maximum(yr, 0.0))
    lit = root > 0.0
    safe = np.where(lit, root, 1.0)

    L = 100.0 * root
    a = np.where(lit, _KA * (xyz[..., 0] / _XN - yr) / safe, 0.0)
    b = np.where(lit, _KB * (yr - xyz[..., 2] / _ZN) / safe, 0.0)
    return np.stack([L, a, b], axis=-1)


def hunter_lab_to_xyz(hunter_lab: TripletLike) -> NDArray:
    hunter_lab = as_triplet_array(hunter_lab)
    root = hunter_lab[..., 0] / 100.0
    yr = root * root
    X = (hunter_lab[..., 1] / _KA * root + yr) * _XN
    Z = (yr - hunter_lab[..., 2] / _KB * root) * _ZN
    return np.stack([X, yr * _YN, Z], axis=-1) / 100.0


def rgb_to_hunter_lab(rgb: TripletLike) -> NDArray:
    return xyz_to_hunter_lab(rgb_to_xyz(rgb))


def hunter_lab_to_rgb(hunter_lab: TripletLike) -> NDArray:
    return xyz_to_rgb(hunter_lab_to_xyz(hunter_lab))
