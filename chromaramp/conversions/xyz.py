"""CIE 1931 XYZ, D65 white, Y of sRGB white = 1."""

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .srgb import linear_to_srgb, srgb_to_linear

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_SRGB = np.linalg.inv(SRGB_TO_XYZ)

# Derived from the matrix so that white maps exactly onto the reference white
WHITE_D65 = SRGB_TO_XYZ.sum(axis=1)

Encoder = Callable[[NDArray], NDArray]


def apply_matrix(matrix: NDArray, values: NDArray) -> NDArray:
    """Multiply every triplet on the last axis of ``values`` by ``matrix``."""
    return values @ matrix.T


def linear_rgb_to_xyz(linear: NDArray) -> NDArray:
    return apply_matrix(SRGB_TO_XYZ, linear)


def xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return apply_matrix(XYZ_TO_SRGB, xyz)


def rgb_to_xyz(rgb: TripletLike) -> NDArray:
    return linear_rgb_to_xyz(srgb_to_linear(as_triplet_array(rgb)))


def xyz_to_rgb(xyz: TripletLike, encode: Encoder = linear_to_srgb) -> NDArray:
    """XYZ -> sRGB; ``encode`` selects the exact or an approximate transfer function."""
    return encode(xyz_to_linear_rgb(as_triplet_array(xyz)))
