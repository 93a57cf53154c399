"""
ICtCp (ITU-R BT.2100, PQ variant).

sRGB is routed through XYZ into BT.2020 primaries; sRGB white maps to
``ICTCP_WHITE_LUMINANCE`` cd/m^2.
"""

import numpy as np
from numpy.typing import NDArray

from ..defaults import ICTCP_WHITE_LUMINANCE
from ..types.color_types import TripletLike, as_triplet_array
from .pq import PQ_PEAK, pq_decode, pq_encode
from .srgb import linear_to_srgb, srgb_to_linear
from .xyz import XYZ_TO_SRGB, SRGB_TO_XYZ, apply_matrix

_BT2020_TO_XYZ = np.array([
    [0.6369580, 0.1446169, 0.1688810],
    [0.2627002, 0.6779981, 0.0593017],
    [0.0, 0.0280727, 1.0609851],
])
_SRGB_TO_BT2020 = np.linalg.inv(_BT2020_TO_XYZ) @ SRGB_TO_XYZ
_BT2020_TO_SRGB = XYZ_TO_SRGB @ _BT2020_TO_XYZ

_RGB_TO_LMS = np.array([
    [1688.0, 2146.0, 262.0],
    [683.0, 2951.0, 462.0],
    [99.0, 309.0, 3688.0],
]) / 4096.0
_LMS_TO_RGB = np.linalg.inv(_RGB_TO_LMS)

_LMS_TO_ICTCP = np.array([
    [2048.0, 2048.0, 0.0],
    [6610.0, -13613.0, 7003.0],
    [17933.0, -17390.0, -543.0],
]) / 4096.0
_ICTCP_TO_LMS = np.linalg.inv(_LMS_TO_ICTCP)

_SCALE = ICTCP_WHITE_LUMINANCE / PQ_PEAK


def rgb_to_ictcp(rgb: TripletLike) -> NDArray:
    bt2020 = apply_matrix(_SRGB_TO_BT2020, srgb_to_linear(as_triplet_array(rgb)))
    lms = apply_matrix(_RGB_TO_LMS, bt2020) * _SCALE
    return apply_matrix(_LMS_TO_ICTCP, pq_encode(lms))


def ictcp_to_rgb(ictcp: TripletLike) -> NDArray:
    lms = pq_decode(apply_matrix(_ICTCP_TO_LMS, as_triplet_array(ictcp))) / _SCALE
    bt2020 = apply_matrix(_LMS_TO_RGB, lms)
    return linear_to_srgb(apply_matrix(_BT2020_TO_SRGB, bt2020))
