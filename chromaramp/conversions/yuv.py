"""YUV (BT.601 analog), applied directly to encoded sRGB."""

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .xyz import apply_matrix

_RGB_TO_YUV = np.array([
    [0.299, 0.587, 0.114],
    [-0.14713, -0.28886, 0.436],
    [0.615, -0.51499, -0.10001],
])
_YUV_TO_RGB = np.linalg.inv(_RGB_TO_YUV)


def rgb_to_yuv(rgb: TripletLike) -> NDArray:
    return apply_matrix(_RGB_TO_YUV, as_triplet_array(rgb))


def yuv_to_rgb(yuv: TripletLike) -> NDArray:
    return apply_matrix(_YUV_TO_RGB, as_triplet_array(yuv))
