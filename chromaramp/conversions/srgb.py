"""
sRGB transfer function (IEC 61966-2-1).

The canonical triplet used across chromaramp is *encoded* sRGB in [0, 1],
i.e. the channel bytes of a packed ARGB color divided by 255. Spaces built
on linear light decode with :func:`srgb_to_linear` and encode back with one
of the three ``*linear_to_srgb`` variants.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..fastmath import fast_pow, very_fast_pow

_DECODE_THRESHOLD = 0.04045
_ENCODE_THRESHOLD = 0.0031308
_GAMMA = 2.4
_INV_GAMMA = 1.0 / _GAMMA


def srgb_to_linear(c: ArrayLike) -> NDArray:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= _DECODE_THRESHOLD,
        c / 12.92,
        ((np.maximum(c, _DECODE_THRESHOLD) + 0.055) / 1.055) ** _GAMMA,
    )


def linear_to_srgb(c: ArrayLike) -> NDArray:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= _ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * np.maximum(c, _ENCODE_THRESHOLD) ** _INV_GAMMA - 0.055,
    )


def fast_linear_to_srgb(c: ArrayLike) -> NDArray:
    """:func:`linear_to_srgb` with the power step done by the fast-pow table (< 0.02% error)."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= _ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * np.asarray(fast_pow(np.maximum(c, _ENCODE_THRESHOLD), _INV_GAMMA)) - 0.055,
    )


def very_fast_linear_to_srgb(c: ArrayLike) -> NDArray:
    """:func:`linear_to_srgb` using :func:`very_fast_pow`; off by a few percent."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= _ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * np.asarray(very_fast_pow(np.maximum(c, _ENCODE_THRESHOLD), _INV_GAMMA)) - 0.055,
    )
