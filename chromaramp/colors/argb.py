"""
Packed 32-bit ARGB colors (0xAARRGGBB).

Colors are plain Python ints in [0, 0xFFFFFFFF]. Signed 32-bit values are
accepted and masked, so ``-1`` is opaque white.
"""

from typing import Optional, Tuple

import numpy as np
from boundednumbers.functions import clamp, clamp01
from numpy.typing import ArrayLike, NDArray

from ..types.color_types import ARGB
from ..types.format_type import FormatType, scale_unit
from ..utils.default import rng_or_default

_MASK = 0xFFFFFFFF
_RGB_MASK = 0x00FFFFFF


def _unit_to_byte(value: float) -> int:
    return int(clamp01(float(value)) * 255.0 + 0.5)


def compose_argb_bytes(r: int, g: int, b: int, a: int = 255) -> ARGB:
    """Pack 0..255 channels (clamped) into an ARGB int."""
    a, r, g, b = (int(clamp(int(c), 0, 255)) for c in (a, r, g, b))
    return (a << 24) | (r << 16) | (g << 8) | b


def compose_argb(r: float, g: float, b: float, alpha: float = 1.0) -> ARGB:
    """
    Pack unit-interval channels into an ARGB int.

    Channels are clamped to [0, 1] and rounded half-up to bytes.
    """
    return compose_argb_bytes(_unit_to_byte(r), _unit_to_byte(g), _unit_to_byte(b), _unit_to_byte(alpha))


def np_compose_argb(rgb: NDArray, alpha: ArrayLike) -> NDArray:
    """Vectorized :func:`compose_argb` over (..., 3) triplets; returns int64 ARGB values."""
    rgb = np.asarray(rgb, dtype=np.float64)
    channels = (np.clip(rgb, 0.0, 1.0) * 255.0 + 0.5).astype(np.int64)
    a = (np.clip(np.asarray(alpha, dtype=np.float64), 0.0, 1.0) * 255.0 + 0.5).astype(np.int64)
    return (a << 24) | (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]


def alpha_byte(color: ARGB) -> int:
    return ((int(color) & _MASK) >> 24) & 0xFF


def with_alpha(color: ARGB, alpha: int) -> ARGB:
    """Replace the alpha byte of ``color``."""
    return (int(color) & _RGB_MASK) | (int(clamp(int(alpha), 0, 255)) << 24)


def decompose_argb_bytes(color: ARGB) -> Tuple[int, int, int, int]:
    color = int(color) & _MASK
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def decompose_argb(color: ARGB, format_type: FormatType = FormatType.FLOAT) -> Tuple:
    """
    Split a packed color into (a, r, g, b).

    Args:
        color: packed ARGB int
        format_type: INT gives 0..255 ints, FLOAT gives 0..1, PERCENTAGE 0..100

    Returns:
        Tuple (a, r, g, b) in the requested scale
    """
    format_type = FormatType(format_type)
    channels = decompose_argb_bytes(color)
    if format_type == FormatType.INT:
        return channels
    return tuple(scale_unit(c / 255.0, format_type) for c in channels)


def argb_to_unit_rgb(color: ARGB) -> NDArray:
    """Canonical triplet (encoded sRGB in [0, 1]) of a packed color; alpha is dropped."""
    _, r, g, b = decompose_argb_bytes(color)
    return np.array([r, g, b], dtype=np.float64) / 255.0


def random_argb(rng: Optional[np.random.Generator] = None) -> ARGB:
    """Opaque color with uniformly random R, G, B bytes."""
    r, g, b = rng_or_default(rng).integers(0, 256, size=3)
    return compose_argb_bytes(r, g, b)


def mutate_argb(color: ARGB, amount: float, rng: Optional[np.random.Generator] = None) -> ARGB:
    """
    Nudge each of R, G, B up or down by ``amount`` (0..255 scale), clamped.

    The direction is chosen independently per channel; alpha is kept.
    """
    a, r, g, b = decompose_argb_bytes(color)
    signs = np.where(rng_or_default(rng).random(3) < 0.5, amount, -amount)
    r, g, b = (int(round(c + s)) for c, s in zip((r, g, b), signs))
    return compose_argb_bytes(r, g, b, a)
