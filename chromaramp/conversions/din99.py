"""DIN99 (DIN 6176), built on CIE L*a*b*."""

import math

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import TripletLike, as_triplet_array
from .lab import lab_to_rgb, rgb_to_lab

_L_SCALE = 105.51
_L_FACTOR = 0.0158
_ROTATION = math.radians(16.0)
_COS = math.cos(_ROTATION)
_SIN = math.sin(_ROTATION)
_F_FACTOR = 0.7
_C_FACTOR = 0.045


def lab_to_din99(lab: TripletLike) -> NDArray:
    lab = as_triplet_array(lab)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    L99 = _L_SCALE * np.log1p(_L_FACTOR * L)
    e = a * _COS + b * _SIN
    f = _F_FACTOR * (b * _COS - a * _SIN)
    G = np.hypot(e, f)

    safe_G = np.where(G > 0.0, G, 1.0)
    ratio = np.where(G > 0.0, np.log1p(_C_FACTOR * G) / _C_FACTOR / safe_G, 0.0)
    return np.stack([L99, e * ratio, f * ratio], axis=-1)


def din99_to_lab(din99: TripletLike) -> NDArray:
    din99 = as_triplet_array(din99)
    L99, a99, b99 = din99[..., 0], din99[..., 1], din99[..., 2]

    C99 = np.hypot(a99, b99)
    G = np.expm1(_C_FACTOR * C99) / _C_FACTOR
    safe_C = np.where(C99 > 0.0, C99, 1.0)
    ratio = np.where(C99 > 0.0, G / safe_C, 0.0)
    e = a99 * ratio
    f = b99 * ratio / _F_FACTOR

    L = np.expm1(L99 / _L_SCALE) / _L_FACTOR
    a = e * _COS - f * _SIN
    b = e * _SIN + f * _COS
    return np.stack([L, a, b], axis=-1)


def rgb_to_din99(rgb: TripletLike) -> NDArray:
    return lab_to_din99(rgb_to_lab(rgb))


def din99_to_rgb(din99: TripletLike) -> NDArray:
    return lab_to_rgb(din99_to_lab(din99))
