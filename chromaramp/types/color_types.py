from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Triplet = Tuple[float, float, float]
TripletLike = Union[Triplet, ndarray]
# Packed 32-bit color, 0xAARRGGBB
ARGB = int


class ColorSpaces(str, Enum):
    """
    Closed set of color spaces a gradient can interpolate in.

    Member order defines the cyclic ``next()`` / ``prev()`` navigation.
    """
    RGB = "rgb"
    RYB = "ryb"
    HSB_SHORT = "hsb_short"
    HSB_LONG = "hsb_long"
    XYZ = "xyz"
    LAB = "lab"
    FAST_LAB = "fast_lab"
    VERY_FAST_LAB = "very_fast_lab"
    HUNTER_LAB = "hunter_lab"
    LUV = "luv"
    FAST_LUV = "fast_luv"
    JZAZBZ = "jzazbz"
    LCH = "lch"
    HCG = "hcg"
    DIN99 = "din99"
    ICTCP = "ictcp"
    TEMP = "temp"
    YUV = "yuv"

    def next(self) -> "ColorSpaces":
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> "ColorSpaces":
        members = list(type(self))
        return members[(members.index(self) - 1) % len(members)]

    @classmethod
    def resolve(cls, space: Union["ColorSpaces", str]) -> "ColorSpaces":
        """Accept an enum member or its (case-insensitive) value / name."""
        if isinstance(space, cls):
            return space
        key = str(space).lower()
        for member in cls:
            if member.value == key or member.name.lower() == key:
                return member
        raise ValueError(f"Unknown color space: {space!r}")


# Spaces whose first or last channel is an angle in degrees
HUE_SPACES = {ColorSpaces.HSB_SHORT, ColorSpaces.HSB_LONG, ColorSpaces.LCH, ColorSpaces.HCG}


def as_triplet_array(value: TripletLike) -> np.ndarray:
    """
    Convert a triplet (or a stack of triplets) to a float array.

    Args:
        value: tuple, list or ndarray whose last axis has length 3

    Returns:
        float64 ndarray of shape (..., 3)
    """
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected a triplet (last axis of length 3), got shape {arr.shape}")
    return arr


def is_hue_space(color_space: ColorSpaces) -> bool:
    """
    Check if the given color space interpolates a hue angle.

    Args:
        color_space: ColorSpaces member
    Returns:
        True if hue-based, False otherwise
    """
    return color_space in HUE_SPACES
