"""Chromaramp: 1D color gradients blended in a choice of color spaces."""

from .types.color_types import ColorSpaces
from .types.format_type import FormatType
from .types.transform_types import Easing
from .utils.interpolate_hue import HueMode, hue_lerp

from .colors import (
    argb_to_unit_rgb,
    compose_argb,
    decompose_argb,
    mutate_argb,
    random_argb,
)
from .conversions import convert, from_rgb, interpolate, to_rgb
from .gradients import ColorStop, Gradient, ease
from . import fastmath

__version__ = "0.1.0"

__all__ = [
    # enums
    "ColorSpaces",
    "Easing",
    "FormatType",
    "HueMode",
    # packed colors
    "argb_to_unit_rgb",
    "compose_argb",
    "decompose_argb",
    "mutate_argb",
    "random_argb",
    # conversions
    "convert",
    "from_rgb",
    "interpolate",
    "to_rgb",
    "hue_lerp",
    # gradients
    "ColorStop",
    "Gradient",
    "ease",
    "fastmath",
]
