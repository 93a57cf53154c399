"""
Chromaramp Color Space Conversions
==================================

Vectorized conversions between the canonical triplet (encoded sRGB in
[0, 1]) and the native triplet of every interpolation space.

Every ``rgb_to_<space>`` / ``<space>_to_rgb`` pair accepts a single triplet
of shape (3,) or a stack of shape (..., 3) and returns a float ndarray of
the same shape. Results of ``*_to_rgb`` are not clamped; out-of-gamut
blends are clamped when they are packed into ARGB.

Spaces
------
RGB, RYB, HSB (short / long hue arc), XYZ, CIE L*a*b* (exact, fast, very
fast), Hunter Lab, CIE L*u*v* (exact, fast), JzAzBz, LCh, HCG, DIN99,
ICtCp, color temperature and YUV.

Dispatch
--------
from_rgb(rgb, space), to_rgb(native, space)
    Table-driven conversion for any :class:`ColorSpaces` member
convert(triplet, from_space, to_space)
    Native-to-native conversion through the canonical triplet
interpolate(space, start, end, t)
    Channel-wise blend with hue-aware handling of angular channels
"""

from .din99 import din99_to_lab, din99_to_rgb, lab_to_din99, rgb_to_din99
from .hcg import hcg_to_rgb, rgb_to_hcg
from .hsb import hsb_to_rgb, rgb_to_hsb
from .hunter_lab import hunter_lab_to_rgb, hunter_lab_to_xyz, rgb_to_hunter_lab, xyz_to_hunter_lab
from .ictcp import ictcp_to_rgb, rgb_to_ictcp
from .jzazbz import jzazbz_to_rgb, jzazbz_to_xyz, rgb_to_jzazbz, xyz_to_jzazbz
from .lab import fast_lab_to_rgb, lab_to_rgb, lab_to_xyz, rgb_to_lab, very_fast_lab_to_rgb, xyz_to_lab
from .lch import lab_to_lch, lch_to_lab, lch_to_rgb, rgb_to_lch
from .luv import fast_luv_to_rgb, luv_to_rgb, luv_to_xyz, rgb_to_luv, xyz_to_luv
from .ryb import rgb_to_ryb, ryb_to_rgb
from .srgb import fast_linear_to_srgb, linear_to_srgb, srgb_to_linear, very_fast_linear_to_srgb
from .temperature import kelvin_to_rgb, rgb_to_kelvin, rgb_to_temperature, temperature_to_rgb
from .wrapper import COLOR_SPACE_OPS, ColorSpaceOps, convert, from_rgb, get_ops, interpolate, to_rgb
from .xyz import WHITE_D65, rgb_to_xyz, xyz_to_rgb
from .yuv import rgb_to_yuv, yuv_to_rgb

__all__ = [
    "din99_to_lab", "din99_to_rgb", "lab_to_din99", "rgb_to_din99",
    "hcg_to_rgb", "rgb_to_hcg",
    "hsb_to_rgb", "rgb_to_hsb",
    "hunter_lab_to_rgb", "hunter_lab_to_xyz", "rgb_to_hunter_lab", "xyz_to_hunter_lab",
    "ictcp_to_rgb", "rgb_to_ictcp",
    "jzazbz_to_rgb", "jzazbz_to_xyz", "rgb_to_jzazbz", "xyz_to_jzazbz",
    "fast_lab_to_rgb", "lab_to_rgb", "lab_to_xyz", "rgb_to_lab", "very_fast_lab_to_rgb", "xyz_to_lab",
    "lab_to_lch", "lch_to_lab", "lch_to_rgb", "rgb_to_lch",
    "fast_luv_to_rgb", "luv_to_rgb", "luv_to_xyz", "rgb_to_luv", "xyz_to_luv",
    "rgb_to_ryb", "ryb_to_rgb",
    "fast_linear_to_srgb", "linear_to_srgb", "srgb_to_linear", "very_fast_linear_to_srgb",
    "kelvin_to_rgb", "rgb_to_kelvin", "rgb_to_temperature", "temperature_to_rgb",
    "COLOR_SPACE_OPS", "ColorSpaceOps", "convert", "from_rgb", "get_ops", "interpolate", "to_rgb",
    "WHITE_D65", "rgb_to_xyz", "xyz_to_rgb",
    "rgb_to_yuv", "yuv_to_rgb",
]
