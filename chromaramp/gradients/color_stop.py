from __future__ import annotations

from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from ..colors.argb import alpha_byte, argb_to_unit_rgb, compose_argb, mutate_argb
from ..conversions.wrapper import from_rgb, to_rgb
from ..defaults import STOP_POSITION_TOLERANCE
from ..types.color_types import ARGB, ColorSpaces, TripletLike
from ..utils.default import value_or_default
from ..utils.num_utils import approx_equal


class ColorStop:
    """
    A packed ARGB color anchored at a position on the gradient axis.

    The stop caches its color converted to one color space at a time; the
    cache is rebuilt when a different space is requested or the color
    changes. Stops owned by a :class:`Gradient` must be repositioned through
    the gradient so that its ordering is kept.
    """

    __slots__ = ("_color", "position", "original_position", "_cached_space", "_cached_components")

    def __init__(self, color: ARGB, position: float):
        self._color = int(color) & 0xFFFFFFFF
        self.position = float(position)
        # position before any shift_stops() phase is applied
        self.original_position = self.position
        self._cached_space: Optional[ColorSpaces] = None
        self._cached_components: Optional[NDArray] = None

    @classmethod
    def from_components(
        cls,
        space: Union[ColorSpaces, str],
        components: TripletLike,
        position: float,
        alpha: int = 255,
    ) -> ColorStop:
        """Build a stop from a native triplet of ``space`` (alpha on the 0..255 scale)."""
        r, g, b = to_rgb(components, space)
        return cls(compose_argb(r, g, b, alpha / 255.0), position)

    # ===================== Color =====================

    @property
    def color(self) -> ARGB:
        return self._color

    def set_color(self, color: ARGB) -> None:
        self._color = int(color) & 0xFFFFFFFF
        self._cached_space = None
        self._cached_components = None

    @property
    def alpha(self) -> int:
        return alpha_byte(self._color)

    @property
    def unit_alpha(self) -> float:
        return self.alpha / 255.0

    @property
    def rgb(self) -> NDArray:
        return argb_to_unit_rgb(self._color)

    def components(self, space: Union[ColorSpaces, str]) -> NDArray:
        """Native triplet of this stop's color in ``space``, cached and read-only."""
        space = ColorSpaces.resolve(space)
        if self._cached_space != space:
            components = from_rgb(self.rgb, space)
            components.setflags(write=False)
            self._cached_components = components
            self._cached_space = space
        return self._cached_components

    def mutate(self, amount: float, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly push each RGB channel up or down by ``amount`` (0..255 scale)."""
        self.set_color(mutate_argb(self._color, amount, rng))

    # ===================== Position =====================

    def set_position(self, position: float) -> None:
        """Move the stop; this also becomes its new original position."""
        self.position = float(position)
        self.original_position = self.position

    def approx_position(self, other: ColorStop, tolerance: Optional[float] = None) -> bool:
        tolerance = value_or_default(tolerance, STOP_POSITION_TOLERANCE)
        return approx_equal(self.position, other.position, tolerance)

    def __lt__(self, other: ColorStop) -> bool:
        return self.position < other.position

    def copy(self) -> ColorStop:
        clone = ColorStop(self._color, self.position)
        clone.original_position = self.original_position
        return clone

    def __repr__(self) -> str:
        return f"ColorStop(color=0x{self._color:08X}, position={self.position:.4f})"
