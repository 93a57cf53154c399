from __future__ import annotations

import bisect
import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from boundednumbers.functions import cyclic_wrap_float
from numpy.typing import ArrayLike, NDArray

from .. import fastmath
from ..colors.argb import compose_argb, decompose_argb_bytes, np_compose_argb, random_argb
from ..conversions.wrapper import get_ops, interpolate
from ..defaults import DEFAULT_COLOR_SPACE, DEFAULT_EASING, EMPTY_GRADIENT_COLOR
from ..types.color_types import ARGB, ColorSpaces
from ..types.transform_types import Easing
from ..utils.default import rng_or_default, value_or_default
from ..utils.num_utils import wrap_unit
from .color_stop import ColorStop
from .easing import get_easing_function

logger = logging.getLogger(__name__)

ColorSpaceLike = Union[ColorSpaces, str]
EasingLike = Union[Easing, str]


# ===================== Gradient Class =====================

class Gradient:
    """
    A 1D color gradient: ordered color stops on [0, 1] blended in a chosen
    color space with a chosen easing.

    ``evaluate(position)`` is the rendering entry point. It remembers the
    stop interval of the previous query and walks from there, so monotonic
    sweeps (the usual animation pattern) cost O(1) per call; arbitrary
    jumps stay correct and cost proportionally to the distance walked.
    ``evaluate_array`` is the vectorized counterpart and uses a binary
    search instead.

    Near-duplicate stops (closer than ``STOP_POSITION_TOLERANCE``) are not
    kept: the most recently added one replaces the older ones.

    Not safe for concurrent use from several threads.
    """

    def __init__(
        self,
        *colors: ARGB,
        color_space: Optional[ColorSpaceLike] = None,
        easing: Optional[EasingLike] = None,
    ):
        """
        Create a gradient with equidistant stops.

        Args:
            *colors: packed ARGB colors; the first sits at 0, the last at 1.
                A single color is placed at 0, no color gives an empty gradient.
            color_space: interpolation space, defaults to ``DEFAULT_COLOR_SPACE``
            easing: step-warping function, defaults to ``DEFAULT_EASING``
        """
        fastmath.ensure_initialised()
        self._stops: List[ColorStop] = []
        self._offset = 0.0
        self._cursor = 1
        self._color_space = ColorSpaces.resolve(value_or_default(color_space, DEFAULT_COLOR_SPACE))
        self._ops = get_ops(self._color_space)
        self._easing = Easing.resolve(value_or_default(easing, DEFAULT_EASING))
        self._ease = get_easing_function(self._easing)

        if len(colors) == 1:
            self._insert(ColorStop(colors[0], 0.0))
        elif colors:
            step = 1.0 / (len(colors) - 1)
            for i, color in enumerate(colors):
                self._insert(ColorStop(color, i * step))

    # ===================== Alternate constructors =====================

    @classmethod
    def from_stops(
        cls,
        stops: Iterable[ColorStop],
        color_space: Optional[ColorSpaceLike] = None,
        easing: Optional[EasingLike] = None,
    ) -> Gradient:
        """Create a gradient from existing stops (copied, in the order given)."""
        gradient = cls(color_space=color_space, easing=easing)
        for stop in stops:
            gradient._insert(stop.copy())
        return gradient

    @classmethod
    def random(
        cls,
        num_colors: int,
        rng: Optional[np.random.Generator] = None,
        color_space: Optional[ColorSpaceLike] = None,
        easing: Optional[EasingLike] = None,
    ) -> Gradient:
        """Gradient of ``num_colors`` random opaque colors at equidistant stops."""
        if num_colors <= 0:
            raise ValueError(f"num_colors must be positive, got {num_colors}")
        rng = rng_or_default(rng)
        colors = [random_argb(rng) for _ in range(num_colors)]
        logger.debug("Generated random gradient with %d equidistant stops", num_colors)
        return cls(*colors, color_space=color_space, easing=easing)

    @classmethod
    def random_with_stops(
        cls,
        num_colors: int,
        rng: Optional[np.random.Generator] = None,
        color_space: Optional[ColorSpaceLike] = None,
        easing: Optional[EasingLike] = None,
    ) -> Gradient:
        """
        Gradient of ``num_colors`` random opaque colors at random positions.

        The first stop sits at 0 and the last at 1; interior positions are
        uniform in (0, 1). Interior stops drawn too close to another one are
        dropped by the near-duplicate rule.
        """
        if num_colors <= 0:
            raise ValueError(f"num_colors must be positive, got {num_colors}")
        rng = rng_or_default(rng)
        gradient = cls(color_space=color_space, easing=easing)
        first = ColorStop(random_argb(rng), 0.0)
        last = ColorStop(random_argb(rng), 1.0) if num_colors > 1 else None
        for position in rng.random(max(num_colors - 2, 0)):
            gradient._insert(ColorStop(random_argb(rng), float(position)))
        # endpoints go in last so they win over interior near-duplicates
        gradient._insert(first)
        if last is not None:
            gradient._insert(last)
        logger.debug("Generated random gradient with %d stops at random positions", len(gradient))
        return gradient

    # ===================== Stop bookkeeping =====================

    def _reset_cursor(self) -> None:
        self._cursor = 1

    def _insert(self, stop: ColorStop) -> None:
        kept = []
        for existing in self._stops:
            if existing.approx_position(stop):
                logger.warning(
                    "Stop 0x%08X at %.4f replaces near-duplicate stop 0x%08X at %.4f",
                    stop.color, stop.position, existing.color, existing.position,
                )
            else:
                kept.append(existing)
        bisect.insort(kept, stop)
        self._stops = kept
        self._reset_cursor()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._stops):
            raise IndexError(f"Stop index {index} out of range for gradient with {len(self._stops)} stops")

    @property
    def stops(self) -> Tuple[ColorStop, ...]:
        return tuple(self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(tuple(self._stops))

    def add(self, position: float, color: ARGB) -> None:
        """Insert a stop, replacing any stop within the duplicate tolerance."""
        self._insert(ColorStop(color, position))

    def add_stop(self, stop: ColorStop) -> None:
        self._insert(stop.copy())

    def push(self, color: ARGB) -> None:
        """
        Append ``color`` at position 1, compressing the existing stops into
        [0, (n - 1) / n] to make room.
        """
        n = len(self._stops)
        if n:
            scale = (n - 1) / n
            for stop in self._stops:
                stop.set_position(stop.position * scale)
        self._insert(ColorStop(color, 1.0))

    def remove_last(self) -> None:
        """
        Undo :meth:`push`: drop the last stop and stretch the rest back over [0, 1].

        Gradients with fewer than two stops are left unchanged.
        """
        if len(self._stops) < 2:
            logger.warning("remove_last() ignored on a gradient with %d stop(s)", len(self._stops))
            return
        self._stops.pop()
        n = len(self._stops)
        if n > 1:
            scale = n / (n - 1)
            for stop in self._stops:
                stop.set_position(stop.position * scale)
        self._reset_cursor()

    def prime_animation(self) -> None:
        """Duplicate the first color at the end so a wrapping offset shows no seam."""
        self.push(self.color_at(0))

    def remove(self, index: int) -> ColorStop:
        self._check_index(index)
        stop = self._stops.pop(index)
        self._reset_cursor()
        return stop

    def remove_stop(self, stop: ColorStop) -> None:
        """Remove ``stop`` (matched by identity); ValueError if it is not in this gradient."""
        self._stops.remove(stop)
        self._reset_cursor()

    def color_at(self, index: int) -> ARGB:
        self._check_index(index)
        return self._stops[index].color

    def last_color(self) -> ARGB:
        return self.color_at(len(self._stops) - 1)

    def set_stop_color(self, index: int, color: ARGB) -> None:
        self._check_index(index)
        self._stops[index].set_color(color)

    def set_stop_position(self, index: int, position: float) -> None:
        """Move a stop and re-sort; stops left within the duplicate tolerance are replaced."""
        self._check_index(index)
        stop = self._stops.pop(index)
        stop.set_position(position)
        self._insert(stop)

    def mutate_color(self, amount: float, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly push every stop's R, G, B up or down by ``amount`` (0..255 scale)."""
        rng = rng_or_default(rng)
        for stop in self._stops:
            stop.mutate(amount, rng)

    # ===================== Animation =====================

    @property
    def offset(self) -> float:
        return self._offset

    def set_offset(self, offset: float) -> None:
        self._offset = float(offset)

    def animate(self, amount: float) -> None:
        """Advance the offset; it accumulates unclamped and wraps at evaluation."""
        self._offset += amount

    def shift_stops(self, amount: float) -> None:
        """
        Place every stop at ``original_position + amount`` modulo 1, in [0, 1).

        Positions are derived from each stop's original position, so repeated
        shifts by growing amounts do not drift. A stop landing on 1.0 moves
        to 0.0, like any other wrapped position.

        The near-duplicate rule is not applied here: stops that end up at the
        same position are all kept (they render as a hard edge), so every stop
        keeps following its original position on later shifts.
        """
        for stop in self._stops:
            stop.position = cyclic_wrap_float(stop.original_position + amount, 0.0, 1.0)
        self._stops.sort()
        self._reset_cursor()

    # ===================== Color space & easing =====================

    @property
    def color_space(self) -> ColorSpaces:
        return self._color_space

    def set_color_space(self, color_space: ColorSpaceLike) -> None:
        self._color_space = ColorSpaces.resolve(color_space)
        self._ops = get_ops(self._color_space)
        logger.debug("Color space set to %s", self._color_space.name)

    def next_color_space(self) -> ColorSpaces:
        self.set_color_space(self._color_space.next())
        return self._color_space

    def prev_color_space(self) -> ColorSpaces:
        self.set_color_space(self._color_space.prev())
        return self._color_space

    @property
    def easing(self) -> Easing:
        return self._easing

    def set_easing(self, easing: EasingLike) -> None:
        self._easing = Easing.resolve(easing)
        self._ease = get_easing_function(self._easing)
        logger.debug("Easing set to %s", self._easing.name)

    def next_easing(self) -> Easing:
        self.set_easing(self._easing.next())
        return self._easing

    def prev_easing(self) -> Easing:
        self.set_easing(self._easing.prev())
        return self._easing

    # ===================== Evaluation =====================

    def _blend(self, curr: ColorStop, prev: ColorStop, t: float) -> ARGB:
        space = self._color_space
        native = interpolate(space, curr.components(space), prev.components(space), self._ease(t))
        r, g, b = self._ops.to_rgb(native)
        # alpha ignores the easing
        alpha = curr.unit_alpha + t * (prev.unit_alpha - curr.unit_alpha)
        return compose_argb(r, g, b, alpha)

    def evaluate(self, position: float) -> ARGB:
        """
        Color of the gradient at ``position`` (offset applied, then wrapped).

        ``position + offset`` is used as is when it lies in [0, 1] and is
        wrapped modulo 1 otherwise. A sum of exactly 1.0 therefore gives the
        last stop's color while 2.0 gives the first one; this is the only
        place where evaluating at ``p`` with offset ``o`` differs from
        evaluating at ``(p + o) % 1`` with no offset.

        Args:
            position: any finite real; [0, 1] spans the gradient once

        Returns:
            Packed ARGB int
        """
        stops = self._stops
        n = len(stops)
        if n == 0:
            return EMPTY_GRADIENT_COLOR
        if n == 1:
            return stops[0].color

        p = wrap_unit(position + self._offset)
        if p <= stops[0].position:
            return stops[0].color
        if p >= stops[-1].position:
            return stops[-1].color

        # walk until stops[i - 1].position < p <= stops[i].position
        i = min(max(self._cursor, 1), n - 1)
        while p > stops[i].position:
            i += 1
        while p <= stops[i - 1].position:
            i -= 1
        self._cursor = i

        curr = stops[i]
        if p == curr.position:
            return curr.color
        prev = stops[i - 1]
        denominator = prev.position - curr.position
        if denominator == 0.0:
            denominator = 1.0
        return self._blend(curr, prev, (p - curr.position) / denominator)

    def evaluate_array(self, positions: ArrayLike) -> NDArray:
        """
        Vectorized :meth:`evaluate`.

        Uses a binary search per position and leaves the evaluate() cursor
        untouched.

        Args:
            positions: array of positions, any shape

        Returns:
            int64 array of packed ARGB colors, same shape as ``positions``
        """
        p = np.asarray(positions, dtype=np.float64)
        stops = self._stops
        n = len(stops)
        if n == 0:
            return np.full(p.shape, EMPTY_GRADIENT_COLOR, dtype=np.int64)
        if n == 1:
            return np.full(p.shape, stops[0].color, dtype=np.int64)

        q = p + self._offset
        q = np.where((q >= 0.0) & (q <= 1.0), q, np.mod(q, 1.0))

        space = self._color_space
        stop_positions = np.array([s.position for s in stops])
        stop_colors = np.array([s.color for s in stops], dtype=np.int64)
        stop_alphas = np.array([s.unit_alpha for s in stops])
        components = np.stack([s.components(space) for s in stops])

        upper = np.clip(np.searchsorted(stop_positions, q, side="left"), 1, n - 1)
        lower = upper - 1
        curr_pos = stop_positions[upper]
        denominator = stop_positions[lower] - curr_pos
        denominator = np.where(denominator == 0.0, 1.0, denominator)
        t = np.clip((q - curr_pos) / denominator, 0.0, 1.0)

        native = interpolate(space, components[upper], components[lower], self._ease(t))
        rgb = self._ops.to_rgb(native)
        alpha = stop_alphas[upper] + t * (stop_alphas[lower] - stop_alphas[upper])
        blended = np_compose_argb(rgb, alpha)

        result = np.where(q == curr_pos, stop_colors[upper], blended)
        result = np.where(q <= stop_positions[0], stop_colors[0], result)
        result = np.where(q >= stop_positions[-1], stop_colors[-1], result)
        return result.astype(np.int64)

    # ===================== Display =====================

    def __repr__(self) -> str:
        return (
            f"Gradient(stops={len(self._stops)}, color_space={self._color_space.name}, "
            f"easing={self._easing.name}, offset={self._offset})"
        )

    def __str__(self) -> str:
        lines = [
            f"Gradient  color_space={self._color_space.name}  easing={self._easing.name}  "
            f"offset={self._offset:.4f}",
            f"{'#':>3}  {'position':>8}  {'R':>3} {'G':>3} {'B':>3} {'A':>3}  {'packed':>10}  "
            f"{self._color_space.name}",
        ]
        for i, stop in enumerate(self._stops):
            a, r, g, b = decompose_argb_bytes(stop.color)
            components = ", ".join(f"{c:.3f}" for c in stop.components(self._color_space))
            lines.append(
                f"{i:>3}  {stop.position:>8.4f}  {r:>3} {g:>3} {b:>3} {a:>3}  {stop.color:>10d}  "
                f"({components})"
            )
        return "\n".join(lines)
