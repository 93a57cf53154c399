"""
Fast pow() with adjustable accuracy.

Follows Harrison Ainsworth's "Fast pow() With Adjustable Accuracy" (2007):
``base ** exponent`` is rewritten as ``2 ** (exponent * log2(base))``, the
product is scaled straight into the float32 exponent/mantissa bit layout,
and the mantissa bits are replaced by a table lookup before the integer is
reinterpreted as a float.

The essential approximation is a 'staircase' across the fraction range
between successive integer powers of two: full float precision y values at
2 ** precision regular x intervals. With precision = 11 (8K table) the mean
relative error is < 0.01% and the max relative error < 0.02%.

Known weakness: for radix two, integer powers are inexact (2 ** 3 comes
out as 8 * 2 ** (1 / 4096)) even though exact results are attainable.
This is kept as-is; callers needing exact integer powers should not use
these functions.

The tables are process-wide. ``init`` is not thread-safe and must complete
before any other thread calls into this module; afterwards the tables are
read-only and safe to share.
"""

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from ..defaults import (
    DEFAULT_FAST_MATH_PRECISION,
    MAX_FAST_MATH_PRECISION,
    MIN_FAST_MATH_PRECISION,
)
from .fast_log import FastLog

logger = logging.getLogger(__name__)

_2P23 = 8388608.0  # 2 ** 23
_2P23B = 127.0 * _2P23  # exponent bias, pre-shifted
_EXPONENT_MASK = 0xFF800000  # sign + exponent bits
_MANTISSA_MASK = 0x7FFFFF
_MAX_BITS = 0x7F7FFFFF  # largest finite float32
LOG2_E = math.log2(math.e)

_precision: Optional[int] = None
_table: Optional[np.ndarray] = None
_fast_log: Optional[FastLog] = None


def init(precision: int = DEFAULT_FAST_MATH_PRECISION) -> None:
    """
    Build the lookup tables. Must be called once before use.

    Args:
        precision: number of mantissa bits used, >= 0 and <= 18

    Raises:
        ValueError: precision out of range (existing tables are kept)
    """
    global _precision, _table, _fast_log

    if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)):
        raise ValueError(f"Fast math precision must be an integer, got {precision!r}")
    if not MIN_FAST_MATH_PRECISION <= precision <= MAX_FAST_MATH_PRECISION:
        raise ValueError(
            f"Fast math precision must be in [{MIN_FAST_MATH_PRECISION}, "
            f"{MAX_FAST_MATH_PRECISION}], got {precision}"
        )
    precision = int(precision)
    size = 1 << precision

    # y-axis value for each table element, sampled mid-step
    zero_to_one = (np.arange(size, dtype=np.float64) + 0.5) / size
    f = (np.power(2.0, zero_to_one) - 1.0) * _2P23
    table = np.where(f < _2P23, f, _2P23 - 1.0).astype(np.int64)

    _table = table
    _fast_log = FastLog(precision)
    _precision = precision
    logger.debug("Fast math tables built with precision %d (%d entries)", precision, size)


def is_initialised() -> bool:
    return _table is not None


def ensure_initialised(precision: int = DEFAULT_FAST_MATH_PRECISION) -> None:
    """Initialise with ``precision`` unless some precision is already in place."""
    if _table is None:
        init(precision)


def get_precision() -> Optional[int]:
    return _precision


def reset() -> None:
    """Drop the tables; subsequent calls fail until ``init`` runs again."""
    global _precision, _table, _fast_log
    _precision = None
    _table = None
    _fast_log = None


def _require_tables() -> None:
    if _table is None:
        raise RuntimeError("Fast math used before init(); call chromaramp.fastmath.init(precision) first")


def _pow_from_log2(log2_base, exponent):
    i = np.multiply(exponent, np.multiply(_2P23, log2_base)) + _2P23B
    bits = np.clip(i, 0.0, _MAX_BITS).astype(np.int64)

    # replace mantissa with lookup
    bits = (bits & _EXPONENT_MASK) | _table[(bits & _MANTISSA_MASK) >> (23 - _precision)]

    # reinterpret bits as float
    result = np.asarray(bits, dtype=np.int64).astype(np.uint32).view(np.float32).astype(np.float64)
    if result.ndim == 0:
        return float(result)
    return result


def fast_log2(x: ArrayLike):
    """Approximate log2(x) for x > 0 using the table paired with the pow table."""
    _require_tables()
    return _fast_log.log2(x)


def fast_pow(base: ArrayLike, exponent: ArrayLike):
    """
    Approximate ``base ** exponent`` for base > 0.

    Accepts Python floats or numpy arrays (broadcast together).
    """
    _require_tables()
    return _pow_from_log2(_fast_log.log2(base), exponent)


def fast_pow_constant_base(radix_log2: float, exponent: ArrayLike):
    """
    Approximate ``radix ** exponent`` for a radix fixed in advance.

    Args:
        radix_log2: ``base_representation(radix)``, i.e. one over
            the log, to the required radix, of two
        exponent: power to raise the radix to
    """
    _require_tables()
    return _pow_from_log2(radix_log2, exponent)


def base_representation(radix: float) -> float:
    """Representation of ``radix`` for use in :func:`fast_pow_constant_base`."""
    return math.log2(radix)


BASE_TWO = base_representation(2.0)


def fast_exp(x: ArrayLike):
    """Approximate e ** x."""
    return fast_pow_constant_base(LOG2_E, x)


def very_fast_pow(a: ArrayLike, b: ArrayLike):
    """
    Very fast, but with appreciable inaccuracy (a few percent).

    Martin Ankerl's float64 trick: treats the high word of ``a`` as a
    scaled log2 and rescales it by ``b``. Needs no tables. ``a`` must be
    positive.
    """
    a = np.asarray(a, dtype=np.float64)
    high = a.view(np.int64) >> 32
    bits = (np.multiply(b, high - 1072632447) + 1072632447).astype(np.int64) << 32
    result = np.asarray(bits, dtype=np.int64).view(np.float64)
    if result.ndim == 0:
        return float(result)
    return result
