"""
Table-driven base-2 logarithm over the IEEE-754 float32 bit layout.

The exponent field of a float32 already is the integer part of log2(x);
only the mantissa needs a lookup. The table samples log2(1 + m) at
2 ** precision regular steps of the mantissa m in [0, 1) and the lookup
interpolates linearly between neighbouring entries, so results are exact
at powers of two.
"""

import numpy as np
from numpy.typing import ArrayLike

_MANTISSA_BITS = 23
_MANTISSA_MASK = 0x7FFFFF
_EXPONENT_BIAS = 127


class FastLog:
    """
    Lookup-table log2.

    Inputs are read as float32. Zero maps to -127 and the sign bit is
    ignored, so callers must only pass positive values.
    """

    __slots__ = ("precision", "_table", "_shift", "_frac_mask", "_frac_scale")

    def __init__(self, precision: int) -> None:
        self.precision = precision
        size = 1 << precision
        # one extra entry so index + 1 is always valid
        self._table = np.log2(1.0 + np.arange(size + 1, dtype=np.float64) / size)
        self._shift = _MANTISSA_BITS - precision
        self._frac_mask = (1 << self._shift) - 1
        self._frac_scale = 1.0 / (1 << self._shift)

    @property
    def table_size(self) -> int:
        return len(self._table) - 1

    def log2(self, x: ArrayLike):
        bits = np.asarray(x, dtype=np.float32).view(np.int32).astype(np.int64)
        exponent = ((bits >> _MANTISSA_BITS) & 0xFF) - _EXPONENT_BIAS
        mantissa = bits & _MANTISSA_MASK
        index = mantissa >> self._shift
        frac = (mantissa & self._frac_mask) * self._frac_scale
        lo = self._table[index]
        hi = self._table[index + 1]
        result = exponent + lo + frac * (hi - lo)
        if np.ndim(result) == 0:
            return float(result)
        return result
