"""Quick sine from a fixed lookup table (nearest entry, no interpolation)."""

import math

import numpy as np
from numpy.typing import ArrayLike

SIN_TABLE_BITS = 12
_SIN_TABLE_SIZE = 1 << SIN_TABLE_BITS
_SIN_INDEX_MASK = _SIN_TABLE_SIZE - 1
_INDEX_SCALE = _SIN_TABLE_SIZE / (2.0 * math.pi)

_SIN_TABLE = np.sin(np.arange(_SIN_TABLE_SIZE, dtype=np.float64) * (2.0 * math.pi / _SIN_TABLE_SIZE))

# max abs error of a nearest-entry lookup
SIN_QUICK_MAX_ERROR = math.pi / _SIN_TABLE_SIZE


def sin_quick(x: ArrayLike):
    """Approximate sin(x) for any real x (radians)."""
    index = np.rint(np.multiply(x, _INDEX_SCALE)).astype(np.int64) & _SIN_INDEX_MASK
    result = _SIN_TABLE[index]
    if np.ndim(result) == 0:
        return float(result)
    return result
