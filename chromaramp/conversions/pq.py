"""SMPTE ST 2084 perceptual quantizer, shared by ICtCp and JzAzBz."""

import numpy as np
from numpy.typing import NDArray

PQ_M1 = 2610.0 / 16384.0
PQ_M2 = 2523.0 / 4096.0 * 128.0
PQ_C1 = 3424.0 / 4096.0
PQ_C2 = 2413.0 / 4096.0 * 32.0
PQ_C3 = 2392.0 / 4096.0 * 32.0

# Peak luminance of the PQ signal range, cd/m^2
PQ_PEAK = 10000.0


def pq_encode(y: NDArray, m2: float = PQ_M2) -> NDArray:
    """Linear luminance normalised to ``PQ_PEAK`` -> PQ signal."""
    ym = np.maximum(y, 0.0) ** PQ_M1
    return ((PQ_C1 + PQ_C2 * ym) / (1.0 + PQ_C3 * ym)) ** m2


def pq_decode(e: NDArray, m2: float = PQ_M2) -> NDArray:
    em = np.maximum(e, 0.0) ** (1.0 / m2)
    return (np.maximum(em - PQ_C1, 0.0) / (PQ_C2 - PQ_C3 * em)) ** (1.0 / PQ_M1)
