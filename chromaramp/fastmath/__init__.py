"""
Table-driven approximations of pow / log2 / exp / sin.

Call :func:`init` once (or :func:`ensure_initialised`) before using the
pow / log / exp functions. ``sin_quick`` and ``very_fast_pow`` need no
tables.
"""

from .fast_log import FastLog
from .fast_pow import (
    BASE_TWO,
    LOG2_E,
    ensure_initialised,
    fast_exp,
    fast_log2,
    fast_pow,
    fast_pow_constant_base,
    base_representation,
    get_precision,
    init,
    is_initialised,
    reset,
    very_fast_pow,
)
from .fast_trig import SIN_QUICK_MAX_ERROR, sin_quick

__all__ = [
    "FastLog",
    "BASE_TWO",
    "LOG2_E",
    "ensure_initialised",
    "fast_exp",
    "fast_log2",
    "fast_pow",
    "fast_pow_constant_base",
    "base_representation",
    "get_precision",
    "init",
    "is_initialised",
    "reset",
    "very_fast_pow",
    "SIN_QUICK_MAX_ERROR",
    "sin_quick",
]
