import numpy as np
import pytest

from chromaramp import fastmath
from chromaramp.defaults import DEFAULT_FAST_MATH_PRECISION


@pytest.fixture(autouse=True)
def fast_math_tables():
    """Every test starts with the tables built at the default precision."""
    fastmath.init(DEFAULT_FAST_MATH_PRECISION)
    yield
    fastmath.init(DEFAULT_FAST_MATH_PRECISION)


@pytest.fixture
def rng():
    return np.random.default_rng(20240518)


@pytest.fixture
def rgb_samples(rng):
    """Corners of the RGB cube, a few grays and random in-gamut triplets."""
    corners = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 1.0, 1.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 1.0],
        [1.0, 0.0, 1.0],
        [0.5, 0.5, 0.5],
        [0.02, 0.02, 0.02],
    ])
    return np.concatenate([corners, rng.random((200, 3))])
