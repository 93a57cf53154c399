import numpy as np

from chromaramp.fastmath import SIN_QUICK_MAX_ERROR, FastLog, sin_quick


def test_table_size():
    assert FastLog(11).table_size == 2048
    assert FastLog(0).table_size == 1


def test_exact_at_powers_of_two():
    log = FastLog(11)
    x = 2.0 ** np.arange(-30, 31)
    np.testing.assert_array_equal(log.log2(x), np.arange(-30, 31))


def test_interpolated_error_is_small():
    log = FastLog(11)
    x = np.geomspace(1e-3, 1e3, 5000)
    # float32 input rounding dominates the interpolation error
    assert np.abs(log.log2(x) - np.log2(x)).max() < 1e-6


def test_scalar_input():
    result = FastLog(8).log2(8.0)
    assert isinstance(result, float)
    assert result == 3.0


def test_sin_quick_error_bound():
    x = np.linspace(-10.0, 10.0, 20001)
    assert np.abs(sin_quick(x) - np.sin(x)).max() <= SIN_QUICK_MAX_ERROR + 1e-12


def test_sin_quick_zero():
    assert sin_quick(0.0) == 0.0
