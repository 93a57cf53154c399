from boundednumbers.functions import cyclic_wrap_float


def approx_equal(a: float, b: float, tol: float) -> bool:
    """Check whether two floats are within ``tol`` of each other."""
    return abs(a - b) <= tol


def wrap_unit(value: float) -> float:
    """
    Bring a position into the unit interval.

    Values already inside [0, 1] are returned unchanged (1.0 stays 1.0);
    anything else is wrapped by floored modulo into [0, 1), so negative
    values wrap from the top.
    """
    if 0.0 <= value <= 1.0:
        return value
    return cyclic_wrap_float(value, 0.0, 1.0)
