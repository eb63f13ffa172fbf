# utils/tolerance.py
import math
from utils.constants import EPSILON, HASH_PRECISION


def approx_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    """
    Check whether two floats differ by no more than the given tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Maximum allowed absolute difference

    Returns:
        True if |a - b| <= tolerance. Any comparison involving NaN is False.
    """
    return abs(a - b) <= tolerance


def is_approx_zero(value: float, tolerance: float = EPSILON) -> bool:
    """Check whether a float is within tolerance of zero."""
    return approx_equal(value, 0.0, tolerance)


def quantize(value: float, precision: float = HASH_PRECISION) -> float:
    """
    Snap a float onto a grid of the given precision for hashing.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return round(value / precision)
