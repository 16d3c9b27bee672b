import math


def is_close_to_zero(value: float, tol: float) -> bool:
    """Check if a float is within ``tol`` of zero."""
    return abs(value) < tol


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))
