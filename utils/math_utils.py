"""
Numeric helpers shared by the scoring and aggregation layers
"""
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always rounding up

    Unlike the built-in round(), exact halves go up: round_half_up(18.5) == 19.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into [lower, upper]"""
    return max(lower, min(upper, value))
