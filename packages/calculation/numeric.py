"""
32-bit numeric semantics shared by the combat formulas.

Game numbers are stored as 32-bit ints and single-precision floats, so a few
results only line up when the Python math is narrowed the same way:
- products are rounded as float32 before becoming ints
- float -> int casts truncate toward zero and saturate
- int arithmetic wraps around at 32 bits
"""

import math

import numpy as np

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "to_float32",
    "round_half_up",
    "truncate_to_int",
    "wrap_int32",
]


INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def to_float32(value: float) -> float:
    """Narrow a double to single precision (returned as a Python float).

    Values beyond the float32 range become +/-inf without a warning.
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def round_half_up(value: float) -> int:
    """
    Round a single-precision value to the nearest int, ties toward +inf.

    NaN gives 0 and out-of-range values saturate at the int32 bounds.
    """
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    # Exact in double precision for any float32 input
    return int(math.floor(value + 0.5))


def truncate_to_int(value: float) -> int:
    """Cast a float to an int32, truncating toward zero. NaN gives 0."""
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return int(value)


def wrap_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31
