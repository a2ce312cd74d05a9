"""
Small numeric helpers shared by the transforms.
"""

import math

import numpy as np


def lerp(a, b, t):
    """
    Linearly interpolate between a and b.

    t is typically 0..1 but may over- or undershoot.

    Example:
        >>> lerp(0, 125, 0.25)
        31.25
    """
    return a + (b - a) * t


def clamp(min_value, max_value, value):
    """Keep value within [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def tint_to_multiplier(tint: float) -> float:
    """Convert a 0..255 tint component to a 0..1 multiplier (255 -> 1.0)."""
    return tint / 255 if tint > 0 else 0


def round_half_up(x):
    """Round to nearest, .5 always up. Works on scalars and arrays."""
    if isinstance(x, np.ndarray):
        return np.floor(x + 0.5)
    return math.floor(x + 0.5)


def store_byte(x):
    """
    Convert a float to the byte a clamped 8-bit store would hold.

    Clamps to [0, 255] then rounds half to even. Works on scalars and arrays.
    """
    if isinstance(x, np.ndarray):
        return np.rint(np.clip(x, 0, 255)).astype(np.uint8)
    return int(round(clamp(0, 255, x)))
