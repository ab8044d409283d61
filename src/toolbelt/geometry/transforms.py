"""Angle unit conversions.

Both directions accept ints and floats and always return a float.
"""

from __future__ import annotations

import math


def radians(degrees: float) -> float:
    """Convert an angle in degrees to radians.

    Example:
        >>> radians(180) == math.pi
        True
    """
    return math.pi * float(degrees) / 180


def degrees(radians: float) -> float:
    """Convert an angle in radians to degrees.

    Example:
        >>> degrees(math.pi)
        180.0
    """
    return float(radians) / math.pi * 180
