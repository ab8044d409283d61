"""Geometry module for toolbelt.

Value types and small conversions used by the UI helpers.

Key Components:
    - Primitives: Point, Size, Rect, EdgeInsets
    - Transforms: degrees <-> radians

Example:
    from toolbelt.geometry import Point, Rect

    rect = Rect.square(100)
    rect = rect.with_center(Point(x=200, y=200))
    rect *= 2
"""

from toolbelt.geometry.primitives import EdgeInsets, Point, Rect, Size
from toolbelt.geometry.transforms import degrees, radians

__all__ = [
    "EdgeInsets",
    "Point",
    "Rect",
    "Size",
    "degrees",
    "radians",
]
