"""Geometry primitives for toolbelt.

This module provides immutable Pydantic models for points, sizes,
rectangles and edge insets in screen points. Coordinates follow the UI
convention where (0, 0) is the top-left corner and y grows downward.

Values are immutable: operations that "set" a property (for example the
center of a rectangle) return a new instance instead.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class _Value(BaseModel):
    """Shared model configuration for geometry values."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class Point(_Value):
    """A 2D point.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
    """

    x: float = Field(default=0.0, description="X coordinate")
    y: float = Field(default=0.0, description="Y coordinate")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])

    def __mul__(self, multiplier: float) -> Point:
        return Point(x=self.x * multiplier, y=self.y * multiplier)


class Size(_Value):
    """A 2D size.

    Unlike a Rect's extent, a Size may be zero or negative; such sizes are
    reported as empty.

    Attributes:
        width: Horizontal extent.
        height: Vertical extent.
    """

    width: float = Field(default=0.0, description="Width")
    height: float = Field(default=0.0, description="Height")

    @property
    def is_empty(self) -> bool:
        """Return whether the size has no positive area.

        True when either dimension is zero or negative.
        """
        return self.width <= 0 or self.height <= 0

    @property
    def area(self) -> float:
        """Calculate the area (zero for empty sizes)."""
        if self.is_empty:
            return 0.0
        return self.width * self.height

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)

    @classmethod
    def from_tuple(cls, size: tuple[float, float]) -> Self:
        """Create Size from (width, height) tuple."""
        return cls(width=size[0], height=size[1])


class EdgeInsets(_Value):
    """Distances to inset each edge of a rectangle.

    Attributes:
        top: Inset of the top edge.
        left: Inset of the left edge.
        bottom: Inset of the bottom edge.
        right: Inset of the right edge.
    """

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def zero(cls) -> Self:
        """Insets of zero on every edge."""
        return cls()

    @classmethod
    def uniform(cls, inset: float) -> Self:
        """Create insets with the same value on all four edges.

        Example:
            >>> EdgeInsets.uniform(8).to_tuple()
            (8.0, 8.0, 8.0, 8.0)
        """
        return cls(top=inset, left=inset, bottom=inset, right=inset)

    @classmethod
    def symmetric(cls, horizontal: float = 0.0, vertical: float = 0.0) -> Self:
        """Create insets from a horizontal and a vertical value.

        Args:
            horizontal: Inset applied to the left and right edges.
            vertical: Inset applied to the top and bottom edges.
        """
        return cls(top=vertical, left=horizontal, bottom=vertical, right=horizontal)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (top, left, bottom, right) tuple."""
        return (self.top, self.left, self.bottom, self.right)


class Rect(_Value):
    """A rectangle defined by its origin and size.

    Attributes:
        x: Left edge X coordinate.
        y: Top edge Y coordinate.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float = Field(default=0.0, description="Left edge X coordinate")
    y: float = Field(default=0.0, description="Top edge Y coordinate")
    width: float = Field(default=0.0, description="Width")
    height: float = Field(default=0.0, description="Height")

    @classmethod
    def square(cls, side: float) -> Self:
        """Create a square at the origin.

        Example:
            >>> Rect.square(10).to_tuple()
            (0.0, 0.0, 10.0, 10.0)
        """
        return cls(x=0, y=0, width=side, height=side)

    @property
    def origin(self) -> Point:
        """Return the top-left corner as a Point."""
        return Point(x=self.x, y=self.y)

    @property
    def size(self) -> Size:
        """Return the dimensions as a Size."""
        return Size(width=self.width, height=self.height)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        """Return the center point."""
        return Point(x=self.mid_x, y=self.mid_y)

    def with_center(self, center: Point) -> Rect:
        """Return a rect of the same size moved so that it is centered on `center`.

        Args:
            center: The new center point.

        Returns:
            Rect whose origin is ``center - size / 2``.
        """
        return Rect(
            x=center.x - self.width / 2,
            y=center.y - self.height / 2,
            width=self.width,
            height=self.height,
        )

    def with_size(self, size: Size) -> Rect:
        """Return a rect with the same origin and the given size."""
        return Rect(x=self.x, y=self.y, width=size.width, height=size.height)

    def scaled(self, multiplier: float) -> Rect:
        """Scale origin and size uniformly.

        ``rect *= k`` is the in-place spelling of ``rect = rect.scaled(k)``.

        Args:
            multiplier: Scale factor applied to every component.

        Returns:
            The scaled rect.
        """
        return Rect(
            x=self.x * multiplier,
            y=self.y * multiplier,
            width=self.width * multiplier,
            height=self.height * multiplier,
        )

    def __mul__(self, multiplier: float) -> Rect:
        return self.scaled(multiplier)

    def inset_by(self, insets: EdgeInsets) -> Rect:
        """Shrink the rect by the given insets."""
        return Rect(
            x=self.x + insets.left,
            y=self.y + insets.top,
            width=self.width - insets.left - insets.right,
            height=self.height - insets.top - insets.bottom,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_tuple(cls, bbox: tuple[float, float, float, float]) -> Self:
        """Create Rect from (x, y, width, height) tuple."""
        return cls(x=bbox[0], y=bbox[1], width=bbox[2], height=bbox[3])
