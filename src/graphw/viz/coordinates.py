"""2D points and canvas bounds for graph layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point.

    Attributes:
        x: X coordinate (grows to the right)
        y: Y coordinate (grows downward, screen convention)

    Example:
        >>> p1 = Point(10, 20)
        >>> p2 = Point(5, 5)
        >>> p3 = p1 + p2
        >>> p3.x, p3.y
        (15, 25)
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        """Add two points coordinate-wise.

        Example:
            >>> Point(1, 2) + Point(3, 4)
            Point(x=4, y=6)
        """
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        """Subtract two points coordinate-wise.

        Example:
            >>> Point(5, 10) - Point(2, 3)
            Point(x=3, y=7)
        """
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Point:
        """Multiply both coordinates by ``factor``."""
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance.

        Example:
            >>> Point(0, 0).distance_to(Point(3, 4))
            5.0
        """
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Canvas:
    """Drawing surface size in pixels.

    Example:
        >>> Canvas().center
        Point(x=320.0, y=240.0)
    """

    width: int = 640
    height: int = 480

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def min_dimension(self) -> int:
        return min(self.width, self.height)

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the canvas (edges included)."""
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height
