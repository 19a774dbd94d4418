"""Pixel coordinates and walk directions.

This module defines the fundamental types used by the rasterizer:
- Point: An integer pixel coordinate in cartesian (Y-up) space
- Slope: The compass class of a curve, fixing which neighbours a walk may visit
"""

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel coordinate in cartesian space, Y increasing upward.

    Immutable and hashable, compared by value.

    Attributes:
        x: Column, counted from the left edge of the drawable region
        y: Row, counted from the bottom edge of the drawable region
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def offset(self, dx: int, dy: int) -> "Point":
        """Return the point displaced by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


class Slope(Enum):
    """Compass class of a curve between its start and stop points.

    A walk along a curve never reverses direction on either axis, so only
    three neighbouring pixels are ever valid next steps.
    """

    NORTH_EAST = auto()
    SOUTH_EAST = auto()
    SOUTH_WEST = auto()
    NORTH_WEST = auto()

    @classmethod
    def between(cls, start: Point, stop: Point) -> "Slope":
        """Classify the direction from start to stop.

        Equal coordinates fall into the West and South classes.

        Args:
            start: First point of the curve
            stop: Last point of the curve

        Returns:
            The slope class of the curve

        Examples:
            >>> Slope.between(Point(10, 10), Point(11, 9))
            <Slope.SOUTH_EAST: 2>
        """
        if start.x < stop.x:
            if start.y < stop.y:
                return cls.NORTH_EAST
            return cls.SOUTH_EAST
        if start.y < stop.y:
            return cls.NORTH_WEST
        return cls.SOUTH_WEST

    def candidates(self, point: Point) -> tuple[Point, Point, Point]:
        """Select the three points a walk may step to from ``point``.

        The order is fixed and breaks ties during the walk: the first axis
        neighbour, the diagonal, then the second axis neighbour.

        Args:
            point: Current point of the walk

        Returns:
            Tuple of three candidate points
        """
        x, y = point.x, point.y
        if self is Slope.NORTH_EAST:
            return (Point(x, y + 1), Point(x + 1, y + 1), Point(x + 1, y))
        if self is Slope.SOUTH_EAST:
            return (Point(x + 1, y), Point(x + 1, y - 1), Point(x, y - 1))
        if self is Slope.SOUTH_WEST:
            return (Point(x, y - 1), Point(x - 1, y - 1), Point(x - 1, y))
        return (Point(x - 1, y), Point(x - 1, y + 1), Point(x, y + 1))
