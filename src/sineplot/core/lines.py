"""Straight line curve, mainly useful for checking the rasterizer."""

from sineplot.core.curve import Curve
from sineplot.domain import Point


class AngledLine(Curve):
    """Line segment between two pixels.

    The equation dx * (y - y0) - (x - x0) * dy is the perpendicular distance
    to the line scaled by its length, so it stays integral.
    """

    def __init__(self, start: Point, stop: Point) -> None:
        self._start = start
        self._stop = stop
        self.dx = stop.x - start.x
        self.dy = stop.y - start.y

    @property
    def start(self) -> Point:
        return self._start

    @property
    def stop(self) -> Point:
        return self._stop

    def equation(self, point: Point) -> int:
        return self.dx * (point.y - self._start.y) - (point.x - self._start.x) * self.dy

    def antialiased_threshold(self) -> int:
        # One pixel of distance along the major axis.
        return max(abs(self.dx), abs(self.dy))
