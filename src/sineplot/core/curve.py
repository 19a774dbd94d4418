"""Abstract curve understood by the rasterizer.

A curve is any shape described by an implicit equation f(x, y) that is
zero on the curve, walked from a known start point to a known stop point.
The magnitude of the equation is used as a distance proxy: the smaller
|f(p)|, the closer pixel p lies to the curve.
"""

from abc import ABC, abstractmethod

from sineplot.domain import Point, XYDrawable


class Curve(ABC):
    """Base class for shapes that can be rasterized pixel by pixel.

    Subclasses provide the endpoints, the implicit equation and the
    anti-aliasing calibration. Drawing is shared and delegates to
    :mod:`sineplot.core.rasterizer`.

    The equation must vanish at both endpoints, and the curve must not
    change compass class between them.
    """

    @property
    @abstractmethod
    def start(self) -> Point:
        """First pixel of the curve."""

    @property
    @abstractmethod
    def stop(self) -> Point:
        """Last pixel of the curve."""

    @abstractmethod
    def equation(self, point: Point) -> float:
        """Evaluate the implicit equation f(x, y) at ``point``."""

    @abstractmethod
    def antialiased_threshold(self) -> float:
        """|f| above which an anti-aliased pixel is left white."""

    def draw(self, canvas: XYDrawable) -> None:
        """Draw a one pixel wide line."""
        from sineplot.core import rasterizer

        rasterizer.draw(self, canvas)

    def draw_thick(self, canvas: XYDrawable, thickness: int) -> None:
        """Draw a line widened horizontally by ``thickness`` on either side."""
        from sineplot.core import rasterizer

        rasterizer.draw_thick(self, canvas, thickness)

    def draw_antialiased(self, canvas: XYDrawable) -> None:
        """Draw a one pixel wide line with soft grey edges."""
        from sineplot.core import rasterizer

        rasterizer.draw_antialiased(self, canvas)
