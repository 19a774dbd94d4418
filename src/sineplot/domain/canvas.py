"""Drawing capability required by the rasterizer."""

from typing import Protocol

from sineplot.domain.point import Point


class XYDrawable(Protocol):
    """Anything that accepts pixel writes in cartesian (Y-up) coordinates.

    Values are 8-bit intensities, 0 being the darkest.
    """

    def set_point(self, point: Point, value: int) -> None:
        """Set a single pixel."""
        ...

    def set_horizontal_run(self, point: Point, value: int, length: int) -> None:
        """Set ``length`` pixels starting at ``point`` towards +x."""
        ...

    def set_vertical_run(self, point: Point, value: int, length: int) -> None:
        """Set ``length`` pixels starting at ``point`` towards +y."""
        ...
