"""Generic curve rasterizer.

This module walks any :class:`~sineplot.core.curve.Curve` from its start to
its stop point using only the curve's implicit equation. At every step the
walk may move to one of three neighbours, fixed by the curve's slope class,
and picks the one where |f| is smallest. This is the midpoint (Bresenham)
algorithm generalized to arbitrary implicit curves.

Key functions:
- walk: Yield the pixels visited from start to stop
- next_point: Select the best next pixel
- antialiased_value: Intensity of a pixel for anti-aliased drawing
- draw, draw_thick, draw_antialiased: Write a walk to a canvas
"""

import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from sineplot.domain import Point, Slope, XYDrawable
from sineplot.exceptions import (
    AntialiasingThresholdError,
    CurveTraversalError,
    DegenerateCurveError,
    NonFiniteEquationError,
)

if TYPE_CHECKING:
    from sineplot.core.curve import Curve

# Pixel intensities
FOREGROUND = 0
BACKGROUND = 255


def _closest(curve: "Curve", candidates: Sequence[Point]) -> Point:
    """Pick the candidate with the smallest |f|, first one winning ties."""
    best = candidates[0]
    best_error = math.inf
    for candidate in candidates:
        error = abs(curve.equation(candidate))
        if not math.isfinite(error):
            raise NonFiniteEquationError(candidate)
        if error < best_error:
            best = candidate
            best_error = error
    return best


def next_point(curve: "Curve", slope: Slope, point: Point) -> Point:
    """Select the next pixel of a walk.

    Args:
        curve: Curve being walked
        slope: Slope class of the curve
        point: Current pixel

    Returns:
        The candidate neighbour closest to the curve

    Raises:
        NonFiniteEquationError: If the equation is NaN or infinite at a candidate
    """
    return _closest(curve, slope.candidates(point))


def walk(curve: "Curve") -> Iterator[Point]:
    """Yield every pixel of the curve from start to stop, both inclusive.

    The walk never backtracks, so it takes at most |dx| + |dy| steps. A curve
    whose tangent leaves its slope class overshoots the stop point and is
    reported instead of looping forever.

    Args:
        curve: Curve to walk

    Yields:
        Visited points in order

    Raises:
        DegenerateCurveError: If start equals stop
        CurveTraversalError: If the stop point is not reached
        NonFiniteEquationError: If the equation is NaN or infinite near the walk
    """
    start, stop = curve.start, curve.stop
    if start == stop:
        raise DegenerateCurveError(start)

    slope = Slope.between(start, stop)
    max_steps = abs(stop.x - start.x) + abs(stop.y - start.y)

    current = start
    steps = 0
    yield current
    while current != stop:
        if steps == max_steps:
            raise CurveTraversalError(start, stop, steps)
        current = next_point(curve, slope, current)
        steps += 1
        yield current


def antialiased_value(curve: "Curve", point: Point) -> int:
    """Intensity of ``point`` when drawing ``curve`` anti-aliased.

    Returns 255 when |f(point)| exceeds the curve's threshold, otherwise
    floor(|f| * 255 / threshold); pixels on the curve get 0.

    Raises:
        AntialiasingThresholdError: If the threshold is not strictly positive
        NonFiniteEquationError: If the equation is NaN or infinite at ``point``
    """
    threshold = curve.antialiased_threshold()
    if not threshold > 0:
        raise AntialiasingThresholdError(threshold)

    value = abs(curve.equation(point))
    if not math.isfinite(value):
        raise NonFiniteEquationError(point)
    if value > threshold:
        return BACKGROUND
    return math.floor(value * 255 / threshold)


def draw(curve: "Curve", canvas: XYDrawable) -> None:
    """Draw the walk of ``curve`` one pixel wide in the foreground colour."""
    for point in walk(curve):
        canvas.set_point(point, FOREGROUND)


def draw_thick(curve: "Curve", canvas: XYDrawable, thickness: int) -> None:
    """Draw the walk of ``curve`` as horizontal runs of 2 * thickness + 1 pixels.

    Runs are centred on each visited pixel and never start left of x = 0.
    The widening is horizontal whatever the local direction of the curve.

    Raises:
        ValueError: If thickness is negative
    """
    if thickness < 0:
        raise ValueError(f"Thickness must be non-negative, got {thickness}")

    for point in walk(curve):
        left = max(point.x - thickness, 0)
        length = point.x + thickness - left + 1
        canvas.set_horizontal_run(Point(left, point.y), FOREGROUND, length)


def draw_antialiased(curve: "Curve", canvas: XYDrawable) -> None:
    """Draw the walk of ``curve`` with grey edges.

    Every visited pixel and its three candidate neighbours are written with
    their anti-aliased intensity before the walk moves on.
    """
    antialiased_value(curve, curve.start)  # validate threshold before writing
    slope = Slope.between(curve.start, curve.stop)
    stop = curve.stop

    for point in walk(curve):
        canvas.set_point(point, antialiased_value(curve, point))
        if point == stop:
            break
        for candidate in slope.candidates(point):
            canvas.set_point(candidate, antialiased_value(curve, candidate))
