"""Sine waves assembled from quarter-period curves.

A full sine period is not a valid curve for the rasterizer since its
tangent changes compass class twice. It is therefore split into four
quarters, each of which is monotonic on both axes and implemented as a
:class:`~sineplot.core.curve.Curve`. Periods are chained end to end to
form a wave.

Key classes:
- SineQuadrant: Which quarter of a period a segment covers
- QuarterSine: One quarter period, rasterizable
- Sine: One full period made of four chained quarters

Key functions:
- draw_wave: Draw several consecutive periods
"""

import math
from enum import Enum

from sineplot.core.curve import Curve
from sineplot.domain import Point, XYDrawable

# Fixed calibration shared by every quarter sine.
QUARTER_SINE_ANTIALIAS_THRESHOLD = math.pi


class SineQuadrant(Enum):
    """Quadrant of a sine wave travelling towards +x."""

    FIRST = 1  # [0, PI/2]
    SECOND = 2  # [PI/2, PI]
    THIRD = 3  # [PI, 3*PI/2]
    FOURTH = 4  # [3*PI/2, 2*PI]

    def rise(self, amplitude: int) -> int:
        """Vertical displacement covered by this quadrant."""
        if self in (SineQuadrant.FIRST, SineQuadrant.FOURTH):
            return amplitude
        return -amplitude

    def stop(self, start: Point, amplitude: int, quarter_wavelength: int) -> Point:
        """Stop point of a quarter starting at ``start``."""
        return start.offset(quarter_wavelength, self.rise(amplitude))


class QuarterSine(Curve):
    """A quarter period of a sine wave.

    The stop point is computed once from the quadrant, and amplitude and
    quarter wavelength are cached as floats for the equation.

    Attributes:
        quadrant: Which quarter of the period this segment covers
        amplitude: Half the peak-to-peak height, in pixels
        quarter_wavelength: Horizontal extent of the segment, in pixels
    """

    def __init__(
        self,
        start: Point,
        quadrant: SineQuadrant,
        amplitude: int,
        quarter_wavelength: int,
    ) -> None:
        if quarter_wavelength < 1:
            raise ValueError(
                f"Quarter wavelength must be at least 1 pixel, got {quarter_wavelength}"
            )
        if amplitude < 0:
            raise ValueError(f"Amplitude must be non-negative, got {amplitude}")

        self._start = start
        self._stop = quadrant.stop(start, amplitude, quarter_wavelength)
        self.quadrant = quadrant
        self.amplitude = float(amplitude)
        self.quarter_wavelength = float(quarter_wavelength)

    @property
    def start(self) -> Point:
        return self._start

    @property
    def stop(self) -> Point:
        return self._stop

    def equation(self, point: Point) -> float:
        """Evaluate the quadrant equation with the origin moved to ``start``."""
        x = float(point.x - self._start.x)
        y = float(point.y - self._start.y)
        phase = x * math.pi / (2.0 * self.quarter_wavelength)

        if self.quadrant is SineQuadrant.FIRST:
            return y - self.amplitude * math.sin(phase)
        if self.quadrant is SineQuadrant.SECOND:
            return y - self.amplitude * (math.cos(phase) - 1.0)
        if self.quadrant is SineQuadrant.THIRD:
            return y + self.amplitude * math.sin(phase)
        return y + self.amplitude * (math.cos(phase) - 1.0)

    def antialiased_threshold(self) -> float:
        return QUARTER_SINE_ANTIALIAS_THRESHOLD

    def __repr__(self) -> str:
        return (
            f"QuarterSine({self._start}, {self.quadrant.name}, "
            f"amplitude={self.amplitude}, quarter_wavelength={self.quarter_wavelength})"
        )


class Sine:
    """One full sine period, drawn as its four constituent quarters.

    Each quarter starts where the previous one stops, so the period ends at
    the starting height, 4 * quarter_wavelength pixels to the right.

    Example:
        sine = Sine(Point(0, 100), amplitude=50, quarter_wavelength=10)
        sine.draw_thick(canvas, thickness=2)
        sine.next().draw_thick(canvas, thickness=2)
    """

    def __init__(self, start: Point, amplitude: int, quarter_wavelength: int) -> None:
        self.start = start
        self.amplitude = amplitude
        self.quarter_wavelength = quarter_wavelength

        quarters = []
        current = start
        for quadrant in SineQuadrant:
            quarter = QuarterSine(current, quadrant, amplitude, quarter_wavelength)
            quarters.append(quarter)
            current = quarter.stop
        self._quarters = tuple(quarters)

    def quarters(self) -> tuple[QuarterSine, QuarterSine, QuarterSine, QuarterSine]:
        """Return the four chained quarters, first to fourth."""
        return self._quarters  # type: ignore[return-value]

    @property
    def stop(self) -> Point:
        """Last point of the fourth quarter."""
        return self._quarters[-1].stop

    def next(self) -> "Sine":
        """The period immediately following this one."""
        return Sine(self.stop, self.amplitude, self.quarter_wavelength)

    def draw(self, canvas: XYDrawable) -> None:
        for quarter in self._quarters:
            quarter.draw(canvas)

    def draw_thick(self, canvas: XYDrawable, thickness: int) -> None:
        for quarter in self._quarters:
            quarter.draw_thick(canvas, thickness)

    def draw_antialiased(self, canvas: XYDrawable) -> None:
        for quarter in self._quarters:
            quarter.draw_antialiased(canvas)


def draw_wave(
    canvas: XYDrawable,
    start: Point,
    amplitude: int,
    quarter_wavelength: int,
    oscillations: int,
    thickness: int | None = None,
    antialiased: bool = False,
) -> Point:
    """Draw ``oscillations`` consecutive sine periods.

    Args:
        canvas: Canvas to draw on
        start: Start of the first period
        amplitude: Amplitude shared by all periods
        quarter_wavelength: Quarter wavelength shared by all periods
        oscillations: Number of periods to draw
        thickness: Horizontal half-width; None draws one pixel wide
        antialiased: Draw anti-aliased one pixel wide lines, ignoring thickness

    Returns:
        Stop point of the last period

    Raises:
        ValueError: If oscillations is less than 1
    """
    if oscillations < 1:
        raise ValueError(f"At least one oscillation is required, got {oscillations}")

    sine = Sine(start, amplitude, quarter_wavelength)
    for i in range(oscillations):
        if i:
            sine = sine.next()
        if antialiased:
            sine.draw_antialiased(canvas)
        elif thickness is None:
            sine.draw(canvas)
        else:
            sine.draw_thick(canvas, thickness)
    return sine.stop
