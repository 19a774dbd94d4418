"""Tests for the generic curve rasterizer."""

import math

import pytest

from sineplot.core import AngledLine, Curve
from sineplot.core.rasterizer import (
    BACKGROUND,
    FOREGROUND,
    antialiased_value,
    draw,
    draw_antialiased,
    draw_thick,
    next_point,
    walk,
)
from sineplot.domain import Point, Slope
from sineplot.exceptions import (
    AntialiasingThresholdError,
    CurveTraversalError,
    DegenerateCurveError,
    NonFiniteEquationError,
)


class RecordingCanvas:
    """In-memory canvas recording every write."""

    def __init__(self) -> None:
        self.pixels: dict[Point, int] = {}
        self.writes: list[Point] = []
        self.runs: list[tuple[Point, int, int]] = []

    def set_point(self, point: Point, value: int) -> None:
        self.pixels[point] = value
        self.writes.append(point)

    def set_horizontal_run(self, point: Point, value: int, length: int) -> None:
        self.runs.append((point, value, length))
        for x in range(point.x, point.x + length):
            self.set_point(Point(x, point.y), value)

    def set_vertical_run(self, point: Point, value: int, length: int) -> None:
        self.runs.append((point, value, length))
        for y in range(point.y, point.y + length):
            self.set_point(Point(point.x, y), value)


class StubCurve(Curve):
    """Curve with a configurable equation and threshold."""

    def __init__(self, start, stop, equation, threshold=1.0) -> None:
        self._start = start
        self._stop = stop
        self._equation = equation
        self._threshold = threshold

    @property
    def start(self) -> Point:
        return self._start

    @property
    def stop(self) -> Point:
        return self._stop

    def equation(self, point: Point) -> float:
        return self._equation(point)

    def antialiased_threshold(self) -> float:
        return self._threshold


LINES = [
    (Point(0, 0), Point(10, 3)),
    (Point(0, 0), Point(3, 10)),
    (Point(0, 0), Point(7, 7)),
    (Point(10, 3), Point(0, 0)),
    (Point(0, 10), Point(7, 0)),
    (Point(7, 0), Point(0, 10)),
    (Point(2, 5), Point(12, 5)),
]


class TestNextPoint:
    """Tests for next pixel selection."""

    def test_picks_closest_candidate(self) -> None:
        """Test that the candidate with smallest |f| wins."""
        line = AngledLine(Point(0, 0), Point(10, 3))
        assert next_point(line, Slope.NORTH_EAST, Point(0, 0)) == Point(1, 0)

    def test_ties_go_to_first_candidate(self) -> None:
        """Test that ties keep enumeration order."""
        curve = StubCurve(Point(0, 0), Point(5, 5), lambda p: 0.0)
        assert next_point(curve, Slope.NORTH_EAST, Point(0, 0)) == Point(0, 1)

    def test_nan_raises(self) -> None:
        """Test that a NaN equation value is reported."""
        curve = StubCurve(Point(0, 0), Point(5, 5), lambda p: math.nan)
        with pytest.raises(NonFiniteEquationError, match="NaN encountered"):
            next_point(curve, Slope.NORTH_EAST, Point(0, 0))


class TestWalk:
    """Tests for walking a curve from start to stop."""

    @pytest.mark.parametrize(("start", "stop"), LINES)
    def test_walk_is_connected_and_minimal(self, start: Point, stop: Point) -> None:
        """Test that lines give a connected 8-path of max(|dx|, |dy|) + 1 pixels."""
        path = list(walk(AngledLine(start, stop)))

        assert path[0] == start
        assert path[-1] == stop
        assert len(path) == max(abs(stop.x - start.x), abs(stop.y - start.y)) + 1
        for a, b in zip(path, path[1:]):
            assert max(abs(b.x - a.x), abs(b.y - a.y)) == 1

    def test_walk_never_backtracks(self) -> None:
        """Test that every step keeps the slope's direction."""
        path = list(walk(AngledLine(Point(10, 3), Point(0, 0))))
        for a, b in zip(path, path[1:]):
            assert b.x <= a.x
            assert b.y <= a.y

    def test_degenerate_curve(self) -> None:
        """Test that start == stop is rejected."""
        line = AngledLine(Point(4, 4), Point(4, 4))
        with pytest.raises(DegenerateCurveError):
            list(walk(line))

    def test_wrong_direction_is_reported(self) -> None:
        """Test that a walk pulled away from its stop point fails instead of looping."""
        curve = StubCurve(Point(0, 0), Point(3, 3), lambda p: float(p.y))
        with pytest.raises(CurveTraversalError) as exc_info:
            list(walk(curve))
        assert exc_info.value.steps == 6


class TestAntialiasedValue:
    """Tests for anti-aliased intensity."""

    def test_on_curve_is_black(self) -> None:
        """Test that pixels on the curve get intensity 0."""
        line = AngledLine(Point(0, 0), Point(4, 4))
        for point in walk(line):
            assert antialiased_value(line, point) == 0

    def test_proportional_value(self) -> None:
        """Test floor(|f| * 255 / threshold) below the threshold."""
        line = AngledLine(Point(0, 0), Point(8, 2))
        # f(1, 0) = -2, threshold 8
        assert antialiased_value(line, Point(1, 0)) == 63

    def test_far_from_curve_is_white(self) -> None:
        """Test that |f| above the threshold gives 255."""
        line = AngledLine(Point(0, 0), Point(8, 2))
        assert antialiased_value(line, Point(0, 5)) == BACKGROUND

    def test_zero_threshold(self) -> None:
        """Test that a zero threshold is rejected."""
        curve = StubCurve(Point(0, 0), Point(3, 3), lambda p: 0.0, threshold=0.0)
        with pytest.raises(AntialiasingThresholdError):
            antialiased_value(curve, Point(0, 0))

    def test_non_finite_equation(self) -> None:
        """Test that an infinite equation value is rejected."""
        curve = StubCurve(Point(0, 0), Point(3, 3), lambda p: math.inf)
        with pytest.raises(NonFiniteEquationError):
            antialiased_value(curve, Point(0, 0))


class TestDraw:
    """Tests for writing walks to a canvas."""

    def test_draw_writes_foreground(self) -> None:
        """Test that a plain draw writes every visited pixel black."""
        canvas = RecordingCanvas()
        line = AngledLine(Point(0, 0), Point(5, 2))
        draw(line, canvas)

        assert canvas.writes == list(walk(line))
        assert set(canvas.pixels.values()) == {FOREGROUND}

    def test_curve_draw_method_delegates(self) -> None:
        """Test the Curve convenience method."""
        canvas = RecordingCanvas()
        line = AngledLine(Point(0, 0), Point(5, 2))
        line.draw(canvas)
        assert canvas.writes == list(walk(line))

    def test_draw_thick_runs(self) -> None:
        """Test centred horizontal runs clamped at x = 0."""
        canvas = RecordingCanvas()
        draw_thick(AngledLine(Point(0, 0), Point(3, 0)), canvas, thickness=2)

        assert canvas.runs == [
            (Point(0, 0), FOREGROUND, 3),
            (Point(0, 0), FOREGROUND, 4),
            (Point(0, 0), FOREGROUND, 5),
            (Point(1, 0), FOREGROUND, 5),
        ]

    def test_draw_thick_is_horizontal_for_vertical_curve(self) -> None:
        """Test that widening stays horizontal on a vertical segment."""
        canvas = RecordingCanvas()
        line = AngledLine(Point(5, 0), Point(5, 3))
        line.draw_thick(canvas, thickness=1)

        assert all(length == 3 for _, _, length in canvas.runs)
        assert {p.y for p in canvas.pixels} == {0, 1, 2, 3}
        assert {p.x for p in canvas.pixels} == {4, 5, 6}

    def test_draw_thick_zero_is_plain(self) -> None:
        """Test that thickness 0 writes single pixels."""
        canvas = RecordingCanvas()
        line = AngledLine(Point(0, 0), Point(4, 1))
        draw_thick(line, canvas, thickness=0)
        assert list(canvas.pixels) == list(walk(line))

    def test_draw_thick_negative(self) -> None:
        """Test that negative thickness is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            draw_thick(AngledLine(Point(0, 0), Point(3, 0)), RecordingCanvas(), -1)

    def test_draw_antialiased_writes_candidates(self) -> None:
        """Test that neighbours of the path get grey values too."""
        canvas = RecordingCanvas()
        line = AngledLine(Point(0, 0), Point(8, 2))
        draw_antialiased(line, canvas)

        path = list(walk(line))
        for point in path:
            assert point in canvas.pixels
        # (0, 1) is a candidate of the start but not on the path
        assert Point(0, 1) in canvas.pixels
        assert Point(0, 1) not in path
        assert all(0 <= value <= 255 for value in canvas.pixels.values())

    def test_draw_antialiased_rejects_zero_threshold_before_writing(self) -> None:
        """Test that nothing is drawn when the threshold is invalid."""
        canvas = RecordingCanvas()
        curve = StubCurve(Point(0, 0), Point(3, 3), lambda p: 0.0, threshold=0)
        with pytest.raises(AntialiasingThresholdError):
            curve.draw_antialiased(canvas)
        assert canvas.writes == []
