"""End-to-end tests that render single-cell images and verify the output."""

from pathlib import Path

import pytest
from PIL import Image

from sineplot.core import Plotter
from sineplot.domain import Point


def make_source(tmp_path: Path, name: str, value: int) -> Path:
    """Write a 1x1 grayscale image."""
    path = tmp_path / name
    Image.new("L", (1, 1), value).save(path)
    return path


class TestSingleCell:
    """One cell, one period, scale 100, thickness 1."""

    def test_white_source_draws_flat_line(self, tmp_path: Path):
        """A white cell gives amplitude 0: a flat line across the inner width."""
        plotter = Plotter(1, 1, make_source(tmp_path, "white.png", 255), 100)
        canvas = plotter.canvas

        assert (canvas.inner_width, canvas.inner_height) == (5, 5)
        assert plotter.max_amplitude == 2
        assert plotter.amplitude_at(0, 0) == 0
        assert plotter.row_start_y(0) == 2

        plotter.draw(thickness=1)

        for x in range(canvas.inner_width):
            assert canvas.get_point(Point(x, 2)) == 0
            for y in (0, 1, 3, 4):
                assert canvas.get_point(Point(x, y)) == 255

    def test_black_source_draws_tallest_wave(self, tmp_path: Path):
        """A black cell gives the maximum amplitude, staying inside the canvas."""
        plotter = Plotter(1, 1, make_source(tmp_path, "black.png", 0), 100)
        canvas = plotter.canvas

        assert plotter.amplitude_at(0, 0) == plotter.max_amplitude == 2

        plotter.draw(thickness=1)

        assert canvas.get_point(Point(0, 2)) == 0
        assert canvas.get_point(Point(1, 4)) == 0
        assert canvas.get_point(Point(2, 2)) == 0
        assert canvas.get_point(Point(3, 0)) == 0
        assert canvas.get_point(Point(4, 2)) == 0

    @pytest.mark.parametrize("extension", [".jpg", ".bmp", ".png"])
    def test_save_formats(self, tmp_path: Path, extension: str):
        """The rendered canvas can be written in common formats."""
        plotter = Plotter(1, 1, make_source(tmp_path, "black.png", 0), 100)
        plotter.draw(thickness=1)
        output = tmp_path / f"black_sine{extension}"
        plotter.save(output)

        with Image.open(output) as saved:
            assert saved.size == (5, 5)


class TestGradient:
    """A horizontal gradient maps to growing amplitudes."""

    def test_darker_cells_are_taller(self, tmp_path: Path):
        path = tmp_path / "gradient.png"
        image = Image.new("L", (256, 64))
        image.putdata([x for _ in range(64) for x in range(255, -1, -1)])
        image.save(path)

        plotter = Plotter(8, 2, path, 100)
        amplitudes = [plotter.amplitude_at(cx, 0) for cx in range(8)]

        assert amplitudes == sorted(amplitudes)
        assert amplitudes[0] < amplitudes[-1]

        stats = plotter.draw(thickness=2)
        assert stats.waves_drawn == 16
