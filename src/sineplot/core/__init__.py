"""Core drawing algorithms for sineplot.

This module contains:

- The generic implicit-curve rasterizer (plain, thick and anti-aliased)
- Quarter-sine curves and their composition into full periods and waves
- The plotter mapping image brightness to wave amplitude

Key classes:
- Curve: Abstract base for rasterizable shapes
- QuarterSine: One quarter of a sine period
- Sine: Four chained quarters
- AngledLine: Straight line, for checking the rasterizer
- Plotter: Draws an image as rows of sine waves

Key functions:
- walk: Pixels visited along a curve
- draw_wave: Draw consecutive sine periods
"""

from sineplot.core.curve import Curve
from sineplot.core.lines import AngledLine
from sineplot.core.plotter import Plotter
from sineplot.core.rasterizer import (
    antialiased_value,
    draw,
    draw_antialiased,
    draw_thick,
    next_point,
    walk,
)
from sineplot.core.sine import (
    QUARTER_SINE_ANTIALIAS_THRESHOLD,
    QuarterSine,
    Sine,
    SineQuadrant,
    draw_wave,
)

__all__ = [
    "QUARTER_SINE_ANTIALIAS_THRESHOLD",
    "AngledLine",
    "Curve",
    "Plotter",
    "QuarterSine",
    "Sine",
    "SineQuadrant",
    "antialiased_value",
    "draw",
    "draw_antialiased",
    "draw_thick",
    "draw_wave",
    "next_point",
    "walk",
]
