"""Domain models for sineplot.

This module contains the value types shared by the rasterizer, the wave
composer and the plotter. They are independent of Pillow.

Key classes:
- Point: An integer pixel coordinate (Y-up)
- Slope: Compass class of a curve walk
- BrightnessGrid: Downsampled luminance samples of the source image
- XYDrawable: Pixel-writing capability consumed by the rasterizer
"""

from sineplot.domain.canvas import XYDrawable
from sineplot.domain.grid import BrightnessGrid
from sineplot.domain.point import Point, Slope

__all__: list[str] = [
    # Enums
    "Slope",
    # Core types
    "Point",
    "BrightnessGrid",
    "XYDrawable",
]
