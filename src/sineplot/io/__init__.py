"""Image I/O layer for sineplot.

This module handles decoding source images and writing the rendered
canvas using Pillow. It keeps Pillow out of the domain and core layers.

Key responsibilities:
- Decode source images and downsample them to brightness grids
- Hold the output pixel buffer with its border and coordinate flip
- Save the canvas and derive the default output path

Key classes:
- ImageReader: Load images and resample them to cells
- Canvas: Grayscale drawing surface
"""

from sineplot.io.canvas import Canvas, get_sine_path
from sineplot.io.reader import ImageReader

__all__ = [
    "Canvas",
    "ImageReader",
    "get_sine_path",
]
