"""Sineplot - Render images as sine-wave line art.

Sineplot downsamples a raster image to a grid of brightness cells and draws
every grid row as one continuous sine wave whose amplitude follows the
darkness of the underlying cells.

Example:
    $ sineplot lincoln.jpeg

This will create lincoln_sine.jpg next to the source image.
"""

__version__ = "0.1.0"
__author__ = "Sineplot contributors"

__all__ = ["__author__", "__version__"]
