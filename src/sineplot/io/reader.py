"""Source image reader.

This module provides the ImageReader class for decoding a source image
and downsampling it to a grid of luminance cells.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from sineplot.domain import BrightnessGrid
from sineplot.exceptions import ImageLoadError


class ImageReader:
    """Loads a raster image and resamples it to a brightness grid.

    Example:
        with ImageReader(Path("lincoln.jpeg")) as reader:
            grid = reader.resample(50, 50)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to any image format Pillow can decode
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Open and decode the image.

        Raises:
            ImageLoadError: If the file is missing, unreadable or undecodable
        """
        if not self._image_path.exists():
            raise ImageLoadError(str(self._image_path), "file not found")

        try:
            with Image.open(self._image_path) as image:
                image.load()
                # Resample in a colour mode, reduce to luminance afterwards.
                if image.mode not in ("L", "RGB"):
                    image = image.convert("RGB")
                self._image = image.copy()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageLoadError(str(self._image_path), str(e)) from e

    def _loaded(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def width(self) -> int:
        """Width of the source image in pixels.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._loaded().width

    @property
    def height(self) -> int:
        """Height of the source image in pixels.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self._loaded().height

    @property
    def mode(self) -> str:
        """Pillow mode of the decoded image."""
        return self._loaded().mode

    def resample(self, width: int, height: int) -> BrightnessGrid:
        """Downsample the image to exactly ``width`` x ``height`` cells.

        Uses the triangle (bilinear) filter, which is deterministic, and
        converts the result to 8-bit luminance.

        Args:
            width: Number of cells per row
            height: Number of rows

        Returns:
            Brightness grid, row 0 at the top of the image

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        resized = self._loaded().resize((width, height), Image.Resampling.BILINEAR)
        luminance = resized.convert("L")
        return BrightnessGrid(width=width, height=height, values=luminance.tobytes())

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "ImageReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
