"""Grayscale canvas backed by a Pillow image.

The canvas holds a full-size image with a centred inner region. Drawing
happens in cartesian coordinates relative to the bottom-left corner of the
inner region; the canvas flips them into raster rows.
"""

from pathlib import Path

import structlog
from PIL import Image

from sineplot.domain import Point
from sineplot.exceptions import GridGeometryError, ImageSaveError

logger = structlog.get_logger(__name__)

WHITE = 255


class Canvas:
    """Pixel buffer with a border around the drawable region.

    Writes landing outside the full image are clipped.

    Example:
        canvas = Canvas(full_hw=(600, 600), inner_hw=(400, 400))
        canvas.set_point(Point(0, 0), 0)
        canvas.save(Path("out.bmp"))
    """

    def __init__(self, full_hw: tuple[int, int], inner_hw: tuple[int, int]) -> None:
        """Initialize a white canvas.

        Args:
            full_hw: (height, width) of the whole image, border included
            inner_hw: (height, width) of the drawable region

        Raises:
            GridGeometryError: If the inner region does not fit the full image
        """
        full_height, full_width = full_hw
        inner_height, inner_width = inner_hw
        if inner_height < 1 or inner_width < 1:
            raise GridGeometryError(
                f"inner canvas must be at least 1x1, got {inner_width}x{inner_height}"
            )
        if full_height < inner_height or full_width < inner_width:
            raise GridGeometryError(
                f"full canvas {full_width}x{full_height} smaller than "
                f"inner canvas {inner_width}x{inner_height}"
            )

        self.full_height = full_height
        self.full_width = full_width
        self.inner_height = inner_height
        self.inner_width = inner_width
        self.offset_height = (full_height - inner_height) // 2
        self.offset_width = (full_width - inner_width) // 2

        self._image = Image.new("L", (full_width, full_height), WHITE)
        self._pixels = self._image.load()

    @property
    def image(self) -> Image.Image:
        """The underlying Pillow image."""
        return self._image

    def _to_raster(self, x: int, y: int) -> tuple[int, int] | None:
        """Map cartesian (x, y) to a raster (column, row), None if off-image."""
        column = x + self.offset_width
        row = self.full_height - 1 - y - self.offset_height
        if 0 <= column < self.full_width and 0 <= row < self.full_height:
            return column, row
        return None

    def set_xy(self, x: int, y: int, value: int) -> None:
        """Set cartesian (x, y) to ``value``: x is the column, y the inverted row."""
        raster = self._to_raster(x, y)
        if raster is not None:
            self._pixels[raster] = value

    def set_point(self, point: Point, value: int) -> None:
        """Set a point in cartesian coordinates."""
        self.set_xy(point.x, point.y, value)

    def set_horizontal_run(self, point: Point, value: int, length: int) -> None:
        """Set ``length`` pixels from ``point`` towards +x."""
        for x in range(point.x, point.x + length):
            self.set_xy(x, point.y, value)

    def set_vertical_run(self, point: Point, value: int, length: int) -> None:
        """Set ``length`` pixels from ``point`` towards +y."""
        for y in range(point.y, point.y + length):
            self.set_xy(point.x, y, value)

    def get_point(self, point: Point) -> int | None:
        """Read the pixel at ``point``, None if it lies off the image."""
        raster = self._to_raster(point.x, point.y)
        if raster is None:
            return None
        return self._pixels[raster]

    def save(self, path: Path) -> None:
        """Save the canvas to disk, format chosen from the file extension.

        Raises:
            ImageSaveError: If the file cannot be encoded or written
        """
        try:
            self._image.save(path)
        except (OSError, ValueError) as e:
            raise ImageSaveError(str(path), str(e)) from e
        logger.info(
            "Canvas saved",
            path=str(path),
            width=self.full_width,
            height=self.full_height,
        )


def get_sine_path(input_path: Path) -> Path:
    """Generate the default output path for a source image.

    Converts: lincoln.jpeg -> lincoln_sine.jpg

    Args:
        input_path: Source image path

    Returns:
        Path next to the source with a _sine suffix and .jpg extension
    """
    return input_path.parent / f"{input_path.stem}_sine.jpg"
