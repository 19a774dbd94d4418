"""Downsampled brightness grid of a source image."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BrightnessGrid:
    """Luminance samples of a source image, one per cell.

    Row 0 is the top row of the source image.

    Attributes:
        width: Number of cells per row
        height: Number of rows
        values: Row-major 8-bit luminance samples (0 = black, 255 = white)
    """

    width: int
    height: int
    values: bytes

    def __post_init__(self) -> None:
        if len(self.values) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} samples, got {len(self.values)}"
            )

    def value(self, cx: int, cy: int) -> int:
        """Get the luminance of cell (cx, cy).

        Args:
            cx: Column index
            cy: Row index, 0 being the top of the image

        Returns:
            Luminance in the range 0-255

        Raises:
            IndexError: If the cell lies outside the grid
        """
        if not (0 <= cx < self.width and 0 <= cy < self.height):
            raise IndexError(f"Cell ({cx}, {cy}) outside {self.width}x{self.height} grid")
        return self.values[cy * self.width + cx]

    def row(self, cy: int) -> bytes:
        """Get all samples of row ``cy``."""
        if not 0 <= cy < self.height:
            raise IndexError(f"Row {cy} outside grid of height {self.height}")
        return self.values[cy * self.width : (cy + 1) * self.width]
