"""Image to sine-wave mapping.

The Plotter downsamples a source image to a grid of brightness cells and
draws every grid row as a chain of sine periods, one cell wide each, whose
amplitude grows with the darkness of the cell.

Canvas geometry (integer division throughout):
- inner width is a multiple of 4 * grid_width, plus one closing column
- inner height keeps the source aspect ratio
- full size adds ``border_percent`` to both dimensions
"""

from collections.abc import Callable
from pathlib import Path

import structlog

from sineplot.config import SineplotSettings
from sineplot.core.sine import draw_wave
from sineplot.domain import BrightnessGrid, Point
from sineplot.exceptions import GridGeometryError
from sineplot.io import Canvas, ImageReader
from sineplot.utils import PlotLogger, PlotStats

ProgressCallback = Callable[[int, int], None]


class Plotter:
    """Renders a source image as rows of sine waves.

    Example:
        plotter = Plotter(50, 50, Path("lincoln.jpeg"), scale_percent=100)
        plotter.draw(thickness=4)
        plotter.save(Path("lincoln_sine.jpg"))
    """

    def __init__(
        self,
        grid_width: int,
        grid_height: int,
        source: Path,
        scale_percent: int,
        border_percent: int = 5,
        brightness_threshold: int = 255,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Load the source image and allocate the canvas.

        Args:
            grid_width: Number of sine periods per row
            grid_height: Number of rows
            source: Path to the source image
            scale_percent: Scaling of the source resolution for the canvas
            border_percent: Border around the drawable region
            brightness_threshold: Cells brighter than this are clipped to it
            logger: Logger to use (module logger if None)

        Raises:
            GridGeometryError: If the parameters give an unusable layout
            ImageLoadError: If the source cannot be decoded
        """
        if grid_width < 1 or grid_height < 1:
            raise GridGeometryError(
                f"grid must be at least 1x1, got {grid_width}x{grid_height}"
            )
        if scale_percent < 1:
            raise GridGeometryError(f"scale must be at least 1%, got {scale_percent}%")
        if border_percent < 0:
            raise GridGeometryError(f"border must be non-negative, got {border_percent}%")
        if not 0 <= brightness_threshold <= 255:
            raise ValueError(
                f"Brightness threshold must be within 0-255, got {brightness_threshold}"
            )

        self._logger = logger or structlog.get_logger(__name__)
        self.brightness_threshold = brightness_threshold

        with ImageReader(Path(source)) as reader:
            source_width, source_height = reader.width, reader.height

            columns = 4 * grid_width
            inner_width = (source_width * scale_percent // 100 // columns + 1) * columns + 1
            inner_height = source_height * inner_width // source_width

            if inner_height // grid_height < 1:
                raise GridGeometryError(
                    f"{grid_height} rows do not fit a canvas {inner_height} pixels high"
                )

            self._canvas = Canvas(
                (
                    inner_height * (100 + border_percent) // 100,
                    inner_width * (100 + border_percent) // 100,
                ),
                (inner_height, inner_width),
            )
            self._grid = reader.resample(grid_width, grid_height)

        self._logger.info(
            "Plotter initialized",
            source=str(source),
            source_size=f"{source_width}x{source_height}",
            grid=f"{grid_width}x{grid_height}",
            canvas=f"{self._canvas.full_width}x{self._canvas.full_height}",
        )

    @classmethod
    def from_settings(
        cls,
        source: Path,
        settings: SineplotSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "Plotter":
        """Create a plotter from application settings."""
        return cls(
            grid_width=settings.grid.columns,
            grid_height=settings.grid.rows,
            source=source,
            scale_percent=settings.grid.scale_percent,
            border_percent=settings.canvas.border_percent,
            brightness_threshold=settings.stroke.brightness_threshold,
            logger=logger,
        )

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def grid(self) -> BrightnessGrid:
        return self._grid

    @property
    def cell_width(self) -> int:
        return (self._canvas.inner_width - 1) // self._grid.width

    @property
    def cell_height(self) -> int:
        return self._canvas.inner_height // self._grid.height

    @property
    def max_amplitude(self) -> int:
        """Largest amplitude a wave may have, 0.9 x half the cell height."""
        return self.cell_height * 9 // 20

    def quarter_wavelength(self, oscillations: int = 1) -> int:
        """Quarter wavelength when each cell holds ``oscillations`` periods.

        Raises:
            GridGeometryError: If the cell is too narrow for that many periods
        """
        if oscillations < 1:
            raise GridGeometryError(f"oscillations must be at least 1, got {oscillations}")
        quarter = self.cell_width // (4 * oscillations)
        if quarter < 1:
            raise GridGeometryError(
                f"cells {self.cell_width} pixels wide cannot hold {oscillations} oscillations"
            )
        return quarter

    def row_start_y(self, cell_y: int) -> int:
        """Centre line of grid row ``cell_y``; row 0 ends up at the top."""
        inner_height = self._canvas.inner_height
        rows = self._grid.height
        return (inner_height // 2 + inner_height * (rows - cell_y - 1)) // rows

    def amplitude_at(self, cell_x: int, cell_y: int) -> int:
        """Amplitude of the wave in cell (cell_x, cell_y); darker is taller."""
        amax = self.max_amplitude
        brightness = min(self._grid.value(cell_x, cell_y), self.brightness_threshold)
        return amax - amax * brightness // 255

    def draw(
        self,
        thickness: int,
        antialiased: bool = False,
        oscillations: int = 1,
        progress_callback: ProgressCallback | None = None,
    ) -> PlotStats:
        """Draw every grid row onto the canvas.

        Args:
            thickness: Horizontal half-width of the line
            antialiased: Draw one pixel wide anti-aliased lines instead
            oscillations: Sine periods per cell
            progress_callback: Called with (rows_done, total_rows) after each row

        Returns:
            Drawing statistics
        """
        cell_width = self.cell_width
        quarter = self.quarter_wavelength(oscillations)
        plot_logger = PlotLogger(self._logger)
        plot_logger.log_plot_start(
            rows=self._grid.height,
            columns=self._grid.width,
            thickness=None if antialiased else thickness,
        )

        for cell_y in range(self._grid.height):
            y = self.row_start_y(cell_y)
            try:
                for cell_x in range(self._grid.width):
                    # start from the cell index, not the previous stop, so periods never drift
                    draw_wave(
                        self._canvas,
                        Point(cell_width * cell_x, y),
                        self.amplitude_at(cell_x, cell_y),
                        quarter,
                        oscillations,
                        thickness=thickness,
                        antialiased=antialiased,
                    )
            except Exception as e:
                plot_logger.log_plot_error(cell_y, e)
                raise

            plot_logger.log_row_complete(cell_y, self._grid.width * oscillations, y)
            if progress_callback is not None:
                progress_callback(cell_y + 1, self._grid.height)

        plot_logger.log_plot_complete()
        return plot_logger.stats

    def save(self, path: Path) -> None:
        """Save the canvas.

        Raises:
            ImageSaveError: If the file cannot be written
        """
        self._canvas.save(path)
