"""CLI application entry point for sineplot.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from sineplot import __version__
from sineplot.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_layout_info,
    print_source_info,
    print_step,
    print_success,
)
from sineplot.config import (
    CanvasConfig,
    GridConfig,
    LoggingConfig,
    SineplotSettings,
    StrokeConfig,
)
from sineplot.core import Plotter
from sineplot.exceptions import (
    GridGeometryError,
    ImageLoadError,
    ImageSaveError,
    SineplotError,
)
from sineplot.io import ImageReader, get_sine_path
from sineplot.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="sineplot",
    help="Plot images as sine-wave art.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sineplot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def plot(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Source image",
            show_default=False,
        ),
    ],
    rows: Annotated[
        int,
        typer.Option(
            "-i",
            help="Number of rows of sine waves",
            min=1,
        ),
    ] = 50,
    columns: Annotated[
        int,
        typer.Option(
            "-j",
            help="Number of sine oscillations per row",
            min=1,
        ),
    ] = 50,
    scale: Annotated[
        int,
        typer.Option(
            "--scale",
            "-s",
            help="Percentage scaling of image resolution",
            min=1,
        ),
    ] = 100,
    thickness: Annotated[
        int,
        typer.Option(
            "--thickness",
            "-t",
            help="Thickness of line in pixels",
            min=0,
        ),
    ] = 4,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output image path (default: {input}_sine.jpg)",
        ),
    ] = None,
    antialias: Annotated[
        bool,
        typer.Option(
            "--antialias",
            "-a",
            help="Draw thin anti-aliased lines, ignoring --thickness",
        ),
    ] = False,
    oscillations: Annotated[
        int,
        typer.Option(
            "--oscillations",
            "-n",
            help="Sine periods drawn inside each cell",
            min=1,
        ),
    ] = 1,
    border: Annotated[
        int,
        typer.Option(
            "--border",
            "-b",
            help="Border around the drawing, as percent of its size",
            min=0,
            max=100,
        ),
    ] = 5,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            help="Brightness ceiling (0-255); brighter cells are clipped",
            min=0,
            max=255,
        ),
    ] = 255,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Plot an image as rows of sine waves whose amplitude follows darkness.

    Example:
        sineplot lincoln.jpeg -i 60 -j 40

    This will create lincoln_sine.jpg next to the source image.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = SineplotSettings(
        grid=GridConfig(rows=rows, columns=columns, scale_percent=scale),
        stroke=StrokeConfig(
            thickness=thickness,
            antialiased=antialias,
            oscillations=oscillations,
            brightness_threshold=threshold,
        ),
        canvas=CanvasConfig(border_percent=border),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    output_path = output if output is not None else get_sine_path(input_image)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_step("Loading image")
            with ImageReader(input_image) as reader:
                print_source_info(
                    image_path=str(input_image),
                    width=reader.width,
                    height=reader.height,
                    mode=reader.mode,
                )

        plotter = Plotter.from_settings(input_image, settings, logger=logger)

        if not quiet:
            print_layout_info(
                rows=rows,
                columns=columns,
                canvas_width=plotter.canvas.full_width,
                canvas_height=plotter.canvas.full_height,
                verbose=verbose,
                cell_width=plotter.cell_width,
                cell_height=plotter.cell_height,
            )
            print_step("Drawing")

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(f"Drawing {rows} rows", total=rows)

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = plotter.draw(
                    thickness=settings.stroke.thickness,
                    antialiased=settings.stroke.antialiased,
                    oscillations=settings.stroke.oscillations,
                    progress_callback=update_progress,
                )
        else:
            stats = plotter.draw(
                thickness=settings.stroke.thickness,
                antialiased=settings.stroke.antialiased,
                oscillations=settings.stroke.oscillations,
            )

        plotter.save(output_path)

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                rows=stats.rows_drawn,
                waves=stats.waves_drawn,
            )

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except ImageSaveError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except GridGeometryError as e:
        print_error(
            f"Invalid layout: {e.reason}",
            details="Try fewer rows or columns, or a larger --scale.",
        )
        raise typer.Exit(code=1)
    except SineplotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
