"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for row drawing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sineplot[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(image_path: str, width: int, height: int, mode: str) -> None:
    """Print source image information.

    Args:
        image_path: Path to the source image
        width: Source width in pixels
        height: Source height in pixels
        mode: Pillow colour mode of the decoded image
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(image_path)
    line1.append(f" ({mode})")
    console.print(line1)
    console.print(f"  {width:,} x {height:,} pixels")


def print_layout_info(
    rows: int,
    columns: int,
    canvas_width: int,
    canvas_height: int,
    verbose: bool,
    cell_width: int | None = None,
    cell_height: int | None = None,
) -> None:
    """Print grid and canvas layout.

    Args:
        rows: Number of wave rows
        columns: Oscillation cells per row
        canvas_width: Full canvas width in pixels
        canvas_height: Full canvas height in pixels
        verbose: Whether to show cell sizes
        cell_width: Width of one cell in pixels
        cell_height: Height of one cell in pixels
    """
    console.print(
        f"  {rows} rows {SYM_DOT} {columns} columns {SYM_DOT} "
        f"canvas {canvas_width:,} x {canvas_height:,}"
    )
    if verbose and cell_width is not None and cell_height is not None:
        console.print(f"  cells {cell_width} x {cell_height} pixels")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    rows: int,
    waves: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total drawing time in seconds
        rows: Number of rows drawn
        waves: Number of sine periods drawn
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {rows} rows {SYM_DOT} {waves} waves")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
