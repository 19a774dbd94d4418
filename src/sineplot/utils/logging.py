"""Logging utilities for Sineplot."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class PlotStats:
    """Statistics from a plotting run."""

    rows_drawn: int = 0
    waves_drawn: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate drawing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging through the standard library.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sineplot")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PlotLogger:
    """Logger for tracking drawing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PlotStats()

    def log_plot_start(self, rows: int, columns: int, thickness: int | None) -> None:
        """Log start of drawing."""
        self._stats.start_time = time.time()
        self._logger.info(
            "Drawing started",
            rows=rows,
            columns=columns,
            thickness=thickness,
        )

    def log_row_complete(self, row: int, waves: int, start_y: int) -> None:
        """Log a finished grid row."""
        self._logger.debug("Row drawn", row=row, waves=waves, start_y=start_y)
        self._stats.rows_drawn += 1
        self._stats.waves_drawn += waves

    def log_plot_complete(self) -> None:
        """Log end of drawing."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Drawing complete",
            rows=self._stats.rows_drawn,
            waves=self._stats.waves_drawn,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    def log_plot_error(self, row: int, error: Exception) -> None:
        """Log a drawing failure."""
        self._logger.error(
            "Drawing failed",
            row=row,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> PlotStats:
        """Get current drawing statistics."""
        return self._stats
