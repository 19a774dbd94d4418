"""Utility functions for sineplot.

This module provides utility functions including:

- Logging setup and configuration
- Drawing progress and statistics tracking
"""

from sineplot.utils.logging import (
    PlotLogger,
    PlotStats,
    configure_logging,
)

__all__ = [
    "PlotLogger",
    "PlotStats",
    "configure_logging",
]
