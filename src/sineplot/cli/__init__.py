"""Command-line interface for sineplot.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar while rows are drawn
- Verbose/quiet output modes
- Detailed error reporting
"""

from sineplot.cli.app import cli, main

__all__ = ["cli", "main"]
