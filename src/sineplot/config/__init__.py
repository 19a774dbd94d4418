"""Configuration management for sineplot.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GridConfig: Cell grid dimensions and source scaling
- StrokeConfig: Line thickness, anti-aliasing and oscillation settings
- CanvasConfig: Output canvas border
- LoggingConfig: Logging settings
- SineplotSettings: Main application settings
"""

from sineplot.config.settings import (
    CanvasConfig,
    GridConfig,
    LoggingConfig,
    SineplotSettings,
    StrokeConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "GridConfig",
    "LoggingConfig",
    "SineplotSettings",
    "StrokeConfig",
    "get_default_settings",
]
