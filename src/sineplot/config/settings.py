"""Configuration settings for Sineplot."""

from pathlib import Path

from pydantic import BaseModel, Field


class GridConfig(BaseModel):
    """Configuration for the brightness cell grid."""

    rows: int = Field(
        default=50,
        ge=1,
        description="Number of rows of sine waves (grid height)",
    )
    columns: int = Field(
        default=50,
        ge=1,
        description="Number of sine oscillation cells per row (grid width)",
    )
    scale_percent: int = Field(
        default=100,
        ge=1,
        description="Percentage scaling of the source image resolution",
    )


class StrokeConfig(BaseModel):
    """Configuration for how each wave is stroked."""

    thickness: int = Field(
        default=4,
        ge=0,
        description="Horizontal half-width of the line in pixels",
    )
    antialiased: bool = Field(
        default=False,
        description="Draw single-pixel anti-aliased lines instead of thick lines",
    )
    oscillations: int = Field(
        default=1,
        ge=1,
        description="Full sine periods drawn inside each cell",
    )
    brightness_threshold: int = Field(
        default=255,
        ge=0,
        le=255,
        description="Brightness ceiling; brighter cells are clipped to this value",
    )


class CanvasConfig(BaseModel):
    """Configuration for the output canvas."""

    border_percent: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Border added around the drawable region, as percent of its size",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SineplotSettings(BaseModel):
    """Main application settings."""

    grid: GridConfig = Field(default_factory=GridConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SineplotSettings:
    """Get default application settings."""
    return SineplotSettings()
