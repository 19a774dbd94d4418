"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from sineplot.config import (
    CanvasConfig,
    GridConfig,
    StrokeConfig,
    get_default_settings,
)


class TestSettings:
    """Tests for default and validated settings."""

    def test_defaults(self) -> None:
        """Test default values match the CLI defaults."""
        settings = get_default_settings()

        assert settings.grid.rows == 50
        assert settings.grid.columns == 50
        assert settings.grid.scale_percent == 100
        assert settings.stroke.thickness == 4
        assert settings.stroke.antialiased is False
        assert settings.stroke.oscillations == 1
        assert settings.stroke.brightness_threshold == 255
        assert settings.canvas.border_percent == 5
        assert settings.logging.log_file is None

    def test_rows_must_be_positive(self) -> None:
        """Test that an empty grid is rejected."""
        with pytest.raises(ValidationError):
            GridConfig(rows=0)

    def test_threshold_range(self) -> None:
        """Test that the brightness ceiling must be a byte."""
        with pytest.raises(ValidationError):
            StrokeConfig(brightness_threshold=256)

    def test_negative_thickness(self) -> None:
        """Test that thickness cannot be negative."""
        with pytest.raises(ValidationError):
            StrokeConfig(thickness=-1)

    def test_border_range(self) -> None:
        """Test border bounds."""
        assert CanvasConfig(border_percent=0).border_percent == 0
        with pytest.raises(ValidationError):
            CanvasConfig(border_percent=101)
