"""Configuration management for stylizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ShapeDefaults: Defaults for point markers
- StrokeDefaults: Defaults for strokes
- SldConfig: SLD export settings
- LoggingConfig: Logging settings
- StylizerSettings: Main application settings
"""

from stylizer.config.settings import (
    LoggingConfig,
    ShapeDefaults,
    SldConfig,
    StrokeDefaults,
    StylizerSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ShapeDefaults",
    "SldConfig",
    "StrokeDefaults",
    "StylizerSettings",
    "get_default_settings",
]
