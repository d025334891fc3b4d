"""Configuration settings for Stylizer."""

from pathlib import Path

from pydantic import BaseModel, Field


class ShapeDefaults(BaseModel):
    """Defaults applied to point markers built from the command line."""

    size: float = Field(
        default=6.0,
        gt=0.0,
        description="Marker size in pixels",
    )
    type: str = Field(
        default="circle",
        description="Well-known marker name (circle, square, triangle, star, cross, x)",
    )
    opacity: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fill opacity (0 transparent, 1 opaque)",
    )


class StrokeDefaults(BaseModel):
    """Defaults applied to strokes."""

    color: str = Field(
        default="#000000",
        description="Stroke color",
    )
    width: float = Field(
        default=1.0,
        ge=0.0,
        description="Stroke width in pixels",
    )


class SldConfig(BaseModel):
    """Configuration for SLD export."""

    version: str = Field(
        default="1.0.0",
        description="SLD version attribute",
    )
    pretty: bool = Field(
        default=True,
        description="Indent the generated XML",
    )
    style_name: str = Field(
        default="Default Styler",
        description="Name given to generated user styles",
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


class StylizerSettings(BaseModel):
    """Main application settings."""

    shape: ShapeDefaults = Field(default_factory=ShapeDefaults)
    stroke: StrokeDefaults = Field(default_factory=StrokeDefaults)
    sld: SldConfig = Field(default_factory=SldConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StylizerSettings:
    """Get default application settings."""
    return StylizerSettings()
