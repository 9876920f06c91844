"""Configuration settings for vectorpad."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for path geometry queries and editing."""

    nearest_threshold: float = Field(
        default=10.0,
        gt=0.0,
        description="Maximum distance at which a segment counts as nearest",
    )
    projection_samples: int = Field(
        default=32,
        ge=4,
        le=1024,
        description="Uniform samples used to seed cubic curve projection",
    )
    newton_iterations: int = Field(
        default=8,
        ge=0,
        le=64,
        description="Newton refinement steps for cubic curve projection",
    )
    hit_radius: float = Field(
        default=6.0,
        gt=0.0,
        description="Radius within which a control point is hit by the pointer",
    )


class ExportConfig(BaseModel):
    """Configuration for SVG export."""

    width: float = Field(
        default=800.0,
        gt=0.0,
        description="Document width",
    )
    height: float = Field(
        default=600.0,
        gt=0.0,
        description="Document height",
    )
    default_stroke_width: float = Field(
        default=1.0,
        ge=0.0,
        description="Stroke width used when a path element does not declare one",
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


class VectorpadSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> VectorpadSettings:
    """Get default application settings."""
    return VectorpadSettings()
