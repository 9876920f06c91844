"""Configuration management for vectorpad.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Nearest-segment and hit-testing tolerances
- ExportConfig: SVG document settings
- LoggingConfig: Logging settings
- VectorpadSettings: Main application settings
"""

from vectorpad.config.settings import (
    ExportConfig,
    GeometryConfig,
    LoggingConfig,
    VectorpadSettings,
    get_default_settings,
)

__all__ = [
    "ExportConfig",
    "GeometryConfig",
    "LoggingConfig",
    "VectorpadSettings",
    "get_default_settings",
]
