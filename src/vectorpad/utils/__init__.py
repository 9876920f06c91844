"""Utility functions for vectorpad.

This module provides utility functions including:

- Logging setup and configuration
"""

from vectorpad.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
