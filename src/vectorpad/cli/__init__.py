"""Command-line interface for vectorpad.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Path listing with bounding boxes
- Path data normalization to absolute commands
- Nearest-segment queries and point insertion
- Detailed error reporting
"""

from vectorpad.cli.app import cli, main

__all__ = ["cli", "main"]
