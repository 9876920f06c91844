"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vectorpad.core import NearestSegment, Path
from vectorpad.domain import Point2D

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Vectorpad[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(document_path: str, path_count: int) -> None:
    """Print document information.

    Args:
        document_path: Path to the SVG file
        path_count: Number of paths found
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(document_path)
    console.print(line)
    plural = "path" if path_count == 1 else "paths"
    console.print(f"  {path_count} {plural}")


def _format_float(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def print_paths_table(paths: list[Path]) -> None:
    """Print one row per path with its size, box and paint."""
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("id", justify="right")
    table.add_column("points", justify="right")
    table.add_column("bounding box (x, y, w, h)")
    table.add_column("fill")
    table.add_column("stroke")

    for path in paths:
        box = path.bounding_box
        table.add_row(
            str(path.id),
            str(len(path)),
            ", ".join(_format_float(v) for v in (box.x, box.y, box.width, box.height)),
            path.style.fill or "none",
            path.style.stroke or "none",
        )

    console.print(table)


def print_nearest(path: Path, nearest: NearestSegment, point: Point2D) -> None:
    """Print the result of a nearest-segment query.

    Args:
        path: Path owning the segment
        nearest: Query result
        point: Canvas-space position of the nearest point
    """
    console.print(
        f"  path [bold]{path.id}[/bold] {SYM_DOT} segment {nearest.index} "
        f"{SYM_DOT} t={nearest.t:.4f} {SYM_DOT} distance={_format_float(nearest.distance)}"
    )
    console.print(f"  at ({_format_float(point.x)}, {_format_float(point.y)})")


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary message
        output_path: File written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"  [yellow]{SYM_WARN} {message}[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
