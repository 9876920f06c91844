"""CLI application entry point for vectorpad.

This module provides the main CLI interface using Typer.
"""

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import structlog
import typer

from vectorpad import __version__
from vectorpad.cli.output import (
    console,
    print_document_info,
    print_error,
    print_header,
    print_nearest,
    print_paths_table,
    print_step,
    print_success,
    print_warning,
)
from vectorpad.config import LoggingConfig, VectorpadSettings
from vectorpad.core import NearestSegment
from vectorpad.core import Path as PathModel
from vectorpad.domain import Point2D
from vectorpad.exceptions import ApproximationWarning, VectorpadError
from vectorpad.io import export_svg, import_svg
from vectorpad.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="vectorpad",
    help="Inspect and edit the paths of SVG documents.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Settings and logger shared by every command of one invocation."""

    settings: VectorpadSettings = field(default_factory=VectorpadSettings)
    logger: structlog.stdlib.BoundLogger = field(
        default_factory=lambda: structlog.get_logger("vectorpad")
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vectorpad[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and edit the paths of SVG documents."""
    settings = VectorpadSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = CliState(settings=settings, logger=logger)


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def _load_paths(document_path: Path, state: CliState) -> tuple[list[PathModel], int]:
    """Read an SVG file and import its paths.

    Returns:
        Tuple of (paths, number of arc commands that were approximated)
    """
    if not document_path.exists():
        raise FileNotFoundError(f"Input file not found: {document_path}")

    text = document_path.read_text(encoding="utf-8")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ApproximationWarning)
        paths = import_svg(
            text, default_stroke_width=state.settings.export.default_stroke_width
        )

    approximations = sum(1 for w in caught if issubclass(w.category, ApproximationWarning))
    state.logger.info(
        "Document imported",
        document=str(document_path),
        paths=len(paths),
        approximations=approximations,
    )
    return paths, approximations


def _find_nearest(
    paths: list[PathModel],
    x: float,
    y: float,
    settings: VectorpadSettings,
    threshold: float | None,
) -> tuple[PathModel, NearestSegment] | None:
    """Nearest segment over all paths; earlier paths win ties."""
    geometry = settings.geometry
    limit = threshold if threshold is not None else geometry.nearest_threshold

    best: tuple[PathModel, NearestSegment] | None = None
    for path in paths:
        nearest = path.closest_segment(
            path.to_local(Point2D(x, y)),
            threshold=limit,
            samples=geometry.projection_samples,
            iterations=geometry.newton_iterations,
        )
        if nearest is not None and (best is None or nearest.distance < best[1].distance):
            best = (path, nearest)
    return best


def _write_document(
    paths: list[PathModel],
    output: Path,
    state: CliState,
    width: float | None,
    height: float | None,
) -> None:
    export = state.settings.export
    document = export_svg(
        paths,
        width=width if width is not None else export.width,
        height=height if height is not None else export.height,
    )
    output.write_text(document, encoding="utf-8")
    state.logger.info("Document written", output=str(output), paths=len(paths))


@app.command()
def info(
    ctx: typer.Context,
    input_svg: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
) -> None:
    """List the paths of an SVG document with their bounding boxes."""
    state = _state(ctx)
    try:
        paths, approximations = _load_paths(input_svg, state)
    except (FileNotFoundError, VectorpadError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_document_info(str(input_svg), len(paths))
    if approximations:
        print_warning(f"{approximations} arc command(s) approximated as lines")
    if paths:
        print_step("Paths")
        print_paths_table(paths)


@app.command()
def normalize(
    ctx: typer.Context,
    input_svg: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-normalized.svg)",
        ),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Document width", min=0.0),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Document height", min=0.0),
    ] = None,
) -> None:
    """Rewrite every path with absolute M/L/Q/C/Z commands."""
    state = _state(ctx)
    actual_output = output or input_svg.with_name(f"{input_svg.stem}-normalized.svg")

    try:
        paths, approximations = _load_paths(input_svg, state)
        _write_document(paths, actual_output, state, width, height)
    except (FileNotFoundError, VectorpadError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if approximations:
        print_warning(f"{approximations} arc command(s) approximated as lines")
    print_success(f"Normalized {len(paths)} path(s)", str(actual_output))


@app.command()
def nearest(
    ctx: typer.Context,
    input_svg: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="Canvas x coordinate")],
    y: Annotated[float, typer.Argument(help="Canvas y coordinate")],
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", "-t", help="Maximum distance to a segment", min=0.0),
    ] = None,
) -> None:
    """Find the path segment closest to a canvas point."""
    state = _state(ctx)
    try:
        paths, _ = _load_paths(input_svg, state)
    except (FileNotFoundError, VectorpadError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    found = _find_nearest(paths, x, y, state.settings, threshold)
    if found is None:
        console.print("No segment within threshold.")
        raise typer.Exit(code=1)

    path, result = found
    state.logger.debug(
        "Nearest segment",
        path_id=path.id,
        index=result.index,
        distance=round(result.distance, 4),
    )
    local = path.point_for_nearest_segment(result)
    print_nearest(path, result, local.offset(path.translation.x, path.translation.y))


@app.command()
def split(
    ctx: typer.Context,
    input_svg: Annotated[
        Path,
        typer.Argument(help="Path to input SVG file", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="Canvas x coordinate")],
    y: Annotated[float, typer.Argument(help="Canvas y coordinate")],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-split.svg)",
        ),
    ] = None,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", "-t", help="Maximum distance to a segment", min=0.0),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Document width", min=0.0),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Document height", min=0.0),
    ] = None,
) -> None:
    """Insert an on-curve point into the segment closest to a canvas point."""
    state = _state(ctx)
    actual_output = output or input_svg.with_name(f"{input_svg.stem}-split.svg")

    try:
        paths, _ = _load_paths(input_svg, state)
        found = _find_nearest(paths, x, y, state.settings, threshold)
        if found is None:
            print_error("No segment within threshold")
            raise typer.Exit(code=1)

        path, result = found
        path.add_nearest_segment(result)
        state.logger.info(
            "Point inserted", path_id=path.id, index=result.index, t=round(result.t, 4)
        )
        _write_document(paths, actual_output, state, width, height)
    except (FileNotFoundError, VectorpadError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_success(
        f"Inserted point into path {path.id} at segment {result.index}",
        str(actual_output),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
