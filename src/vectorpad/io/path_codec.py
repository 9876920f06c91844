"""Codec between control point sequences and SVG path data strings.

Serialization always produces absolute commands (M, L, Q, C, Z). Parsing
accepts the full SVG path mini-language:

    MoveTo:           2: Mm
    LineTo:           2: Ll   1: Hh(x)   1: Vv(y)
    CubicBezier:      6: Cc   4: Ss
    QuadraticBezier:  4: Qq   2: Tt
    ArcCurve:         7: Aa   (approximated by a straight line)
    ClosePath:        0: Zz

Uppercase commands use absolute coordinates, lowercase ones are relative to
the current point.
"""

import logging
import re
import warnings
from collections.abc import Sequence

from vectorpad.core.path import Path
from vectorpad.domain import (
    ClosePath,
    ControlPoint,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point2D,
    QuadraticCurveTo,
)
from vectorpad.exceptions import ApproximationWarning, MalformedPathError

logger = logging.getLogger(__name__)

# Command letters
SVG_CMDS = "MmLlHhVvCcSsQqTtAaZz"

# Number of arguments consumed by one instance of each command
ARG_COUNTS: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

_COMMAND_RE = re.compile(f"[{SVG_CMDS}][^{SVG_CMDS}]*")
_NUMBER_RE = re.compile(r"[-+]?(?:[0-9]*\.[0-9]+|[0-9]+\.?)(?:[eE][-+]?[0-9]+)?")
_SEPARATORS = " \t\r\n,"


def format_number(value: float) -> str:
    """Format a coordinate using its shortest exact decimal form.

    Integral values drop the fractional part ("100" rather than "100.0").

    Examples:
        >>> format_number(100.0)
        '100'
        >>> format_number(0.1)
        '0.1'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def serialize_control_points(control_points: Sequence[ControlPoint]) -> str:
    """Encode control points as an absolute SVG path data string.

    Args:
        control_points: Control point sequence

    Returns:
        Path data such as "M 0 0 L 10 0 Z"
    """
    tokens: list[str] = []
    for point in control_points:
        if isinstance(point, MoveTo):
            tokens.append(f"M {format_number(point.x)} {format_number(point.y)}")
        elif isinstance(point, LineTo):
            tokens.append(f"L {format_number(point.x)} {format_number(point.y)}")
        elif isinstance(point, QuadraticCurveTo):
            tokens.append(
                "Q "
                + " ".join(
                    format_number(v)
                    for v in (point.control_x, point.control_y, point.x, point.y)
                )
            )
        elif isinstance(point, CubicCurveTo):
            tokens.append(
                "C "
                + " ".join(
                    format_number(v)
                    for v in (
                        point.control_x1,
                        point.control_y1,
                        point.control_x2,
                        point.control_y2,
                        point.x,
                        point.y,
                    )
                )
            )
        elif isinstance(point, ClosePath):
            tokens.append("Z")
    return " ".join(tokens).strip()


def serialize_path(path: Path) -> str:
    """Encode a path's control points as SVG path data."""
    return serialize_control_points(path.control_points)


def _reflect(control: Point2D | None, current: Point2D) -> Point2D:
    if control is None:
        return current
    return Point2D(2.0 * current.x - control.x, 2.0 * current.y - control.y)


def parse_path_data(path_data: str) -> list[ControlPoint]:
    """Decode an SVG path data string into control points.

    Arc commands are approximated by a straight line to their endpoint and
    reported through an ApproximationWarning. ClosePath does not move the
    current point.

    Args:
        path_data: Contents of a path "d" attribute

    Returns:
        Control points in drawing order

    Raises:
        MalformedPathError: If the string has no commands, contains text that
            is not a command or a number, or has a wrong argument count

    Examples:
        >>> parse_path_data("m 10 10 h 5 z")
        [MoveTo(x=10.0, y=10.0), LineTo(x=15.0, y=10.0), ClosePath()]
    """
    groups = list(_COMMAND_RE.finditer(path_data))
    if not groups:
        raise MalformedPathError(path_data, "no path commands found")

    leading = path_data[: groups[0].start()].strip(_SEPARATORS)
    if leading:
        raise MalformedPathError(path_data, f"unexpected text before first command: {leading!r}")

    points: list[ControlPoint] = []
    current = Point2D(0.0, 0.0)
    last_cubic_control: Point2D | None = None
    last_quad_control: Point2D | None = None

    for group in groups:
        letter = group.group()[0]
        body = group.group()[1:]

        leftover = _NUMBER_RE.sub("", body).strip(_SEPARATORS)
        if leftover:
            raise MalformedPathError(
                path_data, f"invalid arguments for command {letter!r}: {body.strip()!r}"
            )

        args = [float(token) for token in _NUMBER_RE.findall(body)]
        command = letter.upper()
        relative = letter.islower()
        count = ARG_COUNTS[command]

        if count == 0:
            if args:
                raise MalformedPathError(path_data, f"command {letter!r} takes no arguments")
            points.append(ClosePath())
            last_cubic_control = None
            last_quad_control = None
            continue

        if not args or len(args) % count:
            raise MalformedPathError(
                path_data,
                f"command {letter!r} expects a multiple of {count} arguments, got {len(args)}",
            )

        for batch_start in range(0, len(args), count):
            a = args[batch_start : batch_start + count]
            ox, oy = (current.x, current.y) if relative else (0.0, 0.0)
            next_cubic_control: Point2D | None = None
            next_quad_control: Point2D | None = None

            if command == "M" and batch_start == 0:
                current = Point2D(a[0] + ox, a[1] + oy)
                points.append(MoveTo(x=current.x, y=current.y))

            elif command in "ML":
                # Extra coordinate pairs after a MoveTo are implicit LineTos
                current = Point2D(a[0] + ox, a[1] + oy)
                points.append(LineTo(x=current.x, y=current.y))

            elif command == "H":
                current = Point2D(a[0] + ox, current.y)
                points.append(LineTo(x=current.x, y=current.y))

            elif command == "V":
                current = Point2D(current.x, a[0] + oy)
                points.append(LineTo(x=current.x, y=current.y))

            elif command in "CS":
                if command == "C":
                    c1 = Point2D(a[0] + ox, a[1] + oy)
                    rest = a[2:]
                else:
                    c1 = _reflect(last_cubic_control, current)
                    rest = a
                c2 = Point2D(rest[0] + ox, rest[1] + oy)
                current = Point2D(rest[2] + ox, rest[3] + oy)
                points.append(
                    CubicCurveTo(
                        x=current.x,
                        y=current.y,
                        control_x1=c1.x,
                        control_y1=c1.y,
                        control_x2=c2.x,
                        control_y2=c2.y,
                    )
                )
                next_cubic_control = c2

            elif command in "QT":
                if command == "Q":
                    control = Point2D(a[0] + ox, a[1] + oy)
                    end = Point2D(a[2] + ox, a[3] + oy)
                else:
                    control = _reflect(last_quad_control, current)
                    end = Point2D(a[0] + ox, a[1] + oy)
                current = end
                points.append(
                    QuadraticCurveTo(
                        x=current.x,
                        y=current.y,
                        control_x=control.x,
                        control_y=control.y,
                    )
                )
                next_quad_control = control

            elif command == "A":
                current = Point2D(a[5] + ox, a[6] + oy)
                points.append(LineTo(x=current.x, y=current.y))
                logger.warning(
                    "Arc approximated as line to (%s, %s)",
                    format_number(current.x),
                    format_number(current.y),
                )
                warnings.warn(
                    f"Arc command approximated as a straight line to "
                    f"({format_number(current.x)}, {format_number(current.y)})",
                    ApproximationWarning,
                    stacklevel=2,
                )

            last_cubic_control = next_cubic_control
            last_quad_control = next_quad_control

    return points
