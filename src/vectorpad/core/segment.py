"""Segment view over a control point sequence.

A segment is the drawable geometry implied by one control point together
with the anchor of the control point before it.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from vectorpad.core._bezier import CubicPoints, elevate_quadratic, evaluate_cubic, lerp
from vectorpad.domain import (
    AnchoredPoint,
    ClosePath,
    ControlPoint,
    CubicCurveTo,
    DrawablePoint,
    LineTo,
    MoveTo,
    Point2D,
    QuadraticCurveTo,
    has_anchor,
    is_drawable,
)
from vectorpad.exceptions import (
    InvalidAdjacencyError,
    InvalidIndexError,
    UnsupportedControlPointError,
)


@dataclass(frozen=True, slots=True)
class Segment:
    """One control point paired with its predecessor.

    Attributes:
        previous: Control point at index - 1, or None for index 0
        current: Control point at index
        index: Position of current in the sequence
    """

    previous: ControlPoint | None
    current: ControlPoint
    index: int

    @property
    def is_drawable(self) -> bool:
        """True when the segment draws geometry from a valid predecessor anchor."""
        return is_drawable(self.current) and has_anchor(self.previous)


@dataclass(frozen=True, slots=True)
class NearestSegment:
    """Closest point on a path to a query point.

    Attributes:
        index: Index of the segment (its control point)
        t: Curve parameter of the closest point, in [0, 1]
        distance: Distance from the query point to the closest point
    """

    index: int
    t: float
    distance: float = 0.0


def iter_segments(control_points: Sequence[ControlPoint]) -> Iterator[Segment]:
    """Yield a Segment for every control point, in sequence order."""
    previous: ControlPoint | None = None
    for index, current in enumerate(control_points):
        yield Segment(previous=previous, current=current, index=index)
        previous = current


def to_cubic(start: Point2D, point: QuadraticCurveTo | CubicCurveTo) -> CubicPoints:
    """Cubic control polygon of a curve segment starting at start."""
    if isinstance(point, QuadraticCurveTo):
        return elevate_quadratic(start, point.control, point.anchor)
    return (start, point.control1, point.control2, point.anchor)


def evaluate_segment(start: Point2D, point: DrawablePoint, t: float) -> Point2D:
    """Point at parameter t on the segment from start to point."""
    if isinstance(point, LineTo):
        return lerp(start, point.anchor, t)
    return evaluate_cubic(to_cubic(start, point), t)


def resolve_segment(
    control_points: Sequence[ControlPoint], index: int
) -> tuple[Point2D, DrawablePoint]:
    """Look up a drawable segment, validating index, type and adjacency.

    Args:
        control_points: Path control points
        index: Segment index

    Returns:
        Tuple of (start anchor, drawable control point)

    Raises:
        InvalidIndexError: If index is outside [0, len(control_points))
        UnsupportedControlPointError: If the point is a MoveTo or ClosePath
        InvalidAdjacencyError: If the predecessor is missing or a ClosePath
    """
    if index < 0 or index >= len(control_points):
        raise InvalidIndexError(index, len(control_points))

    current = control_points[index]
    if isinstance(current, (MoveTo, ClosePath)):
        raise UnsupportedControlPointError(index, type(current).__name__)

    if index == 0:
        raise InvalidAdjacencyError(index, "segment has no predecessor")

    previous = control_points[index - 1]
    if not isinstance(previous, AnchoredPoint):
        raise InvalidAdjacencyError(index, "predecessor is a ClosePath")

    return previous.anchor, current
