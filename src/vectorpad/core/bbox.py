"""Bounding box calculation for control point sequences."""

from collections.abc import Sequence

from vectorpad.core._bezier import cubic_extents
from vectorpad.core.segment import to_cubic
from vectorpad.domain import (
    BoundingBox,
    ClosePath,
    ControlPoint,
    CubicCurveTo,
    Point2D,
    QuadraticCurveTo,
)

EMPTY_BOX = BoundingBox(0.0, 0.0, 0.0, 0.0)


def compute_bounding_box(control_points: Sequence[ControlPoint]) -> BoundingBox:
    """Calculate the tight axis-aligned box of a path in model space.

    Anchors of every control point are included. Curve segments contribute
    their true extrema rather than their control polygon, so off-curve
    handles may lie outside the result. ClosePath contributes nothing.

    A curve with no preceding anchor is measured from its own endpoint.

    Args:
        control_points: Path control points

    Returns:
        Bounding box, or a zero box at the origin when no point has an anchor

    Examples:
        >>> compute_bounding_box([MoveTo(0, 0), LineTo(10, 5)])
        BoundingBox(x=0, y=0, width=10, height=5)
    """
    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")

    current: Point2D | None = None

    for point in control_points:
        if isinstance(point, ClosePath):
            continue

        if isinstance(point, (QuadraticCurveTo, CubicCurveTo)):
            start = current if current is not None else point.anchor
            x0, y0, x1, y1 = cubic_extents(to_cubic(start, point))
        else:
            x0 = x1 = point.x
            y0 = y1 = point.y

        min_x = min(min_x, x0)
        min_y = min(min_y, y0)
        max_x = max(max_x, x1)
        max_y = max(max_y, y1)

        current = point.anchor

    if current is None:
        return EMPTY_BOX

    return BoundingBox.from_extents(min_x, min_y, max_x, max_y)
