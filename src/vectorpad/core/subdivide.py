"""Segment subdivision.

Splitting inserts a new on-curve anchor into a segment without changing the
drawn geometry. Lines split into two lines; quadratic and cubic curves split
into two cubics with De Casteljau's algorithm.
"""

import logging
from collections.abc import Sequence

from vectorpad.core._bezier import lerp, split_cubic
from vectorpad.core.segment import NearestSegment, evaluate_segment, resolve_segment, to_cubic
from vectorpad.domain import ControlPoint, CubicCurveTo, LineTo, Point2D

logger = logging.getLogger(__name__)


def point_at(control_points: Sequence[ControlPoint], nearest: NearestSegment) -> Point2D:
    """Evaluate the segment nearest.index at nearest.t.

    Raises:
        InvalidIndexError: If the index is out of range
        UnsupportedControlPointError: If the target is a MoveTo or ClosePath
        InvalidAdjacencyError: If the predecessor is missing or a ClosePath
    """
    start, point = resolve_segment(control_points, nearest.index)
    return evaluate_segment(start, point, nearest.t)


def split_segment(
    control_points: Sequence[ControlPoint], nearest: NearestSegment
) -> tuple[ControlPoint, ...]:
    """Split one segment at a parameter, returning the new control point sequence.

    For a line, a LineTo at the split point is inserted before nearest.index.
    For a curve, the point at nearest.index is replaced by two CubicCurveTo
    points: the first ends at the split point, the second reproduces the
    original endpoint. Quadratic curves are elevated to cubics first.

    In both cases the new anchor sits at nearest.index and the original
    endpoint moves to nearest.index + 1. The input sequence is never modified.

    Args:
        control_points: Path control points
        nearest: Segment index and split parameter

    Returns:
        New control point sequence, one element longer

    Raises:
        InvalidIndexError: If the index is out of range
        UnsupportedControlPointError: If the target is a MoveTo or ClosePath
        InvalidAdjacencyError: If the predecessor is missing or a ClosePath
    """
    index = nearest.index
    start, point = resolve_segment(control_points, index)

    replacement: list[ControlPoint]
    if isinstance(point, LineTo):
        mid = lerp(start, point.anchor, nearest.t)
        replacement = [LineTo(x=mid.x, y=mid.y), point]
    else:
        left, right = split_cubic(to_cubic(start, point), nearest.t)
        replacement = [
            CubicCurveTo(
                x=left[3].x,
                y=left[3].y,
                control_x1=left[1].x,
                control_y1=left[1].y,
                control_x2=left[2].x,
                control_y2=left[2].y,
            ),
            CubicCurveTo(
                x=point.x,
                y=point.y,
                control_x1=right[1].x,
                control_y1=right[1].y,
                control_x2=right[2].x,
                control_y2=right[2].y,
            ),
        ]

    logger.debug(
        "Split segment index=%d type=%s t=%.4f",
        index,
        type(point).__name__,
        nearest.t,
    )
    return (*control_points[:index], *replacement, *control_points[index + 1 :])
