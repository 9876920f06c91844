"""Nearest-point projection onto path segments.

- project_onto_line: Closest point on a line segment
- project_onto_cubic: Closest point on a cubic Bezier (sampling + Newton refinement)
- find_closest_segment: Closest drawable segment of a control point sequence
"""

import math
from collections.abc import Sequence

from vectorpad.core._bezier import (
    CubicPoints,
    cubic_derivative,
    cubic_second_derivative,
    evaluate_cubic,
)
from vectorpad.core.segment import NearestSegment, iter_segments, to_cubic
from vectorpad.domain import ControlPoint, LineTo, Point2D

DEFAULT_THRESHOLD = 10.0
DEFAULT_SAMPLES = 32
DEFAULT_ITERATIONS = 8

_NEWTON_EPSILON = 1e-12


def project_onto_line(start: Point2D, end: Point2D, point: Point2D) -> tuple[float, float]:
    """Project a point onto the line segment from start to end.

    Args:
        start: Segment start
        end: Segment end
        point: Query point

    Returns:
        Tuple of (distance, t) where t in [0, 1] locates the closest point.
        A zero-length segment yields t = 0.

    Examples:
        >>> project_onto_line(Point2D(0, 0), Point2D(10, 0), Point2D(5, 3))
        (3.0, 0.5)
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0.0:
        t = 0.0
    else:
        t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
        t = max(0.0, min(1.0, t))

    closest_x = start.x + t * dx
    closest_y = start.y + t * dy
    return math.hypot(point.x - closest_x, point.y - closest_y), t


def project_onto_cubic(
    points: CubicPoints,
    point: Point2D,
    samples: int = DEFAULT_SAMPLES,
    iterations: int = DEFAULT_ITERATIONS,
) -> tuple[float, float]:
    """Project a point onto a cubic Bezier curve.

    The curve is sampled uniformly to find a starting parameter, which is then
    refined with Newton's method on (B(t) - P) . B'(t) = 0.

    Args:
        points: Cubic control polygon
        point: Query point
        samples: Number of uniform intervals used for the initial guess
        iterations: Maximum Newton steps

    Returns:
        Tuple of (distance, t) of the closest point found
    """
    best_t = 0.0
    best_dist_sq = math.inf
    for i in range(samples + 1):
        t = i / samples
        p = evaluate_cubic(points, t)
        dist_sq = (p.x - point.x) ** 2 + (p.y - point.y) ** 2
        if dist_sq < best_dist_sq:
            best_dist_sq = dist_sq
            best_t = t

    t = best_t
    for _ in range(iterations):
        p = evaluate_cubic(points, t)
        d1 = cubic_derivative(points, t)
        d2 = cubic_second_derivative(points, t)

        ex = p.x - point.x
        ey = p.y - point.y
        numerator = ex * d1.x + ey * d1.y
        denominator = d1.x * d1.x + d1.y * d1.y + ex * d2.x + ey * d2.y
        if abs(denominator) < _NEWTON_EPSILON:
            break

        next_t = max(0.0, min(1.0, t - numerator / denominator))
        if abs(next_t - t) < _NEWTON_EPSILON:
            t = next_t
            break
        t = next_t

    refined = evaluate_cubic(points, t)
    refined_dist_sq = (refined.x - point.x) ** 2 + (refined.y - point.y) ** 2

    # Newton may walk away from the sampled minimum on badly shaped curves
    if refined_dist_sq > best_dist_sq:
        return math.sqrt(best_dist_sq), best_t
    return math.sqrt(refined_dist_sq), t


def find_closest_segment(
    control_points: Sequence[ControlPoint],
    point: Point2D,
    threshold: float = DEFAULT_THRESHOLD,
    samples: int = DEFAULT_SAMPLES,
    iterations: int = DEFAULT_ITERATIONS,
) -> NearestSegment | None:
    """Find the segment closest to a point.

    Segments without a drawable predecessor (index 0, or after a ClosePath)
    and MoveTo/ClosePath points are skipped. A candidate only replaces the
    current best when it lies within threshold and is strictly closer, so the
    earliest segment wins ties.

    Args:
        control_points: Path control points
        point: Query point in model space
        threshold: Maximum accepted distance
        samples: Cubic projection sample count
        iterations: Cubic projection Newton steps

    Returns:
        The closest segment, or None if no segment lies within threshold
    """
    best: NearestSegment | None = None
    best_distance = math.inf

    for segment in iter_segments(control_points):
        if not segment.is_drawable:
            continue

        start = segment.previous.anchor  # type: ignore[union-attr]
        current = segment.current

        if isinstance(current, LineTo):
            distance, t = project_onto_line(start, current.anchor, point)
        else:
            distance, t = project_onto_cubic(
                to_cubic(start, current),  # type: ignore[arg-type]
                point,
                samples=samples,
                iterations=iterations,
            )

        if distance <= threshold and distance < best_distance:
            best_distance = distance
            best = NearestSegment(index=segment.index, t=t, distance=distance)

    return best
