"""Internal Bezier curve math.

This is an internal module containing the curve primitives shared by the
bounding box, projection and subdivision code. Not intended for public use.

All curves are handled as cubics; quadratics are elevated first.
"""

import math

from vectorpad.domain import Point2D

CubicPoints = tuple[Point2D, Point2D, Point2D, Point2D]

_EPSILON = 1e-12


def lerp(a: Point2D, b: Point2D, t: float) -> Point2D:
    """Linear interpolation between a and b."""
    return Point2D(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def elevate_quadratic(p0: Point2D, control: Point2D, p2: Point2D) -> CubicPoints:
    """Convert a quadratic Bezier into the equivalent cubic.

    Args:
        p0: Start anchor
        control: Quadratic control handle
        p2: End anchor

    Returns:
        Cubic control polygon [p0, c1, c2, p2]
    """
    c1 = Point2D(p0.x + 2.0 / 3.0 * (control.x - p0.x), p0.y + 2.0 / 3.0 * (control.y - p0.y))
    c2 = Point2D(p2.x + 2.0 / 3.0 * (control.x - p2.x), p2.y + 2.0 / 3.0 * (control.y - p2.y))
    return (p0, c1, c2, p2)


def evaluate_cubic(points: CubicPoints, t: float) -> Point2D:
    """Evaluate a cubic Bezier at parameter t."""
    p0, p1, p2, p3 = points
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3.0 * mt * mt * t
    c = 3.0 * mt * t * t
    d = t * t * t
    return Point2D(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def cubic_derivative(points: CubicPoints, t: float) -> Point2D:
    """First derivative of a cubic Bezier at parameter t."""
    p0, p1, p2, p3 = points
    mt = 1.0 - t
    a = 3.0 * mt * mt
    b = 6.0 * mt * t
    c = 3.0 * t * t
    return Point2D(
        a * (p1.x - p0.x) + b * (p2.x - p1.x) + c * (p3.x - p2.x),
        a * (p1.y - p0.y) + b * (p2.y - p1.y) + c * (p3.y - p2.y),
    )


def cubic_second_derivative(points: CubicPoints, t: float) -> Point2D:
    """Second derivative of a cubic Bezier at parameter t."""
    p0, p1, p2, p3 = points
    mt = 1.0 - t
    return Point2D(
        6.0 * mt * (p2.x - 2.0 * p1.x + p0.x) + 6.0 * t * (p3.x - 2.0 * p2.x + p1.x),
        6.0 * mt * (p2.y - 2.0 * p1.y + p0.y) + 6.0 * t * (p3.y - 2.0 * p2.y + p1.y),
    )


def split_cubic(points: CubicPoints, t: float) -> tuple[CubicPoints, CubicPoints]:
    """Split a cubic Bezier at parameter t using De Casteljau's algorithm.

    Args:
        points: Cubic control polygon [p0, p1, p2, p3]
        t: Split parameter in [0, 1]

    Returns:
        (left, right) control polygons; left ends and right starts at the
        curve point for t
    """
    p0, p1, p2, p3 = points

    # First level
    q0 = lerp(p0, p1, t)
    q1 = lerp(p1, p2, t)
    q2 = lerp(p2, p3, t)

    # Second level
    r0 = lerp(q0, q1, t)
    r1 = lerp(q1, q2, t)

    # Third level (point on curve)
    mid = lerp(r0, r1, t)

    return (p0, q0, r0, mid), (mid, r1, q2, p3)


def derivative_roots(v0: float, v1: float, v2: float, v3: float) -> list[float]:
    """Parameters in (0, 1) where one coordinate of a cubic has zero slope.

    The derivative of a cubic Bezier coordinate is the quadratic
    a*t^2 + b*t + c (up to a factor of 3).

    Args:
        v0: Coordinate of p0
        v1: Coordinate of p1
        v2: Coordinate of p2
        v3: Coordinate of p3

    Returns:
        Up to two roots strictly inside (0, 1)
    """
    a = -v0 + 3.0 * v1 - 3.0 * v2 + v3
    b = 2.0 * (v0 - 2.0 * v1 + v2)
    c = v1 - v0

    roots: list[float] = []
    if abs(a) < _EPSILON:
        if abs(b) > _EPSILON:
            roots.append(-c / b)
    else:
        discriminant = b * b - 4.0 * a * c
        if discriminant >= 0.0:
            sqrt_d = math.sqrt(discriminant)
            roots.append((-b + sqrt_d) / (2.0 * a))
            roots.append((-b - sqrt_d) / (2.0 * a))

    return [t for t in roots if 0.0 < t < 1.0]


def cubic_extents(points: CubicPoints) -> tuple[float, float, float, float]:
    """Exact axis-aligned extents of a cubic Bezier curve.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y) covering both endpoints and
        every interior extremum
    """
    p0, p1, p2, p3 = points
    xs = [p0.x, p3.x]
    ys = [p0.y, p3.y]

    for t in derivative_roots(p0.x, p1.x, p2.x, p3.x):
        xs.append(evaluate_cubic(points, t).x)
    for t in derivative_roots(p0.y, p1.y, p2.y, p3.y):
        ys.append(evaluate_cubic(points, t).y)

    return (min(xs), min(ys), max(xs), max(ys))
