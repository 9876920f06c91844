"""Control point variants making up a path.

A path is an ordered sequence of drawing instructions. Each instruction is one
of a closed set of immutable variants:

- MoveTo: Start a new sub-path at (x, y)
- LineTo: Straight segment to (x, y)
- QuadraticCurveTo: Quadratic Bezier to (x, y) with one control handle
- CubicCurveTo: Cubic Bezier to (x, y) with two control handles
- ClosePath: Close the current sub-path (carries no coordinates)

Every variant except ClosePath defines an anchor (x, y), the on-curve endpoint
that becomes the start of the following segment.
"""

from dataclasses import dataclass
from typing import Any, Union

from vectorpad.domain.geometry import Point2D


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new sub-path at (x, y)."""

    x: float
    y: float

    @property
    def anchor(self) -> Point2D:
        return Point2D(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "moveTo", "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the previous anchor to (x, y)."""

    x: float
    y: float

    @property
    def anchor(self) -> Point2D:
        return Point2D(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "lineTo", "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class QuadraticCurveTo:
    """Quadratic Bezier segment to (x, y).

    Attributes:
        x: Anchor x
        y: Anchor y
        control_x: Control handle x
        control_y: Control handle y
    """

    x: float
    y: float
    control_x: float
    control_y: float

    @property
    def anchor(self) -> Point2D:
        return Point2D(self.x, self.y)

    @property
    def control(self) -> Point2D:
        return Point2D(self.control_x, self.control_y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "quadraticCurveTo",
            "x": self.x,
            "y": self.y,
            "controlX": self.control_x,
            "controlY": self.control_y,
        }


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier segment to (x, y).

    Attributes:
        x: Anchor x
        y: Anchor y
        control_x1: First control handle x (leaves the previous anchor)
        control_y1: First control handle y
        control_x2: Second control handle x (enters this anchor)
        control_y2: Second control handle y
    """

    x: float
    y: float
    control_x1: float
    control_y1: float
    control_x2: float
    control_y2: float

    @property
    def anchor(self) -> Point2D:
        return Point2D(self.x, self.y)

    @property
    def control1(self) -> Point2D:
        return Point2D(self.control_x1, self.control_y1)

    @property
    def control2(self) -> Point2D:
        return Point2D(self.control_x2, self.control_y2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "cubicCurveTo",
            "x": self.x,
            "y": self.y,
            "controlX1": self.control_x1,
            "controlY1": self.control_y1,
            "controlX2": self.control_x2,
            "controlY2": self.control_y2,
        }


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current sub-path back to its most recent MoveTo."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "closePath"}


ControlPoint = Union[MoveTo, LineTo, QuadraticCurveTo, CubicCurveTo, ClosePath]

# Variants that draw geometry from the previous anchor
DrawablePoint = Union[LineTo, QuadraticCurveTo, CubicCurveTo]

# Variants carrying an (x, y) anchor
AnchoredPoint = Union[MoveTo, LineTo, QuadraticCurveTo, CubicCurveTo]


def is_drawable(point: ControlPoint | None) -> bool:
    """Check whether a control point draws a segment from its predecessor."""
    return isinstance(point, DrawablePoint)


def has_anchor(point: ControlPoint | None) -> bool:
    """Check whether a control point can serve as a predecessor anchor."""
    return isinstance(point, AnchoredPoint)


def control_point_from_dict(data: dict[str, Any]) -> ControlPoint:
    """Deserialize a control point from a dictionary.

    Args:
        data: Dictionary produced by a variant's to_dict()

    Returns:
        The matching control point variant

    Raises:
        ValueError: If the type tag is unknown
    """
    kind = data.get("type")
    if kind == "moveTo":
        return MoveTo(x=data["x"], y=data["y"])
    if kind == "lineTo":
        return LineTo(x=data["x"], y=data["y"])
    if kind == "quadraticCurveTo":
        return QuadraticCurveTo(
            x=data["x"],
            y=data["y"],
            control_x=data["controlX"],
            control_y=data["controlY"],
        )
    if kind == "cubicCurveTo":
        return CubicCurveTo(
            x=data["x"],
            y=data["y"],
            control_x1=data["controlX1"],
            control_y1=data["controlY1"],
            control_x2=data["controlX2"],
            control_y2=data["controlY2"],
        )
    if kind == "closePath":
        return ClosePath()
    raise ValueError(f"Unknown control point type: {kind!r}")
