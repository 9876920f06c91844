"""Plain geometric value types.

- Point2D: A 2D point or vector
- BoundingBox: An axis-aligned box (x, y, width, height)
- PathStyle: Fill and stroke attributes of a path
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point2D:
    """A point in 2D canvas space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def offset(self, dx: float, dy: float) -> "Point2D":
        """Return a copy shifted by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """An axis-aligned bounding box.

    Attributes:
        x: Left edge
        y: Top edge
        width: Extent along x (never negative)
        height: Extent along y (never negative)
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_extents(
        cls, min_x: float, min_y: float, max_x: float, max_y: float
    ) -> "BoundingBox":
        """Build a box from its min/max corners."""
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def translated(self, dx: float, dy: float) -> "BoundingBox":
        """Return the same box moved by (dx, dy)."""
        return BoundingBox(self.x + dx, self.y + dy, self.width, self.height)

    def contains(self, x: float, y: float) -> bool:
        """Check whether (x, y) lies inside the box, edges included."""
        return self.x <= x <= self.max_x and self.y <= y <= self.max_y

    def intersects(self, other: "BoundingBox") -> bool:
        """Check whether two boxes overlap with a non-zero area.

        Boxes that only touch along an edge do not intersect.
        """
        return (
            self.x < other.max_x
            and self.max_x > other.x
            and self.y < other.max_y
            and self.max_y > other.y
        )

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class PathStyle:
    """Paint attributes of a path.

    Attributes:
        fill: Fill colour, or None for no fill
        stroke: Stroke colour, or None for no stroke
        stroke_width: Stroke width in canvas units
    """

    fill: str | None = None
    stroke: str | None = "black"
    stroke_width: float = 1.0
