"""Path model.

A Path owns an ordered control point sequence, a translation offset and its
paint style. Geometric queries run in model space; the translation is applied
on top when reporting the bounding box.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from vectorpad.core.bbox import compute_bounding_box
from vectorpad.core.projection import (
    DEFAULT_ITERATIONS,
    DEFAULT_SAMPLES,
    DEFAULT_THRESHOLD,
    find_closest_segment,
)
from vectorpad.core.segment import NearestSegment, Segment, iter_segments
from vectorpad.core.subdivide import point_at, split_segment
from vectorpad.domain import (
    BoundingBox,
    ControlPoint,
    PathStyle,
    Point2D,
    control_point_from_dict,
)

logger = logging.getLogger(__name__)


class Path:
    """A piecewise curve made of move/line/quadratic/cubic/close control points.

    The control point sequence is stored as a tuple and only ever replaced as
    a whole, which is the single point where the cached bounding box is
    invalidated.

    Example:
        path = Path([MoveTo(0, 0), LineTo(10, 0)])
        nearest = path.closest_segment(Point2D(5, 3), threshold=10)
        path.add_nearest_segment(nearest)
    """

    def __init__(
        self,
        control_points: Iterable[ControlPoint] = (),
        translation: Point2D | None = None,
        style: PathStyle | None = None,
        path_id: int = 0,
    ) -> None:
        """Initialize the path.

        Args:
            control_points: Initial control point sequence
            translation: Offset applied to the path on the canvas
            style: Fill and stroke attributes
            path_id: Identifier of the path on its canvas
        """
        self.id = path_id
        self.translation = translation if translation is not None else Point2D(0.0, 0.0)
        self.style = style if style is not None else PathStyle()
        self._control_points: tuple[ControlPoint, ...] = tuple(control_points)
        self._cached_bbox: BoundingBox | None = None

    @property
    def control_points(self) -> tuple[ControlPoint, ...]:
        return self._control_points

    @control_points.setter
    def control_points(self, points: Iterable[ControlPoint]) -> None:
        self._control_points = tuple(points)
        self._cached_bbox = None

    def __len__(self) -> int:
        return len(self._control_points)

    @property
    def bounding_box(self) -> BoundingBox:
        """Bounding box in canvas space (model box moved by the translation).

        Computed on first access after the control points change.
        """
        if self._cached_bbox is None:
            self._cached_bbox = compute_bounding_box(self._control_points)
        return self._cached_bbox.translated(self.translation.x, self.translation.y)

    def translate(self, dx: float, dy: float) -> None:
        """Move the path on the canvas without touching its control points."""
        self.translation = self.translation.offset(dx, dy)

    def to_local(self, point: Point2D) -> Point2D:
        """Convert a canvas-space point into this path's model space."""
        return point.offset(-self.translation.x, -self.translation.y)

    def segments(self) -> Iterator[Segment]:
        """Enumerate (previous, current, index) for every control point.

        Each call returns a fresh iterator over the current sequence.
        """
        return iter_segments(self._control_points)

    def closest_segment(
        self,
        point: Point2D,
        threshold: float = DEFAULT_THRESHOLD,
        samples: int = DEFAULT_SAMPLES,
        iterations: int = DEFAULT_ITERATIONS,
    ) -> NearestSegment | None:
        """Find the segment nearest to a model-space point.

        Args:
            point: Query point in model space (see to_local)
            threshold: Maximum accepted distance
            samples: Cubic projection sample count
            iterations: Cubic projection Newton steps

        Returns:
            Nearest segment within threshold, or None
        """
        return find_closest_segment(
            self._control_points,
            point,
            threshold=threshold,
            samples=samples,
            iterations=iterations,
        )

    def point_for_nearest_segment(self, nearest: NearestSegment) -> Point2D:
        """Model-space point on segment nearest.index at nearest.t.

        Raises:
            InvalidIndexError: If the index is out of range
            UnsupportedControlPointError: If the target is a MoveTo or ClosePath
            InvalidAdjacencyError: If the predecessor is missing or a ClosePath
        """
        return point_at(self._control_points, nearest)

    def add_nearest_segment(self, nearest: NearestSegment) -> None:
        """Insert an on-curve point by splitting segment nearest.index at nearest.t.

        The new anchor ends up at nearest.index. The path is left unchanged if
        the split is rejected.

        Raises:
            InvalidIndexError: If the index is out of range
            UnsupportedControlPointError: If the target is a MoveTo or ClosePath
            InvalidAdjacencyError: If the predecessor is missing or a ClosePath
        """
        self.control_points = split_segment(self._control_points, nearest)
        logger.debug(
            "Inserted point path=%d index=%d points=%d",
            self.id,
            nearest.index,
            len(self._control_points),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "controlPoints": [p.to_dict() for p in self._control_points],
            "translation": {"x": self.translation.x, "y": self.translation.y},
            "style": {
                "fill": self.style.fill,
                "stroke": self.style.stroke,
                "strokeWidth": self.style.stroke_width,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary."""
        style = data.get("style", {})
        translation = data.get("translation", {"x": 0.0, "y": 0.0})
        return cls(
            control_points=[control_point_from_dict(p) for p in data["controlPoints"]],
            translation=Point2D(translation["x"], translation["y"]),
            style=PathStyle(
                fill=style.get("fill"),
                stroke=style.get("stroke", "black"),
                stroke_width=style.get("strokeWidth", 1.0),
            ),
            path_id=data.get("id", 0),
        )

    def __repr__(self) -> str:
        return (
            f"Path(id={self.id}, points={len(self._control_points)}, "
            f"translation={self.translation.to_tuple()})"
        )
