"""Point editing on a single path.

PathEditor is the model-side half of curve editing mode: it owns the
selection mask while editing is active, keeps it aligned with the path's
control points, and applies point-level edits. Pointer and keyboard wiring
live in the drawing surface, which calls into this class with canvas
coordinates.
"""

import logging
import math
from dataclasses import replace

from vectorpad.config import GeometryConfig
from vectorpad.core.path import Path
from vectorpad.core.segment import NearestSegment
from vectorpad.domain import (
    SLOT_ANCHOR,
    SLOT_CONTROL_1,
    SLOT_CONTROL_2,
    AnchoredPoint,
    ControlPoint,
    CubicCurveTo,
    Point2D,
    QuadraticCurveTo,
    SelectionMask,
    is_point_selected,
    new_selection_mask,
)

logger = logging.getLogger(__name__)


class PathEditor:
    """Selection and point editing for one path.

    Example:
        editor = PathEditor(path)
        editor.enter()
        if editor.hover(120.0, 80.0) is not None:
            editor.insert_at_hover()
        editor.move_selected(5.0, 0.0)
        editor.exit()
    """

    def __init__(self, path: Path, config: GeometryConfig | None = None) -> None:
        """Initialize the editor.

        Args:
            path: Path being edited
            config: Geometry tolerances (defaults if None)
        """
        self.path = path
        self.config = config if config is not None else GeometryConfig()
        self._selection: SelectionMask | None = None
        self._nearest: NearestSegment | None = None

    @property
    def is_editing(self) -> bool:
        return self._selection is not None

    @property
    def selection(self) -> SelectionMask:
        """Current selection mask.

        Raises:
            RuntimeError: If editing mode is not active
        """
        if self._selection is None:
            raise RuntimeError("Not editing. Call enter() first.")
        if self._selection.shape[0] != len(self.path):
            self._selection = new_selection_mask(len(self.path))
        return self._selection

    @property
    def nearest(self) -> NearestSegment | None:
        """Pending insertion found by the last hover()."""
        return self._nearest

    def enter(self) -> None:
        """Enter editing mode with nothing selected."""
        self._selection = new_selection_mask(len(self.path))
        self._nearest = None
        logger.debug("Editing started path=%d points=%d", self.path.id, len(self.path))

    def exit(self) -> None:
        """Leave editing mode, discarding the selection."""
        self._selection = None
        self._nearest = None
        logger.debug("Editing stopped path=%d", self.path.id)

    def select_only(self, index: int, slot: int) -> None:
        """Replace the selection with a single slot.

        Raises:
            RuntimeError: If not in editing mode
            InvalidIndexError: If (index, slot) is outside the mask
        """
        if not self.is_editing:
            raise RuntimeError("Not editing. Call enter() first.")
        mask = new_selection_mask(len(self.path))
        mask.set(True, index, slot)
        self._selection = mask

    def hit_test(self, x: float, y: float) -> tuple[int, int] | None:
        """Find the anchor or control handle under a canvas-space point.

        Control handles are only hit-testable while they are shown, which is
        when their own point or the point before it has a selected slot.
        Handles take precedence over anchors since they are drawn on top.

        Args:
            x: Canvas x coordinate
            y: Canvas y coordinate

        Returns:
            (index, slot) of the closest hit within the hit radius, or None
        """
        mask = self.selection
        local = self.path.to_local(Point2D(x, y))

        handles: list[tuple[int, int, Point2D]] = []
        anchors: list[tuple[int, int, Point2D]] = []

        for segment in self.path.segments():
            i = segment.index
            point = segment.current
            if not isinstance(point, AnchoredPoint):
                continue
            anchors.append((i, SLOT_ANCHOR, point.anchor))

            shown = is_point_selected(mask, i) or (i > 0 and is_point_selected(mask, i - 1))
            if not shown:
                continue
            if isinstance(point, QuadraticCurveTo):
                handles.append((i, SLOT_CONTROL_1, point.control))
            elif isinstance(point, CubicCurveTo):
                handles.append((i, SLOT_CONTROL_1, point.control1))
                handles.append((i, SLOT_CONTROL_2, point.control2))

        for candidates in (handles, anchors):
            hit = self._closest_within(candidates, local)
            if hit is not None:
                return hit
        return None

    def _closest_within(
        self, candidates: list[tuple[int, int, Point2D]], point: Point2D
    ) -> tuple[int, int] | None:
        best: tuple[int, int] | None = None
        best_distance = math.inf
        for index, slot, position in candidates:
            distance = math.hypot(position.x - point.x, position.y - point.y)
            if distance <= self.config.hit_radius and distance < best_distance:
                best = (index, slot)
                best_distance = distance
        return best

    def hover(self, x: float, y: float) -> NearestSegment | None:
        """Track the pointer and remember where a new point would be inserted.

        Args:
            x: Canvas x coordinate
            y: Canvas y coordinate

        Returns:
            The nearest segment, or None when over a control point or too far
            from every segment
        """
        if self.hit_test(x, y) is not None:
            self._nearest = None
            return None

        self._nearest = self.path.closest_segment(
            self.path.to_local(Point2D(x, y)),
            threshold=self.config.nearest_threshold,
            samples=self.config.projection_samples,
            iterations=self.config.newton_iterations,
        )
        return self._nearest

    def preview_point(self) -> Point2D | None:
        """Model-space position where insert_at_hover() would add a point."""
        if self._nearest is None:
            return None
        return self.path.point_for_nearest_segment(self._nearest)

    def insert_at_hover(self) -> int:
        """Split the hovered segment and select the new anchor.

        Returns:
            Index of the inserted anchor

        Raises:
            RuntimeError: If editing is not active or nothing is hovered
        """
        if not self.is_editing:
            raise RuntimeError("Not editing. Call enter() first.")
        if self._nearest is None:
            raise RuntimeError("No segment under the pointer. Call hover() first.")

        nearest = self._nearest
        self.path.add_nearest_segment(nearest)
        self.select_only(nearest.index, SLOT_ANCHOR)
        self._nearest = None
        return nearest.index

    def move_selected(self, dx: float, dy: float) -> None:
        """Move every selected anchor and handle by (dx, dy).

        A selected anchor carries its incoming cubic handle and the outgoing
        handle of the following cubic. The path receives a new sequence; no
        control point is modified in place.
        """
        mask = self.selection
        points = self.path.control_points

        moved: list[ControlPoint] = []
        for i, point in enumerate(points):
            anchor_selected = mask.get(i, SLOT_ANCHOR)
            previous_selected = i > 0 and mask.get(i - 1, SLOT_ANCHOR)

            if not isinstance(point, AnchoredPoint):
                moved.append(point)
                continue

            if anchor_selected:
                point = replace(point, x=point.x + dx, y=point.y + dy)

            if isinstance(point, QuadraticCurveTo) and mask.get(i, SLOT_CONTROL_1):
                point = replace(
                    point,
                    control_x=point.control_x + dx,
                    control_y=point.control_y + dy,
                )
            elif isinstance(point, CubicCurveTo):
                if previous_selected or mask.get(i, SLOT_CONTROL_1):
                    point = replace(
                        point,
                        control_x1=point.control_x1 + dx,
                        control_y1=point.control_y1 + dy,
                    )
                if anchor_selected or mask.get(i, SLOT_CONTROL_2):
                    point = replace(
                        point,
                        control_x2=point.control_x2 + dx,
                        control_y2=point.control_y2 + dy,
                    )
            moved.append(point)

        self.path.control_points = moved

    def delete_selected(self) -> int:
        """Remove every point whose anchor is selected and clear the selection.

        Returns:
            Number of removed control points
        """
        mask = self.selection
        kept = [
            point
            for i, point in enumerate(self.path.control_points)
            if not mask.get(i, SLOT_ANCHOR)
        ]
        removed = len(self.path) - len(kept)
        if removed:
            self.path.control_points = kept
            logger.debug("Deleted points path=%d count=%d", self.path.id, removed)
        self._selection = new_selection_mask(len(self.path))
        self._nearest = None
        return removed
