"""Domain models for vectorpad.

This module contains the value types describing paths and their selection
state. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of SVG and of any drawing surface

Key classes:
- MoveTo, LineTo, QuadraticCurveTo, CubicCurveTo, ClosePath: Control point variants
- Point2D: A 2D point
- BoundingBox: Axis-aligned box
- PathStyle: Fill and stroke attributes
- MultiArray: Dense N-dimensional array backing selection masks
"""

from vectorpad.domain.control_point import (
    AnchoredPoint,
    ClosePath,
    ControlPoint,
    CubicCurveTo,
    DrawablePoint,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
    control_point_from_dict,
    has_anchor,
    is_drawable,
)
from vectorpad.domain.geometry import BoundingBox, PathStyle, Point2D
from vectorpad.domain.multi_array import (
    SLOT_ANCHOR,
    SLOT_CONTROL_1,
    SLOT_CONTROL_2,
    SLOTS_PER_POINT,
    MultiArray,
    SelectionMask,
    is_point_selected,
    new_selection_mask,
)

__all__: list[str] = [
    # Control points
    "AnchoredPoint",
    "ClosePath",
    "ControlPoint",
    "CubicCurveTo",
    "DrawablePoint",
    "LineTo",
    "MoveTo",
    "QuadraticCurveTo",
    "control_point_from_dict",
    "has_anchor",
    "is_drawable",
    # Geometry
    "BoundingBox",
    "PathStyle",
    "Point2D",
    # Selection
    "SLOTS_PER_POINT",
    "SLOT_ANCHOR",
    "SLOT_CONTROL_1",
    "SLOT_CONTROL_2",
    "MultiArray",
    "SelectionMask",
    "is_point_selected",
    "new_selection_mask",
]
