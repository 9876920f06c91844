"""Core path geometry for vectorpad.

This module contains the algorithms operating on control point sequences:

- Bounding boxes including true curve extrema
- Nearest-point projection onto lines and curves
- Segment subdivision (De Casteljau)
- The Path model tying them together
- Point editing with a selection mask

Key functions:
- compute_bounding_box: Tight box of a control point sequence
- project_onto_line: Closest point on a line segment
- project_onto_cubic: Closest point on a cubic Bezier
- find_closest_segment: Closest drawable segment to a point
- split_segment: Insert an on-curve point into a segment

Key classes:
- Path: Control points, translation, style and cached bounding box
- PathEditor: Selection mask lifecycle and point edits
- Segment: (previous, current, index) view of a control point
- NearestSegment: (index, t, distance) result of a nearest query
"""

from vectorpad.core.bbox import compute_bounding_box
from vectorpad.core.editor import PathEditor
from vectorpad.core.path import Path
from vectorpad.core.projection import (
    find_closest_segment,
    project_onto_cubic,
    project_onto_line,
)
from vectorpad.core.segment import NearestSegment, Segment, iter_segments
from vectorpad.core.subdivide import point_at, split_segment

__all__ = [
    # Classes
    "NearestSegment",
    "Path",
    "PathEditor",
    "Segment",
    # Functions
    "compute_bounding_box",
    "find_closest_segment",
    "iter_segments",
    "point_at",
    "project_onto_cubic",
    "project_onto_line",
    "split_segment",
]
