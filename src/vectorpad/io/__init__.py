"""SVG I/O layer for vectorpad.

This module converts between the path model and SVG text. It provides a
clean abstraction layer between XML and the domain models.

Key responsibilities:
- Encode control points as path data ("d" attributes)
- Decode the full SVG path mini-language into control points
- Export/import <path> elements with paint and translation
- Export/import whole SVG documents

Key functions:
- serialize_path / parse_path_data: Path data codec
- path_to_element / path_from_element: Element-level conversion
- export_svg / import_svg: Document-level conversion
"""

from vectorpad.io.path_codec import (
    format_number,
    parse_path_data,
    serialize_control_points,
    serialize_path,
)
from vectorpad.io.svg import export_svg, import_svg, path_from_element, path_to_element

__all__ = [
    "export_svg",
    "format_number",
    "import_svg",
    "parse_path_data",
    "path_from_element",
    "path_to_element",
    "serialize_control_points",
    "serialize_path",
]
