"""SVG element and document export/import.

- path_to_element / path_from_element: One path <-> one <path> element
- export_svg / import_svg: A list of paths <-> an <svg> document string
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from vectorpad.core.path import Path
from vectorpad.domain import BoundingBox, PathStyle, Point2D
from vectorpad.exceptions import MalformedPathError
from vectorpad.io.path_codec import format_number, parse_path_data, serialize_path

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

_NUMBER = r"[-+]?(?:[0-9]*\.[0-9]+|[0-9]+\.?)(?:[eE][-+]?[0-9]+)?"
_TRANSLATE_RE = re.compile(rf"translate\(\s*({_NUMBER})\s*[,\s]\s*({_NUMBER})\s*\)")
# Leading number of a length such as "2px" or "1.5em"
_LENGTH_RE = re.compile(rf"\s*({_NUMBER})")


def _strip_ns(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _paint_attribute(value: str | None) -> str:
    return value if value is not None else "none"


def _parse_paint(value: str | None) -> str | None:
    if value is None or value.strip() == "none":
        return None
    return value.strip()


def _parse_length(value: str) -> float:
    """Numeric part of an SVG length; units are dropped."""
    match = _LENGTH_RE.match(value)
    if match is None:
        raise MalformedPathError(value, "invalid stroke-width")
    return float(match.group(1))


def path_to_element(path: Path) -> ET.Element:
    """Build a <path> element carrying geometry, paint and translation.

    Args:
        path: Path to export

    Returns:
        Element with d, fill, stroke, stroke-width and transform attributes
    """
    return ET.Element(
        "path",
        {
            "d": serialize_path(path),
            "fill": _paint_attribute(path.style.fill),
            "stroke": _paint_attribute(path.style.stroke),
            "stroke-width": format_number(path.style.stroke_width),
            "transform": (
                f"translate({format_number(path.translation.x)},"
                f"{format_number(path.translation.y)})"
            ),
        },
    )


def path_from_element(
    element: ET.Element, path_id: int = 0, default_stroke_width: float = 1.0
) -> Path:
    """Build a Path from a <path> element.

    Only translate() transforms are understood; without one the path sits at
    the origin.

    Args:
        element: The <path> element
        path_id: Identifier for the new path
        default_stroke_width: Used when stroke-width is absent

    Returns:
        New Path

    Raises:
        MalformedPathError: If the element has no "d" attribute, its path
            data cannot be parsed or its stroke-width is not a number
    """
    path_data = element.get("d")
    if path_data is None:
        raise MalformedPathError("", "path element has no 'd' attribute")

    control_points = parse_path_data(path_data)

    translation = Point2D(0.0, 0.0)
    transform = element.get("transform")
    if transform:
        match = _TRANSLATE_RE.search(transform)
        if match:
            translation = Point2D(float(match.group(1)), float(match.group(2)))
        else:
            logger.debug("Ignoring unsupported transform %r", transform)

    stroke_width = element.get("stroke-width")
    style = PathStyle(
        fill=_parse_paint(element.get("fill")),
        stroke=_parse_paint(element.get("stroke")),
        stroke_width=_parse_length(stroke_width) if stroke_width else default_stroke_width,
    )

    return Path(
        control_points=control_points,
        translation=translation,
        style=style,
        path_id=path_id,
    )


def export_svg(
    paths: Iterable[Path],
    width: float,
    height: float,
    view_box: BoundingBox | None = None,
) -> str:
    """Serialize paths into a standalone SVG document.

    Args:
        paths: Paths in drawing order
        width: Document width
        height: Document height
        view_box: Visible area (e.g. an artboard); defaults to 0 0 width height

    Returns:
        SVG document as a string
    """
    if view_box is None:
        view_box = BoundingBox(0.0, 0.0, width, height)

    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": format_number(width),
            "height": format_number(height),
            "viewBox": " ".join(
                format_number(v)
                for v in (view_box.x, view_box.y, view_box.width, view_box.height)
            ),
        },
    )

    count = 0
    for path in paths:
        svg.append(path_to_element(path))
        count += 1

    logger.debug("Exported SVG paths=%d", count)
    return ET.tostring(svg, encoding="unicode")


def import_svg(
    document: str, first_id: int = 0, default_stroke_width: float = 1.0
) -> list[Path]:
    """Load every <path> of an SVG document, descending into <g> groups.

    Other elements are ignored.

    Args:
        document: SVG document text
        first_id: Identifier given to the first path; later ones count up
        default_stroke_width: Used for paths without a stroke-width

    Returns:
        Paths in document order

    Raises:
        MalformedPathError: If the XML is invalid, the root is not <svg>, or a
            path element is malformed
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise MalformedPathError(document, f"invalid XML: {e}") from e

    if _strip_ns(root.tag) != "svg":
        raise MalformedPathError(document, f"root element is <{_strip_ns(root.tag)}>, not <svg>")

    paths: list[Path] = []

    def process(element: ET.Element) -> None:
        tag = _strip_ns(element.tag)
        if tag == "path":
            paths.append(
                path_from_element(
                    element,
                    path_id=first_id + len(paths),
                    default_stroke_width=default_stroke_width,
                )
            )
        elif tag == "g":
            for child in element:
                process(child)

    for child in root:
        process(child)

    logger.debug("Imported SVG paths=%d", len(paths))
    return paths
