"""Exception hierarchy for vectorpad."""


class VectorpadError(Exception):
    """Base exception for all vectorpad errors."""

    pass


class PathError(VectorpadError):
    """Errors raised by path geometry operations."""

    pass


class InvalidIndexError(PathError, IndexError):
    """An index lies outside the valid range."""

    def __init__(self, index: int | tuple[int, ...], size: int | tuple[int, ...]) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of bounds for size {size}")


class InvalidAdjacencyError(PathError):
    """A segment has no drawable predecessor anchor."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Segment {index} has no drawable predecessor: {reason}")


class UnsupportedControlPointError(PathError):
    """An operation received a control point type it cannot handle."""

    def __init__(self, index: int, point_type: str) -> None:
        self.index = index
        self.point_type = point_type
        super().__init__(f"Unsupported control point {point_type} at index {index}")


class CodecError(VectorpadError):
    """Errors related to path description encoding or decoding."""

    pass


class MalformedPathError(CodecError, ValueError):
    """Path description or SVG document could not be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        shown = source if len(source) <= 60 else source[:57] + "..."
        super().__init__(f"Malformed path description {shown!r}: {reason}")


class ApproximationWarning(UserWarning):
    """Geometry was approximated instead of decoded exactly."""

    pass
