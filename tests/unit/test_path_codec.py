"""Unit tests for the SVG path data codec."""

import warnings

import pytest

from vectorpad.core import NearestSegment, Path
from vectorpad.domain import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadraticCurveTo,
)
from vectorpad.exceptions import ApproximationWarning, CodecError, MalformedPathError
from vectorpad.io import (
    format_number,
    parse_path_data,
    serialize_control_points,
    serialize_path,
)

EXPECTED_SHAPE = [
    MoveTo(x=100.0, y=100.0),
    CubicCurveTo(
        x=250.0,
        y=100.0,
        control_x1=150.0,
        control_y1=50.0,
        control_x2=200.0,
        control_y2=150.0,
    ),
    LineTo(x=300.0, y=150.0),
    QuadraticCurveTo(x=400.0, y=150.0, control_x=350.0, control_y=200.0),
    ClosePath(),
]


class TestParseBasicCommands:
    """Tests for absolute, relative and mixed command strings."""

    def test_absolute_commands(self):
        """Absolute M/C/L/Q/Z map one to one onto control points."""
        path = "M 100 100 C 150 50 200 150 250 100 L 300 150 Q 350 200 400 150 Z"
        assert parse_path_data(path) == EXPECTED_SHAPE

    def test_relative_commands(self):
        """Relative commands resolve against the current point."""
        path = "m 100 100 c 50 -50 100 50 150 0 l 50 50 q 50 50 100 0 z"
        assert parse_path_data(path) == EXPECTED_SHAPE

    def test_mixed_commands(self):
        """Absolute and relative commands can be interleaved."""
        path = "M 100 100 c 50 -50 100 50 150 0 L 300 150 q 50 50 100 0 Z"
        assert parse_path_data(path) == EXPECTED_SHAPE

    def test_compact_syntax(self):
        """Commas, missing spaces and signs as separators are accepted."""
        assert parse_path_data("M10,20L30-40l.5.5z") == [
            MoveTo(10.0, 20.0),
            LineTo(30.0, -40.0),
            LineTo(30.5, -39.5),
            ClosePath(),
        ]

    def test_exponent_numbers(self):
        """Scientific notation is parsed as one number."""
        assert parse_path_data("M 1e2 2.5E-1") == [MoveTo(100.0, 0.25)]


class TestParseExtendedCommands:
    """Tests for shorthand commands that are expanded on parse."""

    def test_horizontal_and_vertical(self):
        """H and V become LineTo keeping the other coordinate."""
        assert parse_path_data("M 10 10 H 50 V 30 h -20 v -5") == [
            MoveTo(10.0, 10.0),
            LineTo(50.0, 10.0),
            LineTo(50.0, 30.0),
            LineTo(30.0, 30.0),
            LineTo(30.0, 25.0),
        ]

    def test_implicit_line_to_after_move_to(self):
        """Extra coordinate pairs after M are LineTos."""
        assert parse_path_data("M 0 0 10 0 10 10") == [
            MoveTo(0.0, 0.0),
            LineTo(10.0, 0.0),
            LineTo(10.0, 10.0),
        ]
        assert parse_path_data("m 5 5 10 0 0 10") == [
            MoveTo(5.0, 5.0),
            LineTo(15.0, 5.0),
            LineTo(15.0, 15.0),
        ]

    def test_repeated_curve_arguments(self):
        """A command letter can be followed by several argument groups."""
        points = parse_path_data("M 0 0 Q 5 10 10 0 15 -10 20 0")
        assert points[1:] == [
            QuadraticCurveTo(x=10.0, y=0.0, control_x=5.0, control_y=10.0),
            QuadraticCurveTo(x=20.0, y=0.0, control_x=15.0, control_y=-10.0),
        ]

    def test_smooth_cubic_reflects_previous_control(self):
        """S reflects the previous second control about the current point."""
        points = parse_path_data("M 0 0 C 10 20 30 20 40 0 S 70 -20 80 0")
        assert points[2] == CubicCurveTo(
            x=80.0, y=0.0, control_x1=50.0, control_y1=-20.0, control_x2=70.0, control_y2=-20.0
        )

    def test_smooth_cubic_without_previous_cubic(self):
        """S after a non-cubic uses the current point as first control."""
        points = parse_path_data("M 0 0 L 10 0 s 20 10 30 0")
        assert points[2] == CubicCurveTo(
            x=40.0, y=0.0, control_x1=10.0, control_y1=0.0, control_x2=30.0, control_y2=10.0
        )

    def test_smooth_quadratic_reflects_previous_control(self):
        """T reflects the previous quadratic control, chaining through T."""
        points = parse_path_data("M 0 0 Q 10 20 20 0 T 40 0 T 60 0")
        assert points[2] == QuadraticCurveTo(x=40.0, y=0.0, control_x=30.0, control_y=-20.0)
        assert points[3] == QuadraticCurveTo(x=60.0, y=0.0, control_x=50.0, control_y=20.0)

    def test_smooth_quadratic_without_previous_quadratic(self):
        """T after a non-quadratic uses the current point as control."""
        points = parse_path_data("M 0 0 C 0 10 10 10 10 0 T 20 0")
        assert points[2] == QuadraticCurveTo(x=20.0, y=0.0, control_x=10.0, control_y=0.0)

    def test_close_path_resets_smooth_state(self):
        """A ClosePath breaks the reflection chain."""
        points = parse_path_data("M 0 0 Q 10 20 20 0 Z T 40 0")
        assert points[3] == QuadraticCurveTo(x=40.0, y=0.0, control_x=20.0, control_y=0.0)

    def test_close_path_keeps_current_point(self):
        """Relative commands after Z continue from the last anchor."""
        points = parse_path_data("M 0 0 L 10 0 z l 5 5")
        assert points[3] == LineTo(15.0, 5.0)

    def test_arc_is_approximated(self):
        """An arc becomes a line to its endpoint with a warning."""
        with pytest.warns(ApproximationWarning, match="Arc command approximated"):
            points = parse_path_data("M 0 0 A 25 25 0 0 1 50 0 a 10 10 0 1 0 10 10")
        assert points == [MoveTo(0.0, 0.0), LineTo(50.0, 0.0), LineTo(60.0, 10.0)]

    def test_no_warning_without_arcs(self):
        """Exact decoding emits no warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            parse_path_data("M 0 0 L 10 10 Z")


class TestParseMalformed:
    """Tests for rejected path data."""

    @pytest.mark.parametrize(
        "path_data",
        [
            "",
            "   ",
            "100 100",
            "X 10 10",
            "10 M 0 0",
            "M 0 0 L 10",
            "M 0 0 C 1 2 3 4 5",
            "M 0 0 L abc def",
            "M 0 0 Z 5",
            "M",
        ],
    )
    def test_malformed(self, path_data):
        """Unparseable strings raise MalformedPathError."""
        with pytest.raises(MalformedPathError):
            parse_path_data(path_data)

    def test_malformed_is_codec_and_value_error(self):
        """MalformedPathError fits both the package and builtin hierarchies."""
        with pytest.raises(CodecError):
            parse_path_data("L")
        with pytest.raises(ValueError):
            parse_path_data("L")

    def test_error_carries_source(self):
        """The offending string and reason are kept on the exception."""
        with pytest.raises(MalformedPathError) as exc_info:
            parse_path_data("M 0 0 L 10")
        assert exc_info.value.source == "M 0 0 L 10"
        assert "expects a multiple of 2" in exc_info.value.reason

    def test_long_source_truncated_in_message(self):
        """Long path data is shortened in the message."""
        source = "M 0 0 " + "L 1 1 " * 30 + "L 5"
        with pytest.raises(MalformedPathError) as exc_info:
            parse_path_data(source)
        assert "..." in str(exc_info.value)
        assert exc_info.value.source == source


class TestSerialize:
    """Tests for path data encoding."""

    def test_format_number(self):
        """Integral values drop the fraction; others keep full precision."""
        assert format_number(100.0) == "100"
        assert format_number(-3.0) == "-3"
        assert format_number(0.1) == "0.1"
        assert format_number(2.5) == "2.5"
        assert format_number(7) == "7"

    def test_serialize_shape(self):
        """Every variant is written as its absolute command."""
        assert serialize_control_points(EXPECTED_SHAPE) == (
            "M 100 100 C 150 50 200 150 250 100 L 300 150 Q 350 200 400 150 Z"
        )

    def test_serialize_empty(self):
        """No points produce an empty string."""
        assert serialize_control_points([]) == ""

    def test_serialize_path(self):
        """serialize_path encodes the model-space points."""
        path = Path([MoveTo(0.0, 0.0), LineTo(1.5, 2.0)])
        path.translate(100.0, 100.0)
        assert serialize_path(path) == "M 0 0 L 1.5 2"

    def test_relative_input_normalizes_to_absolute(self):
        """Parsing then serializing rewrites relative data as absolute."""
        normalized = serialize_control_points(
            parse_path_data("m 100 100 c 50 -50 100 50 150 0 l 50 50 q 50 50 100 0 z")
        )
        assert normalized == "M 100 100 C 150 50 200 150 250 100 L 300 150 Q 350 200 400 150 Z"
        assert parse_path_data(normalized) == EXPECTED_SHAPE

    @pytest.mark.parametrize("value", [0.1, 1e-7, -2.5e-300, 1e22, -0.0, 1 / 3, -123.456])
    def test_fractional_values_survive(self, value):
        """Non-integral and extreme coordinates parse back unchanged."""
        points = [
            MoveTo(value, -value),
            LineTo(value, 1.0),
            QuadraticCurveTo(x=value, y=value, control_x=-value, control_y=0.5),
            CubicCurveTo(
                x=value,
                y=2.0,
                control_x1=value,
                control_y1=-value,
                control_x2=0.25,
                control_y2=value,
            ),
            ClosePath(),
        ]
        assert parse_path_data(serialize_control_points(points)) == points

    @pytest.mark.parametrize("t", [1 / 3, 0.1, 0.7])
    def test_split_output_survives(self, t):
        """Points produced by splitting a curve parse back unchanged."""
        path = Path(
            [
                MoveTo(0.0, 0.0),
                QuadraticCurveTo(x=10.0, y=0.0, control_x=3.0, control_y=7.0),
                CubicCurveTo(
                    x=20.0, y=5.0, control_x1=13.0, control_y1=-4.0, control_x2=17.0, control_y2=9.0
                ),
            ]
        )
        path.add_nearest_segment(NearestSegment(index=1, t=t))
        path.add_nearest_segment(NearestSegment(index=3, t=t))
        assert len(path) == 5
        assert parse_path_data(serialize_path(path)) == list(path.control_points)
