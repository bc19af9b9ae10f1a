# topmark:header:start
#
#   project      : SvgScribe
#   file         : test_formatting.py
#   file_relpath : tests/unit/test_formatting.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Unit tests for the pure formatting helpers in `svgscribe.core.formatting`."""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from svgscribe.constants import EMPTY_CLOSE
from svgscribe.core import formatting as fmt
from svgscribe.core.types import Filterspec
from tests.conftest import mark_hypothesis_slow, parametrize


def test_compose_attributes_empty_is_just_the_closing() -> None:
    assert fmt.compose_attributes([], ">") == ">"
    assert fmt.compose_attributes((), EMPTY_CLOSE) == "/>\n"


def test_compose_attributes_pairs_pass_through_and_bare_tokens_become_style() -> None:
    assert fmt.compose_attributes(["a=1", "b"], ">") == 'a=1 style="b" >'


def test_compose_attributes_preserves_order() -> None:
    out = fmt.compose_attributes(["fill:red", 'id="c1"', "stroke:blue"], EMPTY_CLOSE)
    assert out == 'style="fill:red" id="c1" style="stroke:blue" />\n'


def test_compose_attributes_single_string_is_one_item() -> None:
    """A plain string must not be split into characters."""
    assert fmt.compose_attributes("fill:red", ">") == 'style="fill:red" >'


def test_compose_attributes_leading_equals_is_not_a_pair() -> None:
    assert fmt.compose_attributes(["=x"], ">") == 'style="=x" >'


@parametrize(
    "spec, expected",
    [
        (Filterspec(), ""),
        (Filterspec(result="r"), 'result="r" '),
        (Filterspec(in_="A", in2="B", result="C"), 'in="A" in2="B" result="C" '),
        (Filterspec(in2="B"), 'in2="B" '),
    ],
)
def test_compose_filter_attributes(spec: Filterspec, expected: str) -> None:
    assert fmt.compose_filter_attributes(spec) == expected


@parametrize("value, expected", [(150, 100), (0, 0), (255, 100), (100, 100), (42, 42), (-5, -5)])
def test_pct_caps_at_100_only(value: int, expected: int) -> None:
    assert fmt.pct(value) == expected


@parametrize("value, expected", [(0, "indefinite"), (-5, "indefinite"), (3, "3"), (1, "1")])
def test_repeat_string(value: int, expected: str) -> None:
    assert fmt.repeat_string(value) == expected


def test_onezero() -> None:
    assert fmt.onezero(True) == "1"
    assert fmt.onezero(False) == "0"


@parametrize(
    "value, expected",
    [
        (1, "1"),
        (-7, "-7"),
        (True, "1"),
        (1.5, "1.5"),
        (-2.5, "-2.5"),
        (100.0, "100"),
        (0.1, "0.1"),
        (0.0, "0"),
        (123456.0, "123456"),
        (1e6, "1e+06"),
        (1234567.0, "1.234567e+06"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (1.5e-05, "1.5e-05"),
        (1e21, "1e+21"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert fmt.format_number(value) == expected


def test_format_numbers_joins_with_separator() -> None:
    assert fmt.format_numbers([1, 0.5, 2]) == "1 0.5 2"
    assert fmt.format_numbers([1, 2], sep=",") == "1,2"
    assert fmt.format_numbers([]) == ""


def test_points_pairs_coordinates() -> None:
    assert fmt.points([1, 2, 3], [4, 5, 6]) == "1,4 2,5 3,6"


def test_points_mismatched_lengths_are_blank() -> None:
    assert fmt.points([1, 2, 3], [4, 5]) == " "


def test_points_empty() -> None:
    assert fmt.points([], []) == ""


def test_geometry_helpers() -> None:
    assert fmt.coord(1, 2.5) == "1,2.5"
    assert fmt.coord_pair(1, 2) == "1 2"
    assert fmt.sce(90, 10, 20) == "90 10 20"
    assert fmt.loc(3, 4) == 'x="3" y="4"'
    assert fmt.dim(0, 0, 10, 20) == 'x="0" y="0" width="10" height="20"'
    assert fmt.href("#a") == 'xlink:href="#a"'
    assert fmt.ptag(5, 6) == '<path d="M5,6'


def test_transform_helpers() -> None:
    assert fmt.translate(10, 20) == "translate(10,20)"
    assert fmt.scale(2) == "scale(2)"
    assert fmt.scale_xy(1.5, 2) == "scale(1.5,2)"
    assert fmt.skew_x(30) == "skewX(30)"
    assert fmt.skew_y(-15) == "skewY(-15)"
    assert fmt.rotate(45) == "rotate(45)"


def test_style_attr_and_group() -> None:
    assert fmt.style_attr("fill:red") == 'style="fill:red"'
    assert fmt.style_attr("") == ""
    assert fmt.group("style", "fill:red") == '<g style="fill:red">'


@parametrize(
    "data, expected",
    [
        ("http://example.com/s.js", True),
        ("#local", True),
        ("../up.css", True),
        ("./here.css", True),
        ("https://example.com/s.js", False),
        ("rect { fill: red }", False),
    ],
)
def test_is_link(data: str, expected: bool) -> None:
    assert fmt.is_link(data) is expected


@mark_hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(value=st.floats(allow_nan=False, allow_infinity=False))
def test_format_number_reparses_exactly(value: float) -> None:
    text: str = fmt.format_number(value)
    assert float(text) == value
    assert "e" not in text or text.split("e")[1][1:].isdigit()
