# topmark:header:start
#
#   project      : SvgScribe
#   file         : test_structure.py
#   file_relpath : tests/emitter/test_structure.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Groups, transforms, containers and linking elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.conftest import parametrize

if TYPE_CHECKING:
    import io
    from collections.abc import Callable

    from svgscribe.canvas import Canvas


@parametrize(
    "call, expected",
    [
        (lambda c: c.gstyle("fill:red"), '<g style="fill:red">\n'),
        (lambda c: c.gtransform("scale(2)"), '<g transform="scale(2)">\n'),
        (lambda c: c.translate(10, 20), '<g transform="translate(10,20)">\n'),
        (lambda c: c.scale(0.5), '<g transform="scale(0.5)">\n'),
        (lambda c: c.scale_xy(2, 3), '<g transform="scale(2,3)">\n'),
        (lambda c: c.skew_x(30), '<g transform="skewX(30)">\n'),
        (lambda c: c.skew_y(15), '<g transform="skewY(15)">\n'),
        (lambda c: c.skew_xy(10, 20), '<g transform="skewX(10) skewY(20)">\n'),
        (lambda c: c.rotate(45), '<g transform="rotate(45)">\n'),
        (lambda c: c.translate_rotate(1, 2, 90), '<g transform="translate(1,2) rotate(90)">\n'),
        (lambda c: c.rotate_translate(1, 2, 90), '<g transform="rotate(90) translate(1,2)">\n'),
        (lambda c: c.gend(), "</g>\n"),
    ],
)
def test_group_and_transform_openers(
    canvas: Canvas, sink: io.StringIO, call: Callable[[Canvas], None], expected: str
) -> None:
    call(canvas)
    assert sink.getvalue() == expected


def test_group_with_attributes(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.group(['id="g1"', "fill:none"])
    assert sink.getvalue() == '<g id="g1" style="fill:none" >\n'


def test_gid_escapes_the_id(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.gid("a<b")
    assert sink.getvalue() == '<g id="a&lt;b">\n'


def test_defs(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.defs()
    canvas.defs_end()
    assert sink.getvalue() == "<defs>\n</defs>\n"


def test_clip_path_has_no_newline(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.clip_path('id="clip"')
    canvas.clip_end()
    assert sink.getvalue() == '<clipPath id="clip" ></clipPath>\n'


def test_marker(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.marker("arrow", 2, 3, 8, 8, 'orient="auto"')
    canvas.marker_end()
    assert sink.getvalue() == (
        '<marker id="arrow" refX="2" refY="3" markerWidth="8" markerHeight="8" orient="auto" >\n'
        "</marker>\n"
    )


@parametrize(
    "units, expected",
    [
        ("user", "userSpaceOnUse"),
        ("userSpaceOnUse", "objectBoundingBox"),
        ("User", "objectBoundingBox"),
        ("obj", "objectBoundingBox"),
        ("anything", "objectBoundingBox"),
    ],
)
def test_pattern_units(canvas: Canvas, sink: io.StringIO, units: str, expected: str) -> None:
    canvas.pattern("dots", 0, 0, 10, 10, units)
    assert sink.getvalue() == (
        f'<pattern id="dots" x="0" y="0" width="10" height="10" patternUnits="{expected}" >\n'
    )


def test_pattern_end(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.pattern_end()
    assert sink.getvalue() == "</pattern>\n"


def test_mask(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.mask("m", 0, 0, 5, 5, "fill:white")
    canvas.mask_end()
    assert sink.getvalue() == (
        '<mask id="m" x="0" y="0" width="5" height="5" style="fill:white" ></mask>\n'
    )


def test_title_and_desc_escape_text(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.title("A & B")
    canvas.desc("x < y")
    assert sink.getvalue() == "<title>A &amp; B</title>\n<desc>x &lt; y</desc>\n"


def test_link_escapes_title_but_not_target(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.link("http://example.com/?a=1&b=2", 'say "hi"')
    canvas.link_end()
    assert sink.getvalue() == (
        '<a xlink:href="http://example.com/?a=1&b=2" xlink:title="say &#34;hi&#34;">\n</a>\n'
    )


def test_use(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.use(5, 6, "#sym", "fill:red")
    assert sink.getvalue() == '<use x="5" y="6" xlink:href="#sym" style="fill:red" />\n'
