# topmark:header:start
#
#   project      : SvgScribe
#   file         : test_document.py
#   file_relpath : tests/emitter/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Document root, scripts, style sheets and sink behavior."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

import pytest

import svgscribe
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from svgscribe.canvas import Canvas

NS = (
    '\n     xmlns="http://www.w3.org/2000/svg"'
    '\n     xmlns:xlink="http://www.w3.org/1999/xlink">\n'
)

HELLO_WORLD = (
    '<?xml version="1.0"?>\n'
    '<svg width="100" height="100"\n'
    '     xmlns="http://www.w3.org/2000/svg"\n'
    '     xmlns:xlink="http://www.w3.org/1999/xlink">\n'
    '<circle cx="50" cy="50" r="40" />\n'
    "</svg>\n"
)


@mark_integration
def test_hello_world_document() -> None:
    sink = io.StringIO()
    canvas = svgscribe.new(sink)
    canvas.start(100, 100)
    canvas.circle(50, 50, 40)
    canvas.end()
    assert sink.getvalue() == HELLO_WORLD


@mark_integration
def test_hello_world_parses_as_svg() -> None:
    root = ET.fromstring(HELLO_WORLD.split("\n", 1)[1])
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    (circle,) = list(root)
    assert circle.attrib == {"cx": "50", "cy": "50", "r": "40"}


def test_start_with_extra_root_attributes(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start(10, 20, ['viewBox="0 0 10 20"', 'xmlns:ev="http://www.w3.org/2001/xml-events"'])
    assert sink.getvalue() == (
        '<?xml version="1.0"?>\n<svg width="10" height="20"'
        '\n     viewBox="0 0 10 20"'
        '\n     xmlns:ev="http://www.w3.org/2001/xml-events"' + NS
    )


def test_start_unit(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start_unit(10, 7.5, "cm")
    assert sink.getvalue() == '<?xml version="1.0"?>\n<svg width="10cm" height="7.5cm"' + NS


def test_start_percent(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start_percent(100, 50)
    assert sink.getvalue() == '<?xml version="1.0"?>\n<svg width="100%" height="50%"' + NS


def test_start_view(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start_view(400, 300, 0, 0, 40, 30)
    assert sink.getvalue() == (
        '<?xml version="1.0"?>\n<svg width="400" height="300"\n     viewBox="0 0 40 30"' + NS
    )


def test_start_view_unit(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start_view_unit(4, 3, "in", -1, -1, 2, 2)
    assert sink.getvalue() == (
        '<?xml version="1.0"?>\n<svg width="4in" height="3in"\n     viewBox="-1 -1 2 2"' + NS
    )


def test_start_raw(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.start_raw(['width="1"'])
    assert sink.getvalue() == '<?xml version="1.0"?>\n<svg\n     width="1"' + NS


def test_end(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.end()
    assert sink.getvalue() == "</svg>\n"


def test_script_link(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.script("application/javascript", "http://example.com/app.js")
    assert sink.getvalue() == (
        '<script type="application/javascript" xlink:href="http://example.com/app.js"/>\n'
    )


def test_style_inline_lines_become_cdata(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.style("text/css", ["rect { fill: red }", "circle { fill: blue }"])
    assert sink.getvalue() == (
        '<style type="text/css">\n<![CDATA[\n'
        "rect { fill: red }\ncircle { fill: blue }\n"
        "]]>\n</style>\n"
    )


def test_script_link_with_more_lines_is_inline(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.script("text/ecmascript", ["#x", "alert(1)"])
    assert sink.getvalue().startswith('<script type="text/ecmascript">\n<![CDATA[\n#x\n')


def test_script_without_data_self_closes(canvas: Canvas, sink: io.StringIO) -> None:
    canvas.script("text/ecmascript")
    assert sink.getvalue() == '<script type="text/ecmascript"/>\n'


class _BrokenSink:
    def write(self, s: str, /) -> int:
        raise OSError("disk full")


def test_sink_errors_propagate() -> None:
    canvas = svgscribe.new(_BrokenSink())
    with pytest.raises(OSError, match="disk full"):
        canvas.circle(1, 2, 3)


def test_closed_sink_error_propagates() -> None:
    sink = io.StringIO()
    canvas = svgscribe.new(sink)
    sink.close()
    with pytest.raises(ValueError):
        canvas.end()


def test_repr_names_the_sink(canvas: Canvas, sink: io.StringIO) -> None:
    assert repr(canvas) == f"Canvas(writer={sink!r})"
