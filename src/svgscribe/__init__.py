# topmark:header:start
#
#   project      : SvgScribe
#   file         : __init__.py
#   file_relpath : src/svgscribe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe package.

SvgScribe writes SVG documents straight to any text sink (a file, an
``io.StringIO``, a socket wrapper) without building a document tree. Element
calls compose attribute strings and write them immediately; free text is
escaped, attribute values are written as given.
"""

from __future__ import annotations

from svgscribe.canvas import Canvas, new
from svgscribe.core.formatting import (
    compose_attributes,
    compose_filter_attributes,
    escape_text,
    onezero,
    pct,
    repeat_string,
)
from svgscribe.core.keywords import imgchannel
from svgscribe.core.types import Filterspec, Offcolor, StyleArgs, TextSink
from svgscribe.emitter.base import Emitter

__all__ = [
    "Canvas",
    "Emitter",
    "Filterspec",
    "Offcolor",
    "StyleArgs",
    "TextSink",
    "compose_attributes",
    "compose_filter_attributes",
    "escape_text",
    "imgchannel",
    "new",
    "onezero",
    "pct",
    "repeat_string",
]
