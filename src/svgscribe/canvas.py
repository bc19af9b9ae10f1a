# topmark:header:start
#
#   project      : SvgScribe
#   file         : canvas.py
#   file_relpath : src/svgscribe/canvas.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""The composed SVG canvas.

Example:
    ```python
    import sys

    import svgscribe

    canvas = svgscribe.new(sys.stdout)
    canvas.start(500, 500)
    canvas.circle(250, 250, 100)
    canvas.text(250, 250, "Hello, SVG", style="text-anchor:middle;font-size:30px;fill:white")
    canvas.end()
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.emitter import AnimationMixin, FiltersMixin, PaintMixin, ShapesMixin, TextMixin

if TYPE_CHECKING:
    from svgscribe.core.types import TextSink


class Canvas(TextMixin, ShapesMixin, PaintMixin, FiltersMixin, AnimationMixin):
    """Every SVG element call, writing to one sink.

    A canvas is not thread-safe; see [`Emitter`][svgscribe.emitter.base.Emitter].
    """


def new(writer: TextSink) -> Canvas:
    """Return a canvas writing to ``writer``."""
    return Canvas(writer)
