# topmark:header:start
#
#   project      : SvgScribe
#   file         : text.py
#   file_relpath : src/svgscribe/emitter/text.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Text elements. Text content is always escaped; attributes are not.

Reference: https://www.w3.org/TR/SVG11/text.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.core import formatting as fmt
from svgscribe.emitter.structure import StructureMixin

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svgscribe.core.types import Number, StyleArgs


class TextMixin(StructureMixin):
    """Text, spans and text on a path."""

    def text(self, x: Number, y: Number, t: str, style: StyleArgs = ()) -> None:
        """Write the text ``t`` at ``(x, y)``."""
        self.write(f"<text {fmt.loc(x, y)} " + fmt.compose_attributes(style, ">"))
        self.write_escaped(t)
        self.write_line("</text>")

    def textspan(self, x: Number, y: Number, t: str, style: StyleArgs = ()) -> None:
        """Begin a text element that will hold spans. End with ``text_end()``."""
        self.write(f"<text {fmt.loc(x, y)} " + fmt.compose_attributes(style, ">"))
        self.write_escaped(t)

    def span(self, t: str, style: StyleArgs = ()) -> None:
        """Write spanned text inside ``textspan``; unstyled text is written bare."""
        if not fmt.as_items(style):
            self.write_escaped(t)
            return
        self.write("<tspan " + fmt.compose_attributes(style, ">"))
        self.write_escaped(t)
        self.write("</tspan>")

    def text_end(self) -> None:
        self.write_line("</text>")

    def textpath(self, t: str, path_id: str, style: StyleArgs = ()) -> None:
        """Write ``t`` along the path referenced by ``path_id`` (e.g. ``"#p1"``)."""
        self.write(
            "<text " + fmt.compose_attributes(style, ">") + f'<textPath xlink:href="{path_id}">'
        )
        self.write_escaped(t)
        self.write_line("</textPath></text>")

    def textlines(
        self,
        x: Number,
        y: Number,
        lines: Iterable[str],
        size: int,
        spacing: Number,
        fill: str,
        align: str,
    ) -> None:
        """Write one text element per line, ``spacing`` units apart, in a styled group."""
        self.gstyle(f"font-size:{size}px;fill:{fill};text-anchor:{align}")
        for t in lines:
            self.text(x, y, t)
            y += spacing
        self.gend()
