# topmark:header:start
#
#   project      : SvgScribe
#   file         : structure.py
#   file_relpath : src/svgscribe/emitter/structure.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Document structure: root element, groups, transforms, containers and links.

Container elements are written as separate open and close calls (``group`` /
``gend``, ``defs`` / ``defs_end``, ...). Nothing checks that they are paired;
that is the caller's job.

Reference: https://www.w3.org/TR/SVG11/struct.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.config.logging import get_logger
from svgscribe.constants import EMPTY_CLOSE, SVG_ATTR_INDENT, SVG_NAMESPACES, SVG_TOP, VIEWBOX_FMT
from svgscribe.core import formatting as fmt
from svgscribe.core.keywords import PatternUnits
from svgscribe.emitter.base import Emitter

if TYPE_CHECKING:
    from svgscribe.config.logging import SvgscribeLogger
    from svgscribe.core.types import Number, StyleArgs

logger: SvgscribeLogger = get_logger(__name__)


class StructureMixin(Emitter):
    """Root element, grouping, transforms, definitions and linking."""

    # --- Document root ---

    def _root_attributes(self, attrs: StyleArgs) -> None:
        for attr in fmt.as_items(attrs):
            self.write(SVG_ATTR_INDENT + attr)
        self.write_line(SVG_NAMESPACES)

    def _start(self, w: Number, h: Number, unit: str, attrs: StyleArgs) -> None:
        self.write_formatted(
            '%s width="%s%s" height="%s%s"',
            SVG_TOP,
            fmt.format_number(w),
            unit,
            fmt.format_number(h),
            unit,
        )
        self._root_attributes(attrs)

    def start(self, w: Number, h: Number, attrs: StyleArgs = ()) -> None:
        """Begin the document with width ``w`` and height ``h``.

        Args:
            w (Number): Document width in user units.
            h (Number): Document height in user units.
            attrs (StyleArgs): Extra root attributes (a viewBox, more namespaces),
                each written on its own line.
        """
        logger.debug("start document %sx%s", w, h)
        self._start(w, h, "", attrs)

    def start_unit(self, w: Number, h: Number, unit: str, attrs: StyleArgs = ()) -> None:
        """Begin the document with width and height in ``unit`` (e.g. ``"cm"``)."""
        logger.debug("start document %s%s x %s%s", w, unit, h, unit)
        self._start(w, h, unit, attrs)

    def start_percent(self, w: Number, h: Number, attrs: StyleArgs = ()) -> None:
        """Begin the document with width and height given as percentages."""
        self._start(w, h, "%", attrs)

    def start_view(
        self, w: Number, h: Number, minx: Number, miny: Number, vw: Number, vh: Number
    ) -> None:
        """Begin the document with a size and a ``viewBox``."""
        self.start(w, h, (VIEWBOX_FMT % tuple(fmt.format_number(n) for n in (minx, miny, vw, vh)),))

    def start_view_unit(
        self,
        w: Number,
        h: Number,
        unit: str,
        minx: Number,
        miny: Number,
        vw: Number,
        vh: Number,
    ) -> None:
        """Begin the document with a size in ``unit`` and a ``viewBox``."""
        self.start_unit(
            w, h, unit, (VIEWBOX_FMT % tuple(fmt.format_number(n) for n in (minx, miny, vw, vh)),)
        )

    def start_raw(self, attrs: StyleArgs = ()) -> None:
        """Begin the document with arbitrary root attributes and no size."""
        self.write(SVG_TOP)
        self._root_attributes(attrs)

    def end(self) -> None:
        """Close the document root."""
        self.write_line("</svg>")

    # --- Scripts and style sheets ---

    def _link_embed(self, tag: str, content_type: str, data: StyleArgs) -> None:
        """Write a script-like element.

        A single link-like argument becomes an ``xlink:href``; other arguments
        are written as lines of a CDATA section; no arguments self-close.
        """
        items: tuple[str, ...] = fmt.as_items(data)
        self.write(f'<{tag} type="{content_type}"')
        if len(items) == 1 and fmt.is_link(items[0]):
            self.write(f" {fmt.href(items[0])}{EMPTY_CLOSE}")
        elif items:
            self.write(">\n<![CDATA[\n")
            for line in items:
                self.write_line(line)
            self.write(f"]]>\n</{tag}>\n")
        else:
            self.write_line("/>")

    def script(self, script_type: str, data: StyleArgs = ()) -> None:
        """Write a script of ``script_type`` (e.g. ``application/javascript``)."""
        self._link_embed("script", script_type, data)

    def style(self, style_type: str, data: StyleArgs = ()) -> None:
        """Write a style sheet of ``style_type`` (e.g. ``text/css``)."""
        self._link_embed("style", style_type, data)

    # --- Groups and transforms ---

    def gstyle(self, s: str) -> None:
        """Begin a group with the given style. End with ``gend()``."""
        self.write_line(fmt.group("style", s))

    def gtransform(self, s: str) -> None:
        """Begin a group with the given transform. End with ``gend()``."""
        self.write_line(fmt.group("transform", s))

    def translate(self, x: Number, y: Number) -> None:
        self.gtransform(fmt.translate(x, y))

    def scale(self, n: float) -> None:
        self.gtransform(fmt.scale(n))

    def scale_xy(self, dx: float, dy: float) -> None:
        self.gtransform(fmt.scale_xy(dx, dy))

    def skew_x(self, a: float) -> None:
        self.gtransform(fmt.skew_x(a))

    def skew_y(self, a: float) -> None:
        self.gtransform(fmt.skew_y(a))

    def skew_xy(self, ax: float, ay: float) -> None:
        self.gtransform(fmt.skew_x(ax) + " " + fmt.skew_y(ay))

    def rotate(self, r: float) -> None:
        self.gtransform(fmt.rotate(r))

    def translate_rotate(self, x: Number, y: Number, r: float) -> None:
        """Translate to ``(x, y)``, then rotate by ``r`` degrees."""
        self.gtransform(fmt.translate(x, y) + " " + fmt.rotate(r))

    def rotate_translate(self, x: Number, y: Number, r: float) -> None:
        """Rotate by ``r`` degrees, then translate to ``(x, y)``."""
        self.gtransform(fmt.rotate(r) + " " + fmt.translate(x, y))

    def group(self, style: StyleArgs = ()) -> None:
        """Begin a group with arbitrary attributes."""
        self.write(f"<g {fmt.compose_attributes(style, '>')}\n")

    def gid(self, group_id: str) -> None:
        """Begin a group with an id. The id is escaped."""
        self.write('<g id="')
        self.write_escaped(group_id)
        self.write_line('">')

    def gend(self) -> None:
        """End a group opened by any of the group or transform calls."""
        self.write_line("</g>")

    # --- Containers ---

    def clip_path(self, style: StyleArgs = ()) -> None:
        self.write("<clipPath " + fmt.compose_attributes(style, ">"))

    def clip_end(self) -> None:
        self.write_line("</clipPath>")

    def defs(self) -> None:
        """Begin a definition block."""
        self.write_line("<defs>")

    def defs_end(self) -> None:
        self.write_line("</defs>")

    def marker(
        self,
        marker_id: str,
        x: Number,
        y: Number,
        width: Number,
        height: Number,
        style: StyleArgs = (),
    ) -> None:
        """Begin a marker whose reference point is ``(x, y)``."""
        self.write(
            f'<marker id="{marker_id}" refX="{fmt.format_number(x)}" refY="{fmt.format_number(y)}" '
            f'markerWidth="{fmt.format_number(width)}" markerHeight="{fmt.format_number(height)}" '
            + fmt.compose_attributes(style, ">\n")
        )

    def marker_end(self) -> None:
        self.write_line("</marker>")

    def pattern(
        self,
        pattern_id: str,
        x: Number,
        y: Number,
        width: Number,
        height: Number,
        units: str,
        style: StyleArgs = (),
    ) -> None:
        """Begin a pattern.

        ``units`` is ``"user"`` for ``userSpaceOnUse``; anything else selects
        ``objectBoundingBox``.
        """
        pattern_units: PatternUnits = PatternUnits.from_flag(units)
        self.write(
            f'<pattern id="{pattern_id}" {fmt.dim(x, y, width, height)} '
            f'patternUnits="{pattern_units.value}" ' + fmt.compose_attributes(style, ">\n")
        )

    def pattern_end(self) -> None:
        self.write_line("</pattern>")

    def mask(
        self,
        mask_id: str,
        x: Number,
        y: Number,
        w: Number,
        h: Number,
        style: StyleArgs = (),
    ) -> None:
        self.write(
            f'<mask id="{mask_id}" {fmt.dim(x, y, w, h)} ' + fmt.compose_attributes(style, ">")
        )

    def mask_end(self) -> None:
        self.write_line("</mask>")

    # --- Metadata and linking ---

    def desc(self, text: str) -> None:
        """Write a description element; ``text`` is escaped."""
        self.text_element("desc", text)

    def title(self, text: str) -> None:
        """Write a title element; ``text`` is escaped."""
        self.text_element("title", text)

    def link(self, target: str, title: str) -> None:
        """Begin a hyperlink to ``target``. The title is escaped, the target is not."""
        self.write(f'<a xlink:href="{target}" xlink:title="')
        self.write_escaped(title)
        self.write_line('">')

    def link_end(self) -> None:
        self.write_line("</a>")

    def use(self, x: Number, y: Number, link: str, style: StyleArgs = ()) -> None:
        """Place the object referenced by ``link`` at ``(x, y)``."""
        self.write(
            f"<use {fmt.loc(x, y)} {fmt.href(link)} " + fmt.compose_attributes(style, EMPTY_CLOSE)
        )
