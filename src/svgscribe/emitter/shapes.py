# topmark:header:start
#
#   project      : SvgScribe
#   file         : shapes.py
#   file_relpath : src/svgscribe/emitter/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Basic shapes, paths, lines, images and the grid utility.

All elements here are self-closing. Geometry is written as given: negative
sizes or radii are not corrected.

References:
    - https://www.w3.org/TR/SVG11/shapes.html
    - https://www.w3.org/TR/SVG11/paths.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.constants import EMPTY_CLOSE
from svgscribe.core import formatting as fmt
from svgscribe.emitter.structure import StructureMixin

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svgscribe.core.types import Number, StyleArgs


def _half(n: Number) -> Number:
    """Halve ``n``; integers are truncated toward zero."""
    if isinstance(n, int):
        return -(-n // 2) if n < 0 else n // 2
    return n / 2


class ShapesMixin(StructureMixin):
    """Shapes, paths and lines."""

    def circle(self, x: Number, y: Number, r: Number, style: StyleArgs = ()) -> None:
        """Circle centered at ``(x, y)`` with radius ``r``."""
        self.write(
            f'<circle cx="{fmt.format_number(x)}" cy="{fmt.format_number(y)}" '
            f'r="{fmt.format_number(r)}" ' + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def ellipse(self, x: Number, y: Number, w: Number, h: Number, style: StyleArgs = ()) -> None:
        """Ellipse centered at ``(x, y)`` with radii ``w`` and ``h``."""
        self.write(
            f'<ellipse cx="{fmt.format_number(x)}" cy="{fmt.format_number(y)}" '
            f'rx="{fmt.format_number(w)}" ry="{fmt.format_number(h)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def _poly(
        self, xs: Sequence[Number], ys: Sequence[Number], tag: str, style: StyleArgs
    ) -> None:
        self.write(
            f'<{tag} points="{fmt.points(xs, ys)}" ' + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def polygon(self, xs: Sequence[Number], ys: Sequence[Number], style: StyleArgs = ()) -> None:
        """Closed shape through the points ``zip(xs, ys)``.

        If ``xs`` and ``ys`` differ in length the point list is left blank.
        """
        self._poly(xs, ys, "polygon", style)

    def polyline(self, xs: Sequence[Number], ys: Sequence[Number], style: StyleArgs = ()) -> None:
        """Connected lines through the points ``zip(xs, ys)``."""
        self._poly(xs, ys, "polyline", style)

    def rect(self, x: Number, y: Number, w: Number, h: Number, style: StyleArgs = ()) -> None:
        """Rectangle with upper left corner at ``(x, y)``."""
        self.write(f"<rect {fmt.dim(x, y, w, h)} " + fmt.compose_attributes(style, EMPTY_CLOSE))

    def center_rect(
        self, x: Number, y: Number, w: Number, h: Number, style: StyleArgs = ()
    ) -> None:
        """Rectangle centered at ``(x, y)``."""
        self.rect(x - _half(w), y - _half(h), w, h, style)

    def roundrect(
        self,
        x: Number,
        y: Number,
        w: Number,
        h: Number,
        rx: Number,
        ry: Number,
        style: StyleArgs = (),
    ) -> None:
        """Rectangle with corners rounded by radii ``rx`` and ``ry``."""
        self.write(
            f'<rect {fmt.dim(x, y, w, h)} '
            f'rx="{fmt.format_number(rx)}" ry="{fmt.format_number(ry)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def square(self, x: Number, y: Number, side: Number, style: StyleArgs = ()) -> None:
        self.rect(x, y, side, side, style)

    # --- Paths ---

    def path(self, d: str, style: StyleArgs = ()) -> None:
        """Arbitrary path; ``d`` is written verbatim."""
        self.write(f'<path d="{d}" ' + fmt.compose_attributes(style, EMPTY_CLOSE))

    def arc(
        self,
        sx: Number,
        sy: Number,
        ax: Number,
        ay: Number,
        r: Number,
        large: bool,
        sweep: bool,
        ex: Number,
        ey: Number,
        style: StyleArgs = (),
    ) -> None:
        """Elliptical arc from ``(sx, sy)`` to ``(ex, ey)``.

        Args:
            sx (Number): Start x.
            sy (Number): Start y.
            ax (Number): Arc x radius.
            ay (Number): Arc y radius.
            r (Number): Rotation of the x axis, in degrees.
            large (bool): Sweep through 180 degrees or more.
            sweep (bool): Draw in the positive-angle (clockwise) direction.
            ex (Number): End x.
            ey (Number): End y.
            style (StyleArgs): Optional style fragments.
        """
        self.write(
            f"{fmt.ptag(sx, sy)} A{fmt.coord(ax, ay)} {fmt.format_number(r)} "
            f'{fmt.onezero(large)} {fmt.onezero(sweep)} {fmt.coord(ex, ey)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def bezier(
        self,
        sx: Number,
        sy: Number,
        cx: Number,
        cy: Number,
        px: Number,
        py: Number,
        ex: Number,
        ey: Number,
        style: StyleArgs = (),
    ) -> None:
        """Cubic Bezier curve with control points ``(cx, cy)`` and ``(px, py)``."""
        self.write(
            f"{fmt.ptag(sx, sy)} C{fmt.coord(cx, cy)} {fmt.coord(px, py)} {fmt.coord(ex, ey)}\" "
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def qbez(
        self,
        sx: Number,
        sy: Number,
        cx: Number,
        cy: Number,
        ex: Number,
        ey: Number,
        style: StyleArgs = (),
    ) -> None:
        """Quadratic Bezier curve with control point ``(cx, cy)``."""
        self.write(
            f"{fmt.ptag(sx, sy)} Q{fmt.coord(cx, cy)} {fmt.coord(ex, ey)}\" "
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def qbezier(
        self,
        sx: Number,
        sy: Number,
        cx: Number,
        cy: Number,
        ex: Number,
        ey: Number,
        tx: Number,
        ty: Number,
        style: StyleArgs = (),
    ) -> None:
        """Quadratic Bezier curve continued by a smooth segment to ``(tx, ty)``."""
        self.write(
            f"{fmt.ptag(sx, sy)} Q{fmt.coord(cx, cy)} {fmt.coord(ex, ey)} T{fmt.coord(tx, ty)}\" "
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    # --- Lines and images ---

    def line(self, x1: Number, y1: Number, x2: Number, y2: Number, style: StyleArgs = ()) -> None:
        self.write(
            f'<line x1="{fmt.format_number(x1)}" y1="{fmt.format_number(y1)}" '
            f'x2="{fmt.format_number(x2)}" y2="{fmt.format_number(y2)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def image(
        self, x: Number, y: Number, w: Number, h: Number, link: str, style: StyleArgs = ()
    ) -> None:
        """Place the image at ``link`` in the box ``(x, y, w, h)``."""
        self.write(
            f"<image {fmt.dim(x, y, w, h)} {fmt.href(link)} "
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def grid(self, x: int, y: int, w: int, h: int, n: int, style: StyleArgs = ()) -> None:
        """Draw a grid over ``(x, y, w, h)`` with lines every ``n`` units.

        Only the first style item is used, as the style of an enclosing group.

        Raises:
            ValueError: If ``n`` is not positive.
        """
        if n <= 0:
            raise ValueError(f"grid spacing must be positive, got {n}")
        items: tuple[str, ...] = fmt.as_items(style)
        if items:
            self.gstyle(items[0])
        for ix in range(x, x + w + 1, n):
            self.line(ix, y, ix, y + h)
        for iy in range(y, y + h + 1, n):
            self.line(x, iy, x + w, iy)
        if items:
            self.gend()

