# topmark:header:start
#
#   project      : SvgScribe
#   file         : paint.py
#   file_relpath : src/svgscribe/emitter/paint.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Colors and gradients.

Gradient geometry and stop offsets are percentages; values above 100 are
capped at 100, values below 0 are written as given.

References:
    - https://www.w3.org/TR/css3-color/
    - https://www.w3.org/TR/SVG11/pservers.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.core.formatting import pct
from svgscribe.emitter.base import Emitter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svgscribe.core.types import Offcolor


class PaintMixin(Emitter):
    """Fill colors and gradient paint servers."""

    def rgb(self, r: int, g: int, b: int) -> str:
        """Return a fill style for the color ``(r, g, b)``. Nothing is written."""
        return f"fill:rgb({r},{g},{b})"

    def rgba(self, r: int, g: int, b: int, a: float) -> str:
        """Return a fill style for ``(r, g, b)`` with opacity ``a``. Nothing is written."""
        return f"fill-opacity:{a:.2f}; {self.rgb(r, g, b)}"

    def linear_gradient(
        self,
        gradient_id: str,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        stops: Iterable[Offcolor],
    ) -> None:
        """Write a linear gradient along the vector ``(x1, y1)`` to ``(x2, y2)``."""
        self.write(
            f'<linearGradient id="{gradient_id}" x1="{pct(x1)}%" y1="{pct(y1)}%" '
            f'x2="{pct(x2)}%" y2="{pct(y2)}%">\n'
        )
        self._stop_colors(stops)
        self.write_line("</linearGradient>")

    def radial_gradient(
        self,
        gradient_id: str,
        cx: int,
        cy: int,
        r: int,
        fx: int,
        fy: int,
        stops: Iterable[Offcolor],
    ) -> None:
        """Write a radial gradient centered at ``(cx, cy)`` with focal point ``(fx, fy)``."""
        self.write(
            f'<radialGradient id="{gradient_id}" cx="{pct(cx)}%" cy="{pct(cy)}%" r="{pct(r)}%" '
            f'fx="{pct(fx)}%" fy="{pct(fy)}%">\n'
        )
        self._stop_colors(stops)
        self.write_line("</radialGradient>")

    def _stop_colors(self, stops: Iterable[Offcolor]) -> None:
        for stop in stops:
            self.write(
                f'<stop offset="{pct(stop.offset)}%" stop-color="{stop.color}" '
                f'stop-opacity="{stop.opacity:.2f}"/>\n'
            )
