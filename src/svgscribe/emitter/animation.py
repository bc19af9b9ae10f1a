# topmark:header:start
#
#   project      : SvgScribe
#   file         : animation.py
#   file_relpath : src/svgscribe/emitter/animation.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SMIL animation elements.

Every animation targets another element through ``link`` (``"#id"``). A
``repeat`` of zero or less repeats indefinitely.

Reference: https://www.w3.org/TR/SVG11/animate.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.constants import EMPTY_CLOSE
from svgscribe.core import formatting as fmt
from svgscribe.emitter.base import Emitter

if TYPE_CHECKING:
    from svgscribe.core.types import Number, StyleArgs


class AnimationMixin(Emitter):
    """animate, animateMotion and animateTransform."""

    def animate(
        self,
        link: str,
        attr: str,
        from_: Number,
        to: Number,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        """Animate attribute ``attr`` of ``link`` from ``from_`` to ``to``."""
        self.write(
            f'<animate {fmt.href(link)} attributeName="{attr}" '
            f'from="{fmt.format_number(from_)}" to="{fmt.format_number(to)}" '
            f'dur="{fmt.format_number(duration)}s" repeatCount="{fmt.repeat_string(repeat)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def animate_motion(
        self,
        link: str,
        path: str,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        """Move ``link`` along the path element referenced by ``path``."""
        self.write(
            f'<animateMotion {fmt.href(link)} dur="{fmt.format_number(duration)}s" '
            f'repeatCount="{fmt.repeat_string(repeat)}" '
            + fmt.compose_attributes(style, ">")
            + f"<mpath {fmt.href(path)}/></animateMotion>\n"
        )

    def animate_transform(
        self,
        link: str,
        transform_type: str,
        from_: str,
        to: str,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        """Animate the ``transform`` of ``link``; ``from_``/``to`` are written verbatim."""
        self.write(
            f'<animateTransform {fmt.href(link)} attributeName="transform" '
            f'type="{transform_type}" from="{from_}" to="{to}" '
            f'dur="{fmt.format_number(duration)}s" repeatCount="{fmt.repeat_string(repeat)}" '
            + fmt.compose_attributes(style, EMPTY_CLOSE)
        )

    def animate_translate(
        self,
        link: str,
        fx: Number,
        fy: Number,
        tx: Number,
        ty: Number,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        self.animate_transform(
            link,
            "translate",
            fmt.coord_pair(fx, fy),
            fmt.coord_pair(tx, ty),
            duration,
            repeat,
            style,
        )

    def animate_rotate(
        self,
        link: str,
        fs: Number,
        fc: Number,
        fe: Number,
        ts: Number,
        tc: Number,
        te: Number,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        """Rotate from ``(fs, fc, fe)`` to ``(ts, tc, te)`` (angle, center x, center y)."""
        self.animate_transform(
            link, "rotate", fmt.sce(fs, fc, fe), fmt.sce(ts, tc, te), duration, repeat, style
        )

    def animate_scale(
        self,
        link: str,
        from_: float,
        to: float,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        self.animate_transform(
            link, "scale", fmt.format_number(from_), fmt.format_number(to), duration, repeat, style
        )

    def animate_skew_x(
        self,
        link: str,
        from_: float,
        to: float,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        self.animate_transform(
            link, "skewX", fmt.format_number(from_), fmt.format_number(to), duration, repeat, style
        )

    def animate_skew_y(
        self,
        link: str,
        from_: float,
        to: float,
        duration: float,
        repeat: int,
        style: StyleArgs = (),
    ) -> None:
        self.animate_transform(
            link, "skewY", fmt.format_number(from_), fmt.format_number(to), duration, repeat, style
        )
