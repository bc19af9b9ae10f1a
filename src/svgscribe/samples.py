# topmark:header:start
#
#   project      : SvgScribe
#   file         : samples.py
#   file_relpath : src/svgscribe/samples.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Ready-made documents used by the CLI.

Each function drives a `Canvas` from a `Config` and writes one complete
document, from prolog to ``</svg>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.config.logging import get_logger
from svgscribe.core.types import Filterspec, Offcolor

if TYPE_CHECKING:
    from svgscribe.canvas import Canvas
    from svgscribe.config.logging import SvgscribeLogger
    from svgscribe.config.model import Config

logger: SvgscribeLogger = get_logger(__name__)


def _start(canvas: Canvas, config: Config) -> None:
    if config.unit:
        canvas.start_unit(config.width, config.height, config.unit)
    else:
        canvas.start(config.width, config.height)


def hello(canvas: Canvas, config: Config) -> None:
    """Write a circle centered on the canvas with the configured message over it."""
    logger.debug("Writing hello document (%s x %s)", config.width, config.height)
    cx = config.width / 2
    cy = config.height / 2
    _start(canvas, config)
    canvas.circle(cx, cy, config.radius, config.circle_style or ())
    if config.message:
        canvas.text(cx, cy, config.message, config.text_style or ())
    canvas.end()


def showcase(canvas: Canvas, config: Config) -> None:
    """Write a document that combines gradients, filters, text and animation."""
    logger.debug("Writing showcase document (%s x %s)", config.width, config.height)
    w = int(config.width)
    h = int(config.height)
    radius = min(w, h) / 8

    _start(canvas, config)
    canvas.title("SvgScribe showcase")
    canvas.desc("Gradients, filters, text and animation")

    canvas.defs()
    canvas.linear_gradient(
        "sky", 0, 0, 0, 100, [Offcolor(0, "#1e3c72"), Offcolor(100, "#2a5298")]
    )
    canvas.radial_gradient(
        "glow",
        50,
        50,
        50,
        30,
        30,
        [Offcolor(0, "white"), Offcolor(60, "gold"), Offcolor(100, "orange", 0.8)],
    )
    canvas.filter("shadow")
    canvas.fe_gaussian_blur(Filterspec(in_="SourceAlpha", result="blur"), 4, 4)
    canvas.fe_offset(Filterspec(in_="blur", result="offset"), 3, 3)
    canvas.fe_merge(["offset", "SourceGraphic"])
    canvas.fend()
    canvas.filter("aged")
    canvas.sepia()
    canvas.fend()
    canvas.path(f"M 0,{h * 3 // 4} Q {w // 2},{h // 2} {w},{h * 3 // 4}", 'id="arc"')
    canvas.defs_end()

    canvas.rect(0, 0, w, h, "fill:url(#sky)")
    canvas.grid(0, 0, w, h, max(1, min(w, h) // 10), "stroke:white;stroke-opacity:0.15")
    canvas.circle(
        w / 2, h / 3, radius, ['id="sun"', 'filter="url(#shadow)"', "fill:url(#glow)"]
    )
    canvas.animate("#sun", "r", radius, radius * 1.25, 2, 0)
    canvas.textpath(
        "Streaming SVG from Python", "#arc", ['filter="url(#aged)"', "fill:white;font-size:20px"]
    )
    canvas.textlines(
        w / 2, h * 0.85, ["gradients", "filters", "animation"], 14, 16, "white", "middle"
    )
    canvas.end()
