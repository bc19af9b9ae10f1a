# topmark:header:start
#
#   project      : SvgScribe
#   file         : __init__.py
#   file_relpath : src/svgscribe/emitter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Emitter and element families.

[`Emitter`][svgscribe.emitter.base.Emitter] owns the sink; each mixin adds one
family of SVG elements on top of it. Most callers use the composed
[`Canvas`][svgscribe.canvas.Canvas] instead of these classes directly.
"""

from __future__ import annotations

from svgscribe.emitter.animation import AnimationMixin
from svgscribe.emitter.base import Emitter
from svgscribe.emitter.filters import FiltersMixin
from svgscribe.emitter.paint import PaintMixin
from svgscribe.emitter.shapes import ShapesMixin
from svgscribe.emitter.structure import StructureMixin
from svgscribe.emitter.text import TextMixin

__all__ = [
    "AnimationMixin",
    "Emitter",
    "FiltersMixin",
    "PaintMixin",
    "ShapesMixin",
    "StructureMixin",
    "TextMixin",
]
