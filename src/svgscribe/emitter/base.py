# topmark:header:start
#
#   project      : SvgScribe
#   file         : base.py
#   file_relpath : src/svgscribe/emitter/base.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Streaming emitter: the single object that writes to the output sink.

The [`Emitter`][svgscribe.emitter.base.Emitter] forwards text to a
caller-owned sink and offers a few composite writes shared by the element
families (escaped text and text-bearing tags). It keeps no
state besides the sink: there is no buffering, no tag stack and no validation
of element nesting.

Threading:
    An emitter mutates its sink without locking. Confine each instance to one
    thread, or serialize access in the caller.

Errors:
    Sink exceptions (``OSError``, ``ValueError`` on a closed file, ...) are not
    caught here; they reach whoever called the element method.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svgscribe.config.logging import get_logger
from svgscribe.core.formatting import escape_text

if TYPE_CHECKING:
    from svgscribe.config.logging import SvgscribeLogger
    from svgscribe.core.types import TextSink

logger: SvgscribeLogger = get_logger(__name__)


class Emitter:
    """Write SVG text to a sink.

    Args:
        writer (TextSink): Destination for generated markup. Only ``write(str)``
            is used; closing or flushing it is up to the caller.

    Attributes:
        writer (TextSink): The sink bound at construction.
    """

    writer: TextSink

    def __init__(self, writer: TextSink) -> None:
        self.writer = writer
        logger.trace("Emitter bound to %r", writer)

    def write(self, text: str) -> None:
        """Write ``text`` unchanged."""
        self.writer.write(text)

    def write_line(self, text: str = "") -> None:
        """Write ``text`` followed by a newline."""
        self.writer.write(text + "\n")

    def write_formatted(self, template: str, *args: object) -> None:
        """Write a printf-style ``template`` filled with ``args``."""
        self.writer.write(template % args if args else template)

    def write_escaped(self, raw: str) -> None:
        """Write ``raw`` escaped as text content."""
        self.writer.write(escape_text(raw))

    def text_element(self, tag: str, text: str) -> None:
        """Write ``<tag>text</tag>`` with ``text`` escaped, then a newline."""
        self.write("<" + tag + ">")
        self.write_escaped(text)
        self.write_line("</" + tag + ">")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(writer={self.writer!r})"
