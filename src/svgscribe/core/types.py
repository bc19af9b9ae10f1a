# topmark:header:start
#
#   project      : SvgScribe
#   file         : types.py
#   file_relpath : src/svgscribe/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Value types shared by the emitter and its element families."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias, Union

# Style fragments: each item is either a bare style value (``"fill:red"``) or a
# literal attribute pair (``'id="c1"'``). A plain string counts as one item.
StyleArgs: TypeAlias = Union[str, Sequence[str]]

Number: TypeAlias = Union[int, float]


class TextSink(Protocol):
    """Anything the emitter can append text to (files, ``io.StringIO``, stream wrappers)."""

    def write(self, s: str, /) -> object:
        """Append ``s`` to the sink."""
        ...


@dataclass(frozen=True)
class Offcolor:
    """One gradient stop.

    Attributes:
        offset (int): Stop position as a percentage; values above 100 saturate.
        color (str): Any SVG color value.
        opacity (float): Stop opacity, written with two decimals.
    """

    offset: int
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class Filterspec:
    """Common ``in``/``in2``/``result`` labels of filter primitives.

    Empty fields are left out of the element.
    """

    in_: str = ""
    in2: str = ""
    result: str = ""
