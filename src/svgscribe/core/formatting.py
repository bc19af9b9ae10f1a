# topmark:header:start
#
#   project      : SvgScribe
#   file         : formatting.py
#   file_relpath : src/svgscribe/core/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Pure helpers that build SVG attribute fragments.

Nothing in this module writes to a sink or holds state: each helper takes
explicit inputs and returns a string (or a normalized value). The emitter and
its element families compose these fragments into tags.

Attribute values passed in by callers are inserted verbatim; only
[`escape_text`][svgscribe.core.formatting.escape_text] escapes anything, and it
is meant for text content.

Numbers:
    Integers are written in decimal. Floats use the shortest representation
    that round-trips, switching to exponent notation when the decimal
    exponent is below -4 or at least 6 (``1e+06``, ``1.5e-05``).
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import TYPE_CHECKING, Final

from svgscribe.constants import LINK_PREFIXES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svgscribe.core.types import Filterspec, Number, StyleArgs

# Exponent threshold for the shortest general float form.
_EXPONENT_PRECISION: Final[int] = 6

_TEXT_ESCAPES: Final[dict[int, str]] = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
        "'": "&#39;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)

# Characters outside the XML 1.0 Char production.
_NON_XML_CHARS: Final[re.Pattern[str]] = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


# --- Numbers ---


def format_number(value: Number) -> str:
    """Render ``value`` the way coordinates and scalar attributes are written.

    Args:
        value (Number): An int or a float.

    Returns:
        str: Decimal text for ints; shortest general form for floats.
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits: str = "".join(str(d) for d in digit_tuple)
    # value == 0.<digits> * 10**point
    point: int = len(digits) + int(exponent)
    exp10: int = point - 1
    prefix: str = "-" if sign else ""

    if exp10 < -4 or exp10 >= _EXPONENT_PRECISION:
        mantissa: str = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign: str = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"

    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def format_numbers(values: Iterable[Number], sep: str = " ") -> str:
    """Join several numbers with ``sep``."""
    return sep.join(format_number(v) for v in values)


def pct(n: int) -> int:
    """Return a percentage capped at 100. Values below zero are left alone."""
    if n > 100:
        return 100
    return n


def onezero(flag: bool) -> str:
    """Map a boolean to the ``"1"``/``"0"`` flags used by arc commands."""
    return "1" if flag else "0"


def repeat_string(n: int) -> str:
    """Return the ``repeatCount`` value: ``indefinite`` for ``n <= 0``, else ``n``."""
    if n > 0:
        return str(n)
    return "indefinite"


# --- Coordinates and geometry ---


def coord(x: Number, y: Number) -> str:
    """Return ``x,y``."""
    return f"{format_number(x)},{format_number(y)}"


def coord_pair(x: Number, y: Number) -> str:
    """Return ``x y`` (space separated, as used by animation values)."""
    return f"{format_number(x)} {format_number(y)}"


def sce(start: Number, center: Number, end: Number) -> str:
    """Return the ``start center end`` triple used by rotate animations."""
    return format_numbers((start, center, end))


def loc(x: Number, y: Number) -> str:
    """Return the ``x``/``y`` attributes."""
    return f'x="{format_number(x)}" y="{format_number(y)}"'


def dim(x: Number, y: Number, w: Number, h: Number) -> str:
    """Return the ``x``/``y``/``width``/``height`` attributes."""
    return f'{loc(x, y)} width="{format_number(w)}" height="{format_number(h)}"'


def href(link: str) -> str:
    """Return an ``xlink:href`` attribute."""
    return f'xlink:href="{link}"'


def ptag(x: Number, y: Number) -> str:
    """Return the opening of a path element positioned at ``x,y``."""
    return f'<path d="M{coord(x, y)}'


def points(xs: Iterable[Number], ys: Iterable[Number]) -> str:
    """Return a ``points`` list for polygons and polylines.

    Coordinate lists of different lengths produce a blank list (a single space).
    """
    xl, yl = list(xs), list(ys)
    if len(xl) != len(yl):
        return " "
    return " ".join(coord(x, y) for x, y in zip(xl, yl))


# --- Transforms ---


def translate(x: Number, y: Number) -> str:
    return f"translate({format_number(x)},{format_number(y)})"


def scale(n: float) -> str:
    return f"scale({format_number(n)})"


def scale_xy(dx: float, dy: float) -> str:
    return f"scale({format_number(dx)},{format_number(dy)})"


def skew_x(angle: float) -> str:
    return f"skewX({format_number(angle)})"


def skew_y(angle: float) -> str:
    return f"skewY({format_number(angle)})"


def rotate(r: float) -> str:
    return f"rotate({format_number(r)})"


# --- Attribute composition ---


def style_attr(value: str) -> str:
    """Wrap ``value`` as a ``style`` attribute; an empty value stays empty."""
    if value:
        return f'style="{value}"'
    return value


def group(attr: str, value: str) -> str:
    """Return an opening ``g`` tag carrying one attribute."""
    return f'<g {attr}="{value}">'


def as_items(items: StyleArgs) -> tuple[str, ...]:
    """Normalize string arguments; a single string is one item, not a character list."""
    if isinstance(items, str):
        return (items,)
    return tuple(items)


def compose_attributes(items: StyleArgs, closing: str) -> str:
    """Compose style arguments into an attribute fragment ending in ``closing``.

    Items containing ``=`` (after the first character) are literal attribute
    pairs and pass through unchanged; any other item becomes
    ``style="<item>"``. Each fragment is followed by a space.

    Args:
        items (StyleArgs): Style values and/or ``name="value"`` pairs, in order.
        closing (str): Tag terminator appended last, e.g. ``"/>\\n"`` or ``">"``.

    Returns:
        str: The composed fragment; just ``closing`` when ``items`` is empty.

    Example:
        ```python
        compose_attributes(["a=1", "b"], ">")  # 'a=1 style="b" >'
        ```
    """
    fragments: list[str] = []
    for item in as_items(items):
        fragments.append(item if item.find("=") > 0 else style_attr(item))
        fragments.append(" ")
    fragments.append(closing)
    return "".join(fragments)


def compose_filter_attributes(spec: Filterspec) -> str:
    """Return ``in``/``in2``/``result`` attributes for the non-empty fields of ``spec``."""
    attrs: str = ""
    if spec.in_:
        attrs += f'in="{spec.in_}" '
    if spec.in2:
        attrs += f'in2="{spec.in2}" '
    if spec.result:
        attrs += f'result="{spec.result}" '
    return attrs


# --- Text ---


def escape_text(raw: str) -> str:
    """Escape ``raw`` for use as element text content.

    ``&``, ``<``, ``>``, both quote characters, tab, newline and carriage return
    become character references. Characters that XML does not allow are
    replaced with U+FFFD.
    """
    return _NON_XML_CHARS.sub("\ufffd", raw).translate(_TEXT_ESCAPES)


def is_link(data: str) -> bool:
    """Return True if ``data`` references an external or in-document resource."""
    return data.startswith(LINK_PREFIXES)
