# topmark:header:start
#
#   project      : SvgScribe
#   file         : enum_mixins.py
#   file_relpath : src/svgscribe/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Keyed string enums with alias-aware, lenient parsing.

SVG keyword attributes (blend modes, channel selectors, operators) accept a
small closed vocabulary. [`KeyedStrEnum`][svgscribe.core.enum_mixins.KeyedStrEnum]
models such a vocabulary: ``.value`` is the exact token written to the
document, ``.label`` a human description, and ``aliases`` extra spellings
accepted by ``parse()``.

Subclasses name a fallback member by overriding ``default()``; ``coerce()``
never fails and returns that member for anything it does not recognize.

Example:
    ```python
    class Units(KeyedStrEnum):
        USER = ("userSpaceOnUse", "User space", ("user",))
        BBOX = ("objectBoundingBox", "Bounding box", ("obj",))

        @classmethod
        def default(cls) -> Units:
            return cls.BBOX

    assert Units.coerce("user") is Units.USER
    assert Units.coerce("nonsense") is Units.BBOX
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for case-insensitive matching."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is the token emitted into the document.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The token written to the document (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Document token (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None, *, case_insensitive: bool = True) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the key (`.value`), the member name (`.name`) and any
        configured aliases. By default matching is case-insensitive and
        normalizes '-' and ' ' to '_'. With ``case_insensitive=False`` only the
        exact key or an exact alias matches.

        Returns:
            _KS | None: The matching member, or None when nothing matches.
        """
        if raw is None:
            return None
        if not case_insensitive:
            for m in cls:
                if raw == m.value or raw in m.aliases:
                    return m
            return None

        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None

    @classmethod
    def default(cls: type[_KS]) -> _KS:
        """Return the fallback member substituted for unrecognized tokens."""
        raise NotImplementedError(f"{cls.__name__} does not define a default member")

    @classmethod
    def coerce(cls: type[_KS], raw: str | None, *, case_insensitive: bool = True) -> _KS:
        """Parse ``raw``, substituting the default member when it is not recognized."""
        member: _KS | None = cls.parse(raw, case_insensitive=case_insensitive)
        return member if member is not None else cls.default()
