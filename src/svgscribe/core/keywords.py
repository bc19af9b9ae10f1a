# topmark:header:start
#
#   project      : SvgScribe
#   file         : keywords.py
#   file_relpath : src/svgscribe/core/keywords.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Closed keyword vocabularies for SVG filter and paint-server attributes.

Every vocabulary has a fallback member. Unrecognized input never raises: the
emitting code calls ``coerce()`` and writes the fallback instead. Keyword
matching for blend modes and operators is exact (the SVG tokens are
case-sensitive), while channel selectors accept any case and the color names.
"""

from __future__ import annotations

from svgscribe.core.enum_mixins import KeyedStrEnum


class Channel(KeyedStrEnum):
    """Color channel selector used by feFunc* and feDisplacementMap."""

    RED = ("R", "Red channel", ("red",))
    GREEN = ("G", "Green channel", ("green",))
    BLUE = ("B", "Blue channel", ("blue",))
    ALPHA = ("A", "Alpha channel", ("alpha",))

    @classmethod
    def default(cls) -> Channel:
        """Unknown channels select red."""
        return cls.RED


class BlendMode(KeyedStrEnum):
    """``mode`` values of feBlend."""

    NORMAL = ("normal", "Normal")
    MULTIPLY = ("multiply", "Multiply")
    SCREEN = ("screen", "Screen")
    DARKEN = ("darken", "Darken")
    LIGHTEN = ("lighten", "Lighten")

    @classmethod
    def default(cls) -> BlendMode:
        return cls.NORMAL


class CompositeOperator(KeyedStrEnum):
    """``operator`` values of feComposite."""

    OVER = ("over", "Over")
    IN = ("in", "In")
    OUT = ("out", "Out")
    ATOP = ("atop", "Atop")
    XOR = ("xor", "Xor")
    ARITHMETIC = ("arithmetic", "Arithmetic")

    @classmethod
    def default(cls) -> CompositeOperator:
        return cls.OVER


class MorphologyOperator(KeyedStrEnum):
    """``operator`` values of feMorphology."""

    ERODE = ("erode", "Erode")
    DILATE = ("dilate", "Dilate")

    @classmethod
    def default(cls) -> MorphologyOperator:
        return cls.ERODE


class TurbulenceType(KeyedStrEnum):
    """``type`` values of feTurbulence."""

    FRACTAL_NOISE = ("fractalNoise", "Fractal noise")
    TURBULENCE = ("turbulence", "Turbulence")

    @classmethod
    def default(cls) -> TurbulenceType:
        return cls.TURBULENCE

    @classmethod
    def from_initial(cls, raw: str) -> TurbulenceType:
        """Select by first letter: ``f``/``F`` is fractal noise, anything else turbulence."""
        if raw[:1] in ("f", "F"):
            return cls.FRACTAL_NOISE
        return cls.default()


class PatternUnits(KeyedStrEnum):
    """``patternUnits`` values of the pattern element."""

    USER_SPACE = ("userSpaceOnUse", "User space on use", ("user",))
    BOUNDING_BOX = ("objectBoundingBox", "Object bounding box", ("obj",))

    @classmethod
    def default(cls) -> PatternUnits:
        return cls.BOUNDING_BOX

    @classmethod
    def from_flag(cls, raw: str) -> PatternUnits:
        """Select by flag: exactly ``"user"`` is user space, anything else the bounding box."""
        if raw == "user":
            return cls.USER_SPACE
        return cls.default()


def imgchannel(name: str) -> str:
    """Normalize a channel name to its single-letter form.

    ``"red"``, ``"Red"``, ``"r"`` and ``"R"`` all yield ``"R"``; anything
    unrecognized yields ``"R"`` as well.
    """
    return Channel.coerce(name).value
