# topmark:header:start
#
#   project      : SvgScribe
#   file         : keys.py
#   file_relpath : src/svgscribe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Canonical TOML section and key names for SvgScribe configuration.

These names are the external configuration schema as it appears in
``svgscribe.toml`` and in ``[tool.svgscribe]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SvgScribe configuration."""

    # [canvas]
    SECTION_CANVAS: Final[str] = "canvas"

    KEY_WIDTH: Final[str] = "width"
    KEY_HEIGHT: Final[str] = "height"
    KEY_UNIT: Final[str] = "unit"

    # [hello]
    SECTION_HELLO: Final[str] = "hello"

    KEY_RADIUS: Final[str] = "radius"
    KEY_MESSAGE: Final[str] = "message"
    KEY_CIRCLE_STYLE: Final[str] = "circle_style"
    KEY_TEXT_STYLE: Final[str] = "text_style"
