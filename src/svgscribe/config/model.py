# topmark:header:start
#
#   project      : SvgScribe
#   file         : model.py
#   file_relpath : src/svgscribe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Configuration model and merge policy for the SvgScribe CLI.

`Config` is an immutable snapshot. Layers are applied with
`Config.merge_table`, which returns a new snapshot; keys missing from a layer
keep their previous value.

The library itself (``svgscribe.canvas``) takes no configuration: these
settings only feed the CLI commands that build documents.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from svgscribe.config.keys import Toml
from svgscribe.config.logging import get_logger

if TYPE_CHECKING:
    from svgscribe.config.io import TomlTable
    from svgscribe.config.logging import SvgscribeLogger

logger: SvgscribeLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source is unreadable or holds a wrongly-typed value."""


def _typed(table: TomlTable, section: str, key: str, expected: type | tuple[type, ...]) -> Any:
    value: Any = table[key]
    # bool is a subclass of int; TOML booleans are never valid sizes.
    if isinstance(value, bool) or not isinstance(value, expected):
        kinds: tuple[type, ...] = expected if isinstance(expected, tuple) else (expected,)
        raise ConfigError(
            f"[{section}] {key} has type {type(value).__name__}, "
            f"expected {' or '.join(k.__name__ for k in kinds)}"
        )
    return value


@dataclass(frozen=True)
class Config:
    """Settings for documents produced by the CLI.

    Attributes:
        width (float): Canvas width.
        height (float): Canvas height.
        unit (str): Unit suffix for width and height (``""`` for user units).
        radius (float): Circle radius of the hello document.
        message (str): Text of the hello document (empty for none).
        circle_style (str): Style of the hello circle.
        text_style (str): Style of the hello text.
    """

    width: float = 500
    height: float = 500
    unit: str = ""
    radius: float = 100
    message: str = "Hello, SVG"
    circle_style: str = ""
    text_style: str = "text-anchor:middle;font-size:30px;fill:white"

    def merge_table(self, table: TomlTable, *, source: str = "<table>") -> Config:
        """Return a copy overridden by the values present in ``table``.

        Args:
            table (TomlTable): Parsed TOML content (top level of ``svgscribe.toml``
                or the ``[tool.svgscribe]`` table).
            source (str): Label used in log and error messages.

        Returns:
            Config: The merged snapshot.

        Raises:
            ConfigError: If a known key holds a value of the wrong type.
        """
        changes: dict[str, Any] = {}

        canvas: Any = table.get(Toml.SECTION_CANVAS, {})
        if not isinstance(canvas, dict):
            raise ConfigError(f"{source}: [{Toml.SECTION_CANVAS}] must be a table")
        for key in (Toml.KEY_WIDTH, Toml.KEY_HEIGHT):
            if key in canvas:
                changes[key] = _typed(canvas, Toml.SECTION_CANVAS, key, (int, float))
        if Toml.KEY_UNIT in canvas:
            changes["unit"] = _typed(canvas, Toml.SECTION_CANVAS, Toml.KEY_UNIT, str)

        hello: Any = table.get(Toml.SECTION_HELLO, {})
        if not isinstance(hello, dict):
            raise ConfigError(f"{source}: [{Toml.SECTION_HELLO}] must be a table")
        if Toml.KEY_RADIUS in hello:
            changes["radius"] = _typed(hello, Toml.SECTION_HELLO, Toml.KEY_RADIUS, (int, float))
        for key in (Toml.KEY_MESSAGE, Toml.KEY_CIRCLE_STYLE, Toml.KEY_TEXT_STYLE):
            if key in hello:
                changes[key] = _typed(hello, Toml.SECTION_HELLO, key, str)

        logger.debug("Config layer %s overrides %s", source, sorted(changes))
        return replace(self, **changes)

    def to_table(self) -> TomlTable:
        """Return the snapshot as a TOML-compatible dict."""
        return {
            Toml.SECTION_CANVAS: {
                Toml.KEY_WIDTH: self.width,
                Toml.KEY_HEIGHT: self.height,
                Toml.KEY_UNIT: self.unit,
            },
            Toml.SECTION_HELLO: {
                Toml.KEY_RADIUS: self.radius,
                Toml.KEY_MESSAGE: self.message,
                Toml.KEY_CIRCLE_STYLE: self.circle_style,
                Toml.KEY_TEXT_STYLE: self.text_style,
            },
        }
