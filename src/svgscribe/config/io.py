# topmark:header:start
#
#   project      : SvgScribe
#   file         : io.py
#   file_relpath : src/svgscribe/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Load, render and layer TOML configuration sources.

Sources, lowest precedence first:

1. runtime defaults (`Config()`),
2. ``[tool.svgscribe]`` in ``pyproject.toml`` of the working directory,
3. ``svgscribe.toml`` of the working directory,
4. an explicit ``--config`` file.

Discovered files (2 and 3) are lenient: read or parse errors are logged and the
layer is skipped. An explicit file (4) must load, otherwise `ConfigError` is
raised.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from svgscribe.config.logging import get_logger
from svgscribe.config.model import Config, ConfigError
from svgscribe.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from svgscribe.config.logging import SvgscribeLogger

TomlTable = dict[str, Any]

logger: SvgscribeLogger = get_logger(__name__)


def _parse_toml_text(text: str) -> TomlTable:
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return _parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def load_toml_dict_strict(path: Path) -> TomlTable:
    """Load and parse a TOML file, raising `ConfigError` on any failure."""
    try:
        return _parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _pyproject_table(data: TomlTable) -> TomlTable:
    node: Any = data
    for part in PYPROJECT_SECTION.split("."):
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(part, {})
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def resolve_config(cwd: Path, explicit: Path | None = None, *, discover: bool = True) -> Config:
    """Build the effective `Config` for ``cwd``.

    Args:
        cwd (Path): Directory searched for ``pyproject.toml`` and ``svgscribe.toml``.
        explicit (Path | None): Optional file passed with ``--config``.
        discover (bool): If False, skip the files found in ``cwd`` (``--no-config``).

    Returns:
        Config: Defaults overridden by every layer found, in precedence order.

    Raises:
        ConfigError: If ``explicit`` cannot be loaded, or any layer holds a
            wrongly-typed value.
    """
    config = Config()

    pyproject: Path = cwd / PYPROJECT_FILE_NAME
    if discover and pyproject.is_file():
        table: TomlTable = _pyproject_table(load_toml_dict(pyproject))
        if table:
            config = config.merge_table(table, source=f"{pyproject} [{PYPROJECT_SECTION}]")

    local: Path = cwd / CONFIG_FILE_NAME
    if discover and local.is_file():
        config = config.merge_table(load_toml_dict(local), source=str(local))

    if explicit is not None:
        config = config.merge_table(load_toml_dict_strict(explicit), source=str(explicit))

    logger.trace("Resolved config: %r", config)
    return config


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        return [_strip_none_for_toml(v) for v in cast("list[object]", value) if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
