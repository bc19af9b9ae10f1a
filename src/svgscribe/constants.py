# topmark:header:start
#
#   project      : SvgScribe
#   file         : constants.py
#   file_relpath : src/svgscribe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SVGSCRIBE_VERSION: str = get_version("svgscribe")

# Document prolog: the root element is left open so extra attributes can follow.
SVG_TOP: str = '<?xml version="1.0"?>\n<svg'
SVG_NAMESPACES: str = (
    '\n     xmlns="http://www.w3.org/2000/svg"'
    '\n     xmlns:xlink="http://www.w3.org/1999/xlink">'
)
SVG_ATTR_INDENT: str = "\n     "
VIEWBOX_FMT: str = 'viewBox="%s %s %s %s"'

EMPTY_CLOSE: str = "/>\n"

# Prefixes that make a script/style argument a reference rather than inline data.
LINK_PREFIXES: tuple[str, ...] = ("http://", "#", "../", "./")

# Configuration discovery
CONFIG_FILE_NAME: str = "svgscribe.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.svgscribe"

LOG_LEVEL_ENV_VAR: str = "SVGSCRIBE_LOG_LEVEL"
