# topmark:header:start
#
#   project      : SvgScribe
#   file         : options.py
#   file_relpath : src/svgscribe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Common CLI option utilities for SvgScribe.

This module centralizes reusable options (verbosity, color, config, output)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from svgscribe.cli.cli_types import EnumChoiceParam
from svgscribe.cli.errors import SvgscribeUsageError
from svgscribe.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        SvgscribeUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SvgscribeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. Machine formats (``json``) never use color.
        2. ``--color=always|never``.
        3. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
        4. Otherwise, color is enabled when stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (str | None): Output format string, e.g. ``"json"``.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and svgscribe.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_path",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        default=None,
        help="Additional config file, applied after discovered ones.",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--output/-o`` to a command that writes an SVG document."""
    return click.option(
        "--output",
        "-o",
        "output",
        metavar="PATH",
        type=str,
        default="-",
        show_default=True,
        help="Write the document to PATH ('-' for stdout).",
    )(f)
