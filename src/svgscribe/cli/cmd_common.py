# topmark:header:start
#
#   project      : SvgScribe
#   file         : cmd_common.py
#   file_relpath : src/svgscribe/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Helpers shared by SvgScribe commands.

Commands own their sinks: the library writes into whatever it is given and lets
sink errors propagate, and these helpers translate configuration and I/O
failures into CLI errors with proper exit codes.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from svgscribe.cli.errors import (
    SvgscribeConfigError,
    SvgscribeFileNotFoundError,
    SvgscribeIOError,
    SvgscribePermissionDeniedError,
)
from svgscribe.config.io import resolve_config
from svgscribe.config.logging import get_logger
from svgscribe.config.model import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

    from svgscribe.config.logging import SvgscribeLogger
    from svgscribe.config.model import Config

logger: SvgscribeLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 = terse) stored by the group."""
    obj = ctx.obj or {}
    return int(obj.get("verbose", 0))


def load_command_config(config_path: str | None, *, no_config: bool = False) -> Config:
    """Resolve the layered configuration for the current working directory.

    Args:
        config_path (str | None): Explicit ``--config`` file, if any.
        no_config (bool): Skip discovered files (``--no-config``).

    Returns:
        Config: The effective configuration.

    Raises:
        SvgscribeConfigError: If a configuration source is invalid.
    """
    try:
        return resolve_config(
            Path.cwd(),
            Path(config_path) if config_path else None,
            discover=not no_config,
        )
    except ConfigError as exc:
        raise SvgscribeConfigError(str(exc)) from exc


@contextmanager
def open_output(output: str) -> Iterator[TextIO]:
    """Open ``output`` for writing an SVG document (``"-"`` is stdout).

    Errors raised while opening, writing or closing are converted to CLI errors.

    Raises:
        SvgscribeFileNotFoundError: If the parent directory does not exist.
        SvgscribePermissionDeniedError: If the file cannot be written.
        SvgscribeIOError: For any other I/O error.
    """
    try:
        with click.open_file(output, "w", encoding="utf-8") as fh:
            logger.debug("Writing SVG document to %s", output)
            yield fh
    except FileNotFoundError as exc:
        raise SvgscribeFileNotFoundError(f"Cannot write {output}: {exc.strerror}") from exc
    except PermissionError as exc:
        raise SvgscribePermissionDeniedError(f"Cannot write {output}: {exc.strerror}") from exc
    except OSError as exc:
        raise SvgscribeIOError(f"Cannot write {output}: {exc}") from exc
