# topmark:header:start
#
#   project      : SvgScribe
#   file         : main.py
#   file_relpath : src/svgscribe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Click entry point for the SvgScribe CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svgscribe.cli.commands.defaults import defaults_command
from svgscribe.cli.commands.hello import hello_command
from svgscribe.cli.commands.showcase import showcase_command
from svgscribe.cli.commands.version import version_command
from svgscribe.cli.console import ClickConsole
from svgscribe.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from svgscribe.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from svgscribe.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    ``SVGSCRIBE_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for the log level.
    Without either, only critical records are logged.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbose"] = verbose

    level_env: int | None = resolve_env_log_level()
    if level_env is not None:
        log_level: int | None = level_env
    elif verbose or quiet:
        log_level = level_cli
    else:
        log_level = None
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SvgScribe: write SVG documents from Python.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the SvgScribe CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'svgscribe hello -o hello.svg' to write a first document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(defaults_command)

cli.add_command(hello_command)

cli.add_command(showcase_command)

if __name__ == "__main__":
    cli()
