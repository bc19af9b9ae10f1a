# topmark:header:start
#
#   project      : SvgScribe
#   file         : defaults.py
#   file_relpath : src/svgscribe/cli/commands/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe `defaults` command.

Prints the runtime default configuration as TOML, suitable as a starting point
for ``svgscribe.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svgscribe.config.io import to_toml
from svgscribe.config.model import Config

if TYPE_CHECKING:
    from svgscribe.cli.console_api import ConsoleLike


@click.command(name="defaults", help="Print the default configuration as TOML.")
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.svgscribe] for pyproject.toml.",
)
def defaults_command(*, for_pyproject: bool) -> None:
    """Print the runtime defaults as a TOML document."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    table = Config().to_table()
    if for_pyproject:
        table = {"tool": {"svgscribe": table}}
    console.print(to_toml(table), nl=False)
