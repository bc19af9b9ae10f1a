# topmark:header:start
#
#   project      : SvgScribe
#   file         : version.py
#   file_relpath : src/svgscribe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe `version` command.

Prints the current SvgScribe version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from svgscribe.cli.cli_types import EnumChoiceParam, OutputFormat
from svgscribe.cli.cmd_common import get_effective_verbosity
from svgscribe.constants import SVGSCRIBE_VERSION

if TYPE_CHECKING:
    from svgscribe.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SvgScribe.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SvgScribe.

    Args:
        output_format (OutputFormat | None): Optional output format (text, json or markdown).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SVGSCRIBE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SvgScribe Version\n")
        console.print(f"**SvgScribe version: {SVGSCRIBE_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SvgScribe version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SVGSCRIBE_VERSION, bold=True)}")
    else:
        console.print(console.styled(SVGSCRIBE_VERSION, bold=True))
