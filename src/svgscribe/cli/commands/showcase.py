# topmark:header:start
#
#   project      : SvgScribe
#   file         : showcase.py
#   file_relpath : src/svgscribe/cli/commands/showcase.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe `showcase` command."""

from __future__ import annotations

import click

from svgscribe.canvas import new
from svgscribe.cli.cmd_common import load_command_config, open_output
from svgscribe.cli.options import common_config_options, common_output_options
from svgscribe.samples import showcase


@click.command(
    name="showcase",
    help="Write a document combining gradients, filters, text and animation.",
)
@common_output_options
@common_config_options
def showcase_command(*, output: str, config_path: str | None, no_config: bool) -> None:
    """Write the showcase document using the configured canvas size."""
    config = load_command_config(config_path, no_config=no_config)
    with open_output(output) as sink:
        showcase(new(sink), config)
