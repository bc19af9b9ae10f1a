# topmark:header:start
#
#   project      : SvgScribe
#   file         : hello.py
#   file_relpath : src/svgscribe/cli/commands/hello.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe `hello` command.

Writes the classic hello-world document: a circle with a centered message.
Command-line flags override the configured ``[canvas]`` and ``[hello]`` values.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import click

from svgscribe.canvas import new
from svgscribe.cli.cmd_common import load_command_config, open_output
from svgscribe.cli.options import common_config_options, common_output_options
from svgscribe.samples import hello

if TYPE_CHECKING:
    from svgscribe.config.model import Config


@click.command(name="hello", help="Write a hello-world SVG document.")
@click.option("--width", type=float, default=None, help="Canvas width.")
@click.option("--height", type=float, default=None, help="Canvas height.")
@click.option("--radius", type=float, default=None, help="Circle radius.")
@click.option("--message", type=str, default=None, help="Text drawn over the circle.")
@common_output_options
@common_config_options
def hello_command(
    *,
    width: float | None,
    height: float | None,
    radius: float | None,
    message: str | None,
    output: str,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Write a hello-world SVG document to ``--output``."""
    config: Config = load_command_config(config_path, no_config=no_config)
    overrides: dict[str, Any] = {
        k: v
        for k, v in (("width", width), ("height", height), ("radius", radius), ("message", message))
        if v is not None
    }
    config = replace(config, **overrides)

    with open_output(output) as sink:
        hello(new(sink), config)
