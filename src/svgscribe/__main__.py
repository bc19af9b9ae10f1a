# topmark:header:start
#
#   project      : SvgScribe
#   file         : __main__.py
#   file_relpath : src/svgscribe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Module entry point for running SvgScribe via ``python -m svgscribe``.

Equivalent to running the ``svgscribe`` console script.

Examples:
    Write the hello-world document to a file::

        python -m svgscribe hello -o hello.svg
"""

from __future__ import annotations

from svgscribe.cli.main import cli

if __name__ == "__main__":
    cli()
