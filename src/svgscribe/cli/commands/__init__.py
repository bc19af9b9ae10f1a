# topmark:header:start
#
#   project      : SvgScribe
#   file         : __init__.py
#   file_relpath : src/svgscribe/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""SvgScribe CLI subcommands."""
