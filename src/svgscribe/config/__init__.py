# topmark:header:start
#
#   project      : SvgScribe
#   file         : __init__.py
#   file_relpath : src/svgscribe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Configuration and logging for SvgScribe."""
