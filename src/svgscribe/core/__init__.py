# topmark:header:start
#
#   project      : SvgScribe
#   file         : __init__.py
#   file_relpath : src/svgscribe/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SvgScribe contributors
#
# topmark:header:end

"""Pure, UI-agnostic building blocks: value types, keyword vocabularies and formatting helpers."""
