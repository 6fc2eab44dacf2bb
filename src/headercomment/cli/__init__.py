# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Command line interface for HeaderComment (Click based)."""
