# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment CLI subcommands."""
