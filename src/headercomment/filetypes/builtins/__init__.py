# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Built-in file type groups.

Each topical module exports a ``FILETYPES`` list; `headercomment.filetypes.instances`
aggregates them into the runtime registry.
"""
