# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment package.

HeaderComment prepends a rendered license or banner comment to source files as
a build step. It resolves a header template, renders it with Jinja2, wraps the
result in the comment syntax of the target file type and merges it with the
file content, keeping XML/HTML declarations as the first line.
"""

from __future__ import annotations
