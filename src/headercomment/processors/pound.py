# headercomment:header:start
#
#   project      : HeaderComment
#   file         : pound.py
#   file_relpath : src/headercomment/processors/pound.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Comment processor for pound-prefixed comment formats.

Handles files using ``#`` for comments, such as Python, shell scripts and
YAML. This is also the fallback style for extensions no file type claims.
"""

from __future__ import annotations

from headercomment.filetypes.registry import register_filetype
from headercomment.processors.base import CommentProcessor


@register_filetype("coffeescript")
@register_filetype("conf")
@register_filetype("ini")
@register_filetype("makefile")
@register_filetype("perl")
@register_filetype("properties")
@register_filetype("python")
@register_filetype("r")
@register_filetype("ruby")
@register_filetype("shell")
@register_filetype("toml")
@register_filetype("yaml")
class PoundCommentProcessor(CommentProcessor):
    """Processor for ``#`` line comments framed by lone ``#`` lines."""

    block_prefix = "#"
    line_prefix = "#"
    block_suffix = "#"
