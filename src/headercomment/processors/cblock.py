# headercomment:header:start
#
#   project      : HeaderComment
#   file         : cblock.py
#   file_relpath : src/headercomment/processors/cblock.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Comment processor for C-like block comments: /** ... */ with per-line *.

Layout example:

/**
 * Copyright (c) 2025 ACME
 *
 * Licensed under the MIT License.
 */
"""

from __future__ import annotations

from headercomment.filetypes.registry import register_filetype
from headercomment.processors.base import CommentProcessor


# Attach all relevant file types here; their definitions live in filetypes/builtins
@register_filetype("c")
@register_filetype("cpp")
@register_filetype("csharp")
@register_filetype("css")
@register_filetype("dart")
@register_filetype("go")
@register_filetype("groovy")
@register_filetype("java")
@register_filetype("javascript")
@register_filetype("json5")
@register_filetype("kotlin")
@register_filetype("less")
@register_filetype("php")
@register_filetype("rust")
@register_filetype("scala")
@register_filetype("scss")
@register_filetype("stylus")
@register_filetype("swift")
@register_filetype("text")
@register_filetype("typescript")
class CBlockCommentProcessor(CommentProcessor):
    """Processor for C-style documentation block comments."""

    def __init__(self) -> None:
        super().__init__(
            block_prefix="/**",
            line_prefix=" *",
            block_suffix=" */",
        )
