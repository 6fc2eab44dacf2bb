# headercomment:header:start
#
#   project      : HeaderComment
#   file         : xml.py
#   file_relpath : src/headercomment/processors/xml.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Processor for files with HTML/XML-style block comments (<!-- ... -->).

Supports markup formats such as HTML, XML, SVG and Markdown. Inner lines carry
a ``//`` marker so that the comment text reads the same in every family.
"""

from __future__ import annotations

from headercomment.filetypes.registry import register_filetype
from headercomment.processors.base import CommentProcessor


@register_filetype("html")
@register_filetype("markdown")
@register_filetype("svg")
@register_filetype("vue")
@register_filetype("xhtml")
@register_filetype("xml")
@register_filetype("xsl")
class XmlCommentProcessor(CommentProcessor):
    """Header processor for XML/HTML-like formats."""

    def __init__(self) -> None:
        super().__init__(
            block_prefix="<!--",
            line_prefix=" //",
            block_suffix="-->",
        )
