# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Configuration for HeaderComment: header options, TOML loaders and logging."""

from __future__ import annotations

from headercomment.config.model import HeaderOptions, TemplateSource

__all__ = [
    "HeaderOptions",
    "TemplateSource",
]
