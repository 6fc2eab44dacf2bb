# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Header templates: resolving the template source, the render context and rendering."""

from __future__ import annotations

from headercomment.template.context import FileInfo, RenderContext, build_render_context
from headercomment.template.renderer import render_template
from headercomment.template.resolver import resolve_template

__all__ = [
    "FileInfo",
    "RenderContext",
    "build_render_context",
    "render_template",
    "resolve_template",
]
