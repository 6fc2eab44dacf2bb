# headercomment:header:start
#
#   project      : HeaderComment
#   file         : web.py
#   file_relpath : src/headercomment/filetypes/builtins/web.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Web and frontend assets.

Includes markup, stylesheets, vector graphics, and browser/Node-oriented
languages.

Exports:
    FILETYPES (list[FileType]): Definitions for CSS, Less, SCSS, Stylus,
        JavaScript, TypeScript, HTML, XHTML, XML, XSL, SVG, Vue and Markdown.

Notes:
    - HTML (``.html``, ``.htm``), XML and SVG may start with a prolog line;
      see `headercomment.filetypes.prolog`.
"""

from __future__ import annotations

from headercomment.filetypes.base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="css",
        extensions=(".css",),
        description="Cascading Style Sheets (CSS)",
    ),
    FileType(
        name="html",
        extensions=(".html", ".htm"),
        description="HyperText Markup Language (HTML)",
    ),
    FileType(
        name="javascript",
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    FileType(
        name="less",
        extensions=(".less",),
        description="Less stylesheets (*.less)",
    ),
    FileType(
        name="markdown",
        extensions=(".md",),
        description="Markdown documents",
    ),
    FileType(
        name="scss",
        extensions=(".scss",),
        description="Sass SCSS syntax (*.scss)",
    ),
    FileType(
        name="stylus",
        extensions=(".styl",),
        description="Stylus stylesheets (*.styl)",
    ),
    FileType(
        name="svg",
        extensions=(".svg",),
        description="Scalable Vector Graphics (SVG)",
    ),
    FileType(
        name="typescript",
        extensions=(".ts", ".tsx", ".mts", ".cts"),
        description="TypeScript sources (*.ts, *.tsx, *.mts, *.cts)",
    ),
    FileType(
        name="vue",
        extensions=(".vue",),
        description="Vue single-file components",
    ),
    FileType(
        name="xhtml",
        extensions=(".xhtml",),
        description="XHTML documents",
    ),
    FileType(
        name="xml",
        extensions=(".xml",),
        description="Extensible Markup Language (XML)",
    ),
    FileType(
        name="xsl",
        extensions=(".xsl", ".xslt"),
        description="XSL stylesheets",
    ),
]
