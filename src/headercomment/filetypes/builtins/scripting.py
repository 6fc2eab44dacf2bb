# headercomment:header:start
#
#   project      : HeaderComment
#   file         : scripting.py
#   file_relpath : src/headercomment/filetypes/builtins/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Scripting languages using ``#`` line comments.

Exports:
    FILETYPES (list[FileType]): Definitions for CoffeeScript, Make fragments,
        Perl, Python, R, Ruby and shell scripts.
"""

from __future__ import annotations

from headercomment.filetypes.base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="coffeescript",
        extensions=(".coffee",),
        description="CoffeeScript sources",
    ),
    FileType(
        name="makefile",
        extensions=(".mk",),
        description="Makefile fragments (*.mk)",
    ),
    FileType(
        name="perl",
        extensions=(".pl", ".pm"),
        description="Perl scripts and modules",
    ),
    FileType(
        name="python",
        extensions=(".py", ".pyi"),
        description="Python sources and stubs",
    ),
    FileType(
        name="r",
        extensions=(".r", ".R"),
        description="R scripts",
    ),
    FileType(
        name="ruby",
        extensions=(".rb",),
        description="Ruby sources",
    ),
    FileType(
        name="shell",
        extensions=(".sh", ".bash", ".zsh"),
        description="Shell scripts",
    ),
]
