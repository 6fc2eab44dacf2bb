# headercomment:header:start
#
#   project      : HeaderComment
#   file         : base.py
#   file_relpath : src/headercomment/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""File type definitions used to pick a comment style.

A `FileType` groups the filename extensions of one language or format. The
comment processor registered for a file type decides how header text is
wrapped for files with one of those extensions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import PurePath


@dataclass(frozen=True)
class FileType:
    """Represents a file type recognized by HeaderComment.

    Attributes:
        name (str): Internal identifier of the file type (e.g. ``"javascript"``).
        extensions (tuple[str, ...]): Filename extensions including the leading dot
            (e.g. ``".js"``). Matching is case-sensitive.
        description (str): Human-readable description of the file type.
    """

    name: str
    extensions: tuple[str, ...]
    description: str = field(default="", compare=False)

    def matches_extension(self, extension: str) -> bool:
        """Return True if ``extension`` (with leading dot) belongs to this type."""
        return extension in self.extensions

    def matches(self, path: PurePath) -> bool:
        """Return True if the suffix of ``path`` belongs to this type."""
        return self.matches_extension(path.suffix)
