# headercomment:header:start
#
#   project      : HeaderComment
#   file         : data.py
#   file_relpath : src/headercomment/filetypes/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Data, configuration and plain text formats.

Exports:
    FILETYPES (list[FileType]): Definitions for INI/CFG, JSON5, properties,
        TOML, YAML, generic ``.conf`` files and plain text.

Notes:
    - Plain text (``.txt``) takes C-style block comments, matching what most
      license banners look like in distributed text assets.
"""

from __future__ import annotations

from headercomment.filetypes.base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="conf",
        extensions=(".conf",),
        description="Generic configuration files (*.conf)",
    ),
    FileType(
        name="ini",
        extensions=(".ini", ".cfg"),
        description="INI-style configuration files",
    ),
    FileType(
        name="json5",
        extensions=(".json5",),
        description="JSON5 documents (comments allowed)",
    ),
    FileType(
        name="properties",
        extensions=(".properties",),
        description="Java properties files",
    ),
    FileType(
        name="text",
        extensions=(".txt",),
        description="Plain text files",
    ),
    FileType(
        name="toml",
        extensions=(".toml",),
        description="TOML documents",
    ),
    FileType(
        name="yaml",
        extensions=(".yml", ".yaml"),
        description="YAML documents",
    ),
]
