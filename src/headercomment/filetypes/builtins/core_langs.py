# headercomment:header:start
#
#   project      : HeaderComment
#   file         : core_langs.py
#   file_relpath : src/headercomment/filetypes/builtins/core_langs.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Compiled and general-purpose languages using C-style block comments.

Exports:
    FILETYPES (list[FileType]): Definitions for C/C++, C#, Dart, Go, Groovy,
        Java, Kotlin, PHP, Rust, Scala and Swift.
"""

from __future__ import annotations

from headercomment.filetypes.base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="c",
        extensions=(".c", ".h"),
        description="C sources and headers",
    ),
    FileType(
        name="cpp",
        extensions=(".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"),
        description="C++ sources and headers",
    ),
    FileType(
        name="csharp",
        extensions=(".cs",),
        description="C# sources",
    ),
    FileType(
        name="dart",
        extensions=(".dart",),
        description="Dart sources",
    ),
    FileType(
        name="go",
        extensions=(".go",),
        description="Go sources",
    ),
    FileType(
        name="groovy",
        extensions=(".groovy", ".gradle"),
        description="Groovy sources and Gradle build scripts",
    ),
    FileType(
        name="java",
        extensions=(".java",),
        description="Java sources",
    ),
    FileType(
        name="kotlin",
        extensions=(".kt", ".kts"),
        description="Kotlin sources and scripts",
    ),
    FileType(
        name="php",
        extensions=(".php",),
        description="PHP sources",
    ),
    FileType(
        name="rust",
        extensions=(".rs",),
        description="Rust sources",
    ),
    FileType(
        name="scala",
        extensions=(".scala",),
        description="Scala sources",
    ),
    FileType(
        name="swift",
        extensions=(".swift",),
        description="Swift sources",
    ),
]
