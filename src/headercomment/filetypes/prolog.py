# headercomment:header:start
#
#   project      : HeaderComment
#   file         : prolog.py
#   file_relpath : src/headercomment/filetypes/prolog.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Prolog table for markup formats whose first line must stay first.

HTML documents may start with a ``<!DOCTYPE ...>`` line and XML documents
(including SVG) with an ``<?xml ...?>`` declaration. A header inserted into
such a file goes right after that line instead of before it.

The table is keyed by the lowercased extension token without the leading dot.
``htm`` shares the HTML check and ``svg`` shares the XML check.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class PrologKind(Enum):
    """Kinds of prolog line a file type may start with."""

    HTML = "html"
    XML = "xml"


def _is_html_doctype(line: str) -> bool:
    return line.startswith("<!doctype")


def _is_xml_declaration(line: str) -> bool:
    return line.startswith("<?xml")


PROLOG_CHECKS: Final[Mapping[PrologKind, Callable[[str], bool]]] = MappingProxyType(
    {
        PrologKind.HTML: _is_html_doctype,
        PrologKind.XML: _is_xml_declaration,
    }
)

PROLOG_TYPES: Final[Mapping[str, PrologKind]] = MappingProxyType(
    {
        "htm": PrologKind.HTML,
        "html": PrologKind.HTML,
        "xml": PrologKind.XML,
        "svg": PrologKind.XML,
    }
)


def file_type_token(extension: str) -> str:
    """Normalize an extension (``".XML"``, ``"xml"``) to its lowercased token (``"xml"``)."""
    token: str = extension.lower()
    return token[1:] if token.startswith(".") else token


def prolog_kind_for(file_type: str) -> PrologKind | None:
    """Return the prolog kind of a file type token, or None if it carries no prolog.

    Args:
        file_type (str): Extension token, with or without leading dot; case-insensitive.

    Returns:
        PrologKind | None: The registered kind, None for every other type.
    """
    return PROLOG_TYPES.get(file_type_token(file_type))


def may_carry_prolog(file_type: str) -> bool:
    """Return True if files of this type may start with a prolog line."""
    return prolog_kind_for(file_type) is not None


def is_prolog_line(line: str, kind: PrologKind) -> bool:
    """Test whether ``line`` is the prolog declaration of ``kind``.

    The test runs on a trimmed, lowercased copy of the line.
    """
    return PROLOG_CHECKS[kind](line.strip().lower())
