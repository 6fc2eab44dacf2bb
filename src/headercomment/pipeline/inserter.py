# headercomment:header:start
#
#   project      : HeaderComment
#   file         : inserter.py
#   file_relpath : src/headercomment/pipeline/inserter.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Prolog-aware header insertion on fully materialized text.

Most files get the header prepended: ``header + separator + content``.

HTML, XML and SVG files may start with a prolog line (``<!DOCTYPE html>``,
``<?xml version="1.0"?>``) that must stay first. When the first line is such a
prolog, the header is placed right after it::

    first_line + separator + separator + header + separator + rest

The first line is found by splitting on ``"\\n"`` only; a ``"\\r"`` ending it
stays part of the line, and the ``"\\n"`` that ended it is replaced by the
separator. Inserting twice yields two headers.
"""

from __future__ import annotations

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.filetypes.prolog import PrologKind, is_prolog_line, prolog_kind_for

logger: HeaderCommentLogger = get_logger(__name__)


def insert_header(content: str, file_type: str, header: str, separator: str) -> str:
    """Insert ``header`` into ``content`` according to the file type's prolog rules.

    Args:
        content (str): The original file content.
        file_type (str): The extension token (``"xml"``, ``".SVG"``, ``""``);
            normalized to lowercase without leading dot.
        header (str): The comment-delimited header text.
        separator (str): Text placed between the header and the content.

    Returns:
        str: The merged content.
    """
    kind: PrologKind | None = prolog_kind_for(file_type)
    if kind is None:
        return header + separator + content

    lines: list[str] = content.split("\n")
    first_line: str = lines[0]
    if not is_prolog_line(first_line, kind):
        logger.trace("No %s prolog on first line; prepending header", kind.value)
        return header + separator + content

    logger.debug("Keeping %s prolog first: %r", kind.value, first_line)
    rest: str = "\n".join(lines[1:])
    return first_line + separator + separator + header + separator + rest
