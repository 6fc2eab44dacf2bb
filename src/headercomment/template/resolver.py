# headercomment:header:start
#
#   project      : HeaderComment
#   file         : resolver.py
#   file_relpath : src/headercomment/template/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Resolve the header template source to template text."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from headercomment.config.logging import HeaderCommentLogger, get_logger

if TYPE_CHECKING:
    from headercomment.config.model import TemplateSource

logger: HeaderCommentLogger = get_logger(__name__)


async def resolve_template(source: TemplateSource) -> str:
    """Return the template text of ``source``.

    A literal template is returned as-is without any I/O. A template file is
    read on every call (templates may embed per-file data, so nothing is
    cached) in a worker thread using the configured encoding.

    Args:
        source (TemplateSource): The active template source.

    Returns:
        str: The raw template text.

    Raises:
        OSError: The original error when the template file cannot be read.
    """
    if source.file is not None:
        logger.debug("Reading header template %s", source.describe())
        text: str = await asyncio.to_thread(source.file.read_text, encoding=source.encoding)
        logger.trace("Read %d characters from %s", len(text), source.file)
        return text

    return source.text or ""
