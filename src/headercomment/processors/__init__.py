# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/processors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Comment processors and the comment formatting entry point.

Processor modules register themselves with
`headercomment.filetypes.registry.register_filetype` when imported;
`register_all_processors` imports every module of this package.
"""

from __future__ import annotations

import importlib
import pkgutil
from functools import lru_cache
from pathlib import Path

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.processors.base import CommentProcessor

logger: HeaderCommentLogger = get_logger(__name__)


def register_all_processors() -> None:
    """Import all processor modules in the current package.

    Importing is idempotent: already imported modules are not registered again.
    """
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"{__name__}.{module_info.name}")


@lru_cache(maxsize=1)
def get_fallback_processor() -> CommentProcessor:
    """Return the processor used for unknown or missing extensions (``#`` comments)."""
    from headercomment.processors.pound import PoundCommentProcessor

    return PoundCommentProcessor()


def get_processor_for_extension(extension: str) -> CommentProcessor:
    """Retrieve the comment processor for a filename extension.

    Args:
        extension (str): Extension including the leading dot (e.g. ``".js"``), or an
            empty string. The lookup is case-sensitive.

    Returns:
        CommentProcessor: The registered processor, or the fallback processor when
            no file type claims the extension.
    """
    from headercomment.filetypes.registry import get_comment_processor_registry

    register_all_processors()
    for processor in get_comment_processor_registry().values():
        if processor.file_type is not None and processor.file_type.matches_extension(extension):
            logger.trace(
                "Extension %r resolved to file type %s", extension, processor.file_type.name
            )
            return processor

    logger.debug("No comment processor for extension %r; using fallback", extension)
    return get_fallback_processor()


def format_comment(text: str, extension: str) -> str:
    """Wrap ``text`` in the comment syntax matching ``extension``.

    Args:
        text (str): The rendered (already trimmed) header text.
        extension (str): Extension including the leading dot, or ``""``.

    Returns:
        str: The comment block, ending with a newline.
    """
    return get_processor_for_extension(extension).format(text)
