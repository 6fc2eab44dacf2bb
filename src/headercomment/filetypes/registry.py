# headercomment:header:start
#
#   project      : HeaderComment
#   file         : registry.py
#   file_relpath : src/headercomment/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Registry of comment processors for HeaderComment file types.

This module provides a decorator to register `CommentProcessor` implementations
for specific file types, using the file type registry. Each processor is
associated with a FileType by name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from headercomment.config.logging import get_logger
from headercomment.filetypes.instances import get_file_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from headercomment.processors.base import CommentProcessor

logger = get_logger(__name__)


_registry: dict[str, CommentProcessor] = {}


def register_filetype(
    name: str,
) -> Callable[[type[CommentProcessor]], type[CommentProcessor]]:
    """Class decorator to register a CommentProcessor for a specific file type.

    Args:
        name (str): Name of the file type as defined in the file type registry.

    Returns:
        Callable[[type[CommentProcessor]], type[CommentProcessor]]: A decorator that
            registers the class as the comment processor of ``name``.

    Raises:
        ValueError: If the file type name is unknown.
    """
    file_type_registry = get_file_type_registry()
    if name not in file_type_registry:
        raise ValueError(f"Unknown file type: {name}")

    file_type = file_type_registry[name]

    def decorator(cls: type[CommentProcessor]) -> type[CommentProcessor]:
        """Instantiate ``cls`` and bind the instance to the file type.

        One instance is created per file type so that ``processor.file_type``
        is set correctly even when several file types share a processor class.

        Raises:
            ValueError: If the file type already has a registered processor.
        """
        logger.debug("Registering processor %s for file type: %s", cls.__name__, file_type.name)
        if file_type.name in _registry:
            raise ValueError(f"File type '{file_type.name}' already has a registered processor.")
        instance = cls()
        instance.file_type = file_type
        _registry[file_type.name] = instance
        return cls

    return decorator


def get_comment_processor_registry() -> Mapping[str, CommentProcessor]:
    """Return the registry of file type names to CommentProcessor instances."""
    return MappingProxyType(_registry)
