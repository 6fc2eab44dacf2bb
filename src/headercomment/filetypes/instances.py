# headercomment:header:start
#
#   project      : HeaderComment
#   file         : instances.py
#   file_relpath : src/headercomment/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""File type instances and registry for HeaderComment.

Builds the runtime registry of `headercomment.filetypes.base.FileType` objects
from the built-in groups. The registry is constructed lazily on first access and
cached thereafter; callers must treat the returned mapping as immutable.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

from headercomment.config.logging import HeaderCommentLogger, get_logger

from .base import FileType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from types import ModuleType

logger: HeaderCommentLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "headercomment.filetypes.builtins.core_langs",
    "headercomment.filetypes.builtins.scripting",
    "headercomment.filetypes.builtins.data",
    "headercomment.filetypes.builtins.web",
)


def _iter_builtin_filetypes() -> Iterable[FileType]:
    """Yield built-in FileType objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        filetypes: Any = getattr(mod, "FILETYPES", None)
        if not isinstance(filetypes, list):
            logger.warning("Module %s has no FILETYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", filetypes):
            if isinstance(obj, FileType):
                yield obj
            else:
                logger.warning("Non-FileType entry in %s.FILETYPES: %r", modname, obj)


def _generate_registry(filetypes: Iterable[FileType]) -> dict[str, FileType]:
    """Generate a registry mapping file type names to their definitions."""
    registry: dict[str, FileType] = {}
    claimed: dict[str, str] = {}
    for ft in filetypes:
        if ft.name in registry:
            raise ValueError(f"Duplicate FileType name: {ft.name}")
        for ext in ft.extensions:
            if ext in claimed:
                raise ValueError(
                    f"Extension {ext!r} of file type {ft.name!r} "
                    f"already belongs to {claimed[ext]!r}"
                )
            claimed[ext] = ft.name
        registry[ft.name] = ft
    return registry


@lru_cache(maxsize=1)
def get_file_type_registry() -> Mapping[str, FileType]:
    """Return (and cache) the FileType registry keyed by file type name."""
    registry: dict[str, FileType] = _generate_registry(_iter_builtin_filetypes())
    logger.debug("Loaded %d file types", len(registry))
    return MappingProxyType(registry)


def get_file_type_for_extension(extension: str) -> FileType | None:
    """Return the file type owning ``extension`` (leading dot, case-sensitive), if any."""
    for file_type in get_file_type_registry().values():
        if file_type.matches_extension(extension):
            return file_type
    return None
