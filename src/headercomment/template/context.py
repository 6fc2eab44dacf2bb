# headercomment:header:start
#
#   project      : HeaderComment
#   file         : context.py
#   file_relpath : src/headercomment/template/context.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Render context shared by every file of a transform.

The context is built once per transform and never mutated afterwards. It
exposes to templates:

- ``pkg``: the ``[project]`` table of the package descriptor (read-only),
- ``now()``: the current local time as an aware `datetime`,
- ``today``: the current local date,
- ``file``: per-file data (`FileInfo`), present only when rendering for a file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from headercomment.config.loaders import load_package_descriptor
from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import PurePath

logger: HeaderCommentLogger = get_logger(__name__)


def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


def _freeze(value: Any) -> Any:
    """Return a read-only deep copy of TOML-like data (tables and arrays)."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class FileInfo:
    """Per-file data exposed to templates as ``file``.

    Attributes:
        path (str): The file path (POSIX separators).
        name (str): The file name (``"app.js"``).
        stem (str): The file name without its extension (``"app"``).
        extension (str): The extension with leading dot (``".js"``), or ``""``.
        relpath (str): The path relative to the transform's working directory.
    """

    path: str
    name: str
    stem: str
    extension: str
    relpath: str

    @classmethod
    def from_path(cls, path: PurePath, cwd: Path | None = None) -> FileInfo:
        """Build file info for ``path``; ``relpath`` is computed against ``cwd``."""
        return cls(
            path=path.as_posix(),
            name=path.name,
            stem=path.stem,
            extension=path.suffix,
            relpath=compute_relpath(Path(path), cwd).as_posix(),
        )


@dataclass(frozen=True)
class RenderContext:
    """Immutable symbols available to header templates.

    Attributes:
        pkg (Mapping[str, Any]): Read-only package metadata.
        clock (Callable[[], datetime]): Returns the current time.
    """

    pkg: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    clock: Callable[[], datetime] = local_now

    def __post_init__(self) -> None:
        object.__setattr__(self, "pkg", _freeze(self.pkg))

    def as_template_vars(self, file: FileInfo | None = None) -> dict[str, Any]:
        """Return the variables passed to the template engine.

        Args:
            file (FileInfo | None): Data of the file being processed, if any.

        Returns:
            dict[str, Any]: A fresh mapping; the context itself is not exposed.
        """
        variables: dict[str, Any] = {
            "pkg": self.pkg,
            "now": self.clock,
            "today": self.clock().date(),
        }
        if file is not None:
            variables["file"] = file
        return variables


def build_render_context(
    cwd: Path | None = None,
    *,
    clock: Callable[[], datetime] | None = None,
) -> RenderContext:
    """Build the render context, reading the package descriptor once.

    Args:
        cwd (Path | None): Directory holding ``pyproject.toml`` (defaults to the
            current working directory).
        clock (Callable[[], datetime] | None): Time source; defaults to local time.

    Returns:
        RenderContext: The immutable context.

    Raises:
        ConfigError: If the package descriptor is not valid TOML.
    """
    pkg: dict[str, Any] = load_package_descriptor(cwd)
    logger.debug("Render context: pkg=%s", pkg.get("name", "<unnamed>"))
    return RenderContext(pkg=pkg, clock=clock or local_now)
