# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Public API for HeaderComment.

Typical use inside a build script::

    import asyncio
    from pathlib import Path

    from headercomment.api import apply_to_paths

    outcomes = asyncio.run(
        apply_to_paths([Path("dist/app.js")], {"file": "LICENSE.tpl"}, write=True)
    )

For custom pipelines, build a transform once with `header_comment` and await it
for each `FileRecord`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.pipeline.content import FileRecord
from headercomment.pipeline.outcomes import FileOutcome
from headercomment.pipeline.transform import HeaderTransform

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from headercomment.config.model import HeaderOptions
    from headercomment.template.context import RenderContext

logger: HeaderCommentLogger = get_logger(__name__)

__all__ = [
    "FileOutcome",
    "FileRecord",
    "HeaderTransform",
    "apply_to_paths",
    "header_comment",
]


def header_comment(
    options: str | Mapping[str, Any] | HeaderOptions,
    *,
    context: RenderContext | None = None,
    cwd: Path | None = None,
) -> HeaderTransform:
    """Create a header transform.

    Args:
        options (str | Mapping[str, Any] | HeaderOptions): A literal template, or a
            mapping with ``file``/``template``, ``encoding`` and ``separator``.
        context (RenderContext | None): Render context to reuse across transforms.
        cwd (Path | None): Directory holding the package descriptor.

    Returns:
        HeaderTransform: An awaitable step taking and returning a `FileRecord`.

    Raises:
        ConfigError: If the options are missing, ambiguous or malformed.
    """
    return HeaderTransform(options, context=context, cwd=cwd)


async def _apply_to_path(
    transform: HeaderTransform,
    path: Path,
    *,
    write: bool,
    stream: bool,
) -> FileOutcome:
    try:
        record: FileRecord = await asyncio.to_thread(FileRecord.from_path, path, stream=stream)
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FileOutcome(record=FileRecord(path=path), error=exc)

    outcome: FileOutcome = await transform.process(record)
    if not outcome.ok:
        return outcome

    try:
        # Drain streams before writing: they read from the file being replaced
        data: bytes | None = await record.materialize()
        if write and data is not None:
            await asyncio.to_thread(path.write_bytes, data)
            logger.info("Wrote %s", path)
    except OSError as exc:
        logger.error("Cannot update %s: %s", path, exc)
        return FileOutcome(record=record, error=exc)
    return outcome


async def apply_to_paths(
    paths: Iterable[Path | str],
    options: str | Mapping[str, Any] | HeaderOptions,
    *,
    write: bool = False,
    stream: bool = False,
    cwd: Path | None = None,
) -> list[FileOutcome]:
    """Insert a header into files on disk.

    Each file is read (buffered, or streamed when ``stream`` is True),
    transformed, and written back when ``write`` is True. Without ``write`` the
    transformed bytes are left on ``outcome.record.contents``.

    Args:
        paths (Iterable[Path | str]): Files to process; directories pass through.
        options (str | Mapping[str, Any] | HeaderOptions): Header options.
        write (bool): Write the result back to each file.
        stream (bool): Use the streaming content path.
        cwd (Path | None): Directory holding the package descriptor.

    Returns:
        list[FileOutcome]: One outcome per path, in input order.

    Raises:
        ConfigError: If the options are invalid (raised before any file is touched).
    """
    transform: HeaderTransform = header_comment(options, cwd=cwd)
    outcomes = await asyncio.gather(
        *(_apply_to_path(transform, Path(p), write=write, stream=stream) for p in paths)
    )
    return list(outcomes)
