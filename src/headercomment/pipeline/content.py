# headercomment:header:start
#
#   project      : HeaderComment
#   file         : content.py
#   file_relpath : src/headercomment/pipeline/content.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""File records and their contents.

A `FileRecord` is one unit of content travelling through the transform: a path
plus contents that are one of

- `Absent`: no contents (a null file or a directory),
- `Buffered`: the whole content as bytes,
- `Streamed`: an asynchronous iterable of byte chunks.

The transform replaces ``record.contents`` in place and hands the same record on.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Union

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.constants import DEFAULT_CHUNK_SIZE

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator, Iterable

logger: HeaderCommentLogger = get_logger(__name__)


@dataclass(frozen=True)
class Absent:
    """No contents: a null file, or a directory when ``directory`` is True."""

    directory: bool = False


@dataclass(frozen=True)
class Buffered:
    """Contents fully resident in memory."""

    data: bytes


@dataclass(frozen=True)
class Streamed:
    """Contents delivered as an asynchronous stream of byte chunks."""

    source: AsyncIterable[bytes]


Contents = Union[Absent, Buffered, Streamed]


async def iter_chunks(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    """Expose in-memory chunks as an asynchronous byte stream."""
    for chunk in chunks:
        yield chunk


async def iter_file_chunks(
    path: Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> AsyncIterator[bytes]:
    """Stream the bytes of ``path`` in chunks read from a worker thread."""
    fh = await asyncio.to_thread(path.open, "rb")
    try:
        while True:
            chunk: bytes = await asyncio.to_thread(fh.read, chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        fh.close()


async def collect(stream: AsyncIterable[bytes]) -> bytes:
    """Read a byte stream to the end and return its concatenated contents."""
    parts: list[bytes] = [chunk async for chunk in stream]
    return b"".join(parts)


@dataclass
class FileRecord:
    """One file passing through the transform.

    Attributes:
        path (Path): The file path; its extension selects comment style and prolog handling.
        contents (Contents): The file contents.
    """

    path: Path
    contents: Contents = field(default_factory=Absent)

    def is_null(self) -> bool:
        """Return True if the record has no contents (null file or directory)."""
        return isinstance(self.contents, Absent)

    def is_directory(self) -> bool:
        """Return True if the record stands for a directory."""
        return isinstance(self.contents, Absent) and self.contents.directory

    def is_buffer(self) -> bool:
        """Return True if the contents are held in memory."""
        return isinstance(self.contents, Buffered)

    def is_stream(self) -> bool:
        """Return True if the contents are a byte stream."""
        return isinstance(self.contents, Streamed)

    @classmethod
    def from_path(
        cls,
        path: Path,
        *,
        stream: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> FileRecord:
        """Create a record for a file on disk.

        Args:
            path (Path): The file or directory.
            stream (bool): Stream the contents lazily instead of reading them now.
            chunk_size (int): Chunk size used when streaming.

        Returns:
            FileRecord: A directory record, or a buffered/streamed file record.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            OSError: If the file cannot be read (buffered mode).
        """
        if path.is_dir():
            return cls(path=path, contents=Absent(directory=True))
        if not path.exists():
            raise FileNotFoundError(f"No such file: {path}")
        if stream:
            return cls(path=path, contents=Streamed(iter_file_chunks(path, chunk_size)))
        return cls(path=path, contents=Buffered(path.read_bytes()))

    async def materialize(self) -> bytes | None:
        """Return the contents as bytes, draining a stream if needed.

        A drained stream is replaced by `Buffered` contents so the record can be
        read again.

        Returns:
            bytes | None: The contents, or None for absent contents.
        """
        contents: Contents = self.contents
        if isinstance(contents, Absent):
            return None
        if isinstance(contents, Buffered):
            return contents.data
        data: bytes = await collect(contents.source)
        self.contents = Buffered(data)
        return data
