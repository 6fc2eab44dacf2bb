# headercomment:header:start
#
#   project      : HeaderComment
#   file         : adapter.py
#   file_relpath : src/headercomment/pipeline/adapter.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Apply a header to the contents of a file record.

Buffered contents are rewritten at once. Streamed contents are wrapped in a new
stream that emits the header and then forwards the original chunks; for file
types that may carry a prolog the wrapper first buffers the source up to the
first ``"\\n"`` (or the end of the stream), so a first line split across chunk
boundaries is still recognized.

Both paths produce byte-identical output for identical input. Contents are
decoded as UTF-8 with ``surrogateescape`` so arbitrary bytes survive unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.constants import CONTENT_ENCODING
from headercomment.filetypes.prolog import file_type_token, may_carry_prolog
from headercomment.pipeline.content import Absent, Buffered, Streamed
from headercomment.pipeline.inserter import insert_header

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator

    from headercomment.pipeline.content import FileRecord

logger: HeaderCommentLogger = get_logger(__name__)

_ERRORS: str = "surrogateescape"


def _decode(data: bytes) -> str:
    return data.decode(CONTENT_ENCODING, errors=_ERRORS)


def _encode(text: str) -> bytes:
    return text.encode(CONTENT_ENCODING, errors=_ERRORS)


def apply_to_bytes(data: bytes, file_type: str, header: str, separator: str) -> bytes:
    """Insert the header into buffered bytes.

    Args:
        data (bytes): The original contents.
        file_type (str): The extension token of the file.
        header (str): The comment-delimited header.
        separator (str): Text placed between header and content.

    Returns:
        bytes: The merged contents.
    """
    if may_carry_prolog(file_type):
        return _encode(insert_header(_decode(data), file_type, header, separator))
    # Plain prepend, no decode/encode round trip
    return _encode(header + separator) + data


async def _close(source: AsyncIterable[bytes]) -> None:
    aclose = getattr(source, "aclose", None)
    if aclose is not None:
        await aclose()


async def _prepend_stream(
    source: AsyncIterable[bytes],
    header: str,
    separator: str,
) -> AsyncIterator[bytes]:
    try:
        yield _encode(header + separator)
        async for chunk in source:
            yield chunk
    finally:
        await _close(source)


async def _prolog_aware_stream(
    source: AsyncIterable[bytes],
    file_type: str,
    header: str,
    separator: str,
) -> AsyncIterator[bytes]:
    iterator: AsyncIterator[bytes] = source.__aiter__()
    head = bytearray()
    try:
        # Buffer until the first line is complete (or the stream ends)
        async for chunk in iterator:
            head.extend(chunk)
            if b"\n" in chunk:
                break
        logger.trace("Buffered %d byte(s) to inspect the first line", len(head))
        yield apply_to_bytes(bytes(head), file_type, header, separator)
        async for chunk in iterator:
            yield chunk
    finally:
        await _close(iterator)


def apply_to_stream(
    source: AsyncIterable[bytes],
    file_type: str,
    header: str,
    separator: str,
) -> AsyncIterator[bytes]:
    """Wrap a byte stream so that it carries the header.

    Nothing is read from ``source`` until the returned stream is consumed.
    Closing the returned stream early closes ``source``.

    Args:
        source (AsyncIterable[bytes]): The original byte stream.
        file_type (str): The extension token of the file.
        header (str): The comment-delimited header.
        separator (str): Text placed between header and content.

    Returns:
        AsyncIterator[bytes]: The stream of merged contents.
    """
    if may_carry_prolog(file_type):
        return _prolog_aware_stream(source, file_type, header, separator)
    return _prepend_stream(source, header, separator)


def apply_header(record: FileRecord, header: str, separator: str) -> None:
    """Insert ``header`` into the contents of ``record``, in place.

    Absent contents (null files, directories) are left untouched.

    Args:
        record (FileRecord): The record to update.
        header (str): The comment-delimited header.
        separator (str): Text placed between header and content.

    Raises:
        TypeError: If the record holds an unknown contents type.
    """
    contents = record.contents
    file_type: str = file_type_token(record.path.suffix)

    if isinstance(contents, Absent):
        logger.debug("No contents for %s; leaving it unchanged", record.path)
    elif isinstance(contents, Buffered):
        record.contents = Buffered(apply_to_bytes(contents.data, file_type, header, separator))
    elif isinstance(contents, Streamed):
        record.contents = Streamed(apply_to_stream(contents.source, file_type, header, separator))
    else:
        raise TypeError(f"Unsupported contents for {record.path}: {type(contents).__name__}")
