# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_processors.py
#   file_relpath : tests/processors/test_processors.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for comment formatting per file extension."""

from __future__ import annotations

from headercomment.filetypes.registry import get_comment_processor_registry
from headercomment.processors import (
    format_comment,
    get_fallback_processor,
    get_processor_for_extension,
    register_all_processors,
)
from headercomment.processors.base import CommentProcessor
from headercomment.processors.cblock import CBlockCommentProcessor
from headercomment.processors.pound import PoundCommentProcessor
from headercomment.processors.xml import XmlCommentProcessor
from tests.conftest import parametrize


def test_javascript_block_comment() -> None:
    """JavaScript headers use ``/** ... */`` blocks."""
    assert format_comment("Hello World", ".js") == "/**\n * Hello World\n */\n"


def test_unknown_extension_falls_back_to_pound() -> None:
    """Unregistered extensions get ``#`` comments."""
    assert format_comment("Hello World", ".appcache") == "#\n# Hello World\n#\n"


def test_empty_extension_falls_back_to_pound() -> None:
    """Files without extension get ``#`` comments."""
    assert format_comment("Hello", "") == "#\n# Hello\n#\n"


def test_xml_comment() -> None:
    """Markup headers use ``<!-- ... -->`` with ``//`` inner lines."""
    assert format_comment("Hello World", ".xml") == "<!--\n // Hello World\n-->\n"


def test_text_files_use_block_comment() -> None:
    """Plain text files share the C block style."""
    assert format_comment("Note", ".txt") == "/**\n * Note\n */\n"


def test_blank_lines_emit_bare_prefix() -> None:
    """Blank header lines carry no trailing space."""
    assert format_comment("a\n\nb", ".py") == "#\n# a\n#\n# b\n#\n"
    assert format_comment("a\n\nb", ".css") == "/**\n * a\n *\n * b\n */\n"


def test_crlf_header_text_is_normalized() -> None:
    """Header lines are joined with ``\\n`` whatever their original terminator."""
    assert format_comment("a\r\nb", ".sh") == "#\n# a\n# b\n#\n"


def test_extension_lookup_is_case_sensitive() -> None:
    """``.JS`` is not ``.js`` and falls back to ``#`` comments."""
    assert format_comment("x", ".JS") == "#\n# x\n#\n"


@parametrize(
    "extension, expected_cls",
    [
        (".ts", CBlockCommentProcessor),
        (".scss", CBlockCommentProcessor),
        (".go", CBlockCommentProcessor),
        (".json5", CBlockCommentProcessor),
        (".py", PoundCommentProcessor),
        (".yaml", PoundCommentProcessor),
        (".R", PoundCommentProcessor),
        (".mk", PoundCommentProcessor),
        (".html", XmlCommentProcessor),
        (".htm", XmlCommentProcessor),
        (".svg", XmlCommentProcessor),
        (".md", XmlCommentProcessor),
    ],
)
def test_processor_selection(extension: str, expected_cls: type[CommentProcessor]) -> None:
    """Each extension maps to the processor of its family."""
    processor: CommentProcessor = get_processor_for_extension(extension)

    assert isinstance(processor, expected_cls)
    assert processor.file_type is not None
    assert processor.file_type.matches_extension(extension)


def test_fallback_processor_has_no_file_type() -> None:
    """The fallback processor is shared and unbound."""
    fallback: CommentProcessor = get_fallback_processor()

    assert fallback is get_fallback_processor()
    assert fallback.file_type is None
    assert get_processor_for_extension(".unknown") is fallback


def test_registration_is_idempotent() -> None:
    """Importing processor modules again does not register duplicates."""
    register_all_processors()
    before: int = len(get_comment_processor_registry())

    register_all_processors()

    assert len(get_comment_processor_registry()) == before


def test_one_instance_per_file_type() -> None:
    """File types sharing a processor class get their own bound instance."""
    registry = get_comment_processor_registry()

    assert registry["html"] is not registry["xml"]
    assert registry["html"].file_type is not None
    assert registry["html"].file_type.name == "html"


def test_custom_processor_delimiters() -> None:
    """Delimiters can be passed at construction time."""
    processor = CommentProcessor(block_prefix="(*", line_prefix=" *", block_suffix="*)")

    assert processor.format("x") == "(*\n * x\n*)\n"
