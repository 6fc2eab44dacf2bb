# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_prolog.py
#   file_relpath : tests/filetypes/test_prolog.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for the prolog file type table."""

from __future__ import annotations

from headercomment.filetypes.prolog import (
    PrologKind,
    file_type_token,
    is_prolog_line,
    may_carry_prolog,
    prolog_kind_for,
)
from tests.conftest import parametrize


@parametrize(
    "token, expected",
    [
        ("html", PrologKind.HTML),
        ("htm", PrologKind.HTML),
        (".HTML", PrologKind.HTML),
        ("xml", PrologKind.XML),
        ("svg", PrologKind.XML),
        (".Svg", PrologKind.XML),
        ("js", None),
        ("xhtml", None),
        ("", None),
    ],
)
def test_prolog_kind_for(token: str, expected: PrologKind | None) -> None:
    """Only htm/html/xml/svg may carry a prolog; lookup ignores case and dot."""
    assert prolog_kind_for(token) is expected
    assert may_carry_prolog(token) is (expected is not None)


def test_file_type_token_strips_one_dot() -> None:
    """Tokens are lowercased and lose a single leading dot."""
    assert file_type_token(".XML") == "xml"
    assert file_type_token("xml") == "xml"
    assert file_type_token("..xml") == ".xml"


@parametrize(
    "line, kind, expected",
    [
        ("<!DOCTYPE html>", PrologKind.HTML, True),
        ("  <!doctype html>  ", PrologKind.HTML, True),
        ("<html>", PrologKind.HTML, False),
        ('<?xml version="1.0"?>', PrologKind.XML, True),
        ('<?XML version="1.0"?>\r', PrologKind.XML, True),
        ("<svg>", PrologKind.XML, False),
        ("<!DOCTYPE html>", PrologKind.XML, False),
    ],
)
def test_is_prolog_line(line: str, kind: PrologKind, expected: bool) -> None:
    """The check runs on the trimmed, lowercased line."""
    assert is_prolog_line(line, kind) is expected
