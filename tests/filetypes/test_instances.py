# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_instances.py
#   file_relpath : tests/filetypes/test_instances.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for the built-in file type registry."""

from __future__ import annotations

from pathlib import PurePath

import pytest

from headercomment.filetypes.base import FileType
from headercomment.filetypes.instances import (
    _generate_registry,  # pyright: ignore[reportPrivateUsage]
    get_file_type_registry,
)


def test_registry_is_cached_and_read_only() -> None:
    """The registry is built once and cannot be mutated."""
    registry = get_file_type_registry()

    assert registry is get_file_type_registry()
    with pytest.raises(TypeError):
        registry["new"] = FileType(name="new", extensions=(".new",))  # type: ignore[index]


def test_every_extension_has_one_owner() -> None:
    """No extension is claimed by two file types."""
    seen: dict[str, str] = {}
    for name, ft in get_file_type_registry().items():
        for ext in ft.extensions:
            assert ext not in seen, f"{ext} claimed by {seen.get(ext)} and {name}"
            assert ext.startswith(".")
            seen[ext] = name


def test_file_type_matches_path_suffix() -> None:
    """`FileType.matches` compares the path suffix exactly."""
    html: FileType = get_file_type_registry()["html"]

    assert html.matches(PurePath("index.htm"))
    assert not html.matches(PurePath("INDEX.HTM"))


def test_duplicate_names_are_rejected() -> None:
    """Two file types may not share a name."""
    with pytest.raises(ValueError, match="Duplicate FileType name"):
        _generate_registry([FileType("a", (".a",)), FileType("a", (".b",))])


def test_duplicate_extensions_are_rejected() -> None:
    """Two file types may not share an extension."""
    with pytest.raises(ValueError, match="already belongs"):
        _generate_registry([FileType("a", (".x",)), FileType("b", (".x",))])
