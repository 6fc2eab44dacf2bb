# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_resolver.py
#   file_relpath : tests/template/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for template source resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from headercomment.config.model import TemplateSource
from headercomment.template.resolver import resolve_template

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.asyncio
async def test_literal_template_returned_unchanged() -> None:
    """Inline templates are returned as given, whitespace included."""
    assert await resolve_template(TemplateSource(text="  Hello {{ pkg.name }}\n")) == (
        "  Hello {{ pkg.name }}\n"
    )


@pytest.mark.asyncio
async def test_template_file_is_read_with_encoding(tmp_path: Path) -> None:
    """Template files are decoded with the configured encoding."""
    tpl: Path = tmp_path / "header.tpl"
    tpl.write_bytes("Copyright \xa9 Zo\xeb\n".encode("latin-1"))

    text: str = await resolve_template(TemplateSource(file=tpl, encoding="latin-1"))

    assert text == "Copyright \xa9 Zo\xeb\n"


@pytest.mark.asyncio
async def test_template_file_read_on_every_call(tmp_path: Path) -> None:
    """Nothing is cached: edits to the file are picked up."""
    tpl: Path = tmp_path / "header.tpl"
    tpl.write_text("one", encoding="utf-8")
    source = TemplateSource(file=tpl)

    first: str = await resolve_template(source)
    tpl.write_text("two", encoding="utf-8")
    second: str = await resolve_template(source)

    assert (first, second) == ("one", "two")


@pytest.mark.asyncio
async def test_missing_template_file_raises_original_oserror(tmp_path: Path) -> None:
    """A missing file surfaces as the original `FileNotFoundError`."""
    with pytest.raises(FileNotFoundError):
        await resolve_template(TemplateSource(file=tmp_path / "missing.tpl"))
