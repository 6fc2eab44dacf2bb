# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_renderer.py
#   file_relpath : tests/template/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for Jinja2 header template rendering."""

from __future__ import annotations

from pathlib import PurePosixPath

import jinja2
import pytest

from headercomment.errors import TemplateError
from headercomment.template.context import FileInfo, RenderContext
from headercomment.template.renderer import render_template
from tests.conftest import parametrize


def test_plain_text_is_stripped(fixed_context: RenderContext) -> None:
    """Leading and trailing whitespace is removed from the rendered text."""
    assert render_template("\n  Hello World  \n\n", fixed_context) == "Hello World"


def test_inner_whitespace_is_kept(fixed_context: RenderContext) -> None:
    """Only the outer whitespace is stripped."""
    assert render_template("a\n\n  b\n", fixed_context) == "a\n\n  b"


@parametrize(
    "template, expected",
    [
        ("{{ pkg.name }} v{{ pkg.version }}", "demo-pkg v1.2.3"),
        ("(c) {{ pkg.authors[0].name }}", "(c) Ada"),
        ("{{ now().year }}", "2024"),
        ("{{ now() | datefmt('%Y-%m') }}", "2024-05"),
        ("{{ today | datefmt }}", "2024-05-17"),
        ("{{ pkg.name | upper }}", "DEMO-PKG"),
    ],
)
def test_symbols_and_filters(fixed_context: RenderContext, template: str, expected: str) -> None:
    """Package data, the clock and filters are available to templates."""
    assert render_template(template, fixed_context) == expected


def test_file_symbol(fixed_context: RenderContext) -> None:
    """Per-file data is exposed as ``file``."""
    info = FileInfo.from_path(PurePosixPath("/tmp/src/app.js"))

    assert render_template("{{ file.name }}:{{ file.extension }}", fixed_context, file=info) == (
        "app.js:.js"
    )


def test_undefined_name_raises_template_error(fixed_context: RenderContext) -> None:
    """Unknown names fail instead of rendering as empty strings."""
    with pytest.raises(TemplateError) as excinfo:
        render_template("{{ nope }}", fixed_context)

    assert isinstance(excinfo.value.cause, jinja2.UndefinedError)
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_file_is_undefined_without_file_info(fixed_context: RenderContext) -> None:
    """``file`` only exists when rendering for a file."""
    with pytest.raises(TemplateError):
        render_template("{{ file.name }}", fixed_context)


def test_syntax_error_raises_template_error(fixed_context: RenderContext) -> None:
    """Malformed templates are reported as `TemplateError`."""
    with pytest.raises(TemplateError) as excinfo:
        render_template("{{ pkg.name ", fixed_context)

    assert isinstance(excinfo.value.__cause__, jinja2.TemplateSyntaxError)


def test_evaluation_error_raises_template_error(fixed_context: RenderContext) -> None:
    """Exceptions raised while evaluating the template are wrapped."""
    with pytest.raises(TemplateError) as excinfo:
        render_template("{{ 1 // 0 }}", fixed_context)

    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
