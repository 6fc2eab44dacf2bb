# headercomment:header:start
#
#   project      : HeaderComment
#   file         : renderer.py
#   file_relpath : src/headercomment/template/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Render header templates with Jinja2.

Templates use Jinja2 syntax, e.g.::

    Copyright (c) {{ now().year }} {{ pkg.authors[0].name }}
    {{ pkg.name }} v{{ pkg.version }} - {{ file.name }}

Undefined names fail loudly (`jinja2.StrictUndefined`); every failure is
reported as `headercomment.errors.TemplateError` chained to the engine error.
"""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from typing import TYPE_CHECKING

import jinja2

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.errors import TemplateError

if TYPE_CHECKING:
    from headercomment.template.context import FileInfo, RenderContext

logger: HeaderCommentLogger = get_logger(__name__)


def datefmt(value: date | datetime, fmt: str = "%Y-%m-%d") -> str:
    """Jinja filter formatting a date or datetime with `strftime` syntax."""
    return value.strftime(fmt)


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    """Return the shared Jinja2 environment (configured once, then read-only)."""
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.filters["datefmt"] = datefmt
    return env


def render_template(
    template_text: str,
    context: RenderContext,
    *,
    file: FileInfo | None = None,
) -> str:
    """Interpolate ``template_text`` against ``context``.

    Args:
        template_text (str): The raw template text.
        context (RenderContext): The shared render context.
        file (FileInfo | None): Data of the file being processed, exposed as ``file``.

    Returns:
        str: The rendered text, stripped of leading and trailing whitespace.

    Raises:
        TemplateError: If the template cannot be parsed, references an undefined
            name, or raises while being evaluated.
    """
    env: jinja2.Environment = get_environment()
    try:
        template: jinja2.Template = env.from_string(template_text)
        rendered: str = template.render(context.as_template_vars(file))
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Cannot render header template: {exc}") from exc
    except Exception as exc:
        raise TemplateError(
            f"Header template raised {type(exc).__name__} while rendering: {exc}"
        ) from exc

    logger.trace("Rendered header template (%d characters)", len(rendered))
    return rendered.strip()
