# headercomment:header:start
#
#   project      : HeaderComment
#   file         : config_resolver.py
#   file_relpath : src/headercomment/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Resolve header options from a TOML file and command line overrides.

Resolution order (later wins):

1. the ``[tool.headercomment]`` table of ``--config`` (or of ``pyproject.toml``
   in the working directory when it exists);
2. ``--template`` / ``--template-file``, ``--encoding`` and ``--separator``.

A template given on the command line replaces both template keys of the
configuration file, so that options never end up ambiguous by accident.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from headercomment.cli.options import unescape_separator
from headercomment.config.loaders import load_tool_options
from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.config.model import HeaderOptions
from headercomment.constants import PACKAGE_DESCRIPTOR_NAME, TOOL_TABLE
from headercomment.errors import ConfigError

logger: HeaderCommentLogger = get_logger(__name__)


def resolve_header_options(
    *,
    template_text: str | None,
    template_file: Path | None,
    encoding: str | None,
    separator: str | None,
    config_path: Path | None,
    cwd: Path,
) -> HeaderOptions:
    """Merge configuration file options with command line overrides.

    Args:
        template_text (str | None): Literal template from ``--template``.
        template_file (Path | None): Template path from ``--template-file``;
            relative paths are resolved against ``cwd``.
        encoding (str | None): Template file encoding from ``--encoding``.
        separator (str | None): Separator from ``--separator`` (escapes allowed).
        config_path (Path | None): Explicit TOML configuration file.
        cwd (Path): The working directory.

    Returns:
        HeaderOptions: The validated options.

    Raises:
        ConfigError: If no template is configured or the options are invalid.
        OSError: If an explicit configuration file cannot be read.
    """
    merged: dict[str, Any] = {}
    base_dir: Path | None = None

    path: Path | None = config_path
    if path is None and (cwd / PACKAGE_DESCRIPTOR_NAME).is_file():
        path = cwd / PACKAGE_DESCRIPTOR_NAME
    if path is not None:
        table: dict[str, Any] | None = load_tool_options(path)
        if table is not None:
            merged.update(table)
            base_dir = path.resolve().parent
            logger.info("Using [tool.%s] from %s", TOOL_TABLE, path)
        elif config_path is not None:
            logger.warning("No [tool.%s] table in %s", TOOL_TABLE, config_path)

    if template_text is not None and template_file is not None:
        raise ConfigError("Use either --template or --template-file, not both")
    if template_text is not None:
        merged.pop("file", None)
        merged["template"] = template_text
    if template_file is not None:
        merged.pop("template", None)
        merged["file"] = str(template_file if template_file.is_absolute() else cwd / template_file)
    if encoding is not None:
        merged["encoding"] = encoding
    if separator is not None:
        merged["separator"] = unescape_separator(separator)

    if "file" not in merged and "template" not in merged:
        raise ConfigError(
            f"No header template: use --template, --template-file or [tool.{TOOL_TABLE}]"
        )
    return HeaderOptions.from_options(merged, base_dir=base_dir)
