# headercomment:header:start
#
#   project      : HeaderComment
#   file         : loaders.py
#   file_relpath : src/headercomment/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Load TOML sources: the package descriptor and HeaderComment options.

Two documents are read with `tomlkit` and returned as plain `dict` structures:

- the package descriptor (``pyproject.toml``) whose ``[project]`` table is
  exposed to header templates as ``pkg``;
- a configuration file whose ``[tool.headercomment]`` table holds header
  options (``file``/``template``, ``encoding``, ``separator``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.constants import (
    PACKAGE_DESCRIPTOR_NAME,
    PACKAGE_DESCRIPTOR_TABLE,
    TOOL_TABLE,
)
from headercomment.errors import ConfigError

logger: HeaderCommentLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the document is not valid TOML.
        OSError: If the file cannot be read.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error decoding TOML from {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_package_descriptor(cwd: Path | None = None) -> TomlTable:
    """Return the ``[project]`` table of the package descriptor in ``cwd``.

    A missing descriptor (or one without a ``[project]`` table) yields an
    empty mapping.

    Args:
        cwd (Path | None): Directory holding the descriptor (defaults to the
            current working directory).

    Returns:
        TomlTable: The package metadata.

    Raises:
        ConfigError: If the descriptor exists but is not valid TOML.
    """
    path: Path = (cwd or Path.cwd()) / PACKAGE_DESCRIPTOR_NAME
    if not path.is_file():
        logger.debug("No package descriptor at %s", path)
        return {}
    try:
        data: TomlTable = load_toml_dict(path)
    except OSError as exc:
        logger.warning("Cannot read package descriptor %s: %s", path, exc)
        return {}
    project: Any = data.get(PACKAGE_DESCRIPTOR_TABLE, {})
    if not isinstance(project, dict):
        logger.warning("Ignoring non-table [%s] in %s", PACKAGE_DESCRIPTOR_TABLE, path)
        return {}
    logger.debug("Loaded package descriptor %s (%d keys)", path, len(project))
    return cast("TomlTable", project)


def load_tool_options(path: Path) -> TomlTable | None:
    """Return the ``[tool.headercomment]`` table of a TOML file.

    Args:
        path (Path): The TOML file (usually ``pyproject.toml``).

    Returns:
        TomlTable | None: The options table, or None if the file declares none.

    Raises:
        ConfigError: If the file is not valid TOML or the table is not a table.
        OSError: If the file cannot be read.
    """
    data: TomlTable = load_toml_dict(path)
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    options: Any = cast("TomlTable", tool).get(TOOL_TABLE)
    if options is None:
        return None
    if not isinstance(options, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {path} must be a table")
    logger.debug("Loaded [tool.%s] from %s", TOOL_TABLE, path)
    return cast("TomlTable", options)
