# headercomment:header:start
#
#   project      : HeaderComment
#   file         : constants.py
#   file_relpath : src/headercomment/constants.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    HEADERCOMMENT_VERSION: str = get_version("headercomment")
except PackageNotFoundError:  # running from a source checkout
    HEADERCOMMENT_VERSION = "0.0.0"

# Project descriptor read once per render context and exposed to templates as `pkg`
PACKAGE_DESCRIPTOR_NAME: str = "pyproject.toml"
PACKAGE_DESCRIPTOR_TABLE: str = "project"

# Table holding HeaderComment options inside a TOML configuration file
TOOL_TABLE: str = "headercomment"

DEFAULT_TEMPLATE_ENCODING: str = "utf-8"
DEFAULT_SEPARATOR: str = "\n"

# File contents are handled as bytes; the header is encoded with this codec
CONTENT_ENCODING: str = "utf-8"

DEFAULT_CHUNK_SIZE: int = 64 * 1024

LOG_LEVEL_ENV_VAR: str = "HEADERCOMMENT_LOG_LEVEL"
