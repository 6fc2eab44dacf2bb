# headercomment:header:start
#
#   project      : HeaderComment
#   file         : file.py
#   file_relpath : src/headercomment/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""File path helpers for HeaderComment."""

import os
from pathlib import Path

from headercomment.config.logging import get_logger

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path | None) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The root path to compute the relative path from
            (defaults to the current working directory).

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        # Direct subpath case
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath: fall back to os.path.relpath
        logger.trace("%s is outside %s", resolved_path, resolved_root)
        return Path(os.path.relpath(resolved_path, start=resolved_root))
