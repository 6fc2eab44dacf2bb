# headercomment:header:start
#
#   project      : HeaderComment
#   file         : logging.py
#   file_relpath : src/headercomment/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Logging for HeaderComment.

Adds a TRACE severity below DEBUG, a logger class with a ``trace()`` method and
a yachalk-based formatter. Log records go to stderr: stdout is reserved for the
transformed file contents printed by the CLI.

The level comes from the caller (CLI ``-v``/``-q``) or from the
``HEADERCOMMENT_LOG_LEVEL`` environment variable (a name such as ``"debug"`` or
a number such as ``"10"``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from headercomment.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5
TRACE_NAME: Final[str] = "TRACE"

logging.addLevelName(TRACE_LEVEL, TRACE_NAME)


class HeaderCommentLogger(logging.Logger):
    """A `logging.Logger` that can also emit TRACE records."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Emit a TRACE record (finer grained than DEBUG).

        Args:
            msg (object): Message format string.
            *args (object): Values interpolated into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        # stacklevel=2 attributes the record to the caller of trace()
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.setLoggerClass(HeaderCommentLogger)

PLAIN_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DETAILED_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

# Ordered from most to least severe; the first threshold reached picks the style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter painting each record with the color of its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colorize the result.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized line.
        """
        text: str = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(text)
        return chalk.dim(text)


def parse_log_level(value: str) -> int | None:
    """Translate a level name ("TRACE", "debug") or number ("10") into a logging level.

    Returns None when ``value`` names no known level.
    """
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    if name == "WARN":
        name = "WARNING"
    elif name == "FATAL":
        name = "CRITICAL"
    level: int | str = logging.getLevelName(name)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level named by ``HEADERCOMMENT_LOG_LEVEL``, or None if unset or invalid."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    return parse_log_level(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Previously installed root handlers are removed so repeated calls (one per
    CLI invocation) never duplicate output.

    Args:
        level (int | None): The level to apply; when None the environment is
            consulted and WARNING is used if it names nothing.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = env_level if env_level is not None else logging.WARNING

    root: logging.Logger = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(PLAIN_FORMAT if level >= logging.INFO else DETAILED_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> HeaderCommentLogger:
    """Return the `HeaderCommentLogger` called ``name`` (usually ``__name__``)."""
    return cast("HeaderCommentLogger", logging.getLogger(name))
