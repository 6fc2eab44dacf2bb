# headercomment:header:start
#
#   project      : HeaderComment
#   file         : options.py
#   file_relpath : src/headercomment/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Shared Click options and helpers for the HeaderComment CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import click

from headercomment.cli.errors import HeaderCommentUsageError
from headercomment.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")

_ESCAPES: dict[str, str] = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\"}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Three or more -v flags set TRACE, two DEBUG, one INFO; any -q sets ERROR.
    Default level is WARNING.

    Raises:
        HeaderCommentUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HeaderCommentUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count > 0:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: F) -> F:
    """Add the counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v, -vv, -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def unescape_separator(value: str) -> str:
    r"""Translate ``\n``, ``\r``, ``\t`` and ``\\`` escapes typed on the command line."""
    out: list[str] = []
    i: int = 0
    while i < len(value):
        ch: str = value[i]
        if ch == "\\" and i + 1 < len(value) and value[i + 1] in _ESCAPES:
            out.append(_ESCAPES[value[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)
