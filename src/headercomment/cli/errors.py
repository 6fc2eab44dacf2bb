# headercomment:header:start
#
#   project      : HeaderComment
#   file         : errors.py
#   file_relpath : src/headercomment/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Exceptions for the HeaderComment CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes.
"""

from __future__ import annotations

from typing import IO, Any

import click

from headercomment.cli.exit_codes import ExitCode
from headercomment.pipeline.outcomes import Outcome


class HeaderCommentCliError(click.ClickException):
    """Base class for all HeaderComment CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class HeaderCommentUsageError(HeaderCommentCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HeaderCommentConfigError(HeaderCommentCliError):
    """Error for configuration errors (missing/invalid/malformed options)."""

    exit_code = ExitCode.CONFIG_ERROR


class HeaderCommentTemplateError(HeaderCommentCliError):
    """Error for header templates that cannot be rendered."""

    exit_code = ExitCode.TEMPLATE_ERROR


class HeaderCommentFileNotFoundError(HeaderCommentCliError):
    """Error when an input path or template file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeaderCommentPermissionDeniedError(HeaderCommentCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class HeaderCommentIOError(HeaderCommentCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


_ERROR_BY_OUTCOME: dict[Outcome, type[HeaderCommentCliError]] = {
    Outcome.CONFIG_ERROR: HeaderCommentConfigError,
    Outcome.TEMPLATE_ERROR: HeaderCommentTemplateError,
    Outcome.NOT_FOUND: HeaderCommentFileNotFoundError,
    Outcome.PERMISSION_DENIED: HeaderCommentPermissionDeniedError,
    Outcome.IO_ERROR: HeaderCommentIOError,
}


def error_for_outcome(outcome: Outcome) -> type[HeaderCommentCliError]:
    """Return the CLI error class matching a failed outcome."""
    return _ERROR_BY_OUTCOME.get(outcome, HeaderCommentCliError)
