# headercomment:header:start
#
#   project      : HeaderComment
#   file         : outcomes.py
#   file_relpath : src/headercomment/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Per-file outcomes of a transform run.

An outcome pairs a record with the error that stopped its processing, if any.
Failures are kept per file so that one broken file never hides the results of
its siblings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from headercomment.errors import ConfigError, TemplateError

if TYPE_CHECKING:
    from headercomment.pipeline.content import FileRecord


class Outcome(Enum):
    """Stable outcome keys used for reporting."""

    INSERTED = "inserted"
    SKIPPED = "skipped"
    CONFIG_ERROR = "config_error"
    TEMPLATE_ERROR = "template_error"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"
    FAILED = "failed"


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing one record.

    Attributes:
        record (FileRecord): The (possibly updated) record.
        error (Exception | None): The error that stopped processing, if any.
    """

    record: FileRecord
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Return True if the record was processed without error."""
        return self.error is None

    @property
    def outcome(self) -> Outcome:
        """Classify this result."""
        return classify(self)


def classify(result: FileOutcome) -> Outcome:
    """Map a file outcome to its stable `Outcome` key.

    Order matters: `FileNotFoundError` and `PermissionError` are `OSError`
    subclasses and must be tested first.
    """
    err: Exception | None = result.error
    if err is None:
        return Outcome.SKIPPED if result.record.is_null() else Outcome.INSERTED
    if isinstance(err, ConfigError):
        return Outcome.CONFIG_ERROR
    if isinstance(err, TemplateError):
        return Outcome.TEMPLATE_ERROR
    if isinstance(err, FileNotFoundError):
        return Outcome.NOT_FOUND
    if isinstance(err, PermissionError):
        return Outcome.PERMISSION_DENIED
    if isinstance(err, OSError):
        return Outcome.IO_ERROR
    return Outcome.FAILED
