# headercomment:header:start
#
#   project      : HeaderComment
#   file         : __init__.py
#   file_relpath : src/headercomment/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Header insertion pipeline: file records, insertion, content adapters and the transform."""

from __future__ import annotations

from headercomment.pipeline.content import Absent, Buffered, FileRecord, Streamed
from headercomment.pipeline.outcomes import FileOutcome, Outcome
from headercomment.pipeline.transform import HeaderTransform

__all__ = [
    "Absent",
    "Buffered",
    "FileOutcome",
    "FileRecord",
    "HeaderTransform",
    "Outcome",
    "Streamed",
]
