# headercomment:header:start
#
#   project      : HeaderComment
#   file         : transform.py
#   file_relpath : src/headercomment/pipeline/transform.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""The header transform: one awaitable step per file record.

For each record the transform chains, sequentially:

    resolve template → render → format as comment → insert/apply

Null and directory records pass through untouched. Many records may be in
flight at once (`HeaderTransform.transform_all`); they share only the
read-only render context and the file type/processor registries.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.config.model import HeaderOptions
from headercomment.pipeline.adapter import apply_header
from headercomment.pipeline.outcomes import FileOutcome
from headercomment.processors import format_comment, register_all_processors
from headercomment.template.context import FileInfo, RenderContext, build_render_context
from headercomment.template.renderer import render_template
from headercomment.template.resolver import resolve_template

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from headercomment.pipeline.content import FileRecord

logger: HeaderCommentLogger = get_logger(__name__)


class HeaderTransform:
    """Insert a rendered header comment into file records.

    Args:
        options (str | Mapping[str, Any] | HeaderOptions): A literal template, an
            options mapping, or validated options.
        context (RenderContext | None): Render context to share; built from the
            package descriptor in ``cwd`` when omitted.
        cwd (Path | None): Working directory for the package descriptor and for
            ``file.relpath`` (defaults to the process working directory).

    Raises:
        ConfigError: If the options are invalid or the package descriptor is malformed.
    """

    def __init__(
        self,
        options: str | Mapping[str, Any] | HeaderOptions,
        *,
        context: RenderContext | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.options: HeaderOptions = HeaderOptions.from_options(options)
        self.cwd: Path | None = cwd
        self.context: RenderContext = context if context is not None else build_render_context(cwd)
        register_all_processors()

    def build_header(self, template_text: str, path: Path) -> str:
        """Render ``template_text`` for ``path`` and wrap it as a comment.

        Raises:
            TemplateError: If the template cannot be rendered.
        """
        rendered: str = render_template(
            template_text,
            self.context,
            file=FileInfo.from_path(path, self.cwd),
        )
        return format_comment(rendered, path.suffix)

    async def __call__(self, record: FileRecord) -> FileRecord:
        """Insert the header into ``record`` and return it.

        Args:
            record (FileRecord): The record to transform, updated in place.

        Returns:
            FileRecord: The same record.

        Raises:
            OSError: If the template file cannot be read.
            TemplateError: If the template cannot be rendered.
        """
        if record.is_null():
            logger.debug("Passing %s through: no contents", record.path)
            return record

        template_text: str = await resolve_template(self.options.source)
        header: str = self.build_header(template_text, record.path)
        apply_header(record, header, self.options.separator)
        logger.info("Inserted header into %s", record.path)
        return record

    async def process(self, record: FileRecord) -> FileOutcome:
        """Transform ``record`` and capture any failure in the outcome."""
        try:
            await self(record)
        except Exception as exc:
            logger.error("Cannot insert header into %s: %s", record.path, exc)
            return FileOutcome(record=record, error=exc)
        return FileOutcome(record=record)

    async def transform_all(self, records: Iterable[FileRecord]) -> list[FileOutcome]:
        """Transform records concurrently.

        Args:
            records (Iterable[FileRecord]): The records to transform.

        Returns:
            list[FileOutcome]: One outcome per record, in input order.
        """
        outcomes = await asyncio.gather(*(self.process(record) for record in records))
        return list(outcomes)
