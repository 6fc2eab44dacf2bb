# headercomment:header:start
#
#   project      : HeaderComment
#   file         : apply.py
#   file_relpath : src/headercomment/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment `apply` command.

Renders the header template for every given file and inserts it as a comment.
Without ``--write`` the transformed contents are printed to stdout (preceded by
a ``==> path <==`` banner when several files are given); with ``--write`` the
files are rewritten in place.

Errors are reported per file; the exit code reflects the first failure.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from headercomment.api import apply_to_paths
from headercomment.cli.config_resolver import resolve_header_options
from headercomment.cli.errors import (
    HeaderCommentConfigError,
    HeaderCommentIOError,
    error_for_outcome,
)
from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.errors import ConfigError
from headercomment.pipeline.content import Buffered
from headercomment.pipeline.outcomes import Outcome

if TYPE_CHECKING:
    from headercomment.config.model import HeaderOptions
    from headercomment.pipeline.outcomes import FileOutcome

logger: HeaderCommentLogger = get_logger(__name__)


def _report(outcomes: list[FileOutcome], *, write: bool) -> None:
    """Print transformed contents (or a summary) and raise for the first failure."""
    banner: bool = len(outcomes) > 1
    first_failure: FileOutcome | None = None
    for result in outcomes:
        path: Path = result.record.path
        if not result.ok:
            click.secho(f"{path}: {result.error}", err=True, fg="red")
            if first_failure is None:
                first_failure = result
            continue
        if result.outcome == Outcome.SKIPPED:
            logger.info("Skipped %s (no contents)", path)
            continue
        if write:
            click.echo(f"Updated {path}")
            continue
        contents = result.record.contents
        if banner:
            click.echo(f"==> {path} <==")
        if isinstance(contents, Buffered):
            click.echo(contents.data, nl=False)
        if banner:
            click.echo()

    if first_failure is not None:
        error_cls = error_for_outcome(first_failure.outcome)
        failed: int = sum(1 for r in outcomes if not r.ok)
        raise error_cls(f"{failed} of {len(outcomes)} file(s) failed")


@click.command(
    name="apply",
    help="Insert the rendered header comment into files.",
    epilog="""
The template comes from --template, --template-file, or the [tool.headercomment]
table of pyproject.toml (or --config). Templates use Jinja2 syntax with 'pkg',
'now', 'today' and 'file' available.
""",
)
@click.option(
    "--template",
    "template_text",
    default=None,
    help="Literal header template.",
)
@click.option(
    "--template-file",
    "template_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Header template file.",
)
@click.option(
    "--encoding",
    default=None,
    help="Encoding of the template file (default: utf-8).",
)
@click.option(
    "--separator",
    default=None,
    help=r"Text between header and content (default: '\n'; escapes \n \r \t allowed).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="TOML file holding a [tool.headercomment] table.",
)
@click.option(
    "--stream",
    is_flag=True,
    default=False,
    help="Stream file contents instead of reading them at once.",
)
@click.option(
    "--write",
    is_flag=True,
    default=False,
    help="Rewrite the files in place instead of printing them.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
def apply_command(
    *,
    template_text: str | None,
    template_file: Path | None,
    encoding: str | None,
    separator: str | None,
    config_path: Path | None,
    stream: bool,
    write: bool,
    paths: tuple[Path, ...],
) -> None:
    """Insert the rendered header comment into ``paths``.

    Args:
        template_text (str | None): Literal template (``--template``).
        template_file (Path | None): Template file (``--template-file``).
        encoding (str | None): Template file encoding.
        separator (str | None): Separator between header and content.
        config_path (Path | None): Explicit TOML configuration file.
        stream (bool): Use the streaming content path.
        write (bool): Rewrite files in place.
        paths (tuple[Path, ...]): Files to process.
    """
    cwd: Path = Path.cwd()
    try:
        options: HeaderOptions = resolve_header_options(
            template_text=template_text,
            template_file=template_file,
            encoding=encoding,
            separator=separator,
            config_path=config_path,
            cwd=cwd,
        )
        outcomes: list[FileOutcome] = asyncio.run(
            apply_to_paths(paths, options, write=write, stream=stream, cwd=cwd)
        )
    except ConfigError as exc:
        raise HeaderCommentConfigError(str(exc)) from exc
    except OSError as exc:
        raise HeaderCommentIOError(str(exc)) from exc

    _report(outcomes, write=write)
