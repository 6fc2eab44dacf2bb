# headercomment:header:start
#
#   project      : HeaderComment
#   file         : filetypes.py
#   file_relpath : src/headercomment/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment `filetypes` command.

Lists all file types known to HeaderComment with their extensions, the comment
style used for their headers and, for HTML/XML-like types, the prolog line that
is kept in front of the header.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from headercomment.filetypes.instances import get_file_type_registry
from headercomment.filetypes.prolog import file_type_token, prolog_kind_for
from headercomment.filetypes.registry import get_comment_processor_registry
from headercomment.processors import get_fallback_processor, register_all_processors

if TYPE_CHECKING:
    from headercomment.filetypes.base import FileType
    from headercomment.filetypes.prolog import PrologKind
    from headercomment.processors.base import CommentProcessor


def _prolog_name(ft: FileType) -> str:
    """Return the prolog kind shared by the extensions of ``ft``, or ``""``."""
    kinds: set[PrologKind] = set()
    for ext in ft.extensions:
        kind: PrologKind | None = prolog_kind_for(file_type_token(ext))
        if kind is not None:
            kinds.add(kind)
    return ",".join(sorted(k.value for k in kinds))


def _serialize(ft: FileType, processor: CommentProcessor) -> dict[str, Any]:
    return {
        "name": ft.name,
        "description": ft.description,
        "extensions": list(ft.extensions),
        "comment": {
            "block_prefix": processor.block_prefix,
            "line_prefix": processor.line_prefix,
            "block_suffix": processor.block_suffix,
        },
        "prolog": _prolog_name(ft),
    }


@click.command(
    name="filetypes",
    help="List all supported file types.",
    epilog="""
Files whose extension is not listed get '#' comments.
""",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def filetypes_command(*, output_format: str = "text") -> None:
    """List supported file types.

    Args:
        output_format (str): ``text`` for a human-readable listing, ``json`` for
            machine-readable output.
    """
    register_all_processors()
    file_types = get_file_type_registry()
    processors = get_comment_processor_registry()
    fallback: CommentProcessor = get_fallback_processor()

    rows: list[dict[str, Any]] = [
        _serialize(ft, processors.get(name, fallback)) for name, ft in sorted(file_types.items())
    ]

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        comment: dict[str, str] = row["comment"]
        style: str = f"{comment['block_prefix']} {comment['line_prefix'].strip()}".rstrip()
        line: str = f"{row['name']:<14} {' '.join(row['extensions']):<28} {style}"
        if row["prolog"]:
            line += f"  (keeps {row['prolog']} prolog)"
        click.echo(line.rstrip())
