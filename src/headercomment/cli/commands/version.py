# headercomment:header:start
#
#   project      : HeaderComment
#   file         : version.py
#   file_relpath : src/headercomment/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment `version` command.

Prints the current HeaderComment version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from headercomment.constants import HEADERCOMMENT_VERSION


@click.command(
    name="version",
    help="Show the current version of HeaderComment.",
)
def version_command() -> None:
    """Show the current version of HeaderComment."""
    click.echo(HEADERCOMMENT_VERSION)
