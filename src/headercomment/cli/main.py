# headercomment:header:start
#
#   project      : HeaderComment
#   file         : main.py
#   file_relpath : src/headercomment/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""HeaderComment command line entry point.

Key ideas:
- Group-level options (verbosity) are initialized once and placed into ``ctx.obj``.
- ``HEADERCOMMENT_LOG_LEVEL`` overrides the level chosen with ``-v``/``-q``.
- Subcommands are plain Click commands registered on the group.
"""

from __future__ import annotations

import click

from headercomment.cli.commands.apply import apply_command
from headercomment.cli.commands.filetypes import filetypes_command
from headercomment.cli.commands.version import version_command
from headercomment.cli.options import common_verbose_options, resolve_verbosity
from headercomment.config.logging import get_logger, resolve_env_log_level, setup_logging
from headercomment.processors import register_all_processors

logger = get_logger(__name__)

register_all_processors()


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared verbosity state and logging on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="HeaderComment CLI",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the HeaderComment CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'headercomment apply --template TEXT [PATHS...]' to insert headers.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(apply_command)

cli.add_command(filetypes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
