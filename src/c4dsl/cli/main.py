# topmark:header:start
#
#   project      : C4DSL
#   file         : main.py
#   file_relpath : src/c4dsl/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``c4dsl`` command.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from c4dsl.cli.commands.export import export_command
from c4dsl.cli.commands.init_config import init_config_command
from c4dsl.cli.commands.version import version_command
from c4dsl.cli.console import ClickConsole
from c4dsl.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from c4dsl.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from c4dsl.cli.console import ConsoleLike
    from c4dsl.config.logging import C4dslLogger

logger: C4dslLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)
    ctx.obj["verbose"] = verbose

    # Internal logging is driven by the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(
        enable_color=enable_color,
        verbosity_level=ctx.obj["verbosity_level"],
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render C4 architecture models as Structurizr DSL.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the C4DSL CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'c4dsl export WORKSPACE.toml' to render a workspace.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(init_config_command)

cli.add_command(export_command)

if __name__ == "__main__":
    cli()
