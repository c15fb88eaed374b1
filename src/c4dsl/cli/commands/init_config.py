# topmark:header:start
#
#   project      : C4DSL
#   file         : init_config.py
#   file_relpath : src/c4dsl/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL `init-config` command.

Prints the default serializer configuration as TOML, either as a standalone
``c4dsl.toml`` or nested under ``[tool.c4dsl]`` for ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from c4dsl.config import MutableConfig

if TYPE_CHECKING:
    from c4dsl.cli.console import ConsoleLike


@click.command(
    name="init-config",
    help="Display an initial C4DSL configuration file.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the configuration under [tool.c4dsl] for use in pyproject.toml.",
)
def init_config_command(*, for_pyproject: bool = False) -> None:
    """Print a starter config file to stdout.

    With ``-v`` the TOML is framed by a banner and BEGIN/END markers, which
    makes the output unsuitable for redirecting straight into a file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbose: int = ctx.obj.get("verbose", 0)

    if verbose > 0:
        console.print(
            console.styled("Initial C4DSL Configuration (TOML):", bold=True, underline=True)
        )
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    console.print(
        console.styled(
            MutableConfig.get_default_config_toml(for_pyproject=for_pyproject),
            fg="cyan",
        ),
        nl=False,
    )

    if verbose > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
