# topmark:header:start
#
#   project      : C4DSL
#   file         : version.py
#   file_relpath : src/c4dsl/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL `version` command.

Prints the C4DSL version installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from c4dsl.cli.options import EnumChoiceParam
from c4dsl.constants import C4DSL_VERSION

if TYPE_CHECKING:
    from c4dsl.cli.console import ConsoleLike


class VersionFormat(str, Enum):
    """Output formats of the ``version`` command."""

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


@click.command(
    name="version",
    help="Show the current version of C4DSL.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in VersionFormat)}).",
)
def version_command(*, output_format: VersionFormat | None = None) -> None:
    """Show the current version of C4DSL.

    Args:
        output_format (VersionFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbose: int = ctx.obj.get("verbose", 0)

    fmt = output_format or VersionFormat.DEFAULT
    if fmt is VersionFormat.JSON:
        console.print(json.dumps({"version": C4DSL_VERSION}))
    elif fmt is VersionFormat.MARKDOWN:
        console.print("# C4DSL Version\n")
        console.print(f"**C4DSL version: {C4DSL_VERSION}**")
    elif verbose > 0:
        console.print(console.styled("C4DSL version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(C4DSL_VERSION, bold=True)}")
    else:
        console.print(console.styled(C4DSL_VERSION, bold=True))
