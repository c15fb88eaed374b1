# topmark:header:start
#
#   project      : C4DSL
#   file         : export.py
#   file_relpath : src/c4dsl/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL `export` command.

Loads a workspace document (TOML or JSON), renders it as Structurizr DSL and
writes the result to stdout or to ``--output``.

Configuration is resolved in this order (later wins): built-in defaults,
``pyproject.toml`` / ``c4dsl.toml`` in the working directory, ``--config``
files, then ``--identifier-scope`` / ``--indent-width``.

Exit codes:
    - 0: the document was rendered.
    - 65: the document or the model it describes is invalid.
    - 66: the input file does not exist.
    - 74: the input could not be read or the output could not be written.
    - 78: a ``--config`` file is not valid TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from c4dsl.cli.errors import (
    C4dslConfigError,
    C4dslDataError,
    C4dslFileNotFoundError,
    C4dslIOError,
)
from c4dsl.cli.options import EnumChoiceParam, common_config_options
from c4dsl.config.io import parse_toml_text
from c4dsl.config.keys import Toml
from c4dsl.config.logging import get_logger
from c4dsl.config.model import MAX_INDENT_WIDTH, MutableConfig
from c4dsl.config.types import IdentifierScopeMode
from c4dsl.dsl.errors import C4DslError
from c4dsl.loader import load_workspace

if TYPE_CHECKING:
    from collections.abc import Iterable

    from c4dsl.cli.console import ConsoleLike
    from c4dsl.config.logging import C4dslLogger
    from c4dsl.config.model import Config

logger: C4dslLogger = get_logger(__name__)


def _check_config_files(paths: Iterable[Path]) -> None:
    """Fail early on explicit config files that are not valid TOML.

    Discovered files are lenient (errors are logged and the file is skipped);
    a file named on the command line is expected to be usable.

    Raises:
        C4dslConfigError: If a file cannot be parsed.
        C4dslIOError: If a file cannot be read.
    """
    for path in paths:
        try:
            parse_toml_text(path.read_text(encoding="utf-8"))
        except TomlkitParseError as exc:
            raise C4dslConfigError(f"Invalid config file {path}: {exc}") from exc
        except OSError as exc:
            raise C4dslIOError(f"Cannot read config file {path}: {exc}") from exc


def resolve_export_config(
    *,
    config_paths: Iterable[str],
    no_config: bool,
    identifier_scope: IdentifierScopeMode | None,
    indent_width: int | None,
) -> Config:
    """Merge configuration layers and CLI overrides into a frozen `Config`."""
    extra = [Path(p) for p in config_paths]
    _check_config_files(extra)
    draft = MutableConfig.load_merged(
        anchor=Path.cwd(), extra_config_files=extra, no_config=no_config
    )
    draft.apply_overrides(
        {
            Toml.KEY_IDENTIFIER_SCOPE: identifier_scope.value if identifier_scope else None,
            Toml.KEY_INDENT_WIDTH: indent_width,
        }
    )
    return draft.freeze()


@click.command(
    name="export",
    help="Render a workspace document (TOML or JSON) as Structurizr DSL.",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the DSL to this file instead of stdout.",
)
@common_config_options
@click.option(
    "--identifier-scope",
    "identifier_scope",
    type=EnumChoiceParam(IdentifierScopeMode),
    default=None,
    help="Identifier uniqueness scope (hierarchical or global).",
)
@click.option(
    "--indent-width",
    "indent_width",
    type=click.IntRange(1, MAX_INDENT_WIDTH),
    default=None,
    help="Spaces per indentation level.",
)
def export_command(
    *,
    input_path: Path,
    output_path: Path | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    identifier_scope: IdentifierScopeMode | None,
    indent_width: int | None,
) -> None:
    """Render INPUT as Structurizr DSL."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbose: int = ctx.obj.get("verbose", 0)

    if not input_path.exists():
        raise C4dslFileNotFoundError(f"Input file not found: {input_path}")

    config = resolve_export_config(
        config_paths=config_paths,
        no_config=no_config,
        identifier_scope=identifier_scope,
        indent_width=indent_width,
    )
    for diagnostic in config.diagnostics:
        console.warn(diagnostic.render(color=bool(ctx.obj.get("color_enabled"))))

    try:
        dsl = load_workspace(input_path, config=config).serialize()
    except OSError as exc:
        raise C4dslIOError(f"Cannot read {input_path}: {exc}") from exc
    except C4DslError as exc:
        raise C4dslDataError(str(exc)) from exc

    if output_path is None:
        console.print(dsl)
        return

    try:
        output_path.write_text(f"{dsl}\n", encoding="utf-8")
    except OSError as exc:
        raise C4dslIOError(f"Cannot write {output_path}: {exc}") from exc
    logger.info("Wrote %s", output_path)
    if verbose > 0:
        console.print(f"Wrote {len(dsl.splitlines())} lines to {output_path}")
