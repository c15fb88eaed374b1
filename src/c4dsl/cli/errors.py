# topmark:header:start
#
#   project      : C4DSL
#   file         : errors.py
#   file_relpath : src/c4dsl/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the C4DSL CLI.

Usage:
    Commands translate library errors (`c4dsl.dsl.errors.C4DslError`,
    `OSError`, ...) into these `click.ClickException` subclasses, which carry
    the matching `ExitCode`.

Styling:
    Errors prefer the project console from the Click context (see `show()`);
    without one they fall back to Click's default output.
"""

from __future__ import annotations

from typing import IO, Any

import click

from c4dsl.cli.exit_codes import ExitCode


class C4dslCliError(click.ClickException):
    """Base class for all C4DSL CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error on the project console, or via Click if there is none."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class C4dslUsageError(C4dslCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class C4dslDataError(C4dslCliError):
    """Invalid workspace document or model."""

    exit_code = ExitCode.DATA_ERROR


class C4dslFileNotFoundError(C4dslCliError):
    """The input document does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class C4dslIOError(C4dslCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class C4dslConfigError(C4dslCliError):
    """Configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
