# topmark:header:start
#
#   project      : C4DSL
#   file         : console.py
#   file_relpath : src/c4dsl/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Program output (the generated DSL, config dumps, messages) goes through a
console; diagnostics go through `logging`. Keeping them apart means that
``c4dsl export`` output on stdout is never mixed with log records.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-output console backed by `click.echo`.

    Args:
        enable_color (bool): If True, emit ANSI color codes.
        verbosity_level (int): Program-output level from `-v` / `-q`; warnings
            are dropped when it is above WARNING.
        out (TextIO | None): Standard output stream; defaults to `sys.stdout`.
        err (TextIO | None): Error stream; defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity_level: int = logging.WARNING,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity_level = verbosity_level
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr, in yellow when color is enabled; silent under `-q`."""
        if self.verbosity_level > logging.WARNING:
            return
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr, in bright red when color is enabled."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged without color."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
