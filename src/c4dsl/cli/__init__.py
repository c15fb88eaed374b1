# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    c4dsl = "c4dsl.cli.main:cli"

Subcommands live in `c4dsl.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
