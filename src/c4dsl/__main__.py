# topmark:header:start
#
#   project      : C4DSL
#   file         : __main__.py
#   file_relpath : src/c4dsl/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running C4DSL via ``python -m c4dsl``.

Delegates to :func:`c4dsl.cli.main.cli`, the single CLI entry point shared
with the ``c4dsl`` console script.

Examples:
    Export a workspace document to stdout::

        python -m c4dsl export workspace.toml
"""

from __future__ import annotations

from c4dsl.cli.main import cli

if __name__ == "__main__":
    cli()
