# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``c4dsl`` group."""
