# topmark:header:start
#
#   project      : C4DSL
#   file         : constants.py
#   file_relpath : src/c4dsl/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

C4DSL_VERSION: str = get_version("c4dsl")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "C4DSL_LOG_LEVEL"

# Local configuration files, in merge order within one directory.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
C4DSL_TOML_NAME: str = "c4dsl.toml"
PYPROJECT_TOOL_SECTION: str = "tool.c4dsl"

DEFAULT_WORKSPACE_NAME: str = "Name"
DEFAULT_WORKSPACE_DESCRIPTION: str = "Description"
DEFAULT_INDENT_WIDTH: int = 4

# Placeholder emitted by `format_identifier` for empty input.
EMPTY_IDENTIFIER_PLACEHOLDER: str = "element"

EXTERNAL_TAG: str = "External"
DEFAULT_RELATIONSHIP_STYLE_TAG: str = "Relationship"
