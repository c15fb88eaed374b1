# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for C4DSL.

Serializer settings are read from ``c4dsl.toml`` or ``[tool.c4dsl]`` in
``pyproject.toml`` with `tomlkit`, merged with explicit overrides and frozen
into an immutable `Config`.
"""

from __future__ import annotations

from c4dsl.config.model import Config, MutableConfig, default_config
from c4dsl.config.types import IdentifierScopeMode

__all__ = [
    "Config",
    "IdentifierScopeMode",
    "MutableConfig",
    "default_config",
]
