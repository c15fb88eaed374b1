# topmark:header:start
#
#   project      : C4DSL
#   file         : types.py
#   file_relpath : src/c4dsl/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

Kept free of I/O so the serializer core can import them without pulling in
configuration discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config overrides (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class IdentifierScopeMode(str, Enum):
    """How short DSL identifiers are kept unique.

    Attributes:
        HIERARCHICAL: Top-level elements share one scope; containers are unique
            within their system and components within their container.
        GLOBAL: Every element draws from one workspace-wide set.
    """

    HIERARCHICAL = "hierarchical"
    GLOBAL = "global"

    @classmethod
    def parse(cls, value: str | None) -> IdentifierScopeMode | None:
        """Return the member whose value matches ``value`` (case-insensitive), or None."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
