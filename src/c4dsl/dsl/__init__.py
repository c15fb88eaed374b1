# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/dsl/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DSL serialization engine.

Leaf helpers (identifiers, escaping, templates, writer, paths) are combined by
`c4dsl.dsl.workspace` into a single serialization pass.
"""

from __future__ import annotations

from c4dsl.dsl.styles import ElementStyle, RelationshipStyle
from c4dsl.dsl.views import ViewConfiguration, ViewType
from c4dsl.dsl.workspace import WorkspaceBuilder, WorkspaceSerializer

__all__ = [
    "ElementStyle",
    "RelationshipStyle",
    "ViewConfiguration",
    "ViewType",
    "WorkspaceBuilder",
    "WorkspaceSerializer",
]
