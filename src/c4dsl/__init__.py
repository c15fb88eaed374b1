# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4DSL package.

C4DSL renders an in-memory C4 architecture model (people, software systems,
containers, components and the relationships between them) into Structurizr
DSL text. It exposes a small typed API for building models and a CLI for
exporting workspace documents.
"""

from __future__ import annotations

from c4dsl.dsl.errors import (
    C4DslError,
    CircularHierarchyError,
    DuplicateElementError,
    HierarchyError,
    InvalidParentTypeError,
    SerializationError,
)
from c4dsl.dsl.styles import ElementStyle, RelationshipStyle
from c4dsl.dsl.views import ViewConfiguration, ViewType
from c4dsl.dsl.workspace import WorkspaceBuilder
from c4dsl.model import (
    CodeElement,
    CodeType,
    Component,
    Container,
    ContainerType,
    ElementIdentity,
    ElementKind,
    ElementValidationError,
    IdentityAllocator,
    InteractionStyle,
    Location,
    ModelFactory,
    Person,
    Relationship,
    SoftwareSystem,
)

__all__ = [
    "C4DslError",
    "CircularHierarchyError",
    "CodeElement",
    "CodeType",
    "Component",
    "Container",
    "ContainerType",
    "DuplicateElementError",
    "ElementIdentity",
    "ElementKind",
    "ElementStyle",
    "ElementValidationError",
    "HierarchyError",
    "IdentityAllocator",
    "InteractionStyle",
    "InvalidParentTypeError",
    "Location",
    "ModelFactory",
    "Person",
    "Relationship",
    "RelationshipStyle",
    "SerializationError",
    "SoftwareSystem",
    "ViewConfiguration",
    "ViewType",
    "WorkspaceBuilder",
]
