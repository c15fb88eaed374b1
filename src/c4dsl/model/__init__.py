# topmark:header:start
#
#   project      : C4DSL
#   file         : __init__.py
#   file_relpath : src/c4dsl/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C4 domain model: element records, identities, relationships and their construction."""

from __future__ import annotations

from c4dsl.model.elements import (
    CodeElement,
    Component,
    Container,
    Element,
    Identifiable,
    Person,
    SoftwareSystem,
)
from c4dsl.model.errors import ElementValidationError
from c4dsl.model.factory import ModelFactory, build_relationship
from c4dsl.model.identity import ElementIdentity, IdentityAllocator
from c4dsl.model.relationship import Endpoint, EndpointLike, Relationship, to_endpoint
from c4dsl.model.types import (
    CodeType,
    ContainerType,
    ElementKind,
    InteractionStyle,
    Location,
)

__all__ = [
    "CodeElement",
    "CodeType",
    "Component",
    "Container",
    "ContainerType",
    "Element",
    "ElementIdentity",
    "ElementKind",
    "ElementValidationError",
    "Endpoint",
    "EndpointLike",
    "Identifiable",
    "IdentityAllocator",
    "InteractionStyle",
    "Location",
    "ModelFactory",
    "Person",
    "Relationship",
    "SoftwareSystem",
    "build_relationship",
    "to_endpoint",
]
