# topmark:header:start
#
#   project      : C4DSL
#   file         : elements.py
#   file_relpath : src/c4dsl/model/elements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable C4 element records.

Containment is strict ownership: a software system owns its containers, a
container its components, a component its code elements. Children are kept as
tuples in caller order; that order drives identifier allocation and therefore
the serialized output.

Records are normally created through `c4dsl.model.factory.ModelFactory`,
which validates fields and mints identities. The serializer only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol, Union

from c4dsl.model.types import CodeType, ContainerType, ElementKind, Location

if TYPE_CHECKING:
    from c4dsl.model.identity import ElementIdentity


class Identifiable(Protocol):
    """Read-only capability shared by every element kind."""

    @property
    def identity(self) -> ElementIdentity: ...

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def location(self) -> Location: ...

    @property
    def kind(self) -> ElementKind: ...


@dataclass(frozen=True, slots=True)
class CodeElement:
    """A class, function, module, ... inside a component."""

    identity: ElementIdentity
    name: str
    description: str
    code_type: CodeType
    language: str | None = None
    file_path: str | None = None
    location: Location = Location.INTERNAL

    kind: ClassVar[ElementKind] = ElementKind.CODE


@dataclass(frozen=True, slots=True)
class Component:
    """A grouping of related functionality inside a container."""

    identity: ElementIdentity
    name: str
    description: str
    technology: str | None = None
    responsibilities: tuple[str, ...] = ()
    code_elements: tuple[CodeElement, ...] = ()
    location: Location = Location.INTERNAL

    kind: ClassVar[ElementKind] = ElementKind.COMPONENT


@dataclass(frozen=True, slots=True)
class Container:
    """A separately deployable or runnable unit inside a software system."""

    identity: ElementIdentity
    name: str
    description: str
    container_type: ContainerType = ContainerType.OTHER
    type_label: str | None = None
    technology: str | None = None
    components: tuple[Component, ...] = ()
    location: Location = Location.INTERNAL

    kind: ClassVar[ElementKind] = ElementKind.CONTAINER

    @property
    def type_name(self) -> str:
        """Display name of the container type, preferring the custom label."""
        if self.container_type is ContainerType.OTHER and self.type_label:
            return self.type_label
        return self.container_type.display_name


@dataclass(frozen=True, slots=True)
class SoftwareSystem:
    """The highest level of abstraction that delivers value to its users."""

    identity: ElementIdentity
    name: str
    description: str
    containers: tuple[Container, ...] = ()
    location: Location = Location.INTERNAL

    kind: ClassVar[ElementKind] = ElementKind.SOFTWARE_SYSTEM


@dataclass(frozen=True, slots=True)
class Person:
    """A human user of one or more software systems."""

    identity: ElementIdentity
    name: str
    description: str
    technology: str | None = None
    location: Location = Location.INTERNAL

    kind: ClassVar[ElementKind] = ElementKind.PERSON


Element = Union[Person, SoftwareSystem, Container, Component, CodeElement]
