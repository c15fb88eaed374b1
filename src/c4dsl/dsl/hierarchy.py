# topmark:header:start
#
#   project      : C4DSL
#   file         : hierarchy.py
#   file_relpath : src/c4dsl/dsl/hierarchy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation of explicitly declared parent/child relationships.

Besides owning children directly, a workspace may declare that a container
belongs to a software system (``add_container(parent, container)``) or that a
component belongs to a container (``add_component(parent, component)``). The
parent is referenced by element, identity or name. Before anything is
emitted every declaration is checked:

- the parent must be registered and be of the expected kind
  (`InvalidParentTypeError` otherwise);
- walking up from the parent must never reach the child again
  (`CircularHierarchyError` otherwise);
- no element may appear twice, whether added twice or both owned and
  declared (`DuplicateElementError` otherwise).

The C4 hierarchy is Person and SoftwareSystem at the top, Container under
SoftwareSystem, Component under Container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar, Union

from c4dsl.config.logging import get_logger
from c4dsl.dsl.errors import (
    CircularHierarchyError,
    DuplicateElementError,
    InvalidParentTypeError,
)
from c4dsl.model.elements import Component, Container
from c4dsl.model.relationship import to_endpoint
from c4dsl.model.types import ElementKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from c4dsl.config.logging import C4dslLogger
    from c4dsl.model.elements import Identifiable, Person, SoftwareSystem
    from c4dsl.model.identity import ElementIdentity
    from c4dsl.model.relationship import EndpointLike

logger: C4dslLogger = get_logger(__name__)

UNREGISTERED: str = "unregistered"

ChildT = TypeVar("ChildT", bound=Union[Container, Component])


@dataclass(frozen=True, slots=True)
class ParentDeclaration(Generic[ChildT]):
    """A child element together with the reference to its declared parent."""

    child: ChildT
    parent: EndpointLike


def _reference_label(ref: EndpointLike) -> str:
    endpoint = to_endpoint(ref)
    return endpoint if isinstance(endpoint, str) else endpoint.name


class HierarchyValidator:
    """Registry of elements and their parents, used to check declarations."""

    def __init__(self) -> None:
        self._by_identity: dict[ElementIdentity, Identifiable] = {}
        self._by_name: dict[str, Identifiable] = {}
        self._parent_of: dict[ElementIdentity, ElementIdentity] = {}

    def register(self, element: Identifiable, parent: Identifiable | None = None) -> None:
        """Register ``element``; the first element registered under a name wins name lookups.

        Raises:
            DuplicateElementError: If ``element`` is already registered.
        """
        if element.identity in self._by_identity:
            raise DuplicateElementError(element.kind.value, element.name)
        self._by_identity[element.identity] = element
        self._by_name.setdefault(element.name, element)
        if parent is not None:
            self._parent_of[element.identity] = parent.identity
        logger.trace(
            "Registered %s %r (parent: %r)",
            element.kind.value,
            element.name,
            parent.name if parent is not None else None,
        )

    def register_software_system(self, system: SoftwareSystem) -> None:
        """Register a software system together with everything it owns."""
        self.register(system)
        for container in system.containers:
            self.register_container(container, system)

    def register_container(self, container: Container, parent: Identifiable | None = None) -> None:
        """Register a container (with its parent, if known) and its components."""
        self.register(container, parent)
        for component in container.components:
            self.register(component, container)

    def lookup(self, ref: EndpointLike) -> Identifiable | None:
        """Return the registered element named by ``ref``, or None."""
        if isinstance(ref, str):
            return self._by_name.get(ref.strip())
        endpoint = to_endpoint(ref)
        if isinstance(endpoint, str):
            return self._by_name.get(endpoint.strip())
        return self._by_identity.get(endpoint)

    def parent_chain(self, element: Identifiable) -> list[Identifiable]:
        """Return the registered ancestors of ``element``, nearest first.

        Raises:
            CircularHierarchyError: If the walk reaches an element twice.
        """
        chain: list[Identifiable] = []
        seen: set[ElementIdentity] = {element.identity}
        current = self._parent_of.get(element.identity)
        while current is not None:
            if current in seen:
                raise CircularHierarchyError(self._by_identity[current].name)
            seen.add(current)
            ancestor = self._by_identity[current]
            chain.append(ancestor)
            current = self._parent_of.get(current)
        return chain

    def detect_circular_relationship(self, child: Identifiable, parent: Identifiable) -> None:
        """Raise if ``child`` is ``parent`` or one of its ancestors.

        Raises:
            CircularHierarchyError: Naming the child.
        """
        chain = [parent, *self.parent_chain(parent)]
        if any(ancestor.identity is child.identity for ancestor in chain):
            raise CircularHierarchyError(child.name)

    def validate_parent(
        self, child: Identifiable, parent_ref: EndpointLike, expected: ElementKind
    ) -> Identifiable:
        """Check a declared parent and return the element it names.

        Args:
            child (Identifiable): The element being attached.
            parent_ref (EndpointLike): Declared parent (element, identity or name).
            expected (ElementKind): Kind the parent must have.

        Returns:
            Identifiable: The resolved parent element.

        Raises:
            CircularHierarchyError: If the parent is the child or one of its descendants.
            InvalidParentTypeError: If the parent is unknown or of the wrong kind.
        """
        label = _reference_label(parent_ref)
        parent = self.lookup(parent_ref)
        if parent is None and self._refers_to(parent_ref, child):
            parent = child
        if parent is None:
            raise InvalidParentTypeError(child.name, expected.value, UNREGISTERED, label)
        self.detect_circular_relationship(child, parent)
        if parent.kind is not expected:
            raise InvalidParentTypeError(child.name, expected.value, parent.kind.value, label)
        return parent

    def validate_container_parent(self, container: Container, parent_ref: EndpointLike) -> Identifiable:
        """Check that ``parent_ref`` names a registered software system."""
        return self.validate_parent(container, parent_ref, ElementKind.SOFTWARE_SYSTEM)

    def validate_component_parent(self, component: Component, parent_ref: EndpointLike) -> Identifiable:
        """Check that ``parent_ref`` names a registered container."""
        return self.validate_parent(component, parent_ref, ElementKind.CONTAINER)

    @staticmethod
    def _refers_to(ref: EndpointLike, element: Identifiable) -> bool:
        endpoint = to_endpoint(ref)
        if isinstance(endpoint, str):
            return endpoint.strip() == element.name
        return endpoint is element.identity


@dataclass
class DeclaredHierarchy:
    """Children attached through parent declarations, keyed by parent identity."""

    containers: dict[ElementIdentity, list[Container]] = field(default_factory=lambda: {})
    components: dict[ElementIdentity, list[Component]] = field(default_factory=lambda: {})

    def containers_of(self, system: SoftwareSystem) -> tuple[Container, ...]:
        """Owned containers followed by declared ones, in declaration order."""
        return system.containers + tuple(self.containers.get(system.identity, ()))

    def components_of(self, container: Container) -> tuple[Component, ...]:
        """Owned components followed by declared ones, in declaration order."""
        return container.components + tuple(self.components.get(container.identity, ()))


def resolve_declarations(
    people: Iterable[Person],
    systems: Iterable[SoftwareSystem],
    container_declarations: Sequence[ParentDeclaration[Container]],
    component_declarations: Sequence[ParentDeclaration[Component]],
) -> DeclaredHierarchy:
    """Validate all parent declarations and return where each child goes.

    Container declarations are processed before component declarations, so a
    component may name a container that was itself declared.

    Raises:
        InvalidParentTypeError: If a declared parent is unknown or of the wrong kind.
        CircularHierarchyError: If a declaration makes an element its own ancestor.
        DuplicateElementError: If an element is placed in the workspace twice.
    """
    validator = HierarchyValidator()
    for person in people:
        validator.register(person)
    for system in systems:
        validator.register_software_system(system)

    hierarchy = DeclaredHierarchy()
    for decl in container_declarations:
        parent = validator.validate_container_parent(decl.child, decl.parent)
        validator.register_container(decl.child, parent)
        hierarchy.containers.setdefault(parent.identity, []).append(decl.child)
        logger.debug("Attached container %r to %r", decl.child.name, parent.name)
    for comp_decl in component_declarations:
        parent = validator.validate_component_parent(comp_decl.child, comp_decl.parent)
        validator.register(comp_decl.child, parent)
        hierarchy.components.setdefault(parent.identity, []).append(comp_decl.child)
        logger.debug("Attached component %r to %r", comp_decl.child.name, parent.name)
    return hierarchy
