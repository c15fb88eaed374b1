# topmark:header:start
#
#   project      : C4DSL
#   file         : factory.py
#   file_relpath : src/c4dsl/model/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validated construction of model records.

`ModelFactory` owns the `IdentityAllocator` used to mint element identities.
Each constructor validates its fields first and only then mints an identity,
so a rejected element never consumes a serial number.

Example:
    ```python
    factory = ModelFactory()
    auth = factory.component(name="Auth", description="Sign-in", technology="Python")
    web = factory.container(
        name="Web App",
        description="Frontend",
        container_type=ContainerType.WEB_APPLICATION,
        components=[auth],
    )
    api = factory.software_system(name="API", description="Backend", containers=[web])
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from c4dsl.config.logging import get_logger
from c4dsl.model.elements import CodeElement, Component, Container, Person, SoftwareSystem
from c4dsl.model.identity import IdentityAllocator
from c4dsl.model.relationship import Relationship, to_endpoint
from c4dsl.model.types import (
    CodeType,
    ContainerType,
    ElementKind,
    InteractionStyle,
    Location,
)
from c4dsl.model.validation import (
    FILE_PATH_MAX_LENGTH,
    LANGUAGE_MAX_LENGTH,
    RESPONSIBILITY_MAX_LENGTH,
    TECHNOLOGY_MAX_LENGTH,
    validate_description,
    validate_each_max_length,
    validate_max_length,
    validate_name,
    validate_non_empty,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from c4dsl.config.logging import C4dslLogger
    from c4dsl.model.relationship import EndpointLike

logger: C4dslLogger = get_logger(__name__)

RELATIONSHIP_KIND: str = "Relationship"


def _optional_text(value: str | None) -> str | None:
    """Treat blank optional text as absent."""
    if value is None or not value.strip():
        return None
    return value


class ModelFactory:
    """Builds validated, identity-bearing model records.

    Args:
        allocator (IdentityAllocator | None): Allocator used to mint identities.
            A fresh one is created when omitted.
    """

    def __init__(self, allocator: IdentityAllocator | None = None) -> None:
        self.allocator: IdentityAllocator = allocator or IdentityAllocator()

    def person(
        self,
        *,
        name: str,
        description: str,
        location: Location = Location.INTERNAL,
        technology: str | None = None,
    ) -> Person:
        """Return a validated `Person`."""
        kind = ElementKind.PERSON.value
        validate_name(kind, name)
        validate_description(kind, description)
        validate_max_length(kind, "technology", technology, TECHNOLOGY_MAX_LENGTH)
        return Person(
            identity=self.allocator.mint(ElementKind.PERSON, name),
            name=name,
            description=description,
            technology=_optional_text(technology),
            location=location,
        )

    def software_system(
        self,
        *,
        name: str,
        description: str,
        location: Location = Location.INTERNAL,
        containers: Iterable[Container] = (),
    ) -> SoftwareSystem:
        """Return a validated `SoftwareSystem` owning ``containers``."""
        kind = ElementKind.SOFTWARE_SYSTEM.value
        validate_name(kind, name)
        validate_description(kind, description)
        return SoftwareSystem(
            identity=self.allocator.mint(ElementKind.SOFTWARE_SYSTEM, name),
            name=name,
            description=description,
            containers=tuple(containers),
            location=location,
        )

    def container(
        self,
        *,
        name: str,
        description: str,
        container_type: ContainerType = ContainerType.OTHER,
        type_label: str | None = None,
        technology: str | None = None,
        location: Location = Location.INTERNAL,
        components: Iterable[Component] = (),
    ) -> Container:
        """Return a validated `Container` owning ``components``.

        Args:
            name (str): Display name.
            description (str): What the container does.
            container_type (ContainerType): Technology category.
            type_label (str | None): Free label for `ContainerType.OTHER`.
            technology (str | None): Implementation technology.
            location (Location): Internal or external.
            components (Iterable[Component]): Owned components, in output order.

        Returns:
            Container: The new record.

        Raises:
            ElementValidationError: If a field is empty or too long.
        """
        kind = ElementKind.CONTAINER.value
        validate_name(kind, name)
        validate_description(kind, description)
        validate_max_length(kind, "technology", technology, TECHNOLOGY_MAX_LENGTH)
        validate_max_length(kind, "type_label", type_label, TECHNOLOGY_MAX_LENGTH)
        return Container(
            identity=self.allocator.mint(ElementKind.CONTAINER, name),
            name=name,
            description=description,
            container_type=container_type,
            type_label=_optional_text(type_label),
            technology=_optional_text(technology),
            components=tuple(components),
            location=location,
        )

    def component(
        self,
        *,
        name: str,
        description: str,
        technology: str | None = None,
        responsibilities: Iterable[str] = (),
        location: Location = Location.INTERNAL,
        code_elements: Iterable[CodeElement] = (),
    ) -> Component:
        """Return a validated `Component` owning ``code_elements``."""
        kind = ElementKind.COMPONENT.value
        validate_name(kind, name)
        validate_description(kind, description)
        validate_max_length(kind, "technology", technology, TECHNOLOGY_MAX_LENGTH)
        checked = validate_each_max_length(
            kind, "responsibilities", responsibilities, RESPONSIBILITY_MAX_LENGTH
        )
        return Component(
            identity=self.allocator.mint(ElementKind.COMPONENT, name),
            name=name,
            description=description,
            technology=_optional_text(technology),
            responsibilities=checked,
            code_elements=tuple(code_elements),
            location=location,
        )

    def code_element(
        self,
        *,
        name: str,
        description: str,
        code_type: CodeType,
        language: str | None = None,
        file_path: str | None = None,
        location: Location = Location.INTERNAL,
    ) -> CodeElement:
        """Return a validated `CodeElement`."""
        kind = ElementKind.CODE.value
        validate_name(kind, name)
        validate_description(kind, description)
        validate_max_length(kind, "language", language, LANGUAGE_MAX_LENGTH)
        validate_max_length(kind, "file_path", file_path, FILE_PATH_MAX_LENGTH)
        return CodeElement(
            identity=self.allocator.mint(ElementKind.CODE, name),
            name=name,
            description=description,
            code_type=code_type,
            language=_optional_text(language),
            file_path=_optional_text(file_path),
            location=location,
        )

    def relationship(
        self,
        source: EndpointLike,
        target: EndpointLike,
        description: str,
        technology: str | None = None,
        *,
        interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
    ) -> Relationship:
        """Return a validated `Relationship`; relationships carry no identity."""
        return build_relationship(
            source,
            target,
            description,
            technology,
            interaction_style=interaction_style,
        )


def build_relationship(
    source: EndpointLike,
    target: EndpointLike,
    description: str,
    technology: str | None = None,
    *,
    interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
) -> Relationship:
    """Validate fields and return a `Relationship` between two endpoints.

    Args:
        source (EndpointLike): Element, identity or raw DSL reference.
        target (EndpointLike): Element, identity or raw DSL reference.
        description (str): What the relationship does; must not be blank.
        technology (str | None): Optional technology, at most 255 characters.
        interaction_style (InteractionStyle): Synchronous by default.

    Returns:
        Relationship: The new record.

    Raises:
        ElementValidationError: If the description is blank, the technology is
            too long, or a raw endpoint is blank.
    """
    validate_non_empty(RELATIONSHIP_KIND, "description", description)
    validate_max_length(RELATIONSHIP_KIND, "technology", technology, TECHNOLOGY_MAX_LENGTH)
    src = to_endpoint(source)
    dst = to_endpoint(target)
    if isinstance(src, str):
        validate_non_empty(RELATIONSHIP_KIND, "source", src)
    if isinstance(dst, str):
        validate_non_empty(RELATIONSHIP_KIND, "target", dst)
    return Relationship(
        source=src,
        target=dst,
        description=description,
        technology=_optional_text(technology),
        interaction_style=interaction_style,
    )
