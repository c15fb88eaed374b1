# topmark:header:start
#
#   project      : C4DSL
#   file         : workspace.py
#   file_relpath : src/c4dsl/dsl/workspace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Workspace assembly and the single-pass DSL serializer.

`WorkspaceBuilder` accumulates people, software systems, parent declarations,
relationships, views and styles. `WorkspaceBuilder.serialize` hands a snapshot
to a fresh `WorkspaceSerializer`, which performs one ordered pass:

    1) validate declared parents (nothing is written on failure);
    2) write the workspace header and open ``model {``;
    3) walk people, then software systems with their containers and
       components, allocating identifiers and registering paths;
    4) write relationships, resolved against the completed path map;
    5) close ``model``, write the ``views`` block when there is anything to
       show, and close ``workspace``.

Identifier scopes follow `c4dsl.config.types.IdentifierScopeMode`: in
hierarchical mode identifiers are unique among siblings (top level, per
system, per container); in global mode a single workspace-wide set is used.
Paths are always hierarchical (``system.container.component``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from c4dsl.config.logging import get_logger
from c4dsl.config.model import default_config
from c4dsl.config.types import IdentifierScopeMode
from c4dsl.constants import EXTERNAL_TAG
from c4dsl.dsl.escaping import escape_string_literal
from c4dsl.dsl.hierarchy import ParentDeclaration, resolve_declarations
from c4dsl.dsl.identifiers import IdentifierScope
from c4dsl.dsl.paths import PathResolver, join_path
from c4dsl.dsl.styles import render_styles
from c4dsl.dsl.templates import (
    ELEMENT,
    ELEMENT_WITH_TECHNOLOGY,
    IDENTIFIERS_DIRECTIVE,
    MODEL_OPEN,
    RELATIONSHIP,
    RELATIONSHIP_WITH_TECHNOLOGY,
    TAGS,
    WORKSPACE_OPEN,
    render_template,
)
from c4dsl.dsl.views import render_views
from c4dsl.dsl.writer import BlockWriter, reindent_by_brace_depth
from c4dsl.model.factory import build_relationship
from c4dsl.model.types import InteractionStyle, Location

if TYPE_CHECKING:
    from collections.abc import Sequence

    from c4dsl.config.logging import C4dslLogger
    from c4dsl.config.model import Config
    from c4dsl.dsl.hierarchy import DeclaredHierarchy
    from c4dsl.dsl.styles import ElementStyle, RelationshipStyle
    from c4dsl.dsl.views import ViewConfiguration
    from c4dsl.model.elements import Component, Container, Person, SoftwareSystem
    from c4dsl.model.relationship import EndpointLike, Relationship

logger: C4dslLogger = get_logger(__name__)

PERSON_KEYWORD: str = "person"
SOFTWARE_SYSTEM_KEYWORD: str = "softwareSystem"
CONTAINER_KEYWORD: str = "container"
COMPONENT_KEYWORD: str = "component"


def _element_line(
    identifier: str, keyword: str, name: str, description: str, technology: str | None = None
) -> str:
    if technology:
        return render_template(
            ELEMENT_WITH_TECHNOLOGY,
            identifier=identifier,
            keyword=keyword,
            name=escape_string_literal(name),
            description=escape_string_literal(description),
            technology=escape_string_literal(technology),
        )
    return render_template(
        ELEMENT,
        identifier=identifier,
        keyword=keyword,
        name=escape_string_literal(name),
        description=escape_string_literal(description),
    )


def _external_tags_line() -> str:
    return render_template(TAGS, tags=EXTERNAL_TAG)


class WorkspaceSerializer:
    """One serialization pass over a workspace snapshot.

    Identifier scopes, the path map and the writer live only as long as this
    object; `WorkspaceBuilder.serialize` creates a new one per call.
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        people: Sequence[Person],
        systems: Sequence[SoftwareSystem],
        container_declarations: Sequence[ParentDeclaration[Container]],
        component_declarations: Sequence[ParentDeclaration[Component]],
        relationships: Sequence[Relationship],
        views: Sequence[ViewConfiguration],
        element_styles: Sequence[ElementStyle],
        relationship_styles: Sequence[RelationshipStyle],
        styles_output: str | None,
        views_output: str | None,
        configuration_output: str | None,
        config: Config,
    ) -> None:
        self.name = name
        self.description = description
        self.people = people
        self.systems = systems
        self.container_declarations = container_declarations
        self.component_declarations = component_declarations
        self.relationships = relationships
        self.views = views
        self.element_styles = element_styles
        self.relationship_styles = relationship_styles
        self.styles_output = styles_output
        self.views_output = views_output
        self.configuration_output = configuration_output
        self.config = config

        self.writer = BlockWriter(config.indent_width)
        self.resolver = PathResolver()
        self._global_scope: IdentifierScope | None = (
            IdentifierScope("workspace")
            if config.identifier_scope is IdentifierScopeMode.GLOBAL
            else None
        )

    def _scope(self, label: str) -> IdentifierScope:
        """Return the scope for a new sibling group; shared in global mode."""
        if self._global_scope is not None:
            return self._global_scope
        return IdentifierScope(label)

    def run(self) -> str:
        """Perform the pass and return the complete DSL text.

        Raises:
            InvalidParentTypeError: If a declared parent is unknown or of the wrong kind.
            CircularHierarchyError: If a declaration makes an element its own ancestor.
            DuplicateElementError: If an element is placed in the workspace twice.
            SerializationError: If a line template fails to render.
        """
        hierarchy = resolve_declarations(
            self.people,
            self.systems,
            self.container_declarations,
            self.component_declarations,
        )

        header = render_template(
            WORKSPACE_OPEN,
            name=escape_string_literal(self.name),
            description=escape_string_literal(self.description),
        )
        with self.writer.block(header):
            self.writer.add_line(IDENTIFIERS_DIRECTIVE)
            self.writer.add_empty_line()
            with self.writer.block(MODEL_OPEN):
                top_scope = self._scope("workspace")
                for person in self.people:
                    self._write_person(person, top_scope)
                for system in self.systems:
                    self._write_software_system(system, top_scope, hierarchy)
                for relationship in self.relationships:
                    self._write_relationship(relationship)
            self._write_views_section()

        logger.debug(
            "Serialized workspace %r: %d elements, %d relationships, %d views",
            self.name,
            len(self.resolver),
            len(self.relationships),
            len(self.views),
        )
        return self.writer.to_string()

    # ------------------------------ Elements ------------------------------

    def _allocate(self, scope: IdentifierScope, name: str) -> str:
        return scope.allocate(name)

    def _write_person(self, person: Person, scope: IdentifierScope) -> None:
        identifier = self._allocate(scope, person.name)
        self.resolver.register(person.identity, identifier)
        line = _element_line(identifier, PERSON_KEYWORD, person.name, person.description)
        if person.location is Location.EXTERNAL:
            with self.writer.block(f"{line} {{"):
                self.writer.add_line(_external_tags_line())
        else:
            self.writer.add_line(line)

    def _write_software_system(
        self, system: SoftwareSystem, scope: IdentifierScope, hierarchy: DeclaredHierarchy
    ) -> None:
        identifier = self._allocate(scope, system.name)
        self.resolver.register(system.identity, identifier)
        line = _element_line(identifier, SOFTWARE_SYSTEM_KEYWORD, system.name, system.description)
        containers = hierarchy.containers_of(system)
        external = system.location is Location.EXTERNAL
        if not containers and not external:
            self.writer.add_line(f"{line} {{}}")
            return
        with self.writer.block(f"{line} {{"):
            if external:
                self.writer.add_line(_external_tags_line())
            container_scope = self._scope(identifier)
            for container in containers:
                self._write_container(container, identifier, container_scope, hierarchy)

    def _write_container(
        self,
        container: Container,
        parent_path: str,
        scope: IdentifierScope,
        hierarchy: DeclaredHierarchy,
    ) -> None:
        identifier = self._allocate(scope, container.name)
        path = join_path(parent_path, identifier)
        self.resolver.register(container.identity, path)
        line = _element_line(identifier, CONTAINER_KEYWORD, container.name, container.description)
        components = hierarchy.components_of(container)
        if not components:
            self.writer.add_line(f"{line} {{}}")
            return
        with self.writer.block(f"{line} {{"):
            component_scope = self._scope(path)
            for component in components:
                self._write_component(component, path, component_scope)

    def _write_component(self, component: Component, parent_path: str, scope: IdentifierScope) -> None:
        identifier = self._allocate(scope, component.name)
        self.resolver.register(component.identity, join_path(parent_path, identifier))
        self.writer.add_line(
            _element_line(
                identifier,
                COMPONENT_KEYWORD,
                component.name,
                component.description,
                component.technology,
            )
        )

    # --------------------------- Relationships ----------------------------

    def _write_relationship(self, relationship: Relationship) -> None:
        source = self.resolver.resolve(relationship.source)
        target = self.resolver.resolve(relationship.target)
        description = escape_string_literal(relationship.description)
        if relationship.technology:
            line = render_template(
                RELATIONSHIP_WITH_TECHNOLOGY,
                source=source,
                target=target,
                description=description,
                technology=escape_string_literal(relationship.technology),
            )
        else:
            line = render_template(
                RELATIONSHIP, source=source, target=target, description=description
            )
        self.writer.add_line(line)

    # ------------------------------- Views --------------------------------

    def _views_block(self) -> str:
        width = self.config.indent_width
        if self.views_output:
            return reindent_by_brace_depth(self.views_output, width)
        if self.styles_output:
            styles = reindent_by_brace_depth(self.styles_output, width)
        else:
            styles = render_styles(
                self.element_styles, self.relationship_styles, indent_width=width
            )
        configuration = (
            reindent_by_brace_depth(self.configuration_output, width)
            if self.configuration_output
            else ""
        )
        return render_views(
            self.views,
            self.resolver,
            styles=styles,
            configuration=configuration,
            indent_width=width,
        )

    def _write_views_section(self) -> None:
        block = self._views_block()
        if not block:
            return
        self.writer.add_empty_line()
        self.writer.add_lines(block)


class WorkspaceBuilder:
    """Fluent collector for a workspace and its serialization entry point.

    Args:
        config (Config | None): Serializer configuration; built-in defaults if None.

    Example:
        >>> from c4dsl.model import ModelFactory
        >>> factory = ModelFactory()
        >>> user = factory.person(name="User", description="A user")
        >>> print(WorkspaceBuilder().add_person(user).serialize())  # doctest: +SKIP
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config: Config = config or default_config()
        self.name: str | None = None
        self.description: str | None = None
        self.people: list[Person] = []
        self.systems: list[SoftwareSystem] = []
        self.container_declarations: list[ParentDeclaration[Container]] = []
        self.component_declarations: list[ParentDeclaration[Component]] = []
        self.relationships: list[Relationship] = []
        self.views: list[ViewConfiguration] = []
        self.element_styles: list[ElementStyle] = []
        self.relationship_styles: list[RelationshipStyle] = []
        self.styles_output: str | None = None
        self.views_output: str | None = None
        self.configuration_output: str | None = None

    def with_name(self, name: str) -> WorkspaceBuilder:
        """Set the workspace name."""
        self.name = name
        return self

    def with_description(self, description: str) -> WorkspaceBuilder:
        """Set the workspace description."""
        self.description = description
        return self

    def add_person(self, person: Person) -> WorkspaceBuilder:
        """Append a person to the top level."""
        self.people.append(person)
        return self

    def add_software_system(self, system: SoftwareSystem) -> WorkspaceBuilder:
        """Append a software system (with the containers it owns) to the top level."""
        self.systems.append(system)
        return self

    def add_container(self, parent: EndpointLike, container: Container) -> WorkspaceBuilder:
        """Declare ``container`` as a child of the software system ``parent``.

        ``parent`` may be the system itself, its identity, or its name. The
        declaration is checked when serializing.
        """
        self.container_declarations.append(ParentDeclaration(container, parent))
        return self

    def add_component(self, parent: EndpointLike, component: Component) -> WorkspaceBuilder:
        """Declare ``component`` as a child of the container ``parent``.

        ``parent`` may be the container itself, its identity, or its name. The
        declaration is checked when serializing.
        """
        self.component_declarations.append(ParentDeclaration(component, parent))
        return self

    def add_relationship(
        self,
        source: EndpointLike,
        target: EndpointLike,
        description: str,
        technology: str | None = None,
        *,
        interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
    ) -> WorkspaceBuilder:
        """Validate and append a relationship between two endpoints.

        Raises:
            ElementValidationError: If the description is blank or a field is invalid.
        """
        self.relationships.append(
            build_relationship(
                source, target, description, technology, interaction_style=interaction_style
            )
        )
        return self

    def add_relationship_record(self, relationship: Relationship) -> WorkspaceBuilder:
        """Append an already built relationship."""
        self.relationships.append(relationship)
        return self

    def add_view(self, view: ViewConfiguration) -> WorkspaceBuilder:
        """Append a view declaration."""
        self.views.append(view)
        return self

    def add_element_style(self, style: ElementStyle) -> WorkspaceBuilder:
        """Append an element style."""
        self.element_styles.append(style)
        return self

    def add_relationship_style(self, style: RelationshipStyle) -> WorkspaceBuilder:
        """Append a relationship style."""
        self.relationship_styles.append(style)
        return self

    def set_styles_output(self, styles: str) -> WorkspaceBuilder:
        """Use a pre-rendered ``styles { ... }`` fragment instead of the built styles."""
        self.styles_output = styles
        return self

    def set_views_output(self, views: str) -> WorkspaceBuilder:
        """Use a pre-rendered ``views { ... }`` block instead of the built one."""
        self.views_output = views
        return self

    def set_configuration_output(self, configuration: str) -> WorkspaceBuilder:
        """Embed a pre-rendered ``configuration { ... }`` fragment in the views block."""
        self.configuration_output = configuration
        return self

    def serialize(self) -> str:
        """Render the workspace as DSL text.

        Each call runs an independent pass, so repeated calls return identical
        output.

        Returns:
            str: The complete document (no trailing newline).

        Raises:
            InvalidParentTypeError: If a declared parent is unknown or of the wrong kind.
            CircularHierarchyError: If a declaration makes an element its own ancestor.
            DuplicateElementError: If an element is placed in the workspace twice.
            SerializationError: If a line template fails to render.
        """
        serializer = WorkspaceSerializer(
            name=self.name if self.name is not None else self.config.default_name,
            description=(
                self.description
                if self.description is not None
                else self.config.default_description
            ),
            people=tuple(self.people),
            systems=tuple(self.systems),
            container_declarations=tuple(self.container_declarations),
            component_declarations=tuple(self.component_declarations),
            relationships=tuple(self.relationships),
            views=tuple(self.views),
            element_styles=tuple(self.element_styles),
            relationship_styles=tuple(self.relationship_styles),
            styles_output=self.styles_output,
            views_output=self.views_output,
            configuration_output=self.configuration_output,
            config=self.config,
        )
        return serializer.run()
