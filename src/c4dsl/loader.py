# topmark:header:start
#
#   project      : C4DSL
#   file         : loader.py
#   file_relpath : src/c4dsl/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Workspace documents: TOML or JSON descriptions of a C4 model.

A document is parsed into plain dicts (TOML through `tomlkit`, JSON through
the standard library) and turned into a `WorkspaceBuilder`. Elements may carry
a ``key``; relationships, views and parent declarations refer to elements by
that key. Any reference that is not a known key is passed through unchanged,
so it can still name an element (parents) or a raw DSL reference
(relationships, views).

Structural problems (wrong value types, unknown enum values, duplicate keys,
unparsable text) raise `WorkspaceDocumentError`. Field rules (blank names,
over-long text) are enforced by `c4dsl.model.factory.ModelFactory` and raise
`ElementValidationError`.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

from tomlkit.exceptions import ParseError as TomlkitParseError

from c4dsl.config.io import (
    get_bool_value_or_none,
    get_list_value,
    get_string_value_or_none,
    get_table_value,
    parse_toml_text,
)
from c4dsl.config.keys import Doc
from c4dsl.config.logging import get_logger
from c4dsl.constants import DEFAULT_RELATIONSHIP_STYLE_TAG
from c4dsl.dsl.errors import C4DslError
from c4dsl.dsl.styles import ElementStyle, RelationshipStyle
from c4dsl.dsl.views import ViewConfiguration, ViewType
from c4dsl.dsl.workspace import WorkspaceBuilder
from c4dsl.model.factory import ModelFactory
from c4dsl.model.types import CodeType, ContainerType, InteractionStyle, Location

if TYPE_CHECKING:
    from c4dsl.config.io import TomlTable
    from c4dsl.config.logging import C4dslLogger
    from c4dsl.config.model import Config
    from c4dsl.dsl.styles import StyleValue
    from c4dsl.model.elements import (
        CodeElement,
        Component,
        Container,
        Identifiable,
        Person,
        SoftwareSystem,
    )
    from c4dsl.model.relationship import EndpointLike

logger: C4dslLogger = get_logger(__name__)

JSON_SUFFIX: str = ".json"

EnumT = TypeVar("EnumT", bound=Enum)


class WorkspaceDocumentError(C4DslError):
    """A workspace document is malformed.

    Attributes:
        source (str): Where the document came from (a path or ``<string>``).
    """

    def __init__(self, message: str, source: str = "<string>") -> None:
        self.source = source
        super().__init__(f"{source}: {message}")


def parse_document(text: str, *, json_format: bool = False, source: str = "<string>") -> TomlTable:
    """Parse document text into a plain dict.

    Args:
        text (str): The document.
        json_format (bool): Parse as JSON instead of TOML.
        source (str): Label used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        WorkspaceDocumentError: If the text cannot be parsed or is not a table.
    """
    data: Any
    try:
        data = json.loads(text) if json_format else parse_toml_text(text)
    except json.JSONDecodeError as e:
        raise WorkspaceDocumentError(f"invalid JSON: {e}", source) from e
    except TomlkitParseError as e:
        raise WorkspaceDocumentError(f"invalid TOML: {e}", source) from e
    if not isinstance(data, dict):
        raise WorkspaceDocumentError("top level must be a table", source)
    return cast("TomlTable", data)


def read_document(path: Path) -> TomlTable:
    """Read and parse a document file; ``.json`` files are parsed as JSON.

    Raises:
        OSError: If the file cannot be read.
        WorkspaceDocumentError: If the content is not UTF-8 or cannot be parsed.
    """
    logger.debug("Reading workspace document: %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise WorkspaceDocumentError(f"invalid UTF-8: {e}", str(path)) from e
    return parse_document(text, json_format=path.suffix.lower() == JSON_SUFFIX, source=str(path))


def _parse_enum(enum_type: type[EnumT], raw: str, field: str, source: str) -> EnumT:
    """Match ``raw`` against enum values or member names, case-insensitively."""
    wanted = raw.strip().lower()
    for member in enum_type:
        if str(member.value).lower() == wanted or member.name.lower() == wanted:
            return member
    choices = ", ".join(str(m.value) for m in enum_type)
    raise WorkspaceDocumentError(f"unknown {field} {raw!r} (expected one of: {choices})", source)


class WorkspaceLoader:
    """Turns a parsed workspace document into a `WorkspaceBuilder`.

    Args:
        factory (ModelFactory | None): Factory minting element identities.
        config (Config | None): Serializer configuration for the builder.
        source (str): Label used in error messages.
    """

    def __init__(
        self,
        factory: ModelFactory | None = None,
        config: Config | None = None,
        source: str = "<string>",
    ) -> None:
        self.factory: ModelFactory = factory or ModelFactory()
        self.config: Config | None = config
        self.source: str = source
        self.elements: dict[str, Identifiable] = {}

    # ------------------------------ Helpers -------------------------------

    def _error(self, message: str) -> WorkspaceDocumentError:
        return WorkspaceDocumentError(message, self.source)

    def _tables(self, table: TomlTable, key: str, where: str) -> list[TomlTable]:
        entries = get_list_value(table, key)
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise self._error(f"{where}.{key}[{index}] must be a table, got {entry!r}")
        return cast("list[TomlTable]", entries)

    def _text(self, table: TomlTable, key: str) -> str:
        return get_string_value_or_none(table, key) or ""

    def _location(self, table: TomlTable) -> Location:
        raw = get_string_value_or_none(table, Doc.KEY_LOCATION)
        if raw is None:
            return Location.INTERNAL
        return _parse_enum(Location, raw, Doc.KEY_LOCATION, self.source)

    def _remember(self, table: TomlTable, element: Identifiable) -> None:
        key = get_string_value_or_none(table, Doc.KEY_KEY)
        if key is None:
            return
        if key in self.elements:
            raise self._error(f"duplicate element key {key!r}")
        self.elements[key] = element
        logger.trace("Element key %r -> %s", key, element.identity)

    def _reference(self, raw: Any, field: str) -> EndpointLike:
        if not isinstance(raw, str) or not raw.strip():
            raise self._error(f"{field} must be a non-empty string, got {raw!r}")
        return self.elements.get(raw, raw)

    def _style_value(self, table: TomlTable, key: str) -> StyleValue | None:
        value = table.get(key)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise self._error(f"style {key} must be a string or an integer, got {value!r}")

    # ------------------------------ Elements ------------------------------

    def _code_element(self, table: TomlTable) -> CodeElement:
        raw_type = get_string_value_or_none(table, Doc.KEY_TYPE)
        if raw_type is None:
            raise self._error(f"code element {table.get(Doc.KEY_NAME)!r} needs a {Doc.KEY_TYPE}")
        element = self.factory.code_element(
            name=self._text(table, Doc.KEY_NAME),
            description=self._text(table, Doc.KEY_DESCRIPTION),
            code_type=_parse_enum(CodeType, raw_type, "code type", self.source),
            language=get_string_value_or_none(table, Doc.KEY_LANGUAGE),
            file_path=get_string_value_or_none(table, Doc.KEY_FILE_PATH),
            location=self._location(table),
        )
        self._remember(table, element)
        return element

    def _component(self, table: TomlTable) -> Component:
        responsibilities = get_list_value(table, Doc.KEY_RESPONSIBILITIES)
        if not all(isinstance(r, str) for r in responsibilities):
            raise self._error(f"{Doc.KEY_RESPONSIBILITIES} must be a list of strings")
        code = [
            self._code_element(t) for t in self._tables(table, Doc.SECTION_CODE, "component")
        ]
        element = self.factory.component(
            name=self._text(table, Doc.KEY_NAME),
            description=self._text(table, Doc.KEY_DESCRIPTION),
            technology=get_string_value_or_none(table, Doc.KEY_TECHNOLOGY),
            responsibilities=responsibilities,
            location=self._location(table),
            code_elements=code,
        )
        self._remember(table, element)
        return element

    def _container(self, table: TomlTable) -> Container:
        raw_type = get_string_value_or_none(table, Doc.KEY_TYPE)
        container_type = ContainerType.OTHER
        type_label: str | None = None
        if raw_type is not None:
            try:
                container_type = _parse_enum(ContainerType, raw_type, "container type", self.source)
            except WorkspaceDocumentError:
                # Unknown categories are kept as a free label.
                type_label = raw_type
        components = [
            self._component(t)
            for t in self._tables(table, Doc.SECTION_COMPONENTS, "container")
        ]
        element = self.factory.container(
            name=self._text(table, Doc.KEY_NAME),
            description=self._text(table, Doc.KEY_DESCRIPTION),
            container_type=container_type,
            type_label=type_label,
            technology=get_string_value_or_none(table, Doc.KEY_TECHNOLOGY),
            location=self._location(table),
            components=components,
        )
        self._remember(table, element)
        return element

    def _software_system(self, table: TomlTable) -> SoftwareSystem:
        containers = [
            self._container(t) for t in self._tables(table, Doc.SECTION_CONTAINERS, "system")
        ]
        element = self.factory.software_system(
            name=self._text(table, Doc.KEY_NAME),
            description=self._text(table, Doc.KEY_DESCRIPTION),
            location=self._location(table),
            containers=containers,
        )
        self._remember(table, element)
        return element

    def _person(self, table: TomlTable) -> Person:
        element = self.factory.person(
            name=self._text(table, Doc.KEY_NAME),
            description=self._text(table, Doc.KEY_DESCRIPTION),
            location=self._location(table),
            technology=get_string_value_or_none(table, Doc.KEY_TECHNOLOGY),
        )
        self._remember(table, element)
        return element

    # ---------------------------- Other sections ---------------------------

    def _view(self, table: TomlTable) -> ViewConfiguration:
        raw_type = get_string_value_or_none(table, Doc.KEY_TYPE)
        if raw_type is None:
            raise self._error(f"view {table.get(Doc.KEY_TITLE)!r} needs a {Doc.KEY_TYPE}")
        view_type = _parse_enum(ViewType, raw_type, "view type", self.source)
        raw_element = table.get(Doc.KEY_ELEMENT)
        element = None if raw_element is None else self._reference(raw_element, "view element")
        return ViewConfiguration(
            view_type=view_type,
            title=self._text(table, Doc.KEY_TITLE) or view_type.value,
            element=element,
            include=tuple(
                self._reference(r, "view include") for r in get_list_value(table, Doc.KEY_INCLUDE)
            ),
            exclude=tuple(
                self._reference(r, "view exclude") for r in get_list_value(table, Doc.KEY_EXCLUDE)
            ),
        )

    def _element_style(self, table: TomlTable) -> ElementStyle:
        tag = get_string_value_or_none(table, Doc.KEY_TAG)
        if not tag:
            raise self._error("element style needs a tag")
        return ElementStyle(
            tag=tag,
            background=get_string_value_or_none(table, Doc.KEY_BACKGROUND),
            color=get_string_value_or_none(table, Doc.KEY_COLOR),
            shape=get_string_value_or_none(table, Doc.KEY_SHAPE),
            size=self._style_value(table, Doc.KEY_SIZE),
            stroke=get_string_value_or_none(table, Doc.KEY_STROKE),
            stroke_width=self._style_value(table, Doc.KEY_STROKE_WIDTH),
        )

    def _relationship_style(self, table: TomlTable) -> RelationshipStyle:
        return RelationshipStyle(
            tag=get_string_value_or_none(table, Doc.KEY_TAG) or DEFAULT_RELATIONSHIP_STYLE_TAG,
            thickness=self._style_value(table, Doc.KEY_THICKNESS),
            color=get_string_value_or_none(table, Doc.KEY_COLOR),
            router=get_string_value_or_none(table, Doc.KEY_ROUTER),
            dashed=get_bool_value_or_none(table, Doc.KEY_DASHED),
        )

    # -------------------------------- Entry --------------------------------

    def load(self, data: TomlTable) -> WorkspaceBuilder:
        """Build a `WorkspaceBuilder` from a parsed document.

        Elements are created first, in document order, so that relationships
        and views can refer to any element key.

        Args:
            data (TomlTable): The parsed document.

        Returns:
            WorkspaceBuilder: The populated builder (not yet serialized).

        Raises:
            WorkspaceDocumentError: If the document is structurally invalid.
            ElementValidationError: If an element or relationship field is invalid.
        """
        builder = WorkspaceBuilder(self.config)

        workspace = get_table_value(data, Doc.SECTION_WORKSPACE)
        name = get_string_value_or_none(workspace, Doc.KEY_NAME)
        if name is not None:
            builder.with_name(name)
        description = get_string_value_or_none(workspace, Doc.KEY_DESCRIPTION)
        if description is not None:
            builder.with_description(description)

        for table in self._tables(data, Doc.SECTION_PEOPLE, "document"):
            builder.add_person(self._person(table))
        for table in self._tables(data, Doc.SECTION_SYSTEMS, "document"):
            builder.add_software_system(self._software_system(table))
        for table in self._tables(data, Doc.SECTION_CONTAINERS, "document"):
            parent = self._reference(table.get(Doc.KEY_PARENT), "container parent")
            builder.add_container(parent, self._container(table))
        for table in self._tables(data, Doc.SECTION_COMPONENTS, "document"):
            parent = self._reference(table.get(Doc.KEY_PARENT), "component parent")
            builder.add_component(parent, self._component(table))

        for table in self._tables(data, Doc.SECTION_RELATIONSHIPS, "document"):
            raw_interaction = get_string_value_or_none(table, Doc.KEY_INTERACTION)
            interaction = (
                InteractionStyle.SYNCHRONOUS
                if raw_interaction is None
                else _parse_enum(InteractionStyle, raw_interaction, "interaction", self.source)
            )
            builder.add_relationship(
                self._reference(table.get(Doc.KEY_SOURCE), "relationship source"),
                self._reference(table.get(Doc.KEY_TARGET), "relationship target"),
                self._text(table, Doc.KEY_DESCRIPTION),
                get_string_value_or_none(table, Doc.KEY_TECHNOLOGY),
                interaction_style=interaction,
            )

        for table in self._tables(data, Doc.SECTION_VIEWS, "document"):
            builder.add_view(self._view(table))

        styles = get_table_value(data, Doc.SECTION_STYLES)
        for table in self._tables(styles, Doc.KEY_STYLE_ELEMENTS, Doc.SECTION_STYLES):
            builder.add_element_style(self._element_style(table))
        for table in self._tables(styles, Doc.KEY_STYLE_RELATIONSHIPS, Doc.SECTION_STYLES):
            builder.add_relationship_style(self._relationship_style(table))

        logger.debug(
            "Loaded %s: %d people, %d systems, %d relationships, %d views",
            self.source,
            len(builder.people),
            len(builder.systems),
            len(builder.relationships),
            len(builder.views),
        )
        return builder


def load_workspace(
    path: Path | str,
    *,
    config: Config | None = None,
    factory: ModelFactory | None = None,
) -> WorkspaceBuilder:
    """Read a workspace document from ``path`` and return a populated builder.

    Raises:
        OSError: If the file cannot be read.
        WorkspaceDocumentError: If the document is malformed.
        ElementValidationError: If an element or relationship field is invalid.
    """
    doc_path = Path(path)
    data = read_document(doc_path)
    return WorkspaceLoader(factory=factory, config=config, source=str(doc_path)).load(data)


def loads_workspace(
    text: str,
    *,
    json_format: bool = False,
    config: Config | None = None,
    factory: ModelFactory | None = None,
) -> WorkspaceBuilder:
    """Parse a workspace document from a string and return a populated builder."""
    data = parse_document(text, json_format=json_format)
    return WorkspaceLoader(factory=factory, config=config).load(data)


__all__ = [
    "WorkspaceDocumentError",
    "WorkspaceLoader",
    "load_workspace",
    "loads_workspace",
    "parse_document",
    "read_document",
]
