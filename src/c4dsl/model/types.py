# topmark:header:start
#
#   project      : C4DSL
#   file         : types.py
#   file_relpath : src/c4dsl/model/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerations shared by the C4 model records."""

from __future__ import annotations

from enum import Enum


class ElementKind(str, Enum):
    """Kind of a C4 element; values match the names used in error messages."""

    PERSON = "Person"
    SOFTWARE_SYSTEM = "SoftwareSystem"
    CONTAINER = "Container"
    COMPONENT = "Component"
    CODE = "Code"


class Location(str, Enum):
    """Whether an element lives inside or outside the modelled enterprise."""

    INTERNAL = "internal"
    EXTERNAL = "external"


class ContainerType(str, Enum):
    """Technology category of a container.

    `OTHER` is paired with a free-form label on the container itself.
    """

    WEB_APPLICATION = "web_application"
    DESKTOP_APPLICATION = "desktop_application"
    MOBILE_APPLICATION = "mobile_application"
    DATABASE = "database"
    FILE_SYSTEM = "file_system"
    API = "api"
    MESSAGE_BUS = "message_bus"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. ``"Web Application"`` or ``"API"``."""
        if self is ContainerType.API:
            return "API"
        return self.value.replace("_", " ").title()


class InteractionStyle(str, Enum):
    """How the source of a relationship talks to its target."""

    SYNCHRONOUS = "synchronous"
    ASYNCHRONOUS = "asynchronous"
    BIDIRECTIONAL = "bidirectional"


class CodeType(str, Enum):
    """Kind of code-level element owned by a component."""

    CLASS = "class"
    STRUCT = "struct"
    FUNCTION = "function"
    TRAIT = "trait"
    MODULE = "module"
    ENUM = "enum"
