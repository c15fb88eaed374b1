# topmark:header:start
#
#   project      : C4DSL
#   file         : keys.py
#   file_relpath : src/c4dsl/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names.

Two external schemas live here: the serializer configuration
(``c4dsl.toml`` and ``[tool.c4dsl]`` in ``pyproject.toml``) and the workspace
document read by ``c4dsl export``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys of the serializer configuration."""

    SECTION_SERIALIZER: Final[str] = "serializer"

    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_IDENTIFIER_SCOPE: Final[str] = "identifier_scope"
    KEY_DEFAULT_NAME: Final[str] = "default_name"
    KEY_DEFAULT_DESCRIPTION: Final[str] = "default_description"


class Doc:
    """Section names and keys of a workspace document."""

    SECTION_WORKSPACE: Final[str] = "workspace"
    SECTION_PEOPLE: Final[str] = "people"
    SECTION_SYSTEMS: Final[str] = "systems"
    SECTION_CONTAINERS: Final[str] = "containers"
    SECTION_COMPONENTS: Final[str] = "components"
    SECTION_CODE: Final[str] = "code"
    SECTION_RELATIONSHIPS: Final[str] = "relationships"
    SECTION_VIEWS: Final[str] = "views"
    SECTION_STYLES: Final[str] = "styles"

    KEY_KEY: Final[str] = "key"
    KEY_NAME: Final[str] = "name"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_TECHNOLOGY: Final[str] = "technology"
    KEY_LOCATION: Final[str] = "location"
    KEY_TYPE: Final[str] = "type"
    KEY_PARENT: Final[str] = "parent"
    KEY_RESPONSIBILITIES: Final[str] = "responsibilities"
    KEY_LANGUAGE: Final[str] = "language"
    KEY_FILE_PATH: Final[str] = "file_path"

    KEY_SOURCE: Final[str] = "source"
    KEY_TARGET: Final[str] = "target"
    KEY_INTERACTION: Final[str] = "interaction"

    KEY_ELEMENT: Final[str] = "element"
    KEY_TITLE: Final[str] = "title"
    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"

    KEY_STYLE_ELEMENTS: Final[str] = "elements"
    KEY_STYLE_RELATIONSHIPS: Final[str] = "relationships"
    KEY_TAG: Final[str] = "tag"
    KEY_BACKGROUND: Final[str] = "background"
    KEY_COLOR: Final[str] = "color"
    KEY_SHAPE: Final[str] = "shape"
    KEY_SIZE: Final[str] = "size"
    KEY_STROKE: Final[str] = "stroke"
    KEY_STROKE_WIDTH: Final[str] = "stroke_width"
    KEY_THICKNESS: Final[str] = "thickness"
    KEY_ROUTER: Final[str] = "router"
    KEY_DASHED: Final[str] = "dashed"
