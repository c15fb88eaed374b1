# topmark:header:start
#
#   project      : C4DSL
#   file         : templates.py
#   file_relpath : src/c4dsl/dsl/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-shape line templates of the DSL.

Templates are plain `str.format` patterns. Callers pass values that are
already escaped or formatted (see `c4dsl.dsl.escaping`); rendering never
sanitizes on its own. Exact spacing matters: downstream tools and golden
tests compare output byte for byte.
"""

from __future__ import annotations

from typing import Final

from c4dsl.dsl.errors import SerializationError

WORKSPACE_OPEN: Final[str] = 'workspace "{name}" "{description}" {{'
IDENTIFIERS_DIRECTIVE: Final[str] = "!identifiers hierarchical"
MODEL_OPEN: Final[str] = "model {"
VIEWS_OPEN: Final[str] = "views {"
STYLES_OPEN: Final[str] = "styles {"
BLOCK_CLOSE: Final[str] = "}"

ELEMENT: Final[str] = '{identifier} = {keyword} "{name}" "{description}"'
ELEMENT_WITH_TECHNOLOGY: Final[str] = (
    '{identifier} = {keyword} "{name}" "{description}" "{technology}"'
)
TAGS: Final[str] = 'tags "{tags}"'

RELATIONSHIP: Final[str] = '{source} -> {target} "{description}"'
RELATIONSHIP_WITH_TECHNOLOGY: Final[str] = '{source} -> {target} "{description}" "{technology}"'

VIEW_OPEN: Final[str] = '{view_type} {identifier} "{title}" {{'
VIEW_OPEN_WITHOUT_IDENTIFIER: Final[str] = '{view_type} "{title}" {{'
VIEW_INCLUDE: Final[str] = "include {reference}"
VIEW_EXCLUDE: Final[str] = "exclude {reference}"

ELEMENT_STYLE_OPEN: Final[str] = 'element "{tag}" {{'
RELATIONSHIP_STYLE_OPEN: Final[str] = 'relationship "{tag}" {{'
STYLE_ATTRIBUTE: Final[str] = "{attribute} {value}"

# Names used in error messages, keyed by template text.
TEMPLATE_NAMES: Final[dict[str, str]] = {
    WORKSPACE_OPEN: "workspace",
    ELEMENT: "element",
    ELEMENT_WITH_TECHNOLOGY: "element",
    TAGS: "tags",
    RELATIONSHIP: "relationship",
    RELATIONSHIP_WITH_TECHNOLOGY: "relationship",
    VIEW_OPEN: "view",
    VIEW_OPEN_WITHOUT_IDENTIFIER: "view",
    VIEW_INCLUDE: "view include",
    VIEW_EXCLUDE: "view exclude",
    ELEMENT_STYLE_OPEN: "element style",
    RELATIONSHIP_STYLE_OPEN: "relationship style",
    STYLE_ATTRIBUTE: "style attribute",
}


def render_template(template: str, **fields: object) -> str:
    """Render ``template`` with ``fields``.

    Args:
        template (str): One of the module-level templates (or a compatible pattern).
        **fields (object): Values for the template placeholders.

    Returns:
        str: The rendered line.

    Raises:
        SerializationError: If a placeholder is missing or the pattern is malformed.
    """
    try:
        return template.format(**fields)
    except (KeyError, IndexError, ValueError) as exc:
        name = TEMPLATE_NAMES.get(template, repr(template))
        raise SerializationError(name, f"{type(exc).__name__}: {exc}") from exc
