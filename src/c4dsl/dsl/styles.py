# topmark:header:start
#
#   project      : C4DSL
#   file         : styles.py
#   file_relpath : src/c4dsl/dsl/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Element and relationship style blocks.

Only attributes that are set are emitted, in a fixed order; there are no
placeholder lines for unset attributes. The rendered ``styles { ... }``
fragment is embedded in the views block by `c4dsl.dsl.views`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from c4dsl.constants import DEFAULT_INDENT_WIDTH, DEFAULT_RELATIONSHIP_STYLE_TAG
from c4dsl.dsl.escaping import escape_string_literal
from c4dsl.dsl.templates import (
    ELEMENT_STYLE_OPEN,
    RELATIONSHIP_STYLE_OPEN,
    STYLE_ATTRIBUTE,
    STYLES_OPEN,
    render_template,
)
from c4dsl.dsl.writer import BlockWriter

if TYPE_CHECKING:
    from collections.abc import Sequence

StyleValue = Union[str, int]


@dataclass(frozen=True, slots=True)
class ElementStyle:
    """Style applied to elements carrying ``tag``.

    Attributes:
        tag (str): Element tag the style applies to, e.g. ``"Person"``.
        background (str | None): Background color, e.g. ``"#08427B"``.
        color (str | None): Text color.
        shape (str | None): Shape name, e.g. ``"person"`` or ``"cylinder"``.
        size (StyleValue | None): Width/height hint.
        stroke (str | None): Border color.
        stroke_width (StyleValue | None): Border width.
    """

    tag: str
    background: str | None = None
    color: str | None = None
    shape: str | None = None
    size: StyleValue | None = None
    stroke: str | None = None
    stroke_width: StyleValue | None = None

    def attributes(self) -> list[tuple[str, str]]:
        """Return the set attributes as ``(dsl_name, value)`` pairs in output order."""
        pairs: list[tuple[str, StyleValue | None]] = [
            ("background", self.background),
            ("color", self.color),
            ("shape", self.shape),
            ("size", self.size),
            ("stroke", self.stroke),
            ("strokeWidth", self.stroke_width),
        ]
        return [(name, str(value)) for name, value in pairs if value is not None]


@dataclass(frozen=True, slots=True)
class RelationshipStyle:
    """Style applied to relationships carrying ``tag`` (all of them by default)."""

    tag: str = DEFAULT_RELATIONSHIP_STYLE_TAG
    thickness: StyleValue | None = None
    color: str | None = None
    router: str | None = None
    dashed: bool | None = None

    def attributes(self) -> list[tuple[str, str]]:
        """Return the set attributes as ``(dsl_name, value)`` pairs in output order."""
        pairs: list[tuple[str, str | None]] = [
            ("thickness", None if self.thickness is None else str(self.thickness)),
            ("color", self.color),
            ("router", self.router),
            ("dashed", None if self.dashed is None else str(self.dashed).lower()),
        ]
        return [(name, value) for name, value in pairs if value is not None]


def _write_style(writer: BlockWriter, header: str, attributes: list[tuple[str, str]]) -> None:
    with writer.block(header):
        for attribute, value in attributes:
            writer.add_line(render_template(STYLE_ATTRIBUTE, attribute=attribute, value=value))


def render_styles(
    element_styles: Sequence[ElementStyle],
    relationship_styles: Sequence[RelationshipStyle],
    *,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render the ``styles { ... }`` fragment.

    Args:
        element_styles (Sequence[ElementStyle]): Element styles in output order.
        relationship_styles (Sequence[RelationshipStyle]): Relationship styles,
            emitted after all element styles.
        indent_width (int): Spaces per indentation level.

    Returns:
        str: The fragment, or an empty string when no style is defined.
    """
    if not element_styles and not relationship_styles:
        return ""
    writer = BlockWriter(indent_width)
    with writer.block(STYLES_OPEN):
        for style in element_styles:
            header = render_template(ELEMENT_STYLE_OPEN, tag=escape_string_literal(style.tag))
            _write_style(writer, header, style.attributes())
        for rel_style in relationship_styles:
            header = render_template(
                RELATIONSHIP_STYLE_OPEN, tag=escape_string_literal(rel_style.tag)
            )
            _write_style(writer, header, rel_style.attributes())
    return writer.to_string()
