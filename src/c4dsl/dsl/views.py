# topmark:header:start
#
#   project      : C4DSL
#   file         : views.py
#   file_relpath : src/c4dsl/dsl/views.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""View declarations and the ``views { ... }`` block.

A view renders as::

    systemContext a "Context" {
        include *
        exclude b
    }

``systemLandscape`` views never carry a scoping identifier. View titles are
used as view keys, so spaces in them become ``_``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from c4dsl.constants import DEFAULT_INDENT_WIDTH
from c4dsl.dsl.errors import SerializationError
from c4dsl.dsl.escaping import format_reference, format_view_key
from c4dsl.dsl.templates import (
    VIEW_EXCLUDE,
    VIEW_INCLUDE,
    VIEW_OPEN,
    VIEW_OPEN_WITHOUT_IDENTIFIER,
    VIEWS_OPEN,
    render_template,
)
from c4dsl.dsl.writer import BlockWriter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from c4dsl.dsl.paths import PathResolver
    from c4dsl.model.relationship import EndpointLike


class ViewType(str, Enum):
    """View kinds; values are the DSL keywords."""

    SYSTEM_LANDSCAPE = "systemLandscape"
    SYSTEM_CONTEXT = "systemContext"
    CONTAINER = "container"
    COMPONENT = "component"
    FILTERED = "filtered"
    DYNAMIC = "dynamic"
    DEPLOYMENT = "deployment"
    CUSTOM = "custom"

    @property
    def takes_identifier(self) -> bool:
        """Whether the declaration carries a scoping element identifier."""
        return self is not ViewType.SYSTEM_LANDSCAPE


@dataclass(frozen=True, slots=True)
class ViewConfiguration:
    """One view declaration.

    Attributes:
        view_type (ViewType): Kind of view.
        title (str): View title; spaces become ``_`` in the output.
        element (EndpointLike | None): Scoping element. Elements and identities
            resolve through the path resolver; strings are formatted as references.
        include (tuple[EndpointLike, ...]): Include entries. Strings (``*``,
            expressions) are emitted verbatim; elements resolve to their path.
        exclude (tuple[EndpointLike, ...]): Exclude entries, handled like ``include``.
    """

    view_type: ViewType
    title: str
    element: EndpointLike | None = None
    include: tuple[EndpointLike, ...] = ()
    exclude: tuple[EndpointLike, ...] = ()


def _entry_reference(entry: EndpointLike, resolver: PathResolver) -> str:
    if isinstance(entry, str):
        return entry.strip()
    return resolver.resolve(entry)


def _scope_reference(element: EndpointLike, resolver: PathResolver) -> str:
    if isinstance(element, str):
        return format_reference(element)
    return resolver.resolve(element)


def write_view(writer: BlockWriter, view: ViewConfiguration, resolver: PathResolver) -> None:
    """Write one view declaration at the writer's current depth.

    Raises:
        SerializationError: If a view type other than ``systemLandscape`` has no
            scoping element.
    """
    title = format_view_key(view.title)
    if view.view_type.takes_identifier:
        if view.element is None:
            raise SerializationError(
                "view", f"{view.view_type.value} view {view.title!r} needs a scoping element"
            )
        header = render_template(
            VIEW_OPEN,
            view_type=view.view_type.value,
            identifier=_scope_reference(view.element, resolver),
            title=title,
        )
    else:
        header = render_template(
            VIEW_OPEN_WITHOUT_IDENTIFIER, view_type=view.view_type.value, title=title
        )
    with writer.block(header):
        for entry in view.include:
            writer.add_line(
                render_template(VIEW_INCLUDE, reference=_entry_reference(entry, resolver))
            )
        for entry in view.exclude:
            writer.add_line(
                render_template(VIEW_EXCLUDE, reference=_entry_reference(entry, resolver))
            )


def render_views(
    views: Sequence[ViewConfiguration],
    resolver: PathResolver,
    *,
    styles: str = "",
    configuration: str = "",
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> str:
    """Render the ``views { ... }`` block.

    Args:
        views (Sequence[ViewConfiguration]): Views in output order.
        resolver (PathResolver): Resolver filled by the model walk.
        styles (str): Rendered ``styles { ... }`` fragment, embedded after the views.
        configuration (str): Rendered ``configuration { ... }`` fragment, embedded last.
        indent_width (int): Spaces per indentation level.

    Returns:
        str: The block, or an empty string when there is nothing to render.
    """
    if not views and not styles and not configuration:
        return ""
    writer = BlockWriter(indent_width)
    with writer.block(VIEWS_OPEN):
        separate = bool(views)
        for view in views:
            write_view(writer, view, resolver)
        for fragment in (styles, configuration):
            if not fragment:
                continue
            if separate:
                writer.add_empty_line()
            writer.add_lines(fragment)
            separate = True
    return writer.to_string()
