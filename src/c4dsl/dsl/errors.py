# topmark:header:start
#
#   project      : C4DSL
#   file         : errors.py
#   file_relpath : src/c4dsl/dsl/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while building or serializing a workspace.

All of them derive from `C4DslError` so API callers can catch one type. They
are raised before any output is assembled: `WorkspaceBuilder.serialize`
returns a complete document or raises, never a partial string.

The CLI maps these to exit codes in `c4dsl.cli.errors`.
"""

from __future__ import annotations


class C4DslError(Exception):
    """Base class for all C4DSL errors."""


class SerializationError(C4DslError):
    """A fixed-shape line template failed to render.

    Attributes:
        template (str): Name of the template that failed.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"failed to render {template} template: {reason}")


class HierarchyError(C4DslError):
    """An explicitly declared parent/child hierarchy is invalid."""


class InvalidParentTypeError(HierarchyError):
    """A declared parent is not an element of the expected kind.

    Attributes:
        child (str): Name of the element whose parent was declared.
        expected (str): Kind the parent must have (``SoftwareSystem`` or ``Container``).
        actual (str): Kind actually found, or ``unregistered`` when the parent
            reference matched no element.
        parent (str | None): The parent reference as declared.
    """

    def __init__(self, child: str, expected: str, actual: str, parent: str | None = None) -> None:
        self.child = child
        self.expected = expected
        self.actual = actual
        self.parent = parent
        super().__init__(f"invalid parent type for {child}: expected {expected}, got {actual}")


class CircularHierarchyError(HierarchyError):
    """A walk up the declared parent chain revisited an element.

    Attributes:
        element (str): Name of the element seen twice.
    """

    def __init__(self, element: str) -> None:
        self.element = element
        super().__init__(f"circular relationship detected: {element}")


class DuplicateElementError(HierarchyError):
    """The same element was placed in the workspace more than once.

    This covers an element added twice at the top level and a child that is
    both owned by its parent and declared for it.

    Attributes:
        kind (str): Kind of the repeated element.
        element (str): Name of the repeated element.
    """

    def __init__(self, kind: str, element: str) -> None:
        self.kind = kind
        self.element = element
        super().__init__(
            f"duplicate element: {kind} {element} appears more than once in the workspace"
        )
