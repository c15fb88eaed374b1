# topmark:header:start
#
#   project      : C4DSL
#   file         : errors.py
#   file_relpath : src/c4dsl/model/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Model construction errors."""

from __future__ import annotations

from c4dsl.dsl.errors import C4DslError


class ElementValidationError(C4DslError):
    """An element or relationship field failed validation.

    Attributes:
        kind (str): Kind of record being built (``Person``, ``Relationship``, ...).
        field (str): Name of the offending field.
        reason (str): The violated rule, e.g. ``cannot be empty``.
    """

    def __init__(self, kind: str, field: str, reason: str) -> None:
        self.kind = kind
        self.field = field
        self.reason = reason
        super().__init__(f"invalid {kind}: {field} {reason}")
